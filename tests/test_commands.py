"""Unit tests for the create/build/test commands (ai_cli.commands).

Tests cover:
- create_project for hand-written presets (no external processes)
- create_project for the react preset (Vite scaffolder recorded)
- --install behaviour and the react reinstall sequence
- Error reporting and re-raising
- build_project / test_project
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ai_cli import commands
from ai_cli.config import Config
from ai_cli.errors import CommandError, ScaffoldError, UnknownPresetError
from ai_cli.scaffolder import ProjectOptions
from ai_cli.utils import console


# ---------------------------------------------------------------------------
# create_project
# ---------------------------------------------------------------------------


class TestCreateProject:
    @pytest.mark.unit
    async def test_express_in_named_directory(self, fake_commands, config: Config, tmp_path: Path):
        options = ProjectOptions(preset="express", directory="chat-api")
        root = await commands.create_project(options, config, cwd=tmp_path)

        assert root == tmp_path / "chat-api"
        assert (root / "package.json").exists()
        assert (root / "src" / "server.ts").exists()
        assert fake_commands.calls == []

    @pytest.mark.unit
    async def test_default_directory(self, fake_commands, config: Config, tmp_path: Path):
        options = ProjectOptions(preset="minimal")
        root = await commands.create_project(options, config, cwd=tmp_path)
        assert root == tmp_path / "my-ai-chat-app"
        assert (root / "src" / "index.ts").exists()

    @pytest.mark.unit
    async def test_react_runs_vite_without_install(self, fake_commands, config: Config, tmp_path: Path):
        options = ProjectOptions(preset="react", directory="web")
        root = await commands.create_project(options, config, cwd=tmp_path)

        assert fake_commands.commands == [
            ["npm", "create", "vite@latest", "web", "--", "--template", "react-ts"],
        ]
        assert (root / "postcss.config.js").exists()

    @pytest.mark.unit
    async def test_install_for_hand_written_preset(self, fake_commands, config: Config, tmp_path: Path):
        options = ProjectOptions(preset="basic", directory="web", install=True)
        root = await commands.create_project(options, config, cwd=tmp_path)

        assert fake_commands.calls == [(["pnpm", "install"], root)]

    @pytest.mark.unit
    async def test_install_for_react_reinstalls_pins(self, fake_commands, config: Config, tmp_path: Path):
        options = ProjectOptions(preset="react", directory="web", install=True)
        await commands.create_project(options, config, cwd=tmp_path)

        assert fake_commands.commands[1:] == [
            ["pnpm", "install"],
            ["pnpm", "remove", "typescript"],
            ["pnpm", "add", "-D", "typescript@^5.9.2"],
            ["pnpm", "remove", "@types/react", "@types/react-dom"],
            ["pnpm", "add", "-D", "@types/react@^18.3.24", "@types/react-dom@^18.3.7"],
        ]

    @pytest.mark.unit
    async def test_unknown_preset_reported_and_raised(self, fake_commands, config: Config, tmp_path: Path):
        options = ProjectOptions(preset="nextjs", directory="web")

        with console.capture() as capture:
            with pytest.raises(UnknownPresetError):
                await commands.create_project(options, config, cwd=tmp_path)

        assert "Failed to create project" in capture.get()
        assert not (tmp_path / "web").exists()

    @pytest.mark.unit
    async def test_missing_parent_reported_and_raised(self, fake_commands, config: Config, tmp_path: Path):
        options = ProjectOptions(preset="minimal", directory="missing/child")
        with pytest.raises(ScaffoldError):
            await commands.create_project(options, config, cwd=tmp_path)

    @pytest.mark.unit
    async def test_install_failure_reported_and_raised(self, fake_commands, config: Config, tmp_path: Path):
        fake_commands.fail("install", returncode=1)
        options = ProjectOptions(preset="minimal", directory="app", install=True)

        with console.capture() as capture:
            with pytest.raises(CommandError):
                await commands.create_project(options, config, cwd=tmp_path)

        assert "Failed to create project" in capture.get()

    @pytest.mark.unit
    async def test_next_steps(self, fake_commands, config: Config, tmp_path: Path):
        options = ProjectOptions(preset="minimal", directory="app")

        with console.capture() as capture:
            await commands.create_project(options, config, cwd=tmp_path)

        output = capture.get()
        assert "Project created successfully" in output
        assert "cd app" in output
        assert "pnpm install" in output
        assert "pnpm run dev" in output

    @pytest.mark.unit
    async def test_next_steps_quote_directory_with_spaces(self, fake_commands, config: Config, tmp_path: Path):
        options = ProjectOptions(preset="minimal", directory="my chat app")

        with console.capture() as capture:
            await commands.create_project(options, config, cwd=tmp_path)

        assert "cd 'my chat app'" in capture.get()

    @pytest.mark.unit
    async def test_next_steps_skip_install_when_installed(self, fake_commands, config: Config, tmp_path: Path):
        options = ProjectOptions(preset="minimal", directory="app", install=True)

        with console.capture() as capture:
            await commands.create_project(options, config, cwd=tmp_path)

        assert "  pnpm install" not in capture.get()


# ---------------------------------------------------------------------------
# build_project / test_project
# ---------------------------------------------------------------------------


class TestBuildAndTest:
    @pytest.mark.unit
    async def test_build(self, fake_commands, config: Config, tmp_path: Path):
        with console.capture() as capture:
            await commands.build_project(config, cwd=tmp_path)

        assert fake_commands.calls == [(["pnpm", "build"], tmp_path)]
        assert "Build completed successfully!" in capture.get()

    @pytest.mark.unit
    async def test_build_failure(self, fake_commands, config: Config):
        fake_commands.fail("build", returncode=1)

        with console.capture() as capture:
            with pytest.raises(CommandError):
                await commands.build_project(config)

        assert "Build failed" in capture.get()

    @pytest.mark.unit
    async def test_test(self, fake_commands, config: Config, tmp_path: Path):
        with console.capture() as capture:
            await commands.test_project(config, cwd=tmp_path)

        assert fake_commands.calls == [(["pnpm", "test"], tmp_path)]
        assert "Tests completed successfully!" in capture.get()

    @pytest.mark.unit
    async def test_test_failure(self, fake_commands, config: Config):
        fake_commands.fail("test", returncode=1)

        with console.capture() as capture:
            with pytest.raises(CommandError):
                await commands.test_project(config)

        assert "Tests failed" in capture.get()

    @pytest.mark.unit
    async def test_configured_package_manager(self, fake_commands):
        await commands.build_project(Config(package_manager="npm"))
        assert fake_commands.commands == [["npm", "build"]]
