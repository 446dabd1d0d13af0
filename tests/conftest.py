"""Shared pytest fixtures for the ai-cli test suite.

Provides reusable fixtures for:
- Default configuration
- A recorder that stands in for package-manager and scaffolder processes
- A fake ``npm create vite`` that writes what the real React template writes
- Mock subprocess helpers
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ai_cli.config import Config


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> Config:
    """Default configuration (pnpm, npm, react preset)."""
    return Config()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop AI_CLI_* variables so ``Config.from_env`` sees only what a test sets."""
    for key in list(os.environ):
        if key.startswith("AI_CLI_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Fake Vite scaffolder output
# ---------------------------------------------------------------------------

def vite_package_json(name: str, typescript: bool) -> dict[str, Any]:
    """The ``package.json`` written by ``npm create vite`` for the React templates."""
    dev_dependencies: dict[str, str] = {
        "@eslint/js": "^9.25.0",
        "@types/react": "^19.1.2",
        "@types/react-dom": "^19.1.2",
        "@vitejs/plugin-react": "^4.4.1",
        "eslint": "^9.25.0",
        "vite": "^6.3.5",
    }
    if typescript:
        dev_dependencies["typescript"] = "~5.8.3"
    return {
        "name": name,
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": {
            "dev": "vite",
            "build": "tsc -b && vite build" if typescript else "vite build",
            "lint": "eslint .",
            "preview": "vite preview",
        },
        "dependencies": {
            "react": "^19.1.0",
            "react-dom": "^19.1.0",
        },
        "devDependencies": dev_dependencies,
    }


def write_fake_vite_project(root: Path, template: str) -> None:
    """Write a trimmed copy of Vite's ``react``/``react-ts`` template into *root*."""
    typescript = template == "react-ts"
    jsx_ext = "tsx" if typescript else "jsx"
    root.mkdir(exist_ok=True)
    (root / "src").mkdir(exist_ok=True)
    (root / "package.json").write_text(
        json.dumps(vite_package_json(root.name, typescript), indent=2),
        encoding="utf-8",
    )
    (root / "index.html").write_text(
        f'<div id="root"></div><script type="module" src="/src/main.{jsx_ext}"></script>\n',
        encoding="utf-8",
    )
    (root / "src" / f"main.{jsx_ext}").write_text(
        f"import App from './App.{jsx_ext}'\nimport './index.css'\n", encoding="utf-8"
    )
    (root / "src" / f"App.{jsx_ext}").write_text("// vite default app\n", encoding="utf-8")
    (root / "src" / "index.css").write_text(":root {}\n", encoding="utf-8")
    if typescript:
        (root / "tsconfig.json").write_text("{}\n", encoding="utf-8")


@pytest.fixture
def vite_manifest() -> dict[str, Any]:
    """The manifest ``npm create vite -- --template react-ts`` writes for ``web``."""
    return vite_package_json("web", typescript=True)


# ---------------------------------------------------------------------------
# Command recorder
# ---------------------------------------------------------------------------

class CommandRecorder:
    """Replaces ``run_command`` in :mod:`ai_cli.package_manager`.

    Records every ``(cmd, cwd)`` pair.  ``npm create vite`` invocations
    produce a fake Vite project; any command containing a registered failure
    token exits with the configured status.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], Path | None]] = []
        self.failures: dict[str, int] = {}

    def fail(self, token: str, returncode: int = 1) -> None:
        self.failures[token] = returncode

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]

    async def run(
        self, cmd: str | list[str], cwd: str | Path | None = None, **kwargs: Any
    ) -> tuple[int, str, str]:
        args = list(cmd) if isinstance(cmd, list) else cmd.split()
        cwd_path = Path(cwd) if cwd is not None else None
        self.calls.append((args, cwd_path))

        for token, returncode in self.failures.items():
            if token in args:
                return (returncode, "", f"{token} failed")

        if "vite@latest" in args and cwd_path is not None:
            write_fake_vite_project(cwd_path / args[3], args[-1])
        return (0, "", "")


@pytest.fixture
def fake_commands():
    """Route package-manager/scaffolder processes to a ``CommandRecorder``.

    Usage:
        async def test_build(fake_commands):
            await PackageManager("pnpm").build()
            assert fake_commands.commands == [["pnpm", "build"]]
    """
    recorder = CommandRecorder()
    with patch("ai_cli.package_manager.run_command", new=recorder.run), patch(
        "ai_cli.package_manager.shutil.which", return_value=None
    ):
        yield recorder


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
