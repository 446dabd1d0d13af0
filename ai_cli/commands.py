"""The ``create``, ``build`` and ``test`` commands.

Each command reports progress through the shared Rich console, prints a
failure line and re-raises on error.  Converting the error into an exit
status is left to :func:`ai_cli.cli.main`.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path

from ai_cli.config import Config
from ai_cli.errors import AiCliError
from ai_cli.package_manager import PackageManager, reinstall_dependencies
from ai_cli.scaffolder import PRESET_DESCRIPTIONS, ProjectGenerator, ProjectOptions
from ai_cli.utils import (
    console,
    print_error,
    print_info,
    print_step,
    print_success,
    print_summary_table,
)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


async def create_project(
    options: ProjectOptions,
    config: Config | None = None,
    *,
    cwd: str | Path | None = None,
) -> Path:
    """Generate a project from *options* and optionally install it.

    Returns:
        The project root directory.
    """
    config = config or Config()
    generator = ProjectGenerator(options, config, cwd=cwd)

    print_info("Creating new AI UI SDK project...")
    try:
        preset = generator.preset
        root = generator.target

        print_summary_table(
            {
                "Project": root.name,
                "Directory": str(root),
                "Preset": f"{preset} -- {PRESET_DESCRIPTIONS[preset]}",
                "TypeScript": _yes_no(options.typescript),
                "Tailwind CSS": _yes_no(options.tailwind),
            },
            title="New project",
        )

        await generator.generate()

        if options.install:
            pm = PackageManager(config.package_manager, cwd=root)
            print_step(f"Installing dependencies with {config.package_manager}...")
            await pm.install()
            if preset == "react":
                await reinstall_dependencies(root, config)
    except (AiCliError, OSError) as exc:
        print_error(f"Failed to create project: {exc}")
        raise

    print_success(f"Project created successfully in {root}")
    _print_next_steps(root, options, config, cwd=cwd)
    return root


def _print_next_steps(
    root: Path,
    options: ProjectOptions,
    config: Config,
    *,
    cwd: str | Path | None = None,
) -> None:
    base = Path(cwd) if cwd is not None else Path.cwd()
    try:
        display = os.path.relpath(root, base)
    except ValueError:
        display = str(root)

    pm = config.package_manager
    console.print()
    print_info("Next steps:")
    console.print(f"  cd {shlex.quote(display)}")
    if not options.install:
        console.print(f"  {pm} install")
    console.print(f"  {pm} run dev")


async def build_project(config: Config | None = None, *, cwd: str | Path | None = None) -> None:
    """Run ``<package manager> build`` in *cwd*."""
    config = config or Config()
    print_info("Building AI UI SDK project...")
    print_step("Building packages...")
    try:
        await PackageManager(config.package_manager, cwd=cwd).build()
    except (AiCliError, OSError) as exc:
        print_error(f"Build failed: {exc}")
        raise
    print_success("Build completed successfully!")


async def test_project(config: Config | None = None, *, cwd: str | Path | None = None) -> None:
    """Run ``<package manager> test`` in *cwd*."""
    config = config or Config()
    print_info("Running tests for AI UI SDK project...")
    print_step("Running package tests...")
    try:
        await PackageManager(config.package_manager, cwd=cwd).test()
    except (AiCliError, OSError) as exc:
        print_error(f"Tests failed: {exc}")
        raise
    print_success("Tests completed successfully!")
