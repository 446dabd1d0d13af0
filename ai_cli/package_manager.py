"""Package-manager and external scaffolder invocation.

Every command inherits the parent's stdio, runs without a timeout and is
awaited to completion.  A non-zero exit status is raised as
:class:`~ai_cli.errors.CommandError`; nothing is retried.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from ai_cli.config import Config
from ai_cli.errors import CommandError
from ai_cli.utils import format_command, print_step, run_command


async def run_checked(cmd: list[str], cwd: str | Path | None = None) -> None:
    """Run *cmd* and raise ``CommandError`` unless it exits with status 0.

    The child writes straight to the terminal, so the raised error carries
    no stderr text; the user has already seen it.  A command that cannot be
    started (missing executable or working directory) is reported the way a
    shell would, with status 127.
    """
    # Resolves wrappers such as ``pnpm.cmd`` on Windows.
    executable = shutil.which(cmd[0]) or cmd[0]
    try:
        returncode, _, _ = await run_command([executable, *cmd[1:]], cwd=cwd)
    except FileNotFoundError as exc:
        raise CommandError(format_command(cmd), 127, f"could not start {cmd[0]}: {exc}") from exc
    if returncode != 0:
        raise CommandError(format_command(cmd), returncode)


class PackageManager:
    """Thin wrapper around a Node package manager executable (``pnpm`` by default)."""

    def __init__(self, executable: str = "pnpm", cwd: str | Path | None = None) -> None:
        self.executable = executable
        self.cwd = Path(cwd) if cwd is not None else None

    async def run(self, *args: str) -> None:
        """Run ``<executable> <args...>`` in :attr:`cwd`."""
        await run_checked([self.executable, *args], cwd=self.cwd)

    async def install(self) -> None:
        await self.run("install")

    async def build(self) -> None:
        await self.run("build")

    async def test(self) -> None:
        await self.run("test")

    async def add(self, packages: list[str], *, dev: bool = False) -> None:
        """Add *packages*, as devDependencies when *dev* is set."""
        if dev:
            await self.run("add", "-D", *packages)
        else:
            await self.run("add", *packages)

    async def remove(self, packages: list[str]) -> None:
        await self.run("remove", *packages)


async def create_vite_project(
    target: Path, *, typescript: bool, scaffolder: str = "npm"
) -> None:
    """Run ``npm create vite@latest`` for *target* with the React template.

    The scaffolder is started from the parent directory so that it creates
    (or fills) *target* by name.
    """
    template = "react-ts" if typescript else "react"
    cmd = [scaffolder, "create", "vite@latest", target.name, "--", "--template", template]
    await run_checked(cmd, cwd=target.parent)


async def reinstall_dependencies(project_dir: Path, config: Config) -> None:
    """Force the pinned TypeScript and React type versions into *project_dir*.

    Vite's template pins its own versions; removing and re-adding them makes
    the lockfile agree with the merged ``package.json``.
    """
    pins = config.pins
    pm = PackageManager(config.package_manager, cwd=project_dir)

    print_step("Reinstalling with correct TypeScript version...")
    await pm.remove(["typescript"])
    await pm.add([f"typescript@{pins.typescript}"], dev=True)

    print_step("Reinstalling with correct React types...")
    await pm.remove(["@types/react", "@types/react-dom"])
    await pm.add(
        [
            f"@types/react@{pins.types_react}",
            f"@types/react-dom@{pins.types_react_dom}",
        ],
        dev=True,
    )
