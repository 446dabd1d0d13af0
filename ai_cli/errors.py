"""Exceptions raised by ai-cli.

Every error derives from :class:`AiCliError` so the CLI entry point can
report it and exit with status 1 without distinguishing between kinds.
"""

from __future__ import annotations


class AiCliError(Exception):
    """Base class for all ai-cli failures."""


class UnknownPresetError(AiCliError):
    """Raised when a preset name is not one of the known presets."""

    def __init__(self, preset: str, known: tuple[str, ...]) -> None:
        self.preset = preset
        self.known = known
        super().__init__(
            f"Unknown preset: {preset!r} (expected one of: {', '.join(known)})"
        )


class ScaffoldError(AiCliError):
    """Raised when the target directory cannot be created or written."""

    def __init__(self, path: object, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class ManifestError(AiCliError):
    """Raised when a project's ``package.json`` is missing or malformed."""


class CommandError(AiCliError):
    """Raised when an external command exits with a non-zero status.

    *stderr* is only filled in when the command could not be started;
    otherwise its output has already gone to the terminal.
    """

    def __init__(self, cmd: str, returncode: int, stderr: str = "") -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed with exit code {returncode}: {cmd}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)
