"""Main scaffolding orchestrator.

Resolves the preset and target directory from a ``ProjectOptions`` and
delegates file generation to the preset's generator.  The preset is
validated before anything touches the filesystem, so an unknown preset never
leaves a directory behind.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from ai_cli.config import PRESET_NAMES, Config
from ai_cli.errors import ScaffoldError, UnknownPresetError
from ai_cli.utils import sanitize_name

from .basic_gen import BasicGenerator
from .express_gen import ExpressGenerator
from .minimal_gen import MinimalGenerator
from .react_gen import ReactGenerator
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Preset registry
# ---------------------------------------------------------------------------

PRESET_GENERATORS: dict[str, type] = {
    "minimal": MinimalGenerator,
    "basic": BasicGenerator,
    "react": ReactGenerator,
    "express": ExpressGenerator,
}

PRESET_DESCRIPTIONS: dict[str, str] = {
    "minimal": "Console chat app (@buildlayer/ai-core)",
    "basic": "Vite + React chat app, hand-written",
    "react": "Vite React app via npm create vite (@buildlayer/ai-react)",
    "express": "Express.js REST + WebSocket chat API",
}


# ---------------------------------------------------------------------------
# Options model
# ---------------------------------------------------------------------------


class ProjectOptions(BaseModel):
    """Pydantic model describing the project to create."""

    preset: str = Field(default="react", description="One of minimal, basic, react, express")
    directory: str | None = Field(
        default=None,
        description="Target directory; its last component becomes the project name",
    )
    typescript: bool = Field(default=True, description="Emit TypeScript sources and tsconfig")
    tailwind: bool = Field(default=True, description="Emit Tailwind CSS configuration")
    install: bool = Field(default=False, description="Install dependencies after generation")


# ---------------------------------------------------------------------------
# Resolution helpers
# ---------------------------------------------------------------------------


def resolve_preset(name: str) -> str:
    """Return the normalised preset key for *name*.

    Raises:
        UnknownPresetError: If *name* is not a known preset.
    """
    key = name.strip().lower()
    if key not in PRESET_GENERATORS:
        raise UnknownPresetError(name, PRESET_NAMES)
    return key


def resolve_target(
    directory: str | Path | None,
    *,
    default_name: str,
    cwd: str | Path | None = None,
) -> Path:
    """Compute the absolute project directory.

    A relative *directory* is taken relative to *cwd* (the process working
    directory when omitted).  Without a directory the project is placed in
    ``<cwd>/<default_name>``.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    target = Path(directory) if directory else Path(default_name)
    if not target.is_absolute():
        target = base / target
    # Collapse ``..`` and ``.`` without resolving symlinks.
    return Path(os.path.normpath(str(target)))


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Creates one project from ``ProjectOptions``.

    The generator owns a single ``TemplateRenderer`` shared by the preset
    generators.  After :meth:`generate` returns, :attr:`written` lists every
    file the preset produced.
    """

    def __init__(
        self,
        options: ProjectOptions,
        config: Config | None = None,
        *,
        cwd: str | Path | None = None,
    ) -> None:
        self.options = options
        self.config = config or Config()
        self.cwd = cwd
        self.renderer = TemplateRenderer()
        self.written: list[Path] = []

    # -- Public API --------------------------------------------------------

    @property
    def preset(self) -> str:
        return resolve_preset(self.options.preset)

    @property
    def target(self) -> Path:
        return resolve_target(
            self.options.directory,
            default_name=self.config.default_project_name,
            cwd=self.cwd,
        )

    async def generate(self) -> Path:
        """Generate the project and return its root directory.

        Raises:
            UnknownPresetError: Before any filesystem write.
            ScaffoldError: If the target directory cannot be created, e.g.
                because its parent does not exist.
        """
        preset = self.preset
        root = self.target

        await self._create_root(root)

        context = self._build_context(root)
        generator = PRESET_GENERATORS[preset](self.renderer, self.config)
        self.written = await generator.generate(root, context)
        return root

    # -- Context building --------------------------------------------------

    def _build_context(self, root: Path) -> dict[str, Any]:
        """Build the Jinja2 template context from the options."""
        typescript = self.options.typescript
        project_name = root.name or self.config.default_project_name
        return {
            "project_name": project_name,
            "package_name": sanitize_name(project_name) or self.config.default_project_name,
            "typescript": typescript,
            "tailwind": self.options.tailwind,
            "ext": "ts" if typescript else "js",
            "jsx_ext": "tsx" if typescript else "jsx",
            "language": "typescript" if typescript else "javascript",
        }

    # -- Directory structure -----------------------------------------------

    async def _create_root(self, root: Path) -> None:
        """Create *root* but never its parents.

        The directory is left empty: the ``react`` preset hands it to the Vite
        scaffolder, which refuses non-empty targets.
        """
        try:
            await asyncio.to_thread(root.mkdir, exist_ok=True)
        except FileNotFoundError as exc:
            raise ScaffoldError(root, "parent directory does not exist") from exc
        except OSError as exc:
            raise ScaffoldError(root, exc.strerror or str(exc)) from exc
