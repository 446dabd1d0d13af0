"""Vite React app wired to ``@buildlayer/ai-react`` (``react`` preset).

Unlike the other presets this one delegates the base project to the
external Vite scaffolder, then overwrites the application entry component
and stylesheet and merges the SDK into the manifest Vite wrote.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ai_cli.config import Config
from ai_cli.package_manager import create_vite_project
from ai_cli.utils import print_step

from .manifest import MANIFEST_NAME, update_package_json
from .templates import TemplateRenderer


class ReactGenerator:
    """Generates the ``react`` preset on top of ``npm create vite``."""

    def __init__(self, renderer: TemplateRenderer, config: Config) -> None:
        self.renderer = renderer
        self.config = config

    async def generate(self, root: Path, context: dict[str, Any]) -> list[Path]:
        """Scaffold with Vite, then apply the SDK templates to *root*."""
        typescript = context["typescript"]
        tailwind = context["tailwind"]

        print_step("Running Vite scaffolder...")
        await create_vite_project(
            root, typescript=typescript, scaffolder=self.config.scaffolder
        )

        written: list[Path] = []
        written.append(
            await self.renderer.render_to_file(
                "react/src/App.j2", root / "src" / f"App.{context['jsx_ext']}", context
            )
        )
        written.append(
            await self.renderer.render_to_file(
                "react/src/index.css.j2", root / "src" / "index.css", context
            )
        )
        if tailwind:
            written.append(
                await self.renderer.render_to_file(
                    "react/postcss.config.js.j2", root / "postcss.config.js", context
                )
            )

        await update_package_json(root, tailwind=tailwind, config=self.config)
        written.append(root / MANIFEST_NAME)
        return written
