"""Hand-written Vite + React chat app (``basic`` preset).

Writes every file itself instead of calling the Vite scaffolder: manifest,
Vite config, HTML entry point and a ``ChatPanel`` based ``App`` component.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ai_cli.config import Config

from .manifest import build_basic_manifest, write_manifest
from .templates import TemplateRenderer


class BasicGenerator:
    """Generates the ``basic`` preset."""

    # Template name -> output file name, written for every flag combination.
    _STATIC_FILES: dict[str, str] = {
        "basic/vite.config.ts.j2": "vite.config.ts",
        "basic/index.html.j2": "index.html",
    }

    _TYPESCRIPT_FILES: dict[str, str] = {
        "basic/tsconfig.json.j2": "tsconfig.json",
        "basic/tsconfig.node.json.j2": "tsconfig.node.json",
    }

    _TAILWIND_FILES: dict[str, str] = {
        "basic/tailwind.config.js.j2": "tailwind.config.js",
        "basic/postcss.config.js.j2": "postcss.config.js",
        "basic/src/index.css.j2": "src/index.css",
    }

    def __init__(self, renderer: TemplateRenderer, config: Config) -> None:
        self.renderer = renderer
        self.config = config

    async def generate(self, root: Path, context: dict[str, Any]) -> list[Path]:
        """Write the preset into *root* and return the written paths."""
        typescript = context["typescript"]
        tailwind = context["tailwind"]
        jsx_ext = context["jsx_ext"]

        manifest = build_basic_manifest(
            context["package_name"],
            typescript=typescript,
            tailwind=tailwind,
            config=self.config,
        )
        written = [await write_manifest(root, manifest)]

        files = dict(self._STATIC_FILES)
        if typescript:
            files.update(self._TYPESCRIPT_FILES)
        if tailwind:
            files.update(self._TAILWIND_FILES)
        files["basic/src/main.j2"] = f"src/main.{jsx_ext}"
        files["basic/src/App.j2"] = f"src/App.{jsx_ext}"

        for template_name, output_name in files.items():
            path = await self.renderer.render_to_file(
                template_name, root / output_name, context
            )
            written.append(path)

        return written
