"""Console chat app built on ``@buildlayer/ai-core`` only (``minimal`` preset)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ai_cli.config import Config

from .manifest import build_minimal_manifest, write_manifest
from .templates import TemplateRenderer


class MinimalGenerator:
    """Generates the ``minimal`` preset: manifest, optional tsconfig, entry point, README."""

    def __init__(self, renderer: TemplateRenderer, config: Config) -> None:
        self.renderer = renderer
        self.config = config

    async def generate(self, root: Path, context: dict[str, Any]) -> list[Path]:
        typescript = context["typescript"]

        manifest = build_minimal_manifest(
            context["package_name"], typescript=typescript, config=self.config
        )
        written = [await write_manifest(root, manifest)]

        files: dict[str, str] = {}
        if typescript:
            files["minimal/tsconfig.json.j2"] = "tsconfig.json"
        files["minimal/src/index.j2"] = f"src/index.{context['ext']}"
        files["minimal/README.md.j2"] = "README.md"

        for template_name, output_name in files.items():
            path = await self.renderer.render_to_file(
                template_name, root / output_name, context
            )
            written.append(path)

        return written
