"""Express.js chat API with REST and WebSocket endpoints (``express`` preset).

Produces the server entry point, an optional ``tsconfig.json``, the
``.env``/``.env.example`` pair (identical content, both listing the
supported provider keys commented out) and a README documenting the API.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ai_cli.config import Config

from .manifest import build_express_manifest, write_manifest
from .templates import TemplateRenderer


class ExpressGenerator:
    """Generates the ``express`` preset."""

    _ENV_FILES: tuple[str, ...] = (".env", ".env.example")

    def __init__(self, renderer: TemplateRenderer, config: Config) -> None:
        self.renderer = renderer
        self.config = config

    async def generate(self, root: Path, context: dict[str, Any]) -> list[Path]:
        """Write the preset into *root* and return the written paths."""
        typescript = context["typescript"]

        manifest = build_express_manifest(
            context["package_name"], typescript=typescript, config=self.config
        )
        written = [await write_manifest(root, manifest)]

        if typescript:
            written.append(
                await self.renderer.render_to_file(
                    "express/tsconfig.json.j2", root / "tsconfig.json", context
                )
            )

        written.append(
            await self.renderer.render_to_file(
                "express/src/server.j2",
                root / "src" / f"server.{context['ext']}",
                context,
            )
        )

        for env_name in self._ENV_FILES:
            written.append(
                await self.renderer.render_to_file(
                    "express/env.j2", root / env_name, context
                )
            )

        written.append(
            await self.renderer.render_to_file(
                "express/README.md.j2", root / "README.md", context
            )
        )
        return written
