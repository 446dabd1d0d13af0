"""Jinja2 rendering for the preset templates.

Templates are plain source files with a ``.j2`` suffix, grouped in one
directory per preset under ``ai_cli/scaffolder/templates/``.  They are
rendered verbatim (no HTML escaping) and any variable missing from the
context is an error.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ai_cli.utils import write_text

TEMPLATE_ROOT = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Loads and renders preset templates.

    One renderer is shared by every preset generator of a run.  The
    environment trims the newline after block tags and strips indentation
    before them, so ``{% if typescript %}`` lines leave no trace in the
    output; the final newline of each template is kept.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_ROOT
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, name: str, context: dict[str, Any]) -> str:
        """Render template *name* (e.g. ``"express/src/server.j2"``)."""
        return self.env.get_template(name).render(context)

    async def render_to_file(
        self, name: str, output_path: str | Path, context: dict[str, Any]
    ) -> Path:
        """Render *name* into *output_path* and return that path.

        Intermediate directories such as ``src/`` are created as needed.
        """
        path = Path(output_path)
        await asyncio.to_thread(write_text, path, self.render(name, context))
        return path
