"""ai-cli scaffolder -- generates AI chat starter projects.

Takes a ``ProjectOptions`` (preset, target directory, TypeScript/Tailwind
flags) and writes the preset's files, rendered from the Jinja2 templates
under ``ai_cli/scaffolder/templates/``.

Quick usage::

    from ai_cli.scaffolder import ProjectGenerator, ProjectOptions

    options = ProjectOptions(preset="express", directory="chat-api")
    generator = ProjectGenerator(options)
    project_path = await generator.generate()
"""

from ai_cli.scaffolder.generator import (
    PRESET_DESCRIPTIONS,
    ProjectGenerator,
    ProjectOptions,
    resolve_preset,
    resolve_target,
)
from ai_cli.scaffolder.manifest import update_package_json
from ai_cli.scaffolder.templates import TemplateRenderer

__all__ = [
    "PRESET_DESCRIPTIONS",
    "ProjectGenerator",
    "ProjectOptions",
    "TemplateRenderer",
    "resolve_preset",
    "resolve_target",
    "update_package_json",
]
