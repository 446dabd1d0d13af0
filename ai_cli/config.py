"""ai-cli configuration.

Typed configuration for the scaffolder and the package-manager wrappers.
All settings use Pydantic v2 models so they can be validated at construction
time and serialised to/from JSON or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

PRESET_NAMES: tuple[str, ...] = ("minimal", "basic", "react", "express")


class SdkVersions(BaseModel):
    """Version ranges written into generated manifests for the AI chat SDK."""

    ai_core: str = Field(default="^0.1.2")
    ai_react: str = Field(default="^0.1.4")
    # Hand-written presets track the newest SDK release.
    template_range: str = Field(default="latest")


class PinnedVersions(BaseModel):
    """Versions forced onto projects created by the external Vite scaffolder.

    ``@buildlayer/ai-react`` is built against React 18, so the React runtime,
    its type packages and TypeScript are pinned after Vite has written its own
    ``package.json``.
    """

    react: str = Field(default="^18.3.1")
    react_dom: str = Field(default="^18.3.1")
    types_react: str = Field(default="^18.3.24")
    types_react_dom: str = Field(default="^18.3.7")
    typescript: str = Field(default="^5.9.2")
    react_router_dom: str = Field(default="^6.8.0")


class Config(BaseModel):
    """Global ai-cli configuration.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and passed to the command functions.
    """

    package_manager: str = Field(default="pnpm", min_length=1)
    scaffolder: str = Field(default="npm", min_length=1)
    default_preset: str = Field(default="react")
    default_project_name: str = Field(default="my-ai-chat-app", min_length=1)
    sdk: SdkVersions = Field(default_factory=SdkVersions)
    pins: PinnedVersions = Field(default_factory=PinnedVersions)

    @field_validator("default_preset")
    @classmethod
    def _known_preset(cls, value: str) -> str:
        if value not in PRESET_NAMES:
            raise ValueError(
                f"default_preset must be one of {', '.join(PRESET_NAMES)}; got {value!r}"
            )
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            AI_CLI_PACKAGE_MANAGER, AI_CLI_SCAFFOLDER, AI_CLI_DEFAULT_PRESET,
            AI_CLI_PROJECT_NAME, AI_CLI_CORE_VERSION, AI_CLI_REACT_VERSION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("AI_CLI_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["AI_CLI_PACKAGE_MANAGER"]
        if os.environ.get("AI_CLI_SCAFFOLDER"):
            kwargs["scaffolder"] = os.environ["AI_CLI_SCAFFOLDER"]
        if os.environ.get("AI_CLI_DEFAULT_PRESET"):
            kwargs["default_preset"] = os.environ["AI_CLI_DEFAULT_PRESET"]
        if os.environ.get("AI_CLI_PROJECT_NAME"):
            kwargs["default_project_name"] = os.environ["AI_CLI_PROJECT_NAME"]

        sdk_kwargs: dict[str, Any] = {}
        if os.environ.get("AI_CLI_CORE_VERSION"):
            sdk_kwargs["ai_core"] = os.environ["AI_CLI_CORE_VERSION"]
        if os.environ.get("AI_CLI_REACT_VERSION"):
            sdk_kwargs["ai_react"] = os.environ["AI_CLI_REACT_VERSION"]

        return cls(sdk=SdkVersions(**sdk_kwargs), **kwargs)
