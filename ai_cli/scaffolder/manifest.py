"""``package.json`` construction and merging.

The hand-written presets (``minimal``, ``basic``, ``express``) get a manifest
built from scratch.  The ``react`` preset starts from the manifest written by
the external Vite scaffolder, which is read back and merged with the AI SDK
dependencies and the pinned React/TypeScript versions.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ai_cli.config import Config
from ai_cli.errors import ManifestError
from ai_cli.utils import load_json, save_json

MANIFEST_NAME = "package.json"
DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")

CORE_PACKAGE = "@buildlayer/ai-core"
REACT_PACKAGE = "@buildlayer/ai-react"

# Tailwind v4 toolchain used with the Vite scaffolder (PostCSS plugin based).
TAILWIND_V4_DEPENDENCIES: dict[str, str] = {
    "@tailwindcss/postcss": "^4.1.12",
    "autoprefixer": "^10.4.21",
    "postcss": "^8.5.6",
    "tailwindcss": "^4.0.0",
}

# Tailwind v3 toolchain used by the hand-written ``basic`` preset.
TAILWIND_V3_DEPENDENCIES: dict[str, str] = {
    "autoprefixer": "^10.0.0",
    "postcss": "^8.0.0",
    "tailwindcss": "^3.0.0",
}


# ---------------------------------------------------------------------------
# Manifests for hand-written presets
# ---------------------------------------------------------------------------


def build_minimal_manifest(
    name: str, *, typescript: bool, config: Config
) -> dict[str, Any]:
    """Manifest for the console chat preset."""
    dev_dependencies: dict[str, str] = {}
    if typescript:
        dev_dependencies.update({
            "@types/node": "^20.0.0",
            "typescript": "^5.4.0",
            "tsx": "^4.0.0",
        })

    return {
        "name": name,
        "version": "0.1.0",
        "private": True,
        "type": "module",
        "scripts": {
            "start": "node dist/index.js",
            "build": "tsc" if typescript else "echo 'No build needed'",
            "dev": "tsx src/index.ts" if typescript else "node src/index.js",
        },
        "dependencies": {
            CORE_PACKAGE: config.sdk.template_range,
        },
        "devDependencies": dict(sorted(dev_dependencies.items())),
    }


def build_basic_manifest(
    name: str, *, typescript: bool, tailwind: bool, config: Config
) -> dict[str, Any]:
    """Manifest for the hand-written Vite + React preset."""
    dev_dependencies: dict[str, str] = {
        "@vitejs/plugin-react": "^4.0.0",
        "vite": "^5.0.0",
    }
    if typescript:
        dev_dependencies.update({
            "@types/react": "^18.0.0",
            "@types/react-dom": "^18.0.0",
            "typescript": "^5.4.0",
        })
    if tailwind:
        dev_dependencies.update(TAILWIND_V3_DEPENDENCIES)

    return {
        "name": name,
        "version": "0.1.0",
        "private": True,
        "type": "module",
        "scripts": {
            "dev": "vite",
            "build": "tsc && vite build" if typescript else "vite build",
            "preview": "vite preview",
        },
        "dependencies": {
            CORE_PACKAGE: config.sdk.template_range,
            REACT_PACKAGE: config.sdk.template_range,
            "react": "^18.0.0",
            "react-dom": "^18.0.0",
        },
        "devDependencies": dict(sorted(dev_dependencies.items())),
    }


def build_express_manifest(
    name: str, *, typescript: bool, config: Config
) -> dict[str, Any]:
    """Manifest for the Express API preset."""
    dev_dependencies: dict[str, str] = {}
    if typescript:
        dev_dependencies.update({
            "@types/cors": "^2.8.0",
            "@types/express": "^4.17.0",
            "@types/node": "^20.0.0",
            "@types/ws": "^8.5.0",
            "typescript": "^5.4.0",
            "tsx": "^4.0.0",
        })
    dev_dependencies["nodemon"] = "^3.0.0"

    return {
        "name": name,
        "version": "0.1.0",
        "private": True,
        "type": "module",
        "scripts": {
            "start": "node dist/server.js",
            "build": "tsc" if typescript else "echo 'No build needed'",
            "dev": "tsx --watch src/server.ts" if typescript else "nodemon src/server.js",
        },
        "dependencies": {
            CORE_PACKAGE: config.sdk.template_range,
            "cors": "^2.8.5",
            "dotenv": "^16.0.0",
            "express": "^4.18.0",
            "helmet": "^7.0.0",
            "ws": "^8.14.0",
        },
        "devDependencies": dict(sorted(dev_dependencies.items())),
    }


async def write_manifest(project_dir: Path, manifest: dict[str, Any]) -> Path:
    """Write *manifest* as ``package.json`` inside *project_dir*."""
    path = project_dir / MANIFEST_NAME
    await save_json(manifest, path)
    return path


# ---------------------------------------------------------------------------
# Merging into an existing manifest
# ---------------------------------------------------------------------------


def read_manifest(project_dir: Path) -> dict[str, Any]:
    """Read and validate ``package.json`` from *project_dir*.

    Raises:
        ManifestError: If the file is missing or unreadable as UTF-8 JSON,
            or if it or one of its dependency sections is not an object.
    """
    path = project_dir / MANIFEST_NAME
    if not path.is_file():
        raise ManifestError(f"{MANIFEST_NAME} not found in {project_dir}")
    try:
        data = load_json(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object")
    for section in DEPENDENCY_SECTIONS:
        if data.get(section) is not None and not isinstance(data[section], dict):
            raise ManifestError(f"{path}: \"{section}\" must be a JSON object")
    return data


def merge_sdk_dependencies(
    manifest: dict[str, Any],
    *,
    tailwind: bool,
    config: Config,
) -> dict[str, Any]:
    """Return a copy of *manifest* wired to the AI SDK.

    Existing fields are kept.  ``react``/``react-dom`` are pinned to the
    React 18 line ``@buildlayer/ai-react`` is built against; when the
    manifest has a ``devDependencies`` section the React type packages and
    TypeScript are replaced with the pinned versions.
    """
    pins = config.pins
    merged = dict(manifest)

    dependencies = dict(merged.get("dependencies") or {})
    dependencies[CORE_PACKAGE] = config.sdk.ai_core
    dependencies[REACT_PACKAGE] = config.sdk.ai_react
    dependencies["react-router-dom"] = pins.react_router_dom
    dependencies["react"] = pins.react
    dependencies["react-dom"] = pins.react_dom
    if tailwind:
        dependencies.update(TAILWIND_V4_DEPENDENCIES)
    merged["dependencies"] = dependencies

    if merged.get("devDependencies") is not None:
        dev_dependencies = {
            key: value
            for key, value in merged["devDependencies"].items()
            if key not in ("@types/react", "@types/react-dom", "typescript")
        }
        dev_dependencies["@types/react"] = pins.types_react
        dev_dependencies["@types/react-dom"] = pins.types_react_dom
        dev_dependencies["typescript"] = pins.typescript
        merged["devDependencies"] = dev_dependencies

    return merged


async def update_package_json(
    project_dir: str | Path,
    *,
    tailwind: bool,
    config: Config,
) -> dict[str, Any]:
    """Merge the AI SDK dependencies into ``<project_dir>/package.json``.

    Returns:
        The manifest as written.
    """
    root = Path(project_dir)
    manifest = read_manifest(root)
    merged = merge_sdk_dependencies(
        manifest, tailwind=tailwind, config=config
    )
    await write_manifest(root, merged)
    return merged
