"""Reading and rewriting ``package.json`` style manifests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

__all__ = [
    "BOOTSTRAP_SCRIPTS",
    "MANIFEST_LOCATIONS",
    "Manifest",
    "load_manifest",
    "manifest_paths",
    "read_manifest_document",
    "strip_bootstrap_scripts",
]


LOGGER = logging.getLogger(__name__)

MANIFEST_LOCATIONS = ("package.json", "src/package.json")
BOOTSTRAP_SCRIPTS = ("rename", "cleanup")
_MANIFEST_HINT = "Fix the JSON syntax or pass the seed name explicitly with --from."


class Manifest(BaseModel):
    """The subset of a manifest the renamer relies on."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: Optional[str] = Field(None, description="Package name declared by the manifest.")
    scripts: Optional[Dict[str, str]] = Field(None, description="Named script commands.")


def manifest_paths(root: Path) -> list[Path]:
    """Return the candidate manifest locations under ``root`` that exist."""

    return [root / location for location in MANIFEST_LOCATIONS if (root / location).is_file()]


def read_manifest_document(path: Path) -> Dict[str, Any]:
    """Parse ``path`` as a JSON object, keeping its key order.

    Raises :class:`ConfigurationError` when the file is not valid JSON or does
    not hold an object.
    """

    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(
            f"could not parse manifest {path}: {exc.msg}",
            hint=_MANIFEST_HINT,
        ) from exc
    if not isinstance(document, dict):
        raise ConfigurationError(
            f"could not parse manifest {path}: expected a JSON object",
            hint=_MANIFEST_HINT,
        )
    return document


def load_manifest(path: Path) -> Manifest:
    document = read_manifest_document(path)
    try:
        return Manifest.model_validate(document)
    except ValidationError as exc:
        raise ConfigurationError(
            f"could not parse manifest {path}: {exc.errors()[0]['msg']}",
            hint=_MANIFEST_HINT,
        ) from exc


def _write_json(path: Path, document: Dict[str, Any]) -> None:
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def strip_bootstrap_scripts(root: Path) -> list[Path]:
    """Remove the ``rename`` and ``cleanup`` scripts from every manifest.

    Key order of the documents is preserved. Returns the manifests that were
    rewritten.
    """

    updated: list[Path] = []
    for path in manifest_paths(root):
        LOGGER.info("Updating %s...", path)
        document = read_manifest_document(path)
        scripts = document.get("scripts")
        if isinstance(scripts, dict):
            for script in BOOTSTRAP_SCRIPTS:
                scripts.pop(script, None)
        _write_json(path, document)
        updated.append(path)
    return updated
