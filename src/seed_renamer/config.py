"""Run options and seed name resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from .errors import ConfigurationError
from .manifest import MANIFEST_LOCATIONS, load_manifest
from .naming import validate_project_name

__all__ = ["RenameOptions", "SEED_PREFIX", "detect_seed_name", "resolve_seed_name"]


LOGGER = logging.getLogger(__name__)

SEED_PREFIX = "seed-"


@dataclass(slots=True)
class RenameOptions:
    """Everything a single rename run needs.

    Attributes
    ----------
    project_name:
        The new project name, in kebab case as typed by the user.
    seed_name:
        The seed name to replace. ``None`` means auto-detect it from the
        manifest or the directory name.
    root:
        Directory of the checked-out seed project.
    dotnet:
        Use the dotnet-style path renamer.
    run_install:
        Regenerate the lockfile with the package manager after renaming.
    rename_root:
        Rename ``root`` itself when it is still named after the seed.
    extra_excludes:
        Glob patterns added to the default exclusion list.
    """

    project_name: str
    seed_name: str | None = None
    root: Path = field(default_factory=Path.cwd)
    dotnet: bool = False
    run_install: bool = True
    rename_root: bool = True
    extra_excludes: tuple[str, ...] = ()

    @classmethod
    def from_name(
        cls,
        project_name: str | None,
        *,
        seed_name: str | None = None,
        root: str | Path | None = None,
        dotnet: bool = False,
        run_install: bool = True,
        rename_root: bool = True,
        extra_excludes: Sequence[str] = (),
    ) -> "RenameOptions":
        """Build validated :class:`RenameOptions`.

        Raises :class:`ConfigurationError` when ``project_name`` or an explicit
        ``seed_name`` is missing or malformed.
        """

        name = validate_project_name(project_name)
        if seed_name is not None:
            seed_name = validate_project_name(seed_name, label="Seed name")

        return cls(
            project_name=name,
            seed_name=seed_name,
            root=Path(root).expanduser().resolve() if root is not None else Path.cwd(),
            dotnet=dotnet,
            run_install=run_install,
            rename_root=rename_root,
            extra_excludes=tuple(extra_excludes),
        )


def detect_seed_name(root: Path) -> str:
    """Find the seed name from a manifest, falling back to the directory name."""

    for location in MANIFEST_LOCATIONS:
        path = root / location
        if not path.is_file():
            continue
        manifest = load_manifest(path)
        if manifest.name and manifest.name.startswith(SEED_PREFIX):
            LOGGER.debug("Detected seed name %r from %s", manifest.name, path)
            return manifest.name

    if root.name.startswith(SEED_PREFIX):
        LOGGER.debug("Detected seed name %r from directory name", root.name)
        return root.name

    raise ConfigurationError(
        f"could not detect the seed project name in {root}",
        hint=(
            "No manifest name or directory name starts with 'seed-'. "
            "Pass the seed name explicitly with --from <seed-name>."
        ),
    )


def resolve_seed_name(options: RenameOptions) -> str:
    if options.seed_name:
        return options.seed_name
    return detect_seed_name(options.root)
