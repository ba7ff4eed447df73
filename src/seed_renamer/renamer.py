"""End-to-end rename of a checked-out seed project."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .cleanup import Runner, next_steps, regenerate_lockfile, remove_bootstrap_files
from .config import RenameOptions, resolve_seed_name
from .manifest import strip_bootstrap_scripts
from .naming import derive_variants
from .paths import RenameMode, find_dotnet_project_names, rename_paths, rename_project_root
from .replacements import build_replacements
from .substitution import apply_substitutions
from .walk import iter_project_files, project_excludes

__all__ = ["RenameResult", "rename_project"]


LOGGER = logging.getLogger(__name__)


class RenameResult(BaseModel):
    """Outcome of a completed :func:`rename_project` run."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The new project name.")
    seed_name: str = Field(..., description="The seed name that was replaced.")
    project_dir: Path = Field(..., description="Directory holding the project after the run.")
    stats: Dict[str, int] = Field(default_factory=dict, description="Substitution counters.")
    renamed_paths: List[Tuple[Path, Path]] = Field(
        default_factory=list, description="Paths moved by the layout renamer."
    )
    install_succeeded: bool = Field(False, description="Whether the lockfile was regenerated.")


def rename_project(options: RenameOptions, *, runner: Runner = subprocess.run) -> RenameResult:
    """Rename the seed project at ``options.root`` to ``options.project_name``.

    Configuration problems raise :class:`~seed_renamer.errors.ConfigurationError`
    before anything on disk changes. Per-file I/O errors and a failing package
    manager are logged and do not abort the run.
    """

    root = options.root
    seed_name = resolve_seed_name(options)
    seed = derive_variants(seed_name)
    target = derive_variants(options.project_name)
    project_names = find_dotnet_project_names(root, seed) if options.dotnet else []
    replacements = build_replacements(seed, target, extra=project_names)

    LOGGER.info("Renaming project %s to: %s", seed_name, options.project_name)
    for replacement in replacements:
        LOGGER.debug("Replacement %s", replacement)

    files = iter_project_files(
        root,
        exclude=project_excludes(dotnet=options.dotnet, extra=options.extra_excludes),
    )
    LOGGER.info("Found %d files to process", len(files))
    stats = apply_substitutions(files, replacements)

    mode = RenameMode.DOTNET if options.dotnet else RenameMode.GENERIC
    renamed = rename_paths(root, seed, target, mode)

    LOGGER.info("Project successfully renamed to: %s", options.project_name)
    LOGGER.info("Cleaning up...")
    strip_bootstrap_scripts(root)

    installed = False
    if options.run_install:
        installed = regenerate_lockfile(root, dotnet=options.dotnet, runner=runner)

    remove_bootstrap_files(root)

    project_dir = root
    if options.rename_root:
        project_dir = rename_project_root(root, seed, target)

    for line in next_steps(options.project_name, target.camel, dotnet=options.dotnet, root=project_dir):
        LOGGER.info(line)

    return RenameResult(
        name=options.project_name,
        seed_name=seed_name,
        project_dir=project_dir,
        stats=stats.summary(),
        renamed_paths=renamed,
        install_succeeded=installed,
    )
