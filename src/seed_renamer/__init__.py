"""Rename a checked-out seed project into a new project.

The package derives the case variants of the seed and target names, rewrites
every occurrence of the seed variants in the project's text files, renames the
known layout paths, and removes the one-shot bootstrap scripts. Everything is
usable programmatically through :func:`rename_project` or via the
``seed-renamer`` command line interface.
"""

from __future__ import annotations

from .config import RenameOptions, detect_seed_name
from .errors import ConfigurationError, RenamerError
from .naming import NameVariant, derive_variants, validate_project_name
from .paths import RenameMode, rename_paths
from .renamer import RenameResult, rename_project
from .replacements import Replacement, build_replacements
from .substitution import RunStats, apply_substitutions
from .walk import iter_project_files

__all__ = [
    "ConfigurationError",
    "NameVariant",
    "RenameMode",
    "RenameOptions",
    "RenameResult",
    "RenamerError",
    "Replacement",
    "RunStats",
    "apply_substitutions",
    "build_replacements",
    "derive_variants",
    "detect_seed_name",
    "iter_project_files",
    "rename_paths",
    "rename_project",
    "validate_project_name",
]

__version__ = "0.1.0"
