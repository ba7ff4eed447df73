"""Renaming of well-known project layout paths."""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path

from .naming import NameVariant

__all__ = [
    "RenameMode",
    "find_dotnet_project_names",
    "find_loose_solution",
    "rename_if_exists",
    "rename_paths",
    "rename_project_root",
]


LOGGER = logging.getLogger(__name__)

SOLUTION_SUFFIX = ".sln"
PROJECT_SUFFIX = ".csproj"
TESTS_SUFFIX = ".Tests"


class RenameMode(str, Enum):
    """Layout conventions understood by :func:`rename_paths`."""

    GENERIC = "generic"
    DOTNET = "dotnet"


def rename_if_exists(old_path: Path, new_path: Path) -> bool:
    """Rename ``old_path`` to ``new_path`` unless either check fails.

    Nothing happens when ``old_path`` is missing or ``new_path`` already
    exists, so an existing path is never overwritten.
    """

    if not old_path.exists() or new_path.exists():
        return False
    LOGGER.info("Renaming: %s -> %s", old_path.name, new_path.name)
    os.rename(old_path, new_path)
    return True


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(value for value in values if value))


def _generic_candidates(root: Path, seed: NameVariant, target: NameVariant) -> list[tuple[Path, Path]]:
    return [
        (root / seed.kebab, root / target.lower_kebab),
        (root / seed.snake, root / target.snake),
        (root / "src" / seed.snake, root / "src" / target.snake),
    ]


def find_dotnet_project_names(root: str | Path, seed: NameVariant) -> list[str]:
    """Return the on-disk names of project folders named after the seed.

    A folder matches when its name, minus any ``.Tests`` suffix, equals the
    ``camel`` or ``compact`` seed form case-insensitively. Seeds often spell
    these folders with their own casing, e.g. ``SeedDotnetRestapiEcsFargate``
    for ``Seed-Dotnet-RestApi-ECSFargate``.
    """

    root = Path(root)
    needles = {seed.camel.lower(), seed.compact.lower()}
    names: list[str] = []
    for entry in sorted(root.iterdir()):
        if not entry.is_dir():
            continue
        base = entry.name
        if base.lower().endswith(TESTS_SUFFIX.lower()):
            base = base[: -len(TESTS_SUFFIX)]
        if base.lower() in needles:
            names.append(base)
    return _unique(names)


def _dotnet_forms(root: Path, seed: NameVariant) -> list[str]:
    return _unique([seed.camel, seed.compact, *find_dotnet_project_names(root, seed)])


def _dotnet_candidates(root: Path, forms: list[str], target: NameVariant) -> list[tuple[Path, Path]]:
    name = target.camel
    pairs: list[tuple[Path, Path]] = []
    for form in forms:
        pairs.extend(
            [
                (root / form, root / name),
                (root / f"{form}{TESTS_SUFFIX}", root / f"{name}{TESTS_SUFFIX}"),
                (root / f"{form}{SOLUTION_SUFFIX}", root / f"{name}{SOLUTION_SUFFIX}"),
            ]
        )
    return pairs


def _dotnet_project_files(root: Path, forms: list[str], target: NameVariant) -> list[tuple[Path, Path]]:
    name = target.camel
    pairs: list[tuple[Path, Path]] = []
    for directory, suffix in ((root / name, ""), (root / f"{name}{TESTS_SUFFIX}", TESTS_SUFFIX)):
        if not directory.is_dir():
            continue
        stems = {f"{form}{suffix}".lower() for form in forms}
        destination = directory / f"{name}{suffix}{PROJECT_SUFFIX}"
        for project in sorted(directory.glob(f"*{PROJECT_SUFFIX}")):
            if project.stem.lower() in stems:
                pairs.append((project, destination))
    return pairs


def find_loose_solution(root: Path, seed: NameVariant) -> Path | None:
    """Return the first solution file in ``root`` named after any seed form.

    Matching is a case-insensitive substring test, since seeds do not always
    name the solution after one exact variant.
    """

    needles = _unique([seed.lower_kebab, seed.camel.lower(), seed.compact.lower(), seed.snake])
    for candidate in sorted(root.glob(f"*{SOLUTION_SUFFIX}")):
        stem = candidate.stem.lower()
        if any(needle in stem for needle in needles):
            return candidate
    return None


def rename_paths(
    root: str | Path,
    seed: NameVariant,
    target: NameVariant,
    mode: RenameMode | str = RenameMode.GENERIC,
) -> list[tuple[Path, Path]]:
    """Rename the known layout paths of ``root`` and return what moved.

    Every candidate is attempted independently; a missing source or an
    existing destination only skips that candidate.
    """

    root = Path(root)
    mode = RenameMode(mode)

    renamed: list[tuple[Path, Path]] = []

    def attempt(candidates: list[tuple[Path, Path]]) -> None:
        for old_path, new_path in candidates:
            if rename_if_exists(old_path, new_path):
                renamed.append((old_path, new_path))

    if mode is RenameMode.GENERIC:
        attempt(_generic_candidates(root, seed, target))
    else:
        forms = _dotnet_forms(root, seed)
        attempt(_dotnet_candidates(root, forms, target))
        attempt(_dotnet_project_files(root, forms, target))
        solution = find_loose_solution(root, seed)
        if solution is not None:
            destination = root / f"{target.camel}{SOLUTION_SUFFIX}"
            if rename_if_exists(solution, destination):
                renamed.append((solution, destination))

    return renamed


def rename_project_root(root: str | Path, seed: NameVariant, target: NameVariant) -> Path:
    """Rename the project directory itself when it carries the seed name.

    Returns the directory the project lives in afterwards.
    """

    root = Path(root)
    if root.name.lower() != seed.lower_kebab:
        return root
    destination = root.with_name(target.lower_kebab)
    if destination == root or not rename_if_exists(root, destination):
        return root
    return destination
