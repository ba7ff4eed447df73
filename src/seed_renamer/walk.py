"""Denylist-driven enumeration of the files in a project tree."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath
from typing import Iterable

__all__ = [
    "BINARY_EXTENSIONS",
    "DEFAULT_EXCLUDES",
    "DOTNET_EXCLUDES",
    "is_binary_file",
    "is_excluded",
    "iter_project_files",
    "project_excludes",
]


BINARY_EXTENSIONS = frozenset(
    {
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".ico",
        ".pdf",
        ".zip",
        ".tar",
        ".gz",
        ".jar",
        ".exe",
        ".bin",
        ".dll",
        ".pdb",
    }
)

DEFAULT_EXCLUDES: tuple[str, ...] = (
    # dependencies and version control
    "node_modules",
    ".git",
    # build output at the project root and caches anywhere
    "/dist",
    "/build",
    "/out",
    "/coverage",
    ".cache",
    ".nyc_output",
    "__pycache__",
    ".pytest_cache",
    "*.tsbuildinfo",
    # logs, editor and OS metadata
    "*.log",
    ".vs",
    ".idea",
    ".vscode",
    ".DS_Store",
    "Thumbs.db",
    # lockfiles are regenerated by the package manager
    "package-lock.json",
    "npm-shrinkwrap.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    # bootstrap scripts remove themselves
    "/scripts/init",
    # binaries
    "*.jpg",
    "*.jpeg",
    "*.png",
    "*.gif",
    "*.ico",
    "*.pdf",
    "*.zip",
    "*.tar",
    "*.gz",
    "*.jar",
    "*.exe",
    "*.bin",
    "*.dll",
    "*.pdb",
)

# Compiled output of every dotnet project folder.
DOTNET_EXCLUDES: tuple[str, ...] = ("bin", "obj")


def is_binary_file(path: str | Path) -> bool:
    return Path(path).suffix.lower() in BINARY_EXTENSIONS


def _matches(relative: PurePosixPath, pattern: str) -> bool:
    if pattern.startswith("/"):
        return fnmatchcase(relative.as_posix(), pattern[1:])
    return fnmatchcase(relative.as_posix(), pattern) or fnmatchcase(relative.name, pattern)


def is_excluded(relative: PurePosixPath, patterns: Iterable[str]) -> bool:
    """Return ``True`` when ``relative`` matches any pattern.

    A pattern starting with ``/`` is anchored at the project root; any other
    pattern also matches the base name at any depth.
    """

    return any(_matches(relative, pattern) for pattern in patterns)


def project_excludes(*, dotnet: bool = False, extra: Iterable[str] = ()) -> tuple[str, ...]:
    """Return the exclusion patterns for a project of the given kind."""

    patterns = DEFAULT_EXCLUDES + (DOTNET_EXCLUDES if dotnet else ())
    return patterns + tuple(extra)


def iter_project_files(
    root: str | Path,
    *,
    exclude: Iterable[str] = DEFAULT_EXCLUDES,
) -> list[Path]:
    """Return every non-excluded file below ``root`` in a stable order.

    Directories are tested before they are entered, so excluded subtrees such
    as ``node_modules`` are never walked. Hidden files are included.
    """

    root = Path(root)
    patterns = tuple(exclude)
    files: list[Path] = []

    for current, dirnames, filenames in os.walk(root):
        base = PurePosixPath(Path(current).relative_to(root).as_posix())
        dirnames[:] = sorted(
            name for name in dirnames if not is_excluded(base / name, patterns)
        )
        for name in sorted(filenames):
            if not is_excluded(base / name, patterns):
                files.append(Path(current) / name)

    return files
