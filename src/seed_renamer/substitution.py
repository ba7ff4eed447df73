"""In-place literal substitution over a set of files."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from .replacements import Replacement
from .walk import is_binary_file

__all__ = ["FileError", "RunStats", "apply_substitutions", "replace_text"]


LOGGER = logging.getLogger(__name__)

ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class FileError:
    """A file that could not be read or written."""

    path: Path
    message: str


@dataclass(slots=True)
class RunStats:
    """Counters accumulated during a substitution pass."""

    files_scanned: int = 0
    total_replacements: int = 0
    modified_files: dict[Path, None] = field(default_factory=dict)
    occurrences: Counter[str] = field(default_factory=Counter)
    errors: list[FileError] = field(default_factory=list)

    @property
    def files_modified(self) -> int:
        return len(self.modified_files)

    def mark_modified(self, path: Path) -> None:
        self.modified_files[path] = None

    def summary(self) -> dict[str, int]:
        return {
            "files_scanned": self.files_scanned,
            "files_modified": self.files_modified,
            "total_replacements": self.total_replacements,
            "errors": len(self.errors),
        }


def replace_text(text: str, replacements: Sequence[Replacement]) -> tuple[str, list[tuple[Replacement, int]]]:
    """Apply ``replacements`` to ``text`` in order.

    Each occurrence count is taken on the text as it stands right before that
    replacement runs. Returns the new text and the non-zero counts.
    """

    counts: list[tuple[Replacement, int]] = []
    for replacement in replacements:
        occurrences = text.count(replacement.source)
        if not occurrences:
            continue
        text = text.replace(replacement.source, replacement.target)
        counts.append((replacement, occurrences))
    return text, counts


def _process_file(path: Path, replacements: Sequence[Replacement], stats: RunStats) -> None:
    original = path.read_bytes().decode(ENCODING)
    content, counts = replace_text(original, replacements)
    if content == original:
        return

    path.write_bytes(content.encode(ENCODING))

    for replacement, occurrences in counts:
        LOGGER.info(
            '  - Replaced "%s" with "%s" in %s (%d occurrences)',
            replacement.source,
            replacement.target,
            path,
            occurrences,
        )
        stats.occurrences[replacement.source] += occurrences
        stats.total_replacements += occurrences
    stats.mark_modified(path)


def apply_substitutions(files: Iterable[str | Path], replacements: Sequence[Replacement]) -> RunStats:
    """Rewrite every file in ``files`` with ``replacements``.

    Binary files are counted as scanned but never opened. A file that cannot be
    decoded as UTF-8 or fails to read or write is logged and recorded in
    :attr:`RunStats.errors`; the remaining files are still processed.
    """

    stats = RunStats()
    for entry in files:
        path = Path(entry)
        stats.files_scanned += 1
        if is_binary_file(path):
            LOGGER.debug("Skipping binary file %s", path)
            continue
        try:
            _process_file(path, replacements, stats)
        except (OSError, UnicodeError) as exc:
            LOGGER.error("Error processing file %s: %s", path, exc)
            stats.errors.append(FileError(path, str(exc)))

    LOGGER.info("Processed %d files", stats.files_scanned)
    LOGGER.info("Modified %d files", stats.files_modified)
    LOGGER.info("Made %d replacements", stats.total_replacements)
    return stats
