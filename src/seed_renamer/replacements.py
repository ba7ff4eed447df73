"""Ordered replacement table built from two :class:`NameVariant` values."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterable

from .naming import NameVariant

__all__ = ["FALLBACK_TOKENS", "Replacement", "build_replacements"]


# Bare tokens replaced last so they never split a longer, more specific match.
FALLBACK_TOKENS = ("Seed", "seed")


@dataclass(frozen=True, slots=True)
class Replacement:
    """A literal ``source`` to ``target`` substitution."""

    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.source!r} -> {self.target!r}"


def _ordered_pairs(
    seed: NameVariant,
    target: NameVariant,
    extra: Iterable[str],
    fallback: bool,
) -> Iterable[tuple[str, str]]:
    yield seed.tg, target.tg
    yield seed.lower_tg, target.lower_tg
    yield seed.kebab, target.lower_kebab
    yield seed.lower_kebab, target.lower_kebab
    yield seed.pascal, target.pascal
    yield seed.camel, target.camel
    yield seed.compact, target.compact
    yield seed.snake, target.snake
    for name in extra:
        yield name, target.camel
    if fallback:
        upper_token, lower_token = FALLBACK_TOKENS
        target_forms = astuple(target)
        # A token already present in the target would rewrite the new name again.
        if not any(upper_token in form for form in target_forms):
            yield upper_token, target.compact
        if not any(lower_token in form for form in target_forms):
            yield lower_token, target.lower_kebab


def build_replacements(
    seed: NameVariant,
    target: NameVariant,
    *,
    extra: Iterable[str] = (),
    fallback: bool = True,
) -> list[Replacement]:
    """Return the replacements to apply, most specific first.

    ``-tg`` forms come before the kebab forms they contain, structured case
    forms come next, then ``extra`` spellings of the seed (such as on-disk
    project folder names) mapped to the target's ``camel`` form, and the bare
    ``Seed``/``seed`` tokens come last. A bare token that occurs in any target
    form is left out. Empty sources, no-op pairs and repeated sources are
    dropped, keeping the first occurrence.
    """

    table: list[Replacement] = []
    seen: set[str] = set()
    for source, replacement in _ordered_pairs(seed, target, extra, fallback):
        if not source or source == replacement or source in seen:
            continue
        seen.add(source)
        table.append(Replacement(source, replacement))
    return table
