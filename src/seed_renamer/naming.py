"""Name variant derivation for seed and target project names."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ConfigurationError

__all__ = [
    "CAMEL_PRESERVES_INNER_CASE",
    "NameVariant",
    "TG_MAX_LENGTH",
    "derive_variants",
    "is_valid_project_name",
    "validate_project_name",
]


PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")
TG_MAX_LENGTH = 29
TG_SUFFIX = "-tg"
_VOWELS = re.compile(r"[aeiou]")

# ``camel`` only forces the first character of each segment to upper case and
# keeps the rest as typed, unlike ``pascal``. Flip to False to lower the rest.
CAMEL_PRESERVES_INNER_CASE = True


@dataclass(frozen=True, slots=True)
class NameVariant:
    """Case-convention renderings of a single project identifier.

    Attributes
    ----------
    kebab:
        The identifier exactly as supplied, e.g. ``Seed-Dotnet-RestApi``.
    lower_kebab:
        :attr:`kebab` lowercased.
    pascal:
        Hyphen-joined segments, each with an upper-cased first character and a
        lower-cased remainder (``Seed-Dotnet-Restapi``).
    camel:
        Segments concatenated without separator, first character upper-cased
        and the remainder left untouched (``SeedDotnetRestApi``). Despite the
        name this is PascalCase.
    compact:
        Segments concatenated with a lower-cased remainder
        (``SeedDotnetRestapi``).
    snake:
        Hyphens replaced with underscores, lowercased.
    tg:
        Shortened identifier with a ``-tg`` suffix, used for resources with a
        length ceiling.
    lower_tg:
        :attr:`tg` built from the lowercased identifier.
    """

    kebab: str
    lower_kebab: str
    pascal: str
    camel: str
    compact: str
    snake: str
    tg: str
    lower_tg: str


def _capitalize_segment(segment: str, *, lower_rest: bool) -> str:
    rest = segment[1:].lower() if lower_rest else segment[1:]
    return segment[:1].upper() + rest


def _tg_token(base: str) -> str:
    if len(base) > TG_MAX_LENGTH:
        base = _VOWELS.sub("", base)[:TG_MAX_LENGTH]
    return base + TG_SUFFIX


def derive_variants(name: str, *, preserve_camel_case: bool | None = None) -> NameVariant:
    """Return every :class:`NameVariant` form of ``name``.

    ``name`` is expected to have passed :func:`validate_project_name`. Empty
    segments produced by consecutive hyphens are kept empty, so they vanish
    from the concatenated forms.
    """

    if preserve_camel_case is None:
        preserve_camel_case = CAMEL_PRESERVES_INNER_CASE

    segments = name.split("-")
    pascal = "-".join(_capitalize_segment(part, lower_rest=True) for part in segments)
    camel = "".join(
        _capitalize_segment(part, lower_rest=not preserve_camel_case) for part in segments
    )
    compact = "".join(_capitalize_segment(part, lower_rest=True) for part in segments)

    return NameVariant(
        kebab=name,
        lower_kebab=name.lower(),
        pascal=pascal,
        camel=camel,
        compact=compact,
        snake=name.replace("-", "_").lower(),
        tg=_tg_token(name),
        lower_tg=_tg_token(name.lower()),
    )


def is_valid_project_name(name: str) -> bool:
    return bool(PROJECT_NAME_PATTERN.fullmatch(name))


def validate_project_name(name: str | None, *, label: str = "Project name") -> str:
    """Return ``name`` unchanged or raise :class:`ConfigurationError`."""

    if not name:
        raise ConfigurationError(
            f"{label} is required.",
            hint="Usage: seed-renamer your-project-name",
        )
    if not is_valid_project_name(name):
        raise ConfigurationError(
            f"{label} must contain only letters, numbers, and hyphens: {name!r}",
            hint="Try something like 'my-new-service'.",
        )
    return name
