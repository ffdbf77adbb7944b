"""Accept-Language parsing into an ordered fallback chain of locale tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

from langtext.logging import logger

DEFAULT_PREFERENCES: tuple[str, ...] = ("all", "en", "en-us")

_ENTRY_SPLIT = re.compile(r"\s*,\s*")
_ENTRY_PATTERN = re.compile(r"^([A-Za-z]{2})(?:[_-]([A-Za-z0-9_-]+))?(?:\s*;\s*(?:[qQ]=([0-9.]+))?)?\s*$")


@dataclass(frozen=True)
class LanguagePreference:
    language: str
    variant: str | None
    qfactor: float
    sequence: int

    @property
    def tags(self) -> tuple[str, ...]:
        """Locale tags for this entry, most specific first."""

        if self.variant is None:
            return (self.language,)
        return (f"{self.language}-{self.variant}", self.language)


def sanitize_header(header: str) -> str:
    """Rewrite literal ``[].`` sequences so they cannot alias other cache keys."""

    return header.replace("[].", "-")


def _parse_entry(entry: str, sequence: int) -> LanguagePreference | None:
    match = _ENTRY_PATTERN.match(entry)
    if match is None:
        return None
    language, variant, qfactor = match.groups()
    if qfactor is None:
        quality = 1.0
    else:
        try:
            quality = float(qfactor)
        except ValueError:
            return None
    return LanguagePreference(
        language=language.lower(),
        variant=variant.lower() if variant else None,
        qfactor=quality,
        sequence=sequence,
    )


def parse_preference_header(header: str) -> list[LanguagePreference]:
    """Parse a header into entries ordered from most to least preferred.

    Higher q-factors come first; equal q-factors keep declaration order.
    Entries that do not look like ``ll[-variant][;q=n]`` are dropped.
    """

    preferences: list[LanguagePreference] = []
    for sequence, entry in enumerate(_ENTRY_SPLIT.split(header.strip())):
        if not entry:
            continue
        parsed = _parse_entry(entry, sequence)
        if parsed is None:
            logger.debug("language_preference_dropped", entry=entry)
            continue
        preferences.append(parsed)
    preferences.sort(key=lambda item: (-item.qfactor, item.sequence))
    return preferences


def calculate_preference_order(header: str) -> list[str]:
    """Return the locale tags to try for ``header``, front first.

    The chain always ends with ``all``, ``en``, ``en-us``.
    """

    chain = list(DEFAULT_PREFERENCES)
    for preference in reversed(parse_preference_header(header)):
        chain[:0] = preference.tags
    return chain


class PreferenceResolver:
    """Callable wrapper so the service can be given a different resolver."""

    def resolve(self, header: str) -> list[str]:
        return calculate_preference_order(header)


__all__ = [
    "DEFAULT_PREFERENCES",
    "LanguagePreference",
    "PreferenceResolver",
    "calculate_preference_order",
    "parse_preference_header",
    "sanitize_header",
]
