"""Per-header cache of resolved text with deferred, coalesced eviction."""

from __future__ import annotations

import asyncio
import itertools
from dataclasses import dataclass, field
from typing import Callable, Iterator

from langtext.i18n.resolver import ResolvedText
from langtext.logging import logger
from langtext.services.exceptions import InvalidConfigurationError
from langtext.utils.datetime import monotonic_time


def _validate_size(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidConfigurationError(f"Invalid argument {value!r} for {name}")
    return value


@dataclass
class CachePriority:
    access_time: float
    sequence: int

    @property
    def rank(self) -> tuple[float, int]:
        return (self.access_time, self.sequence)


@dataclass
class CacheEntry:
    text: ResolvedText
    priority: CachePriority = field(default_factory=lambda: CachePriority(0.0, 0))


class PurgeScheduler:
    """Coalesces purge requests into one trailing-edge run per window.

    The first ``trigger`` starts a timer; further triggers while it is pending
    are absorbed. The callback runs once, ``delay`` seconds after the window
    opened, against the cache state at that moment.
    """

    def __init__(self, callback: Callable[[], None], *, delay: float = 0.01) -> None:
        self._callback = callback
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.cancel()
            self._callback()
            return
        if self._handle is not None:
            return
        self._handle = loop.call_later(self.delay, self._run)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _run(self) -> None:
        self._handle = None
        self._callback()


class TranslationCache:
    def __init__(
        self,
        *,
        max_size: int = 0,
        min_size: int | None = None,
        purge_delay: float = 0.01,
        clock: Callable[[], float] = monotonic_time,
    ) -> None:
        self._max_size = _validate_size("max_size", max_size)
        self._min_size = None if min_size is None else _validate_size("min_size", min_size)
        self._clock = clock
        self._sequence = itertools.count()
        self._entries: dict[str, CacheEntry] = {}
        self._scheduler = PurgeScheduler(self.purge, delay=purge_delay)

    @property
    def max_size(self) -> int:
        return self._max_size

    @max_size.setter
    def max_size(self, value: int) -> None:
        self._max_size = _validate_size("max_size", value)

    @property
    def min_size(self) -> int | None:
        return self._min_size

    @min_size.setter
    def min_size(self, value: int) -> None:
        self._min_size = _validate_size("min_size", value)

    @property
    def keep_count(self) -> int:
        if self._min_size is None:
            return self._max_size
        return min(self._min_size, self._max_size)

    @property
    def purge_pending(self) -> bool:
        return self._scheduler.pending

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def keys(self) -> list[str]:
        return list(self._entries)

    def get_entry(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    def lookup(self, key: str) -> ResolvedText | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        self._touch(entry)
        return entry.text

    def store(self, key: str, text: ResolvedText) -> None:
        entry = CacheEntry(text=text)
        self._touch(entry)
        self._entries[key] = entry
        self._scheduler.trigger()

    def purge(self) -> None:
        entries = self._entries
        if self._max_size <= 0 or len(entries) <= self._max_size:
            return
        keep = self.keep_count
        ranked = sorted(entries, key=lambda key: entries[key].priority.rank)
        kept = ranked[len(ranked) - keep:] if keep else []
        self._entries = {key: entries[key] for key in kept}
        logger.info(
            "language_cache_purged",
            before=len(entries),
            after=len(self._entries),
            max_size=self._max_size,
        )

    def clear(self) -> None:
        self._scheduler.cancel()
        self._entries = {}

    def cancel_pending_purge(self) -> None:
        self._scheduler.cancel()

    def _touch(self, entry: CacheEntry) -> None:
        entry.priority = CachePriority(self._clock(), next(self._sequence))


__all__ = ["CacheEntry", "CachePriority", "PurgeScheduler", "TranslationCache"]
