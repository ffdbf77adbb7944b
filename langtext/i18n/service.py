"""Header-to-text localization service with an in-memory per-header cache."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from langtext.config import LanguageSettings, get_settings
from langtext.i18n.cache import TranslationCache
from langtext.i18n.preferences import PreferenceResolver, sanitize_header
from langtext.i18n.resolver import ResolvedText, TranslationResolver
from langtext.i18n.source import SourceLoader, load_translation_source
from langtext.logging import logger


class LanguageTextService:
    """Resolve Accept-Language headers into localized text trees.

    The translation source is loaded lazily on the first call and shared by
    every header until ``reset`` or ``set_source_location``. Concurrent first
    callers wait on the same load.
    """

    def __init__(
        self,
        *,
        settings: LanguageSettings | None = None,
        loader: SourceLoader | None = None,
        preference_resolver: PreferenceResolver | None = None,
        translation_resolver: TranslationResolver | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._source_location: str | Path = self.settings.source_path
        self._loader = loader or load_translation_source
        self._preferences = preference_resolver or PreferenceResolver()
        self._translations = translation_resolver or TranslationResolver()
        cache_settings = self.settings.cache
        self.cache = TranslationCache(
            max_size=cache_settings.max_size,
            min_size=cache_settings.min_size,
            purge_delay=cache_settings.purge_delay_seconds,
        )
        self._source: Mapping[str, Any] | None = None
        self._pending_load: asyncio.Task[Mapping[str, Any]] | None = None
        self._epoch = 0

    @property
    def source_location(self) -> str | Path:
        return self._source_location

    @property
    def source_loaded(self) -> bool:
        return self._source is not None

    async def get_language_text(self, accept_language: str) -> ResolvedText:
        """Return the localized tree for ``accept_language``.

        Trees are shared between callers asking for the same header; treat the
        result as read-only.
        """

        key = sanitize_header(accept_language)
        source = self._source
        if source is None:
            source = await self._ensure_source()

        text = self.cache.lookup(key)
        if text is not None:
            return text

        chain = self._preferences.resolve(key)
        text = self._translations.resolve(source, chain)
        if source is self._source:
            self.cache.store(key, text)
        logger.debug("language_text_resolved", header=key, chain=chain)
        return text

    def set_source_location(self, location: str | Path) -> None:
        self._source_location = location
        self.reset()

    def set_max_cache_size(self, size: int) -> None:
        self.cache.max_size = size

    def set_min_cache_size(self, size: int) -> None:
        self.cache.min_size = size

    def reset(self) -> None:
        """Forget the loaded source; the next lookup reloads it."""

        self._epoch += 1
        self._source = None
        self._pending_load = None

    def clear_cache(self) -> None:
        self.cache.clear()

    async def _ensure_source(self) -> Mapping[str, Any]:
        if self._pending_load is None:
            self._pending_load = asyncio.ensure_future(self._load(self._epoch))
        pending = self._pending_load
        try:
            return await asyncio.shield(pending)
        finally:
            if pending.done() and self._pending_load is pending:
                self._pending_load = None

    async def _load(self, epoch: int) -> Mapping[str, Any]:
        source = await self._loader(self._source_location)
        if epoch == self._epoch:
            self._source = source
            # Trees built from a previous source are stale.
            self.cache.clear()
        return source


__all__ = ["LanguageTextService"]
