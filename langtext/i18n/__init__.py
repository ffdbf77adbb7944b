from langtext.i18n.cache import PurgeScheduler, TranslationCache
from langtext.i18n.preferences import (
    PreferenceResolver,
    calculate_preference_order,
    parse_preference_header,
    sanitize_header,
)
from langtext.i18n.resolver import TranslationResolver, resolve_text
from langtext.i18n.service import LanguageTextService
from langtext.i18n.source import load_translation_source

__all__ = [
    "LanguageTextService",
    "PreferenceResolver",
    "PurgeScheduler",
    "TranslationCache",
    "TranslationResolver",
    "calculate_preference_order",
    "load_translation_source",
    "parse_preference_header",
    "resolve_text",
    "sanitize_header",
]
