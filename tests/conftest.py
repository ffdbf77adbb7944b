"""Shared pytest fixtures for language text tests."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from langtext.config import CacheSettings, LanguageSettings
from langtext.i18n.service import LanguageTextService

FIXTURES = Path(__file__).with_name("fixtures")


@pytest.fixture
def language_file(tmp_path: Path) -> Path:
    target = tmp_path / "language.yaml"
    shutil.copy(FIXTURES / "language.yaml", target)
    return target


@pytest.fixture
def settings(language_file: Path) -> LanguageSettings:
    return LanguageSettings(source_path=language_file, cache=CacheSettings())


@pytest.fixture
def service(settings: LanguageSettings) -> LanguageTextService:
    svc = LanguageTextService(settings=settings)
    yield svc
    svc.cache.cancel_pending_purge()
