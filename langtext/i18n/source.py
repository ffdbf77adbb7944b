"""Loading of the hierarchical translation source from disk."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Awaitable, Callable

import yaml

from langtext.logging import logger
from langtext.services.exceptions import SourceLoadError

LOAD_ERROR_MESSAGE = "Failed to load language file:"

SourceLoader = Callable[[str | Path], Awaitable[Mapping[str, Any]]]


def _parse(path: Path, raw: str) -> Any:
    if path.suffix.lower() == ".json":
        return json.loads(raw)
    return yaml.safe_load(raw)


def read_translation_source(location: str | Path) -> Mapping[str, Any]:
    """Read and parse ``location`` synchronously.

    ``.json`` files are parsed as JSON, anything else as YAML. An empty
    document is an empty source.

    Raises:
        SourceLoadError: the file is missing, unreadable, malformed, or its
            root is not a mapping.
    """

    path = Path(location)
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = _parse(path, fp.read())
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as exc:
        logger.error("language_source_load_failed", location=str(path), error=str(exc))
        raise SourceLoadError(LOAD_ERROR_MESSAGE, location=str(path), cause=exc) from exc

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        logger.error("language_source_invalid_root", location=str(path), root=type(data).__name__)
        error = TypeError(f"expected a mapping at the root, got {type(data).__name__}")
        raise SourceLoadError(LOAD_ERROR_MESSAGE, location=str(path), cause=error) from error
    return data


async def load_translation_source(location: str | Path) -> Mapping[str, Any]:
    """Read the source in a worker thread so the event loop keeps serving."""

    data = await asyncio.to_thread(read_translation_source, location)
    logger.info("language_source_loaded", location=str(location), sections=len(data))
    return data


__all__ = [
    "LOAD_ERROR_MESSAGE",
    "SourceLoader",
    "load_translation_source",
    "read_translation_source",
]
