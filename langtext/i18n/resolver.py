"""Select one string per translation item and rebuild the nested text tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, Sequence
from typing import Any, Iterator

from langtext.logging import logger

TranslationSource = Mapping[str, Any]
ResolvedText = dict[str, Any]
KeyPath = tuple[str, ...]


def select_preferred_value(chain: Sequence[str], item: Mapping[str, Any]) -> Any:
    """Return the value under the first tag of ``chain`` present on ``item``."""

    for tag in chain:
        if tag in item:
            return item[tag]
    return None


def _iter_leaf_arrays(source: TranslationSource) -> Iterator[tuple[KeyPath, Sequence[Any]]]:
    pending: deque[tuple[KeyPath, Any]] = deque(((str(key),), value) for key, value in source.items())
    while pending:
        path, node = pending.popleft()
        if isinstance(node, Mapping):
            pending.extend((path + (str(key),), value) for key, value in node.items())
        elif isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
            yield path, node
        else:
            logger.debug("language_source_node_skipped", path=".".join(path))


def resolve_pairs(source: TranslationSource, chain: Sequence[str]) -> list[tuple[KeyPath, Any]]:
    pairs: list[tuple[KeyPath, Any]] = []
    for path, items in _iter_leaf_arrays(source):
        for item in items:
            if not isinstance(item, Mapping) or "name" not in item:
                logger.debug("language_item_skipped", path=".".join(path))
                continue
            pairs.append((path + (str(item["name"]),), select_preferred_value(chain, item)))
    return pairs


def build_tree(pairs: Sequence[tuple[KeyPath, Any]]) -> ResolvedText:
    result: ResolvedText = {}
    for key_path, value in pairs:
        node = result
        for segment in key_path[:-1]:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = node[segment] = {}
            node = child
        node[key_path[-1]] = value
    return result


def resolve_text(source: TranslationSource, chain: Sequence[str]) -> ResolvedText:
    """Localize every item of ``source`` using ``chain``.

    Paths are kept as tuples of segments, so names containing dots or
    brackets stay single keys. Nodes that are neither mappings nor lists, and
    items without a ``name``, are skipped. ``source`` is never modified.
    """

    return build_tree(resolve_pairs(source, chain))


class TranslationResolver:
    def resolve(self, source: TranslationSource, chain: Sequence[str]) -> ResolvedText:
        return resolve_text(source, chain)


__all__ = [
    "ResolvedText",
    "TranslationResolver",
    "TranslationSource",
    "build_tree",
    "resolve_pairs",
    "resolve_text",
    "select_preferred_value",
]
