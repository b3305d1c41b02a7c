"""Module: query_engine.py.

Author: Michael Economou
Date: 2026-03-02

Pure queries over a CollectionStore and a selection.

- filtered_items: case-insensitive substring filter of the current group
- split_characters: user-perceived characters (grapheme clusters) of a string
- character_frequency: per-character tally in first-seen order
- frequency_summary: top characters of the current group

``selection`` is anything exposing ``current_group_index`` and ``search_query``
(a SelectionSnapshot, or a SelectionState read by a single caller).
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

import regex

from listboard.config import STATISTICS_TOP_CHARACTERS
from listboard.models.frequency_summary import FrequencySummary

if TYPE_CHECKING:
    from listboard.models.item_group import CollectionStore


class SelectionLike(Protocol):
    current_group_index: int
    search_query: str


def filtered_items(store: CollectionStore, selection: SelectionLike) -> list[str]:
    """Return the current group's items that contain the search query.

    An empty query returns every item. Matching uses ``str.casefold`` on both
    sides and keeps the group's order.

    Raises:
        GroupIndexError: If the selection's group index is out of range

    """
    group = store.group_at(selection.current_group_index)
    query = selection.search_query
    if not query:
        return group.get_items()

    needle = query.casefold()
    return [item for item in group if needle in item.casefold()]


_GRAPHEME_PATTERN = regex.compile(r"\X")


def split_characters(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters.

    A base letter with combining marks, or a flag made of two regional
    indicators, comes back as one character.
    """
    return _GRAPHEME_PATTERN.findall(text)


def character_count(text: str) -> int:
    """Return the number of user-perceived characters in ``text``."""
    return len(split_characters(text))


def character_frequency(items: Iterable[str]) -> list[tuple[str, int]]:
    """Count characters across ``items`` and rank them by count.

    Counter keeps first-insertion order and ``sorted`` is stable, so equal
    counts stay in the order the characters were first seen.
    """
    counts: Counter[str] = Counter()
    for item in items:
        counts.update(split_characters(item))
    return sorted(counts.items(), key=lambda pair: pair[1], reverse=True)


def frequency_summary(
    store: CollectionStore,
    selection: SelectionLike,
    top: int = STATISTICS_TOP_CHARACTERS,
) -> FrequencySummary:
    """Summarize the full current group; the search query is not applied.

    Raises:
        GroupIndexError: If the selection's group index is out of range

    """
    index = selection.current_group_index
    group = store.group_at(index)
    ranked = character_frequency(group)
    return FrequencySummary(
        ordinal=index + 1,
        item_count=group.item_count,
        pairs=tuple(ranked[:top]),
    )
