"""Module: item_group.py.

Author: Michael Economou
Date: 2026-03-02

ItemGroup and CollectionStore models.

An ItemGroup is one ordered list of short text items (one tab of the vertical
list). The CollectionStore holds every group for the lifetime of the process
and is never mutated after construction.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from listboard.core.errors import ConfigurationError, GroupIndexError


@dataclass(frozen=True)
class ItemGroup:
    """An immutable, ordered group of text items.

    Attributes:
        items: The items in display order

    """

    items: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Freeze whatever sequence was passed into a tuple."""
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def item_count(self) -> int:
        """Return the number of items in this group."""
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        """Check if this group has no items."""
        return len(self.items) == 0

    def get_items(self) -> list[str]:
        """Return all items as a new list."""
        return list(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class CollectionStore:
    """Ordered, read-only collection of ItemGroups.

    Raises:
        ConfigurationError: If constructed with zero groups, since no valid
            group index could exist.

    """

    def __init__(self, groups: Iterable[ItemGroup]) -> None:
        self._groups: tuple[ItemGroup, ...] = tuple(groups)
        if not self._groups:
            raise ConfigurationError("collection store needs at least one group")

    @classmethod
    def from_sequences(cls, data: Iterable[Iterable[str]]) -> CollectionStore:
        """Build a store from plain nested sequences of strings."""
        return cls(ItemGroup(tuple(items)) for items in data)

    @property
    def groups(self) -> tuple[ItemGroup, ...]:
        return self._groups

    @property
    def group_count(self) -> int:
        return len(self._groups)

    def group_at(self, index: int) -> ItemGroup:
        """Return the group at ``index``.

        Negative indexes are rejected rather than counted from the end.

        Raises:
            GroupIndexError: If ``index`` is not an int in ``[0, group_count)``

        """
        valid = (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._groups)
        )
        if not valid:
            raise GroupIndexError(index, len(self._groups))
        return self._groups[index]

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[ItemGroup]:
        return iter(self._groups)

    def __repr__(self) -> str:
        return f"CollectionStore(group_count={len(self._groups)})"
