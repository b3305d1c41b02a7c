"""Module: frequency_summary.py.

Author: Michael Economou
Date: 2026-03-02

FrequencySummary - result of the statistics query for one group.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from listboard.config import STATISTICS_HEADER_FORMAT, STATISTICS_LINE_FORMAT


@dataclass(frozen=True)
class FrequencySummary:
    """Top character counts for a group.

    Attributes:
        ordinal: 1-based position of the group in the store
        item_count: Number of items in the group
        pairs: (character, count) pairs, highest count first

    """

    ordinal: int
    item_count: int
    pairs: tuple[tuple[str, int], ...] = field(default_factory=tuple)

    @property
    def header(self) -> str:
        return STATISTICS_HEADER_FORMAT.format(ordinal=self.ordinal, count=self.item_count)

    def format(self) -> str:
        """Render the summary text shown in the statistics popup.

        Every line, including the last, ends with a newline:

            List 1 (4 items)
            a = 5
            e = 4
            b = 3
        """
        lines = [self.header]
        lines.extend(
            STATISTICS_LINE_FORMAT.format(character=character, count=count)
            for character, count in self.pairs
        )
        return "".join(f"{line}\n" for line in lines)

    def __str__(self) -> str:
        return self.format()
