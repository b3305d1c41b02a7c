"""Tests for FrequencySummary formatting.

Author: Michael Economou
Date: 2026-03-02
"""

from listboard.models.frequency_summary import FrequencySummary


class TestFrequencySummaryFormat:
    """Test the statistics popup text."""

    def test_header(self):
        """Test header uses ordinal and item count."""
        summary = FrequencySummary(ordinal=3, item_count=12)

        assert summary.header == "List 3 (12 items)"

    def test_every_line_is_newline_terminated(self):
        """Test the header and each pair end with a newline."""
        summary = FrequencySummary(2, 4, (("r", 4), ("e", 3)))

        assert summary.format() == "List 2 (4 items)\nr = 4\ne = 3\n"
        assert str(summary) == summary.format()

    def test_header_only(self):
        """Test a summary without pairs is just the header line."""
        assert FrequencySummary(1, 0).format() == "List 1 (0 items)\n"

    def test_whitespace_character_is_listed_verbatim(self):
        """Test spaces are counted like any other character."""
        summary = FrequencySummary(1, 2, ((" ", 2),))

        assert summary.format().splitlines()[1] == "  = 2"
