"""Data models for listboard.

This package contains:
- ItemGroup / CollectionStore: the immutable list catalog
- FrequencySummary: result of the statistics query
- FilteredListModel / StatisticsTableModel: Qt item models (import directly,
  they pull in PyQt5)
"""
