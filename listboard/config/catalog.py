"""Module: listboard.config.catalog

Author: Michael Economou
Date: 2026-03-02

Built-in catalog data and statistics formatting.
"""

# =====================================
# DEFAULT CATALOG
# =====================================

# Groups shown in the vertical list, one tab per group
DEFAULT_VERTICAL_DATA = (
    ("apple", "banana", "orange", "blueberry"),
    ("grape", "melon", "kiwi", "strawberry"),
    ("pear", "pineapple", "mango", "cherry"),
    ("fig", "date", "plum", "papaya"),
)

# Image names for the horizontal carousel (names only, assets live in the app bundle)
CAROUSEL_IMAGES = (
    "A_breathtaking_nature_scene_featuring_a_serene_mou",
    "A_breathtaking_nature_scene_featuring_a_serene_wat",
    "A_scenic_coastal_view_with_waves_crashing_on_a_roc",
    "A_tranquil_forest_scene_with_a_winding_path_leadin",
)

# =====================================
# STATISTICS
# =====================================

STATISTICS_TOP_CHARACTERS = 3
STATISTICS_HEADER_FORMAT = "List {ordinal} ({count} items)"
STATISTICS_LINE_FORMAT = "{character} = {count}"

# =====================================
# LIST ROWS
# =====================================

ITEM_SUBTITLE_FORMAT = "Length: {count} characters"
