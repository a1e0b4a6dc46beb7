"""
Centralized constants for commitgraph.

Sizes are in pixels unless noted otherwise.
"""

# Rows and scrolling
DEFAULT_ROW_HEIGHT = 26
DEFAULT_BUFFER_ROWS = 15  # Rows rendered above and below the visible area
DEFAULT_SCROLL_DURATION = 250  # ms
DEFAULT_PAGE_SIZE = 100  # Commits loaded per "load more"

# Graph column
LANE_WIDTH = 12
NODE_RADIUS = 4
GRAPH_PADDING = 8
MIN_GRAPH_WIDTH = 40
LANE_PADDING = 16  # Extra padding after the rightmost node of a row

# Text columns
AUTHOR_COLUMN_WIDTH = 140
DATE_COLUMN_WIDTH = 110
SHA_COLUMN_WIDTH = 70
LABEL_SPACING = 4
