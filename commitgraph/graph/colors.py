"""Color palettes for lanes and branch labels."""

from collections.abc import Iterable

from commitgraph.graph.types import BranchHead

# Colors for different lanes
LANE_COLORS = [
    "#4078c0",  # Blue
    "#6cc644",  # Green
    "#bd2c00",  # Red
    "#c9510c",  # Orange
    "#6e5494",  # Purple
    "#0086b3",  # Cyan
    "#f9826c",  # Coral
    "#28a745",  # Bright green
    "#6f42c1",  # Violet
    "#17a2b8",  # Teal
]

# Branch labels share the lane palette
BRANCH_COLORS = LANE_COLORS


def get_lane_color(lane: int) -> str:
    """Get color for a lane."""
    return LANE_COLORS[lane % len(LANE_COLORS)]


def assign_branch_colors(heads: Iterable[BranchHead]) -> dict[str, str]:
    """Map each branch name to a color, in first-seen order."""
    colors: dict[str, str] = {}
    for head in heads:
        if head.name not in colors:
            colors[head.name] = BRANCH_COLORS[len(colors) % len(BRANCH_COLORS)]
    return colors


def get_branch_color(name: str, colors: dict[str, str]) -> str:
    return colors.get(name, BRANCH_COLORS[0])
