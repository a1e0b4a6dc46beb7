"""Commit graph visualization components."""

from commitgraph.ui.commit_graph.widget import CommitGraphView

__all__ = ["CommitGraphView"]
