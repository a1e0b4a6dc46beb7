"""Git backend supplying commit history and branch heads"""

from commitgraph.git_backend.repository import GraphRepository

__all__ = ["GraphRepository"]
