"""
Graph module.

Provides the in-memory link graph and its traffic operations:
- LinkGraph: articles, weighted links, reachability, prediction
- UnknownArticleError / InvalidTrajectoryError: domain errors
"""

from wikiwalker.graph.errors import (
    InvalidTrajectoryError,
    UnknownArticleError,
    WikiWalkerError,
)
from wikiwalker.graph.walker import LinkGraph

__all__ = [
    "LinkGraph",
    "WikiWalkerError",
    "UnknownArticleError",
    "InvalidTrajectoryError",
]
