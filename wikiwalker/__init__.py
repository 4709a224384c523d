"""
WikiWalker.

Models a website's link graph together with the traffic recorded across
it: reachability between articles, per-link clickthrough counts, and the
most likely browsing path from a given article.
"""

from wikiwalker.graph import (
    InvalidTrajectoryError,
    LinkGraph,
    UnknownArticleError,
    WikiWalkerError,
)
from wikiwalker.session import BrowsingSession, Click

__version__ = "0.1.0"

__all__ = [
    "LinkGraph",
    "BrowsingSession",
    "Click",
    "WikiWalkerError",
    "UnknownArticleError",
    "InvalidTrajectoryError",
]
