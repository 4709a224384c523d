"""
Exceptions raised by the link graph.
"""

from __future__ import annotations


class WikiWalkerError(Exception):
    """Base class for all WikiWalker errors."""


class UnknownArticleError(WikiWalkerError, KeyError):
    """Raised when an operation needs an article that was never added."""

    def __init__(self, article: str) -> None:
        self.article = article
        super().__init__(article)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the key
        return f"Unknown article: '{self.article}'"


class InvalidTrajectoryError(WikiWalkerError, ValueError):
    """Raised when a trajectory is too short or follows a missing link."""
