"""
Browsing session dataclasses for recording a user's clicks one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from wikiwalker.graph.errors import InvalidTrajectoryError

if TYPE_CHECKING:
    from wikiwalker.graph.walker import LinkGraph


@dataclass
class Click:
    """
    Records a single click in a session.

    Attributes:
        from_title: Article the click was made on
        to_title: Article the click led to
        step_number: 1-indexed position in the session
    """

    from_title: str
    to_title: str
    step_number: int


@dataclass
class BrowsingSession:
    """
    Mutable record of an in-progress browsing session.

    Attributes:
        start_title: Article the session began on
        path: Titles visited so far (including start and current)
        clicks: Clicks recorded so far
        started_at: When the session began
    """

    start_title: str
    path: list[str] = field(default_factory=list)
    clicks: list[Click] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not self.path:
            self.path = [self.start_title]

    @property
    def current_title(self) -> str:
        """Article the session is currently on."""
        return self.path[-1]

    @property
    def click_count(self) -> int:
        """Number of clicks made so far."""
        return len(self.path) - 1

    def record_click(self, to_title: str) -> None:
        """Record a click from the current article and move to to_title."""
        click = Click(
            from_title=self.current_title,
            to_title=to_title,
            step_number=len(self.clicks) + 1,
        )
        self.clicks.append(click)
        self.path.append(to_title)

    def to_trajectory(self) -> list[str]:
        return list(self.path)

    def commit(self, graph: LinkGraph) -> None:
        """
        Log this session's path into a graph.

        Raises:
            InvalidTrajectoryError: If no clicks were recorded, or a click
                does not follow an existing link
        """
        if self.click_count < 1:
            raise InvalidTrajectoryError(
                f"Session starting at '{self.start_title}' has no clicks to log"
            )
        graph.log_trajectory(self.to_trajectory())
