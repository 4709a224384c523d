"""
LinkGraph: articles, the links between them, and the clicks recorded on each link.

Usage:
    from wikiwalker.graph import LinkGraph

    graph = LinkGraph()
    graph.add_article("Cat", ["Dog", "Mammal"])
    graph.add_article("Dog", ["Mammal"])
    graph.log_trajectory(["Cat", "Dog", "Mammal"])

    graph.has_path("Cat", "Mammal")          # True
    graph.clickthroughs("Cat", "Dog")        # 1
    graph.most_likely_trajectory("Cat", 5)   # ["Dog", "Mammal"]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from wikiwalker.graph.errors import InvalidTrajectoryError, UnknownArticleError

logger = logging.getLogger(__name__)

# Returned by clickthroughs() when there is no direct link
NO_LINK = -1


class LinkGraph:
    """
    In-memory site map with per-link click counts.

    Each known article maps to a dict of {linked title: click count}. The
    inner dict is built from sorted titles and never gains keys afterwards,
    so iterating it always yields targets in ascending order. The greedy
    walk in most_likely_trajectory() relies on that order to break ties.

    Attributes:
        site_map: Dict mapping article title to its ordered outgoing links
    """

    def __init__(self) -> None:
        self.site_map: dict[str, dict[str, int]] = {}

    # =========================================================================
    # Mutators
    # =========================================================================

    def add_article(self, name: str, links: Iterable[str] | None = None) -> None:
        """
        Add an article, replacing any links it already had.

        Duplicate links collapse to a single edge and links back to the
        article itself are dropped. Every edge starts with zero clicks.
        """
        previous = self.site_map.get(name)
        if previous and any(previous.values()):
            logger.warning(
                f"Re-adding '{name}' discards {sum(previous.values())} recorded clicks"
            )

        targets = sorted({link for link in (links or ()) if link != name})
        self.site_map[name] = dict.fromkeys(targets, 0)
        logger.debug(f"Added '{name}' with {len(targets)} links")

    def log_trajectory(self, traj: Sequence[str]) -> None:
        """
        Record one click on every link along a trajectory.

        ["A", "B", "C"] increments A->B and B->C. The whole trajectory is
        checked before anything is counted, so a bad one changes nothing.

        Raises:
            InvalidTrajectoryError: If traj has fewer than 2 titles or
                crosses a link that does not exist
        """
        if len(traj) < 2:
            raise InvalidTrajectoryError(
                f"Trajectory needs at least 2 articles, got {len(traj)}"
            )

        steps = list(zip(traj, traj[1:]))
        for src, dest in steps:
            if dest not in self.site_map.get(src, {}):
                raise InvalidTrajectoryError(f"No link from '{src}' to '{dest}'")

        for src, dest in steps:
            self.site_map[src][dest] += 1
        logger.debug(f"Logged trajectory: {' -> '.join(traj)}")

    # =========================================================================
    # Queries
    # =========================================================================

    def has_path(self, src: str, dest: str) -> bool:
        """
        Whether some sequence of links leads from src to dest.

        Depth-first search with a visited set, so cycles terminate. An
        article that was never added has no links and ends its branch.
        """
        if src == dest:
            return True

        visited = {src}
        stack = [src]
        while stack:
            current = stack.pop()
            for neighbor in self.site_map.get(current, {}):
                if neighbor == dest:
                    return True
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)

        return False

    def clickthroughs(self, src: str, dest: str) -> int:
        """
        Number of recorded clicks from src directly to dest.

        Returns 0 if the link exists but was never followed, and -1 if src
        does not link to dest at all.

        Raises:
            UnknownArticleError: If src was never added
        """
        links = self._links_of(src)
        return links.get(dest, NO_LINK)

    def most_likely_trajectory(self, src: str, k: int) -> list[str]:
        """
        Greedily follow the most-clicked link from src for up to k steps.

        Ties go to the alphabetically first title. src itself is not part
        of the output. The walk ends early on an article with no links, and
        may revisit articles.

        Args:
            src: Starting article
            k: Maximum number of steps

        Returns:
            Titles visited after src, at most k of them

        Raises:
            UnknownArticleError: If src was never added
            ValueError: If k is negative
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")

        links = self._links_of(src)
        result: list[str] = []
        for _ in range(k):
            best = None
            best_count = NO_LINK
            for title, count in links.items():
                if count > best_count:
                    best, best_count = title, count

            if best is None:
                break

            result.append(best)
            if best not in self.site_map:
                break
            links = self.site_map[best]

        return result

    # =========================================================================
    # Accessors
    # =========================================================================

    def _links_of(self, name: str) -> dict[str, int]:
        try:
            return self.site_map[name]
        except KeyError:
            raise UnknownArticleError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self.site_map

    def __len__(self) -> int:
        return len(self.site_map)

    def articles(self) -> list[str]:
        """Known article titles in ascending order."""
        return sorted(self.site_map)

    def get_links(self, name: str) -> list[str]:
        """Outgoing links of an article, or [] if it was never added."""
        return list(self.site_map.get(name, {}))

    def is_traversable(self, name: str) -> bool:
        """Check if article is known and has outgoing links."""
        return bool(self.site_map.get(name))

    def total_clicks(self) -> int:
        """Sum of clicks recorded across every link."""
        return sum(sum(links.values()) for links in self.site_map.values())

    def stats(self) -> dict:
        """Get statistics about the graph."""
        return {
            "total_articles": len(self.site_map),
            "traversable_articles": sum(1 for links in self.site_map.values() if links),
            "total_links": sum(len(links) for links in self.site_map.values()),
            "total_clicks": self.total_clicks(),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(articles={len(self.site_map)})"
