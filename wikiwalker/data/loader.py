"""
Loaders for site maps and recorded trajectories.

A site map is a mapping of article title to the titles it links to, stored
as msgpack or JSON. Trajectories are lists of titles, stored as a JSON list
of lists or as JSON Lines with one list per line.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

import msgpack

from wikiwalker.config import SITE_MAP_SUFFIXES, TRAJECTORY_SUFFIXES
from wikiwalker.graph.walker import LinkGraph

logger = logging.getLogger(__name__)


def load_site_map(path: str | Path) -> dict[str, list[str]]:
    """
    Load a site map from a .msgpack or .json file.

    Raises:
        ValueError: If the suffix is unsupported or the content is not a
            mapping of title to list of titles
    """
    path = Path(path)
    if path.suffix not in SITE_MAP_SUFFIXES:
        raise ValueError(f"Unsupported site map file type: '{path.suffix}'")

    logger.info(f"Loading site map from {path}...")
    if path.suffix == ".msgpack":
        with open(path, "rb") as f:
            raw = msgpack.load(f)
    else:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)

    if not isinstance(raw, Mapping):
        raise ValueError(f"Site map in {path} must be a mapping, got {type(raw).__name__}")

    site_map: dict[str, list[str]] = {}
    for title, links in raw.items():
        if not isinstance(links, Sequence) or isinstance(links, str):
            raise ValueError(f"Links for '{title}' in {path} must be a list")
        if not isinstance(title, str):
            raise ValueError(f"Title {title!r} in {path} must be a string")
        for i, link in enumerate(links):
            if not isinstance(link, str):
                raise ValueError(f"Link {i} of '{title}' in {path} must be a string, got {link!r}")
        site_map[title] = list(links)

    logger.info(f"Loaded {len(site_map):,} articles")
    return site_map


def load_trajectories(path: str | Path) -> list[list[str]]:
    """
    Load recorded trajectories from a .json or .jsonl file.

    Raises:
        ValueError: If the suffix is unsupported or an entry is not a list
            of titles
    """
    path = Path(path)
    if path.suffix not in TRAJECTORY_SUFFIXES:
        raise ValueError(f"Unsupported trajectory file type: '{path.suffix}'")

    logger.info(f"Loading trajectories from {path}...")
    with open(path, encoding="utf-8") as f:
        if path.suffix == ".jsonl":
            raw = [json.loads(line) for line in f if line.strip()]
        else:
            raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError(f"Trajectories in {path} must be a list")

    trajectories = []
    for i, traj in enumerate(raw):
        if not isinstance(traj, list):
            raise ValueError(f"Trajectory {i} in {path} must be a list")
        for j, title in enumerate(traj):
            if not isinstance(title, str):
                raise ValueError(
                    f"Entry {j} of trajectory {i} in {path} must be a string, got {title!r}"
                )
        trajectories.append(traj)

    logger.info(f"Loaded {len(trajectories):,} trajectories")
    return trajectories


def build_graph(
    site_map: Mapping[str, Iterable[str]],
    trajectories: Iterable[Sequence[str]] = (),
) -> LinkGraph:
    """
    Build a LinkGraph from a site map, then log each trajectory into it.

    Raises:
        InvalidTrajectoryError: If a trajectory follows a missing link
    """
    graph = LinkGraph()
    for title, links in site_map.items():
        graph.add_article(title, links)

    logged = 0
    for traj in trajectories:
        graph.log_trajectory(traj)
        logged += 1

    logger.info(f"Built graph with {len(graph):,} articles and {logged:,} trajectories")
    return graph
