"""
Data loading module.

Reads site maps and recorded trajectories from disk and builds a
LinkGraph from them.

Usage:
    from wikiwalker.data import build_graph, load_site_map, load_trajectories

    graph = build_graph(
        load_site_map("data/site_map.msgpack"),
        load_trajectories("data/trajectories.json"),
    )
"""

from wikiwalker.data.loader import build_graph, load_site_map, load_trajectories

__all__ = ["build_graph", "load_site_map", "load_trajectories"]
