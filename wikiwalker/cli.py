"""
WikiWalker CLI - Query a site map and its recorded traffic.

Usage:
    wikiwalker --site-map data/site_map.msgpack has-path "Cat" "Philosophy"
    wikiwalker --site-map data/site_map.msgpack --trajectories data/trajectories.json clicks "Cat" "Dog"
    wikiwalker --trajectories data/trajectories.jsonl predict "Cat" -k 5
    wikiwalker stats

Commands:
    has-path  - Whether any sequence of links leads from SRC to DEST
    clicks    - Recorded clicks on the direct link SRC -> DEST (-1 if none)
    predict   - Most likely browsing path from SRC
    stats     - Article, link and click totals
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wikiwalker.config import (
    DEFAULT_TRAJECTORY_LENGTH,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    SITE_MAP_PATH,
    TRAJECTORIES_PATH,
    get_missing_data_files,
)
from wikiwalker.data import build_graph, load_site_map, load_trajectories
from wikiwalker.graph import LinkGraph, WikiWalkerError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="wikiwalker",
        description="Query a site map and its recorded clickthroughs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--site-map",
        type=Path,
        default=SITE_MAP_PATH,
        help=f"Site map file, .msgpack or .json (default: {SITE_MAP_PATH})",
    )
    parser.add_argument(
        "--trajectories",
        type=Path,
        default=None,
        help=f"Recorded trajectories, .json or .jsonl (default: {TRAJECTORIES_PATH} if present)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    has_path = commands.add_parser("has-path", help="Check reachability")
    has_path.add_argument("src")
    has_path.add_argument("dest")

    clicks = commands.add_parser("clicks", help="Count direct clickthroughs")
    clicks.add_argument("src")
    clicks.add_argument("dest")

    predict = commands.add_parser("predict", help="Most likely trajectory")
    predict.add_argument("src")
    predict.add_argument(
        "-k",
        type=int,
        default=DEFAULT_TRAJECTORY_LENGTH,
        help=f"Maximum trajectory length (default: {DEFAULT_TRAJECTORY_LENGTH})",
    )

    commands.add_parser("stats", help="Show graph statistics")

    return parser.parse_args(argv)


def load_graph(site_map_path: Path, trajectories_path: Path | None) -> LinkGraph:
    """Build the graph from the given files."""
    if trajectories_path is None and "trajectories" not in get_missing_data_files():
        trajectories_path = TRAJECTORIES_PATH

    trajectories = load_trajectories(trajectories_path) if trajectories_path else []
    return build_graph(load_site_map(site_map_path), trajectories)


def run_command(graph: LinkGraph, args: argparse.Namespace) -> int:
    """Run one subcommand against a loaded graph and print its answer."""
    if args.command == "has-path":
        found = graph.has_path(args.src, args.dest)
        print("yes" if found else "no")
        return 0 if found else 1

    if args.command == "clicks":
        print(graph.clickthroughs(args.src, args.dest))
        return 0

    if args.command == "predict":
        for title in graph.most_likely_trajectory(args.src, args.k):
            print(title)
        return 0

    for key, value in graph.stats().items():
        print(f"  {key}: {value:,}")
    return 0


def setup_logging(verbose: bool) -> None:
    """Configure root logging from --verbose or LOG_LEVEL."""
    level = logging.DEBUG if verbose else logging.getLevelName(LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: '{LOG_LEVEL}'")
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        setup_logging(args.verbose)
        graph = load_graph(args.site_map, args.trajectories)
        return run_command(graph, args)
    except (WikiWalkerError, OSError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
