#!/usr/bin/env python3
"""
Validate a network file and the graph built from it.

Usage:
    python scripts/validate_network.py
    python scripts/validate_network.py data/network.txt
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from social_graph.config import DEFAULT_NETWORK_PATH  # noqa: E402 - must be after sys.path modification
from social_graph.data import NetworkFileError, load_network  # noqa: E402
from social_graph.graph import SocialGraph, find_connection, friends_of  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)


def load_and_validate(path: Path) -> tuple[SocialGraph | None, bool]:
    """Load the network and run validation checks."""
    print("\n=== Loading Network ===\n")

    start_time = time.time()
    try:
        graph, _ = load_network(path)
    except NetworkFileError as e:
        print(f"✗ {e}")
        return None, False
    load_time = time.time() - start_time
    print(f"\nLoad time: {load_time:.3f} seconds")

    print("\n=== Network Statistics ===\n")
    for key, value in graph.stats().items():
        print(f"  {key}: {value:,}" if isinstance(value, int) else f"  {key}: {value:.2f}")

    print("\n=== Validation Checks ===\n")
    validation = graph.validate()
    all_valid = True
    for check, passed in validation.items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}")
        if not passed:
            all_valid = False

    if graph.dangling_edges:
        print(f"  ⚠ {graph.dangling_edges:,} friendship(s) skipped (unregistered accounts)")

    return graph, all_valid


def sample_queries(graph: SocialGraph) -> None:
    """Run a friend-list and a connection query between the outermost accounts."""
    print("\n=== Sample Queries ===\n")

    accounts = list(graph)
    if not accounts:
        print("  ⚠ Network has no accounts")
        return

    first, last = accounts[0], accounts[-1]
    print(f"  Account {first}: {len(friends_of(graph, first)):,} friend/s")

    result = find_connection(graph, first, last)
    if result.found:
        print(f"  {first} → {last}: {result.hops} hops via {' → '.join(map(str, result.path))}")
    else:
        print(f"  {first} → {last}: {result.status.value}")
    print(f"  Accounts searched: {result.visited_count:,}")


def main() -> int:
    """Main validation routine."""
    parser = argparse.ArgumentParser(description="Validate a social network file")
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=DEFAULT_NETWORK_PATH,
        help=f"Network file (default: {DEFAULT_NETWORK_PATH})",
    )
    args = parser.parse_args()

    print("=" * 60)
    print("Social Graph Network Validation")
    print("=" * 60)

    graph, all_valid = load_and_validate(args.file)
    if graph is None:
        print("\n✗ Network file could not be loaded.")
        return 1
    if not all_valid:
        print("\n✗ Validation checks failed.")
        return 1

    sample_queries(graph)

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
