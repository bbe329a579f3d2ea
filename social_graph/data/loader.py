"""
Network file loader.

File format:
    n e        <- account count and friendship count
    x y        <- one friendship per line, e lines

Usage:
    from social_graph.data import load_network

    graph, network = load_network("data/network.txt")
    graph.neighbors(0)
    network.edges      # raw edge list, in file order
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from social_graph.config import NETWORK_FILE_ENCODING
from social_graph.graph.store import Edge, SocialGraph

logger = logging.getLogger(__name__)


class NetworkFileError(OSError):
    """Raised when a network file is missing, unreadable or malformed."""

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        line_number: int | None = None,
    ) -> None:
        location = str(path) if path is not None else "<input>"
        if line_number is not None:
            location = f"{location}:{line_number}"
        super().__init__(f"{location}: {message}")
        self.path = path
        self.line_number = line_number


@dataclass(frozen=True)
class NetworkData:
    """
    Parsed contents of a network file.

    Attributes:
        node_count: Number of accounts declared in the header
        edges: Friendships in file order
        source: File the data was read from, if any
    """

    node_count: int
    edges: tuple[Edge, ...]
    source: Path | None = None

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def build_graph(self) -> SocialGraph:
        """Construct the graph for this network."""
        return SocialGraph.from_edges(self.node_count, self.edges)


def _parse_pair(
    tokens: list[str], line_number: int, source: str | Path | None
) -> tuple[int, int]:
    """Parse the first two tokens of a line as non-negative integers."""
    if len(tokens) < 2:
        raise NetworkFileError(
            f"expected two integers, got {' '.join(tokens)!r}", source, line_number
        )
    try:
        first, second = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise NetworkFileError(
            f"expected two integers, got {tokens[0]!r} {tokens[1]!r}",
            source,
            line_number,
        ) from None
    if first < 0 or second < 0:
        raise NetworkFileError(
            f"values must be non-negative, got {first} {second}", source, line_number
        )
    return first, second


def parse_network(
    lines: Iterable[str], source: str | Path | None = None
) -> NetworkData:
    """
    Parse network data from lines of text.

    Blank lines are skipped. Lines after the declared number of
    friendships are ignored.

    Raises:
        NetworkFileError: If the header or any friendship line is malformed,
            or the input ends before all friendships are read
    """
    rows = (
        (line_number, tokens)
        for line_number, tokens in (
            (number, line.split()) for number, line in enumerate(lines, 1)
        )
        if tokens
    )

    header = next(rows, None)
    if header is None:
        raise NetworkFileError("missing header line 'n e'", source)
    node_count, edge_count = _parse_pair(header[1], header[0], source)

    edges: list[Edge] = []
    for _ in range(edge_count):
        row = next(rows, None)
        if row is None:
            raise NetworkFileError(
                f"expected {edge_count} friendships, found {len(edges)}", source
            )
        edges.append(_parse_pair(row[1], row[0], source))

    return NetworkData(
        node_count=node_count,
        edges=tuple(edges),
        source=Path(source) if source is not None else None,
    )


def read_network(path: str | Path) -> NetworkData:
    """
    Read and parse a network file.

    Raises:
        NetworkFileError: If the file cannot be opened, decoded or parsed
    """
    path = Path(path)
    logger.info(f"Loading network from {path}...")
    try:
        with open(path, encoding=NETWORK_FILE_ENCODING) as f:
            network = parse_network(f, source=path)
    except NetworkFileError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise NetworkFileError(f"cannot read file ({e})", path) from e

    logger.info(
        f"Loaded {network.node_count:,} accounts and "
        f"{network.edge_count:,} friendships"
    )
    return network


def load_network(path: str | Path) -> tuple[SocialGraph, NetworkData]:
    """
    Read a network file and build its graph.

    Returns:
        (graph, network) so callers keep the raw edge list alongside
        the graph built from it
    """
    network = read_network(path)
    graph = network.build_graph()
    if graph.dangling_edges:
        logger.warning(
            f"{graph.dangling_edges:,} friendship(s) in {path} reference "
            "unregistered accounts and were skipped"
        )
    return graph, network
