"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from social_graph.data import NetworkData, parse_network
from social_graph.graph import SocialGraph

CHAIN_NETWORK = "4 3\n0 1\n1 2\n2 3\n"


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def chain_network() -> NetworkData:
    """Parsed 0-1-2-3 chain network."""
    return parse_network(CHAIN_NETWORK.splitlines())


@pytest.fixture
def chain_graph(chain_network: NetworkData) -> SocialGraph:
    """Graph for the 0-1-2-3 chain."""
    return chain_network.build_graph()


@pytest.fixture
def two_component_graph() -> SocialGraph:
    """Triangle 0-1-2 and a separate pair 3-4."""
    return SocialGraph.from_edges(5, [(0, 1), (1, 2), (2, 0), (3, 4)])


@pytest.fixture
def write_network(tmp_path: Path):
    """Write network text to a temporary file and return its path."""

    def _write(text: str, name: str = "network.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
