"""
Data loading module.

Reads network files into a SocialGraph plus the raw friendship list.

Usage:
    from social_graph.data import load_network

    graph, network = load_network("data/network.txt")
"""

from social_graph.data.loader import (
    NetworkData,
    NetworkFileError,
    load_network,
    parse_network,
    read_network,
)

__all__ = [
    "NetworkData",
    "NetworkFileError",
    "load_network",
    "parse_network",
    "read_network",
]
