"""
Graph module.

Provides the friendship graph and the queries run against it:
- SocialGraph: Read-only adjacency store
- friends_of: Direct friends of an account
- find_connection: Depth-first search for a chain of friendships
"""

from social_graph.graph.search import (
    ConnectionResult,
    ConnectionStatus,
    find_connection,
    friends_of,
)
from social_graph.graph.store import AccountNotFoundError, Edge, SocialGraph

__all__ = [
    "AccountNotFoundError",
    "ConnectionResult",
    "ConnectionStatus",
    "Edge",
    "SocialGraph",
    "find_connection",
    "friends_of",
]
