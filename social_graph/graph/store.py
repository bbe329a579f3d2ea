"""
SocialGraph: read-only adjacency store for an undirected friendship network.

Usage:
    from social_graph.graph import SocialGraph

    graph = SocialGraph.from_edges(4, [(0, 1), (1, 2), (2, 3)])
    graph.neighbors(1)   # (0, 2)
    2 in graph           # True
    graph.stats()
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping

import numpy as np

logger = logging.getLogger(__name__)

Edge = tuple[int, int]


class AccountNotFoundError(KeyError):
    """Raised when an account id is not registered in the graph."""

    def __init__(self, account_id: int) -> None:
        super().__init__(account_id)
        self.account_id = account_id

    def __str__(self) -> str:
        return f"Account {self.account_id} is not registered"


class SocialGraph:
    """
    Undirected friendship graph stored as an adjacency list.

    Each registered account maps to the ordered sequence of its friends,
    in the order the friendships were added. Duplicate friendships are
    kept as duplicate entries. The graph never changes after construction.

    Attributes:
        dangling_edges: Number of input edges skipped because an endpoint
            was not a registered account
    """

    def __init__(
        self,
        adjacency: Mapping[int, Iterable[int]],
        dangling_edges: int = 0,
    ) -> None:
        """
        Initialize from a prebuilt adjacency mapping.

        Most callers should use from_edges() instead, which guarantees the
        symmetry of the relation.

        Args:
            adjacency: Mapping from account id to its friends, in order
            dangling_edges: Edges dropped while building the mapping
        """
        self._adjacency: dict[int, tuple[int, ...]] = {
            account: tuple(friends) for account, friends in adjacency.items()
        }
        # Dense position per account, used to index per-query arrays
        self._slots: dict[int, int] = {
            account: slot for slot, account in enumerate(self._adjacency)
        }
        self.dangling_edges = dangling_edges

        self._self_loops = sum(
            friends.count(account) for account, friends in self._adjacency.items()
        )
        total_entries = sum(len(friends) for friends in self._adjacency.values())
        self._friendship_count = (total_entries - self._self_loops) // 2 + self._self_loops

    @classmethod
    def from_edges(cls, node_count: int, edges: Iterable[Edge]) -> SocialGraph:
        """
        Build a graph with accounts 0..node_count-1 and the given friendships.

        All accounts are registered first, then each edge (a, b) appends b
        to a's friends and a to b's friends. A self-loop (x, x) is recorded
        once. An edge naming an unregistered account is skipped and counted
        in dangling_edges, so the account stays unknown to later lookups.

        Raises:
            ValueError: If node_count is negative
        """
        if node_count < 0:
            raise ValueError(f"node_count must be non-negative, got {node_count}")

        adjacency: dict[int, list[int]] = {account: [] for account in range(node_count)}
        dangling = 0

        for a, b in edges:
            if a not in adjacency or b not in adjacency:
                logger.debug(
                    f"Skipping friendship ({a}, {b}): account not registered "
                    f"(expected ids 0..{node_count - 1})"
                )
                dangling += 1
                continue

            adjacency[a].append(b)
            if a != b:
                adjacency[b].append(a)

        graph = cls(adjacency, dangling_edges=dangling)
        logger.debug(
            f"Built graph with {graph.size():,} accounts and "
            f"{graph.edge_count():,} friendships"
        )
        return graph

    # =========================================================================
    # Core Accessors
    # =========================================================================

    def contains(self, account_id: int) -> bool:
        """Check if an account is registered."""
        return account_id in self._adjacency

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._adjacency

    def neighbors(self, account_id: int) -> tuple[int, ...]:
        """
        Get the friends of an account in insertion order.

        Raises:
            AccountNotFoundError: If the account is not registered
        """
        try:
            return self._adjacency[account_id]
        except KeyError:
            raise AccountNotFoundError(account_id) from None

    def size(self) -> int:
        """Number of registered accounts."""
        return len(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[int]:
        return iter(self._adjacency)

    def slot(self, account_id: int) -> int:
        """
        Get the dense position (0..size-1) of a registered account.

        Raises:
            AccountNotFoundError: If the account is not registered
        """
        try:
            return self._slots[account_id]
        except KeyError:
            raise AccountNotFoundError(account_id) from None

    def degree(self, account_id: int) -> int:
        """Number of friend entries for an account (duplicates included)."""
        return len(self.neighbors(account_id))

    def edge_count(self) -> int:
        """Number of friendships stored (self-loops count once)."""
        return self._friendship_count

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run consistency checks on the adjacency structure."""
        return {
            "symmetric": self._is_symmetric(),
            "neighbors_registered": all(
                friend in self._adjacency
                for friends in self._adjacency.values()
                for friend in friends
            ),
            "degree_sum_matches": (
                sum(len(friends) for friends in self._adjacency.values())
                == 2 * self._friendship_count - self._self_loops
            ),
        }

    def _is_symmetric(self) -> bool:
        """Every a->b entry is matched by the same number of b->a entries."""
        counts = {account: Counter(friends) for account, friends in self._adjacency.items()}
        for account, friend_counts in counts.items():
            for friend, times in friend_counts.items():
                if friend not in counts or counts[friend][account] != times:
                    return False
        return True

    def stats(self) -> dict:
        """Get statistics about the graph."""
        degrees = np.fromiter(
            (len(friends) for friends in self._adjacency.values()),
            dtype=np.int64,
            count=len(self._adjacency),
        )
        return {
            "accounts": self.size(),
            "friendships": self._friendship_count,
            "self_loops": self._self_loops,
            "dangling_edges": self.dangling_edges,
            "isolated_accounts": int(np.count_nonzero(degrees == 0)),
            "mean_degree": float(degrees.mean()) if degrees.size else 0.0,
            "max_degree": int(degrees.max()) if degrees.size else 0,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(accounts={self.size()}, "
            f"friendships={self._friendship_count})"
        )
