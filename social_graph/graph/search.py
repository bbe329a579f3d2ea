"""
Friend-list and connection queries against a SocialGraph.

The connection search is a depth-first search that returns the first
path it finds, following each account's friends in insertion order.
It is not a shortest-path search.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

import numpy as np

from social_graph.graph.store import AccountNotFoundError, Edge, SocialGraph

logger = logging.getLogger(__name__)


class ConnectionStatus(Enum):
    """Outcome of a connection query."""

    FOUND = "found"
    SAME_ACCOUNT = "same_account"
    NOT_FOUND = "not_found"
    NO_PATH = "no_path"


@dataclass(frozen=True)
class ConnectionResult:
    """
    Result of a connection query between two accounts.

    Attributes:
        source: Account the search started from
        target: Account the search was looking for
        status: Outcome of the query
        path: Accounts from source to target (empty unless found)
        missing: Requested accounts that are not registered
        visited_count: Accounts visited by the search (0 if it never ran)
    """

    source: int
    target: int
    status: ConnectionStatus
    path: tuple[int, ...] = ()
    missing: tuple[int, ...] = ()
    visited_count: int = 0

    @property
    def found(self) -> bool:
        """Whether a connecting path was found."""
        return self.status is ConnectionStatus.FOUND

    @property
    def hops(self) -> int | None:
        """Number of friendships in the path, or None if not found."""
        if not self.found:
            return None
        return len(self.path) - 1

    def friendships(self) -> list[Edge]:
        """Consecutive (account, friend) pairs along the path."""
        return list(zip(self.path, self.path[1:]))


def friends_of(
    graph: SocialGraph,
    account_id: int,
    edges: Iterable[Edge] | None = None,
) -> list[int]:
    """
    List an account's direct friends.

    By default the friends come straight from the graph. When a raw edge
    list is given it is re-scanned instead, collecting the other endpoint
    of every edge that mentions the account, in edge order. Either way
    the account must be registered in the graph.

    Args:
        graph: Graph the account must be registered in
        account_id: Account to look up
        edges: Optional raw edge list to re-scan

    Returns:
        Friend ids in the order the friendships were recorded

    Raises:
        AccountNotFoundError: If the account is not registered
    """
    if account_id not in graph:
        raise AccountNotFoundError(account_id)

    if edges is None:
        return list(graph.neighbors(account_id))

    friends = []
    for a, b in edges:
        if a == account_id:
            friends.append(b)
        elif b == account_id:
            friends.append(a)
    return friends


def find_connection(graph: SocialGraph, source: int, target: int) -> ConnectionResult:
    """
    Find a chain of friendships linking source to target.

    Unregistered accounts and identical endpoints are rejected before
    any search runs.

    Returns:
        ConnectionResult with status FOUND (and the path), SAME_ACCOUNT,
        NOT_FOUND or NO_PATH
    """
    missing = tuple(
        dict.fromkeys(account for account in (source, target) if account not in graph)
    )
    if missing:
        logger.info(f"Connection query for unregistered account(s): {missing}")
        return ConnectionResult(source, target, ConnectionStatus.NOT_FOUND, missing=missing)

    if source == target:
        return ConnectionResult(source, target, ConnectionStatus.SAME_ACCOUNT)

    path, visited_count = _depth_first_path(graph, source, target)

    if not path:
        logger.info(
            f"No connection between {source} and {target} "
            f"({visited_count} accounts searched)"
        )
        return ConnectionResult(
            source, target, ConnectionStatus.NO_PATH, visited_count=visited_count
        )

    logger.info(
        f"Found connection ({len(path) - 1} hops): {' -> '.join(map(str, path))}"
    )
    return ConnectionResult(
        source,
        target,
        ConnectionStatus.FOUND,
        path=tuple(path),
        visited_count=visited_count,
    )


def _depth_first_path(
    graph: SocialGraph, source: int, target: int
) -> tuple[list[int], int]:
    """
    Depth-first search with an explicit stack.

    Each stack frame is the friend iterator of the account at the same
    position in `path`, so the stack and the path always have equal
    length. Exhausting a frame backtracks by popping both.

    Returns:
        (path, visited_count); path is empty if target is unreachable
    """
    visited = np.zeros(graph.size(), dtype=np.bool_)
    visited[graph.slot(source)] = True
    visited_count = 1

    path = [source]
    if source == target:
        return path, visited_count

    stack: list[Iterator[int]] = [iter(graph.neighbors(source))]

    while stack:
        for friend in stack[-1]:
            if not visited[graph.slot(friend)]:
                break
        else:
            # No unvisited friends left: backtrack
            stack.pop()
            path.pop()
            continue

        visited[graph.slot(friend)] = True
        visited_count += 1
        path.append(friend)

        if friend == target:
            return path, visited_count

        stack.append(iter(graph.neighbors(friend)))

    return [], visited_count
