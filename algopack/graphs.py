"""Graph traversal, shortest paths and topological ordering."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Union

Adjacency = Union[Mapping[Hashable, Iterable[Hashable]], Sequence[Iterable[Hashable]]]


class CycleError(ValueError):
    """Raised when a directed graph has no topological order."""


def _neighbours(adjacency: Adjacency, node: Hashable) -> Iterable[Hashable]:
    if isinstance(adjacency, Mapping):
        return adjacency.get(node, ())
    return adjacency[node]  # type: ignore[index]


class WeightedGraph:
    """Undirected graph on vertices 0..n-1 with non-negative edge weights."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex!r} is not in the graph")

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check_vertex(u)
        self._check_vertex(v)
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def shortest_paths(self, source: int) -> list[float]:
        """Distance from ``source`` to every vertex; unreachable ones get ``math.inf``."""
        self._check_vertex(source)
        dist: list[float] = [math.inf] * len(self._adjacency)
        dist[source] = 0
        heap: list[tuple[float, int]] = [(0, source)]
        while heap:
            d, u = heapq.heappop(heap)
            if d > dist[u]:
                continue
            for v, weight in self._adjacency[u]:
                candidate = d + weight
                if candidate < dist[v]:
                    dist[v] = candidate
                    heapq.heappush(heap, (candidate, v))
        return dist


def bfs_levels(adjacency: Adjacency, source: Hashable) -> dict[Hashable, int]:
    """Breadth-first distance in edges from ``source`` to every reachable node."""
    levels: dict[Hashable, int] = {source: 0}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in _neighbours(adjacency, node):
            if neighbour not in levels:
                levels[neighbour] = levels[node] + 1
                queue.append(neighbour)
    return levels


def dfs_subtree_sizes(adjacency: Adjacency, root: Hashable) -> dict[Hashable, int]:
    """Size of every subtree of the depth-first search tree rooted at ``root``."""
    sizes: dict[Hashable, int] = {root: 1}
    stack = [(root, iter(_neighbours(adjacency, root)))]
    while stack:
        node, pending = stack[-1]
        for neighbour in pending:
            if neighbour not in sizes:
                sizes[neighbour] = 1
                stack.append((neighbour, iter(_neighbours(adjacency, neighbour))))
                break
        else:
            stack.pop()
            if stack:
                sizes[stack[-1][0]] += sizes[node]
    return sizes


def topological_sort(node_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Kahn's algorithm over nodes 1..node_count; raises CycleError on a cycle."""
    successors: dict[int, list[int]] = {node: [] for node in range(1, node_count + 1)}
    indegree = dict.fromkeys(successors, 0)
    for u, v in edges:
        if u not in successors or v not in successors:
            raise ValueError(f"edge ({u}, {v}) uses a node outside 1..{node_count}")
        successors[u].append(v)
        indegree[v] += 1
    queue = deque(node for node, count in indegree.items() if count == 0)
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in successors[u]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    if len(order) != node_count:
        raise CycleError("graph contains a cycle")
    return order