"""Search for fixed-length cycles in a trimmed cuckatoo edge list."""

from dataclasses import dataclass, field
from enum import Enum

PROOF_LENGTH = 42
# Each edge in the trimmed buffer takes four 32-bit words: node, node, nonce, unused.
_STEP = 4
# A walk is abandoned once its path grows beyond this many nodes.
_MAX_PATH = 84


@dataclass
class Solution:
    """A cycle found in the graph, as the sorted nonces of its edges."""

    nonces: list = field(default_factory=list)


class _NodeState(Enum):
    NOT_VISITED = 0
    VISITED = 1
    EXPLORED = 2


class _Search:
    """Depth-first search state shared by every walk over one graph."""

    def __init__(self, length: int):
        self.length = length * 2
        self.path = []
        self.solutions = []
        self.state = {}
        self.node_visited = 0
        self.node_explored = 0

    def visit(self, node: int) -> None:
        self.state[node] = _NodeState.VISITED
        self.path.append(node)
        self.node_visited += 1

    def explore(self, node: int) -> None:
        self.state[node] = _NodeState.EXPLORED
        self.path.append(node)
        self.node_explored += 1

    def leave(self, node: int) -> None:
        self.path.pop()
        self.state[node] = _NodeState.NOT_VISITED

    def is_visited(self, node: int) -> bool:
        return self.state.get(node, _NodeState.NOT_VISITED) is not _NodeState.NOT_VISITED

    def is_explored(self, node: int) -> bool:
        return self.state.get(node, _NodeState.NOT_VISITED) is _NodeState.EXPLORED

    def is_cycle(self, node: int, is_first: bool) -> bool:
        size = len(self.path)
        found = size > self.length - 1 and self.path[size - self.length] == node
        if found and not is_first:
            self.path.append(node)
        return found


def _nonce_key(node1: int, node2: int) -> tuple:
    return (node1, node2) if node1 < node2 else (node2, node1)


class Graph:
    """Undirected graph of edges, each labelled with the nonce that produced it."""

    def __init__(self, edges=()):
        self._adjacency = {}
        self._nonces = {}
        for node1, node2, nonce in edges:
            self._add_edge(node1, node2, nonce)

    @classmethod
    def search(cls, edges) -> list:
        """Find all 42-cycles in a trimmed edge buffer.

        ``edges[1]`` holds the edge count; edge ``i`` (from 1) occupies the
        words ``edges[4*i : 4*i + 3]`` as node, node, nonce.
        """
        if len(edges) < 2:
            raise ValueError("edge buffer too short to hold an edge count")
        edge_count = edges[1]
        if len(edges) < edge_count * _STEP + 3:
            raise ValueError(
                f"edge buffer of {len(edges)} words cannot hold {edge_count} edges"
            )
        graph = cls()
        search = _Search(PROOF_LENGTH)
        for base in range(_STEP, (edge_count + 1) * _STEP, _STEP):
            node1, node2, nonce = edges[base : base + 3]
            graph._add_edge(node1, node2, nonce)
            graph._walk(node1, search)
        return [Solution(list(sol.nonces)) for sol in search.solutions]

    def node_count(self) -> int:
        """Number of distinct nodes in the graph."""
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Number of edges added to the graph."""
        return sum(len(neighbors) for neighbors in self._adjacency.values()) // 2

    def _add_edge(self, node1: int, node2: int, nonce: int) -> None:
        self._adjacency.setdefault(node1, []).append(node2)
        self._adjacency.setdefault(node2, []).append(node1)
        self._nonces[_nonce_key(node1, node2)] = nonce

    def _neighbors(self, node: int):
        neighbors = self._adjacency.get(node)
        if neighbors is None:
            return None
        # Most recently added neighbours come first.
        return reversed(neighbors)

    def _nonce(self, node1: int, node2: int) -> int:
        try:
            return self._nonces[_nonce_key(node1, node2)]
        except KeyError:
            raise ValueError(f"can not find  a nonce for {node1}:{node2}") from None

    def _add_solution(self, search: _Search) -> None:
        tail = search.path[len(search.path) - search.length :]
        try:
            nonces = [self._nonce(n1, n2) for n1, n2 in zip(tail[::2], tail[1::2])]
        except ValueError as err:
            raise ValueError(f"Failed to get nonce {err}") from err
        search.solutions.append(Solution(sorted(nonces)))

    def _walk(self, current: int, search: _Search) -> None:
        if search.is_explored(current) or len(search.path) > _MAX_PATH:
            if search.is_cycle(current, True):
                self._add_solution(search)
            return

        neighbors = self._neighbors(current)
        if neighbors is None:
            return
        search.explore(current)
        for neighbor in neighbors:
            if not search.is_visited(neighbor):
                search.visit(neighbor)
                self._walk(neighbor ^ 1, search)
                search.leave(neighbor)
            elif search.is_cycle(neighbor, False):
                self._add_solution(search)
        search.leave(current)