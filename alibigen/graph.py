import re
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import networkx as nx

Edge = Tuple[str, str]

_TOKEN = re.compile(r'"([^"]+)"|(\S+)')


@dataclass
class MovementGraph:
    """
    Room adjacency used by the movement constraints.

    - idx: room name -> position in the room list
    - nbr: per room index, the sorted room indices reachable in one step
    """
    idx: Dict[str, int]
    nbr: List[List[int]]
    graph: nx.Graph


def neighbors(rooms: Sequence[str], edges: Sequence[Sequence[str]], include_self: bool) -> MovementGraph:
    """
    Builds the movement graph. Edges naming unknown rooms are ignored.
    With include_self every room is also its own neighbour (staying put).
    """
    idx = {r: i for i, r in enumerate(rooms)}
    G = nx.Graph()
    G.add_nodes_from(range(len(rooms)))

    for a, b in edges:
        if a not in idx or b not in idx:
            continue
        G.add_edge(idx[a], idx[b])

    if include_self:
        G.add_edges_from((i, i) for i in range(len(rooms)))

    nbr = [sorted(G.neighbors(i)) for i in range(len(rooms))]
    return MovementGraph(idx=idx, nbr=nbr, graph=G)


def _tokens(text: str) -> List[str]:
    return [m.group(1) or m.group(2) for m in _TOKEN.finditer(text)]


def parse_mermaid(text: str) -> Tuple[List[str], List[Edge]]:
    """
    Parses a Mermaid-like room graph:

        graph LR
        Kitchen --- "Dining Room"
        "Dining Room" --- Hall

    Returns (rooms in first-seen order, edges). Lines without '---' are skipped.
    """
    rooms: Dict[str, None] = {}
    edges: List[Edge] = []

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("graph"):
            continue
        if "---" not in line:
            continue

        parts = line.split("---")
        if len(parts) != 2:
            continue

        left, right = _tokens(parts[0]), _tokens(parts[1])
        if left and right:
            a, b = left[-1], right[0]
            rooms.setdefault(a)
            rooms.setdefault(b)
            edges.append((a, b))

    return list(rooms), edges
