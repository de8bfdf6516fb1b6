from typing import Dict, Hashable, List, Optional, Sequence

from alibigen.config import PuzzleConfig
from alibigen.encodings import define_and
from alibigen.graph import neighbors
from alibigen.vars import VarKey, VarPool


class CompilationContext:
    """
    Shared state of one compilation: the pool, the clause list and the
    occupancy accessors every scenario pack builds on.
    """
    def __init__(self, config: PuzzleConfig, pool: Optional[VarPool] = None):
        self.config = config
        self.pool = pool if pool else VarPool()
        self.clauses: List[List[int]] = []

        self.rooms = list(config.rooms)
        self.chars = list(config.chars)
        self.T = config.T
        self.graph = neighbors(self.rooms, config.edges, config.include_self)

        # Role variables of the packs compiled so far, keyed by scenario name
        self.roles: Dict[str, Dict[str, List[int]]] = {}

    def var(self, tag: str, *parts: Hashable) -> int:
        return self.pool.get(VarKey(tag, parts))

    def x(self, ci: int, t: int, ri: int) -> int:
        """Character ci occupies room ri at time t."""
        return self.var("X", self.chars[ci], t, self.rooms[ri])

    def role_vars(self, tag: str) -> List[int]:
        """One selection variable per character."""
        return [self.var(tag, c) for c in self.chars]

    def add(self, clause: List[int]) -> None:
        self.clauses.append(clause)

    def extend(self, clauses: List[List[int]]) -> None:
        self.clauses.extend(clauses)

    def together(self, ci: int, cj: int, t: int, ri: int) -> int:
        """
        Tseitin variable for "ci and cj are both in room ri at time t".
        Defined once per unordered pair, however many packs ask for it.
        """
        a, b = sorted((ci, cj))
        key = VarKey("together", (self.chars[a], self.chars[b], t, self.rooms[ri]))
        if key in self.pool:
            return self.pool.get(key)
        vid = self.pool.get(key)
        self.extend(define_and(vid, [self.x(a, t, ri), self.x(b, t, ri)]))
        return vid

    def alone(self, members: Sequence[int], t: int, ri: int) -> int:
        """
        Tseitin variable for "exactly `members` occupy room ri at time t":
        every member is present and every other character is absent.
        """
        members = sorted(set(members))
        key = VarKey("alone", tuple(self.chars[c] for c in members) + (t, self.rooms[ri]))
        if key in self.pool:
            return self.pool.get(key)
        vid = self.pool.get(key)
        inputs = [self.x(c, t, ri) if c in members else -self.x(c, t, ri)
                  for c in range(len(self.chars))]
        self.extend(define_and(vid, inputs))
        return vid
