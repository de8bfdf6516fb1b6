from typing import Dict, Hashable, NamedTuple, Tuple


class VarKey(NamedTuple):
    """
    Structured name of a boolean atom.
    `tag` names the family (X, PH, L1, ...), `parts` the structural context.
    """
    tag: str
    parts: Tuple[Hashable, ...] = ()

    def __str__(self) -> str:
        return "_".join([self.tag] + [str(p) for p in self.parts])


class VarPool:
    """
    Sole naming authority for SAT variables.
    Maps keys to dense indices starting at 1; keys are never removed or reused.
    """
    def __init__(self):
        self._var_map: Dict[Hashable, int] = {}
        self._id_to_key: Dict[int, Hashable] = {}
        self._next_id: int = 1

    def get(self, key: Hashable) -> int:
        """
        Returns the index of `key`, allocating the next one on first use.
        """
        vid = self._var_map.get(key)
        if vid is not None:
            return vid

        vid = self._next_id
        self._var_map[key] = vid
        self._id_to_key[vid] = key
        self._next_id += 1
        return vid

    def count(self) -> int:
        return self._next_id - 1

    def __contains__(self, key: Hashable) -> bool:
        return key in self._var_map

    def key_of(self, vid: int) -> Hashable:
        if vid not in self._id_to_key:
            raise KeyError(f"Variable {vid} was never allocated")
        return self._id_to_key[vid]

    def get_var_map(self) -> Dict[str, int]:
        return {str(k): v for k, v in self._var_map.items()}

    def get_id_to_name(self) -> Dict[int, str]:
        return {v: str(k) for v, k in self._id_to_key.items()}
