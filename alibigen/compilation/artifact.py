from dataclasses import dataclass, field
from typing import Any, Dict, List, TYPE_CHECKING

from alibigen.graph import MovementGraph
from alibigen.vars import VarPool

if TYPE_CHECKING:
    from alibigen.scenarios.base import ScenarioPack

@dataclass
class CompilationArtifact:
    """
    Result of one compilation pass over a puzzle configuration.
    Created fresh per call; the decoder consumes it once.
    """
    # The primary SAT payload
    clauses: List[List[int]]

    # Naming authority, for the variable count and reverse lookup
    pool: VarPool

    # scenario name -> role name -> role-selection variables
    private_keys: Dict[str, Dict[str, List[int]]]

    # Packs that produced the private keys, used to decode their facts
    packs: Dict[str, "ScenarioPack"]

    graph: MovementGraph

    # Stats
    stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def num_vars(self) -> int:
        return self.pool.count()
