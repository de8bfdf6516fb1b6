from enum import Enum
from dataclasses import dataclass
from typing import List, Optional

class SatStatus(str, Enum):
    SAT = "SAT"
    UNSAT = "UNSAT"
    UNKNOWN = "UNKNOWN"   # deadline exceeded

@dataclass
class SatResult:
    """
    Raw result of one solver invocation.
    model[v - 1] is the value of variable v; unassigned variables read as False.
    """
    status: SatStatus
    model: Optional[List[bool]] = None

    # Search telemetry
    decisions: int = 0
    time_taken: float = 0.0  # ms

    @property
    def is_sat(self) -> bool:
        return self.status == SatStatus.SAT
