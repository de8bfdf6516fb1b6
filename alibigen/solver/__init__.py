from alibigen.solver.types import SatResult, SatStatus
from alibigen.solver.dpll import DPLLSolver, sat_solve, solve_with_status, DEFAULT_TIMEOUT_MS

__all__ = ["SatResult", "SatStatus", "DPLLSolver", "sat_solve", "solve_with_status", "DEFAULT_TIMEOUT_MS"]
