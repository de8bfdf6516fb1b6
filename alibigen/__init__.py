"""
alibigen: character-movement schedules for deduction puzzles, generated by
compiling scenario rules to CNF and solving them with a seeded DPLL search.
"""
from alibigen.config import PuzzleConfig, ScenarioSettings, SolverSettings
from alibigen.core.errors import AlibiError, ConfigurationError, CNFError
from alibigen.compilation import CompilationArtifact, build_cnf
from alibigen.decoder import ScenarioSolution, decode_solution, solve_and_decode
from alibigen.graph import neighbors, parse_mermaid
from alibigen.solver import SatResult, SatStatus, sat_solve, solve_with_status

__all__ = [
    "PuzzleConfig", "ScenarioSettings", "SolverSettings",
    "AlibiError", "ConfigurationError", "CNFError",
    "CompilationArtifact", "build_cnf",
    "ScenarioSolution", "decode_solution", "solve_and_decode",
    "neighbors", "parse_mermaid",
    "SatResult", "SatStatus", "sat_solve", "solve_with_status",
]
