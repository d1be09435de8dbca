from npuzzle.engine.gamesolver.config import Algorithm, SolverConfig
from npuzzle.engine.gamesolver.result import SearchResult, Termination
from npuzzle.engine.gamesolver.solver import Solver

__all__ = ["Algorithm", "SearchResult", "Solver", "SolverConfig", "Termination"]
