from backend.engine.puzzlesolver.solver import Solver

__all__ = ["Solver"]
