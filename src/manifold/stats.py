"""
Solve Statistics Module - Counters collected by one solve call.
"""

from dataclasses import dataclass


@dataclass
class SolveStats:
    """
    Search statistics for a single solve.

    Wall-clock time is not recorded here; callers time the call themselves.

    Attributes:
        success: True if the grid was completed
        iterations: Search nodes visited
        backtracks: Dead ends hit (including exhausted nodes)
        max_depth: Deepest node reached (root = 1)
    """
    success: bool = False
    iterations: int = 0
    backtracks: int = 0
    max_depth: int = 0

    def summary(self) -> str:
        """One-line description for logs and status bars."""
        outcome = "solved" if self.success else "no solution"
        return (
            f"{outcome}: {self.iterations} iterations, "
            f"{self.backtracks} backtracks, depth {self.max_depth}"
        )
