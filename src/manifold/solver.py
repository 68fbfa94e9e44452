"""
Backtracking Solver Module - MRV search over a constraint graph.

The search walks an explicit frame stack instead of recursing, so its
Python call depth stays flat regardless of how many cells a topology has.
Each frame is one search node that committed a value to its cell.

Legal values come from a per-cell histogram of neighbor values:
``counts[i, v]`` is the number of neighbors of ``i`` holding ``v``. A value
is legal for ``i`` when its count is zero. The histogram is updated on
every placement and undo, which keeps MRV selection a vectorised scan.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .stats import SolveStats
from .topology import EMPTY, MAX_VALUE


@dataclass
class _Frame:
    """One search node: the chosen cell and its candidate values."""
    index: int
    candidates: List[int]
    position: int = 0

    @property
    def current(self) -> int:
        """Value currently placed by this frame, or EMPTY."""
        if self.position == 0:
            return EMPTY
        return self.candidates[self.position - 1]


def find_conflicts(cells: np.ndarray, neighbors: Sequence[np.ndarray]) -> List[Tuple[int, int]]:
    """
    Find constrained pairs holding the same nonzero value.

    Args:
        cells: Current cell values
        neighbors: Neighbor index array per cell

    Returns:
        Sorted list of (i, j) pairs with i < j
    """
    conflicts: List[Tuple[int, int]] = []
    for index in np.flatnonzero(cells):
        mates = neighbors[index]
        clashing = mates[cells[mates] == cells[index]]
        conflicts.extend((int(index), int(other)) for other in clashing if other > index)
    return conflicts


class BacktrackingSolver:
    """
    Exhaustive backtracking with the minimum-remaining-values heuristic.

    Works in place on the caller's cell array. Non-empty cells are never
    selected, so givens are never modified.

    Attributes:
        neighbors: Neighbor index array per cell
    """

    def __init__(self, neighbors: Sequence[np.ndarray]):
        self.neighbors = neighbors

    def solve(self, cells: np.ndarray) -> SolveStats:
        """
        Fill every empty cell, or leave the array as it was.

        Args:
            cells: Cell values, modified in place

        Returns:
            SolveStats for this search
        """
        stats = SolveStats()
        counts = self._histogram(cells)
        stack: List[_Frame] = []

        while True:
            stats.iterations += 1
            stats.max_depth = max(stats.max_depth, len(stack) + 1)

            selection = self._select_cell(cells, counts)
            if selection is None:
                stats.success = True
                return stats

            index, candidates = selection
            if candidates:
                stack.append(_Frame(index=index, candidates=candidates))
            else:
                # Empty cell with no legal value
                stats.backtracks += 1

            if not self._advance(stack, cells, counts, stats):
                return stats

    def _histogram(self, cells: np.ndarray) -> np.ndarray:
        """Build the neighbor value histogram for the current grid."""
        counts = np.zeros((len(cells), MAX_VALUE + 1), dtype=np.int16)
        for index in np.flatnonzero(cells):
            counts[self.neighbors[index], int(cells[index])] += 1
        return counts

    def _select_cell(
        self,
        cells: np.ndarray,
        counts: np.ndarray
    ) -> Optional[Tuple[int, List[int]]]:
        """
        Pick the empty cell with the fewest legal values.

        Ties go to the lowest index (argmin returns the first minimum).

        Returns:
            (index, ascending candidates) or None when no cell is empty.
            Candidates are empty for a dead end.
        """
        empty = cells == EMPTY
        if not empty.any():
            return None

        legal = counts[:, 1:] == 0
        options = legal.sum(axis=1)
        options[~empty] = MAX_VALUE + 1

        index = int(np.argmin(options))
        candidates = (np.flatnonzero(legal[index]) + 1).tolist()
        return index, candidates

    def _advance(
        self,
        stack: List[_Frame],
        cells: np.ndarray,
        counts: np.ndarray,
        stats: SolveStats
    ) -> bool:
        """
        Place the next untried candidate of the deepest open frame.

        Frames with no candidates left are undone and popped, each one
        counting as a backtrack.

        Returns:
            False once the stack is exhausted (search failed)
        """
        while stack:
            frame = stack[-1]
            if frame.current != EMPTY:
                self._unplace(frame.index, frame.current, cells, counts)

            if frame.position < len(frame.candidates):
                value = frame.candidates[frame.position]
                frame.position += 1
                self._place(frame.index, value, cells, counts)
                return True

            stack.pop()
            stats.backtracks += 1

        return False

    def _place(self, index: int, value: int, cells: np.ndarray, counts: np.ndarray) -> None:
        cells[index] = value
        counts[self.neighbors[index], value] += 1

    def _unplace(self, index: int, value: int, cells: np.ndarray, counts: np.ndarray) -> None:
        cells[index] = EMPTY
        counts[self.neighbors[index], value] -= 1
