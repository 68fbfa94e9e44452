"""
Game Session Module - Host-side state machine around one engine.

This module provides the GameSession which tracks what a UI needs
between calls into the engine: the selected cell, the cell that just
rejected an edit, the loaded puzzle's name and the last solve result.

State Flow:
    LOADING -> READY -> SOLVED
                 |  ^
                 v  |  (reset / load)
              IMPOSSIBLE

For the engine itself, see the src.manifold package.
"""

import logging
import random
from enum import Enum, auto
from typing import List, Optional, Sequence

from src.manifold import (
    ManifoldEngine,
    SolveStats,
    Topology,
    CUBE_FACES,
    get_puzzle,
    get_random_puzzle,
    build_stitched_payload,
)

logger = logging.getLogger(__name__)


__all__ = [
    "GameStatus",
    "GameSession",
]


class GameStatus(Enum):
    """
    Session states.

    States:
        LOADING: Engine not built yet
        READY: Puzzle loaded, accepting edits
        SOLVED: Grid complete, edits refused until reset or reload
        IMPOSSIBLE: Last solve found no solution
    """
    LOADING = auto()
    READY = auto()
    SOLVED = auto()
    IMPOSSIBLE = auto()


class GameSession:
    """
    One player's view of an engine.

    Failures from the engine become session state rather than
    exceptions: a rejected edit sets ``error_cell``, a failed solve
    moves to IMPOSSIBLE.
    """

    def __init__(self, topology: Topology = Topology.CLASSIC_9X9,
                 rng: Optional[random.Random] = None):
        """
        Initialize the session and its engine.

        Args:
            topology: Topology for the engine
            rng: Random source for random puzzles
        """
        self._rng = rng or random.Random()
        self._status = GameStatus.LOADING

        self._engine = ManifoldEngine(topology)
        self._grid: List[int] = self._engine.get_grid()
        self._fixed: List[int] = self._engine.get_fixed_cells()

        self._selected_cell: Optional[int] = None
        self._error_cell: Optional[int] = None
        self._puzzle_name = ""
        self._stats: Optional[SolveStats] = None

        self._status = GameStatus.READY
        logger.info(f"Session ready: {topology.value}")

    @property
    def engine(self) -> ManifoldEngine:
        """Engine owned by this session."""
        return self._engine

    @property
    def status(self) -> GameStatus:
        """Current state."""
        return self._status

    @property
    def grid(self) -> List[int]:
        """Last grid snapshot."""
        return list(self._grid)

    @property
    def fixed(self) -> List[int]:
        """Last fixed-mask snapshot."""
        return list(self._fixed)

    @property
    def selected_cell(self) -> Optional[int]:
        return self._selected_cell

    @property
    def error_cell(self) -> Optional[int]:
        """Cell whose last edit was rejected, cleared on the next action."""
        return self._error_cell

    @property
    def puzzle_name(self) -> str:
        return self._puzzle_name

    @property
    def stats(self) -> Optional[SolveStats]:
        """Stats of the last successful solve."""
        return self._stats

    @property
    def face_names(self) -> Optional[List[str]]:
        """Display names per face, None for single-face topologies."""
        if self._engine.topology == Topology.CUBE_6_FACES:
            return list(CUBE_FACES)
        return None

    def _refresh(self) -> None:
        self._grid = self._engine.get_grid()
        self._fixed = self._engine.get_fixed_cells()

    def select_cell(self, index: Optional[int]) -> None:
        """
        Select a cell for editing (None to deselect).

        Args:
            index: Cell index or None
        """
        self._selected_cell = index
        self._error_cell = None

    def enter_value(self, value: int) -> bool:
        """
        Write a value into the selected cell.

        Args:
            value: 0 to clear, 1-9 to place

        Returns:
            True if the engine accepted the edit
        """
        if self._status == GameStatus.SOLVED or self._selected_cell is None:
            return False

        index = self._selected_cell
        if self._engine.set_cell(index, value):
            self._error_cell = None
            self._refresh()
            return True

        logger.debug(f"Edit rejected at cell {index} (value {value})")
        self._error_cell = index
        return False

    def load_puzzle(self, values: Sequence[int], name: str = "") -> bool:
        """
        Load a payload into the engine.

        Args:
            values: Flat payload (full topology or one face)
            name: Display name

        Returns:
            False if the engine rejected the payload
        """
        if not self._engine.load_puzzle(values):
            logger.warning(f"Puzzle rejected: {len(values)} values for {self._engine.cell_count} cells")
            return False

        self._puzzle_name = name
        self._status = GameStatus.READY
        self._selected_cell = None
        self._error_cell = None
        self._stats = None
        self._refresh()

        logger.info(f"Loaded puzzle: {name or 'unnamed'}")
        return True

    def load_preset(self, name: str) -> bool:
        """
        Load a built-in puzzle into the first face.

        Raises:
            ValueError: If no preset has that name
        """
        puzzle = get_puzzle(name)
        return self.load_puzzle(puzzle.grid, puzzle.name)

    def load_random_puzzle(self) -> bool:
        """
        Load a random preset, stitched across faces on multi-face topologies.

        Returns:
            True if loaded
        """
        face_count = self._engine.face_count
        if face_count > 1:
            payload, name = build_stitched_payload(face_count, self._rng)
            return self.load_puzzle(payload, name)

        puzzle = get_random_puzzle(self._rng)
        return self.load_puzzle(puzzle.grid, puzzle.name)

    def reset(self) -> None:
        """Clear player entries and return to READY."""
        self._engine.reset()
        self._status = GameStatus.READY
        self._error_cell = None
        self._stats = None
        self._refresh()
        logger.info("Session reset")

    def solve(self) -> SolveStats:
        """
        Solve the current grid in place.

        Returns:
            SolveStats from the engine
        """
        stats = self._engine.solve_with_stats()
        self.apply_result(stats)
        return stats

    def apply_result(self, stats: SolveStats) -> None:
        """
        Update session state from a solve run elsewhere (e.g. a worker).

        Args:
            stats: Result of the solve on this session's engine
        """
        if stats.success:
            self._status = GameStatus.SOLVED
            self._error_cell = None
            self._stats = stats
            self._refresh()
        else:
            self._status = GameStatus.IMPOSSIBLE
        logger.info(f"Session solve: {stats.summary()}")

    def get_state_string(self) -> str:
        """Get human-readable state string for UI display."""
        state_strings = {
            GameStatus.LOADING: "Loading",
            GameStatus.READY: "Ready",
            GameStatus.SOLVED: "Solved",
            GameStatus.IMPOSSIBLE: "No solution found",
        }
        base = state_strings.get(self._status, "Unknown")

        if self._status == GameStatus.SOLVED and self._stats is not None:
            return f"{base} ({self._stats.iterations} iterations)"

        return base
