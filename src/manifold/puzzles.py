"""
Puzzle Presets Module - Built-in single-face puzzles.

Presets are 81-cell payloads. Multi-face topologies can load one preset
into the first face, or a stitched payload built from several presets.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .topology import FACE_CELLS, GRID_SIZE, EMPTY


class Difficulty(Enum):
    """Difficulty label shown next to a preset."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    EXPERT = "Expert"


@dataclass(frozen=True)
class Puzzle:
    """
    Named 81-cell puzzle.

    Attributes:
        name: Display name
        difficulty: Difficulty label
        grid: 81 values, 0 for empty
    """
    name: str
    difficulty: Difficulty
    grid: Tuple[int, ...]

    @property
    def given_count(self) -> int:
        """Number of nonzero cells."""
        return sum(1 for v in self.grid if v != EMPTY)


PUZZLES: Tuple[Puzzle, ...] = (
    Puzzle(
        name="Classic Easy",
        difficulty=Difficulty.EASY,
        grid=(
            5, 3, 0, 0, 7, 0, 0, 0, 0,
            6, 0, 0, 1, 9, 5, 0, 0, 0,
            0, 9, 8, 0, 0, 0, 0, 6, 0,
            8, 0, 0, 0, 6, 0, 0, 0, 3,
            4, 0, 0, 8, 0, 3, 0, 0, 1,
            7, 0, 0, 0, 2, 0, 0, 0, 6,
            0, 6, 0, 0, 0, 0, 2, 8, 0,
            0, 0, 0, 4, 1, 9, 0, 0, 5,
            0, 0, 0, 0, 8, 0, 0, 7, 9,
        ),
    ),
    Puzzle(
        name="Hard Maze",
        difficulty=Difficulty.HARD,
        grid=(
            0, 0, 5, 3, 0, 0, 0, 0, 0,
            8, 0, 0, 0, 0, 0, 0, 2, 0,
            0, 7, 0, 0, 1, 0, 5, 0, 0,
            4, 0, 0, 0, 0, 5, 3, 0, 0,
            0, 1, 0, 0, 7, 0, 0, 0, 6,
            0, 0, 3, 2, 0, 0, 0, 8, 0,
            0, 6, 0, 5, 0, 0, 0, 0, 9,
            0, 0, 4, 0, 0, 0, 0, 3, 0,
            0, 0, 0, 0, 0, 9, 7, 0, 0,
        ),
    ),
    Puzzle(
        name="Expert Minimal",
        difficulty=Difficulty.EXPERT,
        grid=(
            0, 0, 5, 0, 1, 0, 0, 0, 0,
            2, 0, 0, 0, 0, 0, 0, 0, 0,
            0, 0, 0, 0, 0, 0, 0, 0, 3,
            0, 0, 1, 0, 0, 0, 0, 0, 0,
            0, 2, 0, 0, 0, 0, 4, 0, 0,
            0, 0, 0, 0, 0, 0, 0, 0, 0,
            7, 0, 0, 0, 0, 0, 0, 0, 0,
            0, 0, 0, 0, 0, 0, 0, 0, 8,
            0, 0, 0, 0, 6, 0, 2, 0, 0,
        ),
    ),
)


def get_puzzle(name: str) -> Puzzle:
    """
    Look up a preset by name (case-insensitive).

    Raises:
        ValueError: If no preset has that name
    """
    for puzzle in PUZZLES:
        if puzzle.name.lower() == name.strip().lower():
            return puzzle
    available = ", ".join(p.name for p in PUZZLES)
    raise ValueError(f"Unknown puzzle: {name}. Available: {available}")


def get_puzzle_names() -> List[str]:
    """Names of all presets."""
    return [p.name for p in PUZZLES]


def get_random_puzzle(rng: Optional[random.Random] = None) -> Puzzle:
    """
    Pick a preset at random.

    Args:
        rng: Random source (module-level random if None)

    Returns:
        One of PUZZLES
    """
    return (rng or random).choice(PUZZLES)


def _is_border(local: int) -> bool:
    row, col = divmod(local, GRID_SIZE)
    last = GRID_SIZE - 1
    return row in (0, last) or col in (0, last)


def build_stitched_payload(
    face_count: int,
    rng: Optional[random.Random] = None
) -> Tuple[List[int], str]:
    """
    Build a multi-face payload from random presets.

    Every face gets a random preset with its border cells blanked, so givens
    never sit on a glued seam.

    Args:
        face_count: Number of faces
        rng: Random source (module-level random if None)

    Returns:
        (flat payload, display name) tuple
    """
    payload: List[int] = []
    first_name = ""

    for face in range(face_count):
        puzzle = get_random_puzzle(rng)
        if face == 0:
            first_name = puzzle.name

        for local in range(FACE_CELLS):
            value = puzzle.grid[local]
            payload.append(EMPTY if _is_border(local) else value)

    return payload, f"{first_name} (Stitched)"
