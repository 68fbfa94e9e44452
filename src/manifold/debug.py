"""
Grid Debug Utilities

Plain-text rendering of faces for logs and the command line.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from .topology import FACE_CELLS, GRID_SIZE, BOX_SIZE, EMPTY


def face_array(grid: Sequence[int]) -> np.ndarray:
    """
    Reshape a flat grid into (faces, rows, cols).

    Args:
        grid: Flat cell values, length a multiple of 81

    Returns:
        uint8 array of shape (face_count, 9, 9)
    """
    cells = np.asarray(grid, dtype=np.uint8)
    return cells.reshape(-1, GRID_SIZE, GRID_SIZE)


def format_face(grid: Sequence[int], face: int = 0) -> List[str]:
    """
    Render one face as text rows, "." for empty cells.

    Boxes are separated with "|" and "-" rules.

    Args:
        grid: Flat cell values
        face: Face index

    Returns:
        List of text lines
    """
    rows = face_array(grid)[face]
    lines: List[str] = []

    for r, row in enumerate(rows):
        if r and r % BOX_SIZE == 0:
            lines.append("------+-------+------")
        parts = []
        for c, value in enumerate(row):
            if c and c % BOX_SIZE == 0:
                parts.append("|")
            parts.append(str(value) if value != EMPTY else ".")
        lines.append(" ".join(parts))

    return lines


def format_grid(grid: Sequence[int], face_names: Optional[Sequence[str]] = None) -> List[str]:
    """
    Render every face, each under a header line.

    Args:
        grid: Flat cell values
        face_names: Optional display names per face

    Returns:
        List of text lines
    """
    face_count = len(grid) // FACE_CELLS
    lines: List[str] = []
    for face in range(face_count):
        if face_count > 1:
            name = face_names[face] if face_names else str(face)
            lines.append(f"Face {face} ({name}):")
        lines.extend(format_face(grid, face))
    return lines


def log_grid(logger: logging.Logger, grid: Sequence[int],
             face_names: Optional[Sequence[str]] = None) -> None:
    """Write a rendered grid to a logger at INFO, one line per call."""
    for line in format_grid(grid, face_names):
        logger.info(f"  {line}")


def parse_grid_text(text: str) -> List[int]:
    """
    Parse a puzzle from text.

    Digits 1-9 are givens, "0" and "." are empty, everything else
    (whitespace, separators) is ignored.

    Args:
        text: Puzzle text

    Returns:
        Flat list of values
    """
    values: List[int] = []
    for ch in text:
        if ch == ".":
            values.append(EMPTY)
        elif ch in "0123456789":
            values.append(int(ch))
    return values
