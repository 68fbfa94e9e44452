"""
Topology Module - Constraint graph generation for planar and stitched grids.

A topology is a set of 9x9 faces laid end to end in one flat cell array.
Face ``f`` owns indices ``f*81 .. f*81+80``; inside a face, row, column and
box are derived from the local index. Stitched topologies add constraints
between border cells of different faces.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Set, Tuple


GRID_SIZE = 9
BOX_SIZE = 3
FACE_CELLS = GRID_SIZE * GRID_SIZE
EMPTY = 0
MAX_VALUE = 9

# Neighbor indices per cell, sorted and deduplicated
ConstraintGraph = Tuple[Tuple[int, ...], ...]


class Edge(Enum):
    """Border of a face. Values are only used for display."""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


@dataclass(frozen=True)
class EdgeGlue:
    """
    One seam joining a border of one face to a border of another.

    Position ``k`` along ``edge_a`` is paired with position ``k`` along
    ``edge_b`` (or ``8 - k`` when ``reversed``), both read in canonical
    direction: top and bottom left to right, left and right top to bottom.

    Attributes:
        face_a: First face index
        edge_a: Border of the first face
        face_b: Second face index
        edge_b: Border of the second face
        reversed: Traverse edge_b backwards
    """
    face_a: int
    edge_a: Edge
    face_b: int
    edge_b: Edge
    reversed: bool = False

    def pairs(self) -> List[Tuple[int, int]]:
        """
        Global index pairs constrained by this seam.

        Returns:
            List of 9 (cell_a, cell_b) tuples
        """
        cells_a = edge_cells(self.edge_a)
        cells_b = edge_cells(self.edge_b)
        if self.reversed:
            cells_b = cells_b[::-1]

        offset_a = self.face_a * FACE_CELLS
        offset_b = self.face_b * FACE_CELLS
        return [(offset_a + a, offset_b + b) for a, b in zip(cells_a, cells_b)]


@dataclass(frozen=True)
class TopologyData:
    """
    Generator output consumed once by the engine.

    Attributes:
        cells: Initial cell values (all empty)
        neighbors: Constraint graph, one neighbor tuple per cell
        face_count: Number of 9x9 faces
    """
    cells: Tuple[int, ...]
    neighbors: ConstraintGraph
    face_count: int

    @property
    def cell_count(self) -> int:
        """Total number of cells."""
        return len(self.cells)


def edge_cells(edge: Edge) -> List[int]:
    """
    Local indices along one border of a face in canonical direction.

    Args:
        edge: Border to read

    Returns:
        List of 9 local cell indices
    """
    last = GRID_SIZE - 1
    if edge == Edge.TOP:
        return [col for col in range(GRID_SIZE)]
    if edge == Edge.BOTTOM:
        return [last * GRID_SIZE + col for col in range(GRID_SIZE)]
    if edge == Edge.LEFT:
        return [row * GRID_SIZE for row in range(GRID_SIZE)]
    return [row * GRID_SIZE + last for row in range(GRID_SIZE)]


def face_neighbors(local: int) -> Set[int]:
    """
    Row, column and box mates of a cell within its own face.

    Args:
        local: Local index 0-80

    Returns:
        Set of local indices, excluding the cell itself
    """
    row = local // GRID_SIZE
    col = local % GRID_SIZE
    box_row = (row // BOX_SIZE) * BOX_SIZE
    box_col = (col // BOX_SIZE) * BOX_SIZE

    mates: Set[int] = set()
    for k in range(GRID_SIZE):
        mates.add(row * GRID_SIZE + k)
        mates.add(k * GRID_SIZE + col)
        mates.add((box_row + k // BOX_SIZE) * GRID_SIZE + (box_col + k % BOX_SIZE))

    mates.discard(local)
    return mates


def _planar_sets(face_count: int) -> List[Set[int]]:
    """Neighbor sets for independent faces."""
    # Same for every face, only the offset changes
    local_sets = [face_neighbors(i) for i in range(FACE_CELLS)]

    sets: List[Set[int]] = []
    for face in range(face_count):
        offset = face * FACE_CELLS
        for local in range(FACE_CELLS):
            sets.append({offset + n for n in local_sets[local]})
    return sets


def _freeze(sets: List[Set[int]], face_count: int) -> TopologyData:
    neighbors = tuple(tuple(sorted(s)) for s in sets)
    return TopologyData(
        cells=(EMPTY,) * len(sets),
        neighbors=neighbors,
        face_count=face_count,
    )


def generate_planar(face_count: int = 1) -> TopologyData:
    """
    Build the constraint graph for unconnected 9x9 faces.

    Args:
        face_count: Number of faces (default 1)

    Returns:
        TopologyData with every cell empty

    Raises:
        ValueError: If face_count < 1
    """
    if face_count < 1:
        raise ValueError(f"face_count must be at least 1, got {face_count}")
    return _freeze(_planar_sets(face_count), face_count)


def generate_stitched(face_count: int, glues: Iterable[EdgeGlue]) -> TopologyData:
    """
    Build a multi-face graph with extra constraints along glued seams.

    Starts from the planar graph of every face, then links each pair of
    cells matched by a seam in both directions.

    Args:
        face_count: Number of faces
        glues: Seams to apply

    Returns:
        TopologyData with every cell empty

    Raises:
        ValueError: If face_count < 1 or a glue names an unknown face
    """
    if face_count < 1:
        raise ValueError(f"face_count must be at least 1, got {face_count}")

    sets = _planar_sets(face_count)

    for glue in glues:
        for face in (glue.face_a, glue.face_b):
            if not 0 <= face < face_count:
                raise ValueError(
                    f"Glue {glue} references face {face}, topology has {face_count} faces"
                )

        for a, b in glue.pairs():
            if a == b:
                continue
            sets[a].add(b)
            sets[b].add(a)

    return _freeze(sets, face_count)


def locate(index: int) -> Tuple[int, int, int]:
    """
    Split a global index into face, row and column.

    Args:
        index: Global cell index

    Returns:
        (face, row, col) tuple
    """
    face, local = divmod(index, FACE_CELLS)
    row, col = divmod(local, GRID_SIZE)
    return face, row, col
