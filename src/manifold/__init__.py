"""
Manifold Package - Constraint-graph Sudoku engine for planar and stitched grids.

This package holds the puzzle state for one topology, validates edits
against its constraint graph and solves the grid with MRV backtracking.
It has no UI and no process-wide state; hosts configure logging.

Public API:
    - Topology: Topology selector enum
    - ManifoldEngine: Grid state, write guard and solver
    - SolveStats: Search counters from one solve
    - Edge, EdgeGlue: Seam description for stitched topologies
    - generate_planar(), generate_stitched(): Graph generators
    - build_topology(): Run a registered recipe
    - register_topology(): Decorator for new recipes
    - Puzzle, get_puzzle(), get_random_puzzle(): Built-in presets

Usage:
    from src.manifold import ManifoldEngine, Topology, get_puzzle

    engine = ManifoldEngine(Topology.CLASSIC_9X9)
    engine.load_puzzle(get_puzzle("Hard Maze").grid)

    stats = engine.solve_with_stats()
    print(stats.summary())
    print(engine.get_grid())
"""

# Graph generation
from .topology import (
    Edge,
    EdgeGlue,
    TopologyData,
    generate_planar,
    generate_stitched,
    edge_cells,
    locate,
    FACE_CELLS,
    GRID_SIZE,
    MAX_VALUE,
)

# Topology registry
from .factory import (
    Topology,
    CUBE_FACES,
    CUBE_GLUES,
    build_topology,
    register_topology,
    topology_from_name,
    available_topologies,
    get_topology_info,
)

# Engine
from .stats import SolveStats
from .engine import ManifoldEngine

# Presets
from .puzzles import (
    Difficulty,
    Puzzle,
    PUZZLES,
    get_puzzle,
    get_puzzle_names,
    get_random_puzzle,
    build_stitched_payload,
)

__all__ = [
    # Generation
    "Edge",
    "EdgeGlue",
    "TopologyData",
    "generate_planar",
    "generate_stitched",
    "edge_cells",
    "locate",
    "FACE_CELLS",
    "GRID_SIZE",
    "MAX_VALUE",
    # Registry
    "Topology",
    "CUBE_FACES",
    "CUBE_GLUES",
    "build_topology",
    "register_topology",
    "topology_from_name",
    "available_topologies",
    "get_topology_info",
    # Engine
    "SolveStats",
    "ManifoldEngine",
    # Presets
    "Difficulty",
    "Puzzle",
    "PUZZLES",
    "get_puzzle",
    "get_puzzle_names",
    "get_random_puzzle",
    "build_stitched_payload",
]
