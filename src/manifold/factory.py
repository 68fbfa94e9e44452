"""
Topology Factory Module - Registry of topology recipes.
"""

from enum import Enum
from typing import Callable, Dict, List

from .topology import (
    Edge,
    EdgeGlue,
    TopologyData,
    generate_planar,
    generate_stitched,
)


class Topology(Enum):
    """Topology selectors. Each member needs a registered recipe."""
    CLASSIC_9X9 = "classic"
    CUBE_6_FACES = "cube"


# Face order for the cube
CUBE_FACES = ("front", "back", "right", "left", "top", "bottom")
FRONT, BACK, RIGHT, LEFT, TOP, BOTTOM = range(len(CUBE_FACES))

# Twelve cube seams, each listed once
CUBE_GLUES = (
    EdgeGlue(FRONT, Edge.TOP, TOP, Edge.BOTTOM),
    EdgeGlue(FRONT, Edge.BOTTOM, BOTTOM, Edge.TOP),
    EdgeGlue(FRONT, Edge.LEFT, LEFT, Edge.RIGHT),
    EdgeGlue(FRONT, Edge.RIGHT, RIGHT, Edge.LEFT),
    EdgeGlue(BACK, Edge.TOP, TOP, Edge.TOP, reversed=True),
    EdgeGlue(BACK, Edge.BOTTOM, BOTTOM, Edge.BOTTOM, reversed=True),
    EdgeGlue(BACK, Edge.LEFT, RIGHT, Edge.RIGHT),
    EdgeGlue(BACK, Edge.RIGHT, LEFT, Edge.LEFT),
    EdgeGlue(RIGHT, Edge.TOP, TOP, Edge.RIGHT, reversed=True),
    EdgeGlue(RIGHT, Edge.BOTTOM, BOTTOM, Edge.RIGHT),
    EdgeGlue(LEFT, Edge.TOP, TOP, Edge.LEFT),
    EdgeGlue(LEFT, Edge.BOTTOM, BOTTOM, Edge.LEFT, reversed=True),
)

# Global registry of recipes
_RECIPES: Dict[Topology, Callable[[], TopologyData]] = {}
_DESCRIPTIONS: Dict[Topology, str] = {}


def register_topology(topology: Topology, description: str = ""):
    """
    Decorator to register a topology recipe.

    Usage:
        @register_topology(Topology.CLASSIC_9X9, "Classic 9x9")
        def _classic() -> TopologyData:
            ...

    Args:
        topology: Selector the recipe builds
        description: Human-readable description

    Returns:
        Decorator returning the recipe unchanged
    """
    def decorator(recipe: Callable[[], TopologyData]) -> Callable[[], TopologyData]:
        _RECIPES[topology] = recipe
        _DESCRIPTIONS[topology] = description
        return recipe
    return decorator


@register_topology(Topology.CLASSIC_9X9, "Classic 9x9 (81 cells)")
def _classic() -> TopologyData:
    return generate_planar(1)


@register_topology(Topology.CUBE_6_FACES, "Stitched cube, 6 faces (486 cells)")
def _cube() -> TopologyData:
    return generate_stitched(len(CUBE_FACES), CUBE_GLUES)


def build_topology(topology: Topology) -> TopologyData:
    """
    Run the recipe registered for a topology.

    Args:
        topology: Topology selector

    Returns:
        Fresh TopologyData

    Raises:
        ValueError: If no recipe is registered
    """
    if topology not in _RECIPES:
        available = ", ".join(t.value for t in _RECIPES)
        raise ValueError(f"Unknown topology: {topology}. Available: {available}")
    return _RECIPES[topology]()


def topology_from_name(name: str) -> Topology:
    """
    Parse a topology selector from its value or member name.

    Accepts "classic", "cube", "CLASSIC_9X9", "cube_6_faces", ...

    Raises:
        ValueError: If the name matches no topology
    """
    key = name.strip()
    for topology in Topology:
        if key.lower() == topology.value or key.upper() == topology.name:
            return topology
    available = ", ".join(t.value for t in Topology)
    raise ValueError(f"Unknown topology: {name}. Available: {available}")


def available_topologies() -> List[Topology]:
    """
    Get list of topologies with a registered recipe.

    Returns:
        List of Topology members
    """
    return list(_RECIPES.keys())


def get_topology_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered topologies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": topology.value, "description": _DESCRIPTIONS[topology]}
        for topology in _RECIPES
    ]
