"""
Test script for constraint graph generation

Covers:
1. Planar graph shape and symmetry
2. Edge cell ordering
3. Stitched seams (plain and reversed)
4. Cube recipe neighbor counts
5. Topology registry lookups

Usage:
    python test_topology.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.manifold import (
    Edge,
    EdgeGlue,
    Topology,
    CUBE_GLUES,
    FACE_CELLS,
    build_topology,
    edge_cells,
    generate_planar,
    generate_stitched,
    locate,
    topology_from_name,
    available_topologies,
    get_topology_info,
)


def _assert_symmetric(neighbors):
    for i, mates in enumerate(neighbors):
        assert i not in mates, f"cell {i} lists itself"
        assert len(set(mates)) == len(mates), f"cell {i} has duplicate neighbors"
        for j in mates:
            assert i in neighbors[j], f"{j} is a neighbor of {i} but not the reverse"


def test_planar_graph():
    """Every planar cell has 20 neighbors and the graph is symmetric."""
    print("\n" + "="*60)
    print("TEST: Planar Graph")
    print("="*60)

    data = generate_planar(1)
    print(f"  Cells: {data.cell_count}, faces: {data.face_count}")

    assert data.cell_count == 81
    assert data.face_count == 1
    assert all(v == 0 for v in data.cells)
    assert all(len(mates) == 20 for mates in data.neighbors)
    _assert_symmetric(data.neighbors)

    # Cell 0: row 0, column 0 and the top-left box
    expected = set(range(1, 9)) | {k * 9 for k in range(1, 9)} | {10, 11, 19, 20}
    assert set(data.neighbors[0]) == expected

    print("  [PASS] Planar graph tests")


def test_planar_faces_are_independent():
    """Multi-face planar graphs never cross face boundaries."""
    print("\n" + "="*60)
    print("TEST: Independent Faces")
    print("="*60)

    data = generate_planar(3)
    assert data.cell_count == 3 * FACE_CELLS

    for i, mates in enumerate(data.neighbors):
        face = i // FACE_CELLS
        assert all(j // FACE_CELLS == face for j in mates)
        assert len(mates) == 20

    # Face 2 is face 0 shifted by 162
    assert data.neighbors[162] == tuple(j + 162 for j in data.neighbors[0])

    print("  [PASS] Independent face tests")


def test_edge_cells():
    """Borders are read left to right and top to bottom."""
    print("\n" + "="*60)
    print("TEST: Edge Cells")
    print("="*60)

    assert edge_cells(Edge.TOP) == [0, 1, 2, 3, 4, 5, 6, 7, 8]
    assert edge_cells(Edge.BOTTOM) == [72, 73, 74, 75, 76, 77, 78, 79, 80]
    assert edge_cells(Edge.LEFT) == [0, 9, 18, 27, 36, 45, 54, 63, 72]
    assert edge_cells(Edge.RIGHT) == [8, 17, 26, 35, 44, 53, 62, 71, 80]

    print("  [PASS] Edge cell tests")


def test_stitched_seams():
    """A glue links matching border positions both ways."""
    print("\n" + "="*60)
    print("TEST: Stitched Seams")
    print("="*60)

    straight = generate_stitched(2, [EdgeGlue(0, Edge.RIGHT, 1, Edge.LEFT)])
    _assert_symmetric(straight.neighbors)
    assert 81 in straight.neighbors[8]        # (0,8) <-> face 1 (0,0)
    assert 81 + 72 in straight.neighbors[80]  # (8,8) <-> face 1 (8,0)
    assert len(straight.neighbors[8]) == 21
    assert len(straight.neighbors[40]) == 20

    flipped = generate_stitched(2, [EdgeGlue(0, Edge.RIGHT, 1, Edge.LEFT, reversed=True)])
    _assert_symmetric(flipped.neighbors)
    assert 81 + 72 in flipped.neighbors[8]    # (0,8) <-> face 1 (8,0)
    assert 81 not in flipped.neighbors[8]

    print("  [PASS] Stitched seam tests")


def test_stitched_edge_cases():
    """Self seams add nothing; unknown faces are rejected."""
    print("\n" + "="*60)
    print("TEST: Stitched Edge Cases")
    print("="*60)

    planar = generate_planar(1)
    same = generate_stitched(1, [EdgeGlue(0, Edge.TOP, 0, Edge.TOP)])
    assert same.neighbors == planar.neighbors

    # Gluing an edge onto its own row adds nothing new either
    row_glue = generate_stitched(1, [EdgeGlue(0, Edge.TOP, 0, Edge.TOP, reversed=True)])
    assert row_glue.neighbors == planar.neighbors

    try:
        generate_stitched(2, [EdgeGlue(0, Edge.TOP, 2, Edge.BOTTOM)])
    except ValueError as e:
        print(f"  Rejected bad glue: {e}")
    else:
        raise AssertionError("glue to a missing face should raise ValueError")

    try:
        generate_planar(0)
    except ValueError:
        pass
    else:
        raise AssertionError("zero faces should raise ValueError")

    print("  [PASS] Stitched edge case tests")


def test_cube_recipe():
    """The cube has 12 seams: corners get 22 neighbors, borders 21."""
    print("\n" + "="*60)
    print("TEST: Cube Recipe")
    print("="*60)

    data = build_topology(Topology.CUBE_6_FACES)
    print(f"  Cells: {data.cell_count}, faces: {data.face_count}, seams: {len(CUBE_GLUES)}")

    assert data.cell_count == 486
    assert data.face_count == 6
    assert len(CUBE_GLUES) == 12
    _assert_symmetric(data.neighbors)

    for i, mates in enumerate(data.neighbors):
        _, row, col = locate(i)
        on_rows = row in (0, 8)
        on_cols = col in (0, 8)
        expected = 20 + int(on_rows) + int(on_cols)
        assert len(mates) == expected, f"cell {i} has {len(mates)} neighbors"

    total = sum(len(mates) for mates in data.neighbors)
    assert total == 486 * 20 + 2 * 12 * 9

    # front (0,0) touches top (8,0) and left (0,8)
    assert {4 * 81 + 72, 3 * 81 + 8} <= set(data.neighbors[0])
    # back (0,0) touches top (0,8) through a reversed seam, and right (0,8)
    assert {4 * 81 + 8, 2 * 81 + 8} <= set(data.neighbors[81])

    print("  [PASS] Cube recipe tests")


def test_registry():
    """Selectors parse from names and every member has a recipe."""
    print("\n" + "="*60)
    print("TEST: Topology Registry")
    print("="*60)

    assert topology_from_name("classic") == Topology.CLASSIC_9X9
    assert topology_from_name("CUBE") == Topology.CUBE_6_FACES
    assert topology_from_name("cube_6_faces") == Topology.CUBE_6_FACES
    assert set(available_topologies()) == set(Topology)

    names = [info["name"] for info in get_topology_info()]
    assert names == [t.value for t in available_topologies()]

    try:
        topology_from_name("torus")
    except ValueError as e:
        print(f"  Rejected unknown topology: {e}")
    else:
        raise AssertionError("unknown topology should raise ValueError")

    # Recipes build a fresh graph each call
    assert build_topology(Topology.CLASSIC_9X9) == build_topology(Topology.CLASSIC_9X9)

    print("  [PASS] Registry tests")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# TOPOLOGY TESTS")
    print("#"*60)

    tests = [
        ("Planar Graph", test_planar_graph),
        ("Independent Faces", test_planar_faces_are_independent),
        ("Edge Cells", test_edge_cells),
        ("Stitched Seams", test_stitched_seams),
        ("Stitched Edge Cases", test_stitched_edge_cases),
        ("Cube Recipe", test_cube_recipe),
        ("Registry", test_registry),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
