"""
Test script for GameSession state machine

Covers:
1. Initial state and preset loading
2. Edit acceptance and error_cell tracking
3. SOLVED / IMPOSSIBLE transitions
4. Random and stitched puzzle loading

Usage:
    python test_session.py
"""

import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.manifold import Topology, PUZZLES, build_stitched_payload
from src.session import GameSession, GameStatus


def test_initial_state():
    """A new session is READY with an empty grid."""
    print("\n" + "="*60)
    print("TEST: Initial State")
    print("="*60)

    session = GameSession()
    print(f"  State: {session.status}")

    assert session.status == GameStatus.READY
    assert session.grid == [0] * 81
    assert session.selected_cell is None
    assert session.error_cell is None
    assert session.stats is None
    assert session.face_names is None
    assert session.get_state_string() == "Ready"

    cube = GameSession(Topology.CUBE_6_FACES)
    assert cube.face_names == ["front", "back", "right", "left", "top", "bottom"]

    print("  [PASS] Initial state tests")


def test_edits():
    """Accepted edits refresh the grid; rejected ones mark the cell."""
    print("\n" + "="*60)
    print("TEST: Edits")
    print("="*60)

    session = GameSession()
    assert session.load_preset("hard maze")
    assert session.puzzle_name == "Hard Maze"

    # Nothing selected
    assert not session.enter_value(1)

    session.select_cell(0)
    assert session.enter_value(1)
    assert session.grid[0] == 1
    assert session.error_cell is None

    # 5 already sits in row 0
    assert not session.enter_value(5)
    assert session.error_cell == 0
    assert session.grid[0] == 1

    # Selecting again clears the error
    session.select_cell(2)
    assert session.error_cell is None
    assert not session.enter_value(4)   # fixed cell
    assert session.error_cell == 2

    session.select_cell(0)
    assert session.enter_value(0)
    assert session.grid[0] == 0

    print("  [PASS] Edit tests")


def test_solve_and_reset():
    """Solving locks edits; reset returns to READY with givens only."""
    print("\n" + "="*60)
    print("TEST: Solve and Reset")
    print("="*60)

    session = GameSession()
    session.load_preset("Classic Easy")
    givens = session.grid

    stats = session.solve()
    print(f"  {session.get_state_string()}")

    assert stats.success
    assert session.status == GameStatus.SOLVED
    assert session.stats == stats
    assert 0 not in session.grid
    assert session.get_state_string().startswith("Solved (")

    session.select_cell(2)
    assert not session.enter_value(0)

    session.reset()
    assert session.status == GameStatus.READY
    assert session.grid == givens
    assert session.stats is None

    print("  [PASS] Solve and reset tests")


def test_impossible():
    """A failed solve moves to IMPOSSIBLE and keeps the grid."""
    print("\n" + "="*60)
    print("TEST: Impossible")
    print("="*60)

    session = GameSession()
    values = [0] * 81
    values[0] = 3
    values[9] = 3
    assert session.load_puzzle(values, "broken")
    before = session.grid

    stats = session.solve()
    assert not stats.success
    assert session.status == GameStatus.IMPOSSIBLE
    assert session.get_state_string() == "No solution found"
    assert session.grid == before
    assert session.stats is None

    # Loading a new puzzle recovers
    assert session.load_preset("Classic Easy")
    assert session.status == GameStatus.READY

    # Bad payloads are refused without changing anything
    assert not session.load_puzzle([1, 2, 3])
    assert session.puzzle_name == "Classic Easy"

    print("  [PASS] Impossible tests")


def test_random_puzzles():
    """Random loads use presets, stitched across faces on the cube."""
    print("\n" + "="*60)
    print("TEST: Random Puzzles")
    print("="*60)

    session = GameSession(rng=random.Random(7))
    assert session.load_random_puzzle()
    names = [p.name for p in PUZZLES]
    assert session.puzzle_name in names
    print(f"  Classic: {session.puzzle_name}")

    cube = GameSession(Topology.CUBE_6_FACES, rng=random.Random(7))
    assert cube.load_random_puzzle()
    assert cube.puzzle_name.endswith(" (Stitched)")
    print(f"  Cube: {cube.puzzle_name}")

    grid = cube.grid
    assert len(grid) == 486
    for face in range(6):
        for local in range(81):
            row, col = divmod(local, 9)
            if row in (0, 8) or col in (0, 8):
                assert grid[face * 81 + local] == 0

    # Same seed, same payload
    first, name_a = build_stitched_payload(6, random.Random(3))
    second, name_b = build_stitched_payload(6, random.Random(3))
    assert first == second and name_a == name_b

    try:
        cube.load_preset("Nope")
    except ValueError as e:
        print(f"  Rejected: {e}")
    else:
        raise AssertionError("unknown preset should raise ValueError")

    print("  [PASS] Random puzzle tests")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# SESSION TESTS")
    print("#"*60)

    tests = [
        ("Initial State", test_initial_state),
        ("Edits", test_edits),
        ("Solve and Reset", test_solve_and_reset),
        ("Impossible", test_impossible),
        ("Random Puzzles", test_random_puzzles),
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
