"""
Manifold Sudoku - Entry Point

Loads a puzzle into an engine, solves it on a worker thread and logs the
result.

Example:
    python main.py
    python main.py --topology cube --random
    python main.py --puzzle "Classic Easy" --debug
    python main.py --file puzzles/hard.txt
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from PyQt5.QtCore import QCoreApplication

from src.manifold import (
    Topology,
    SolveStats,
    topology_from_name,
    get_puzzle_names,
    get_topology_info,
)
from src.manifold.debug import log_grid, parse_grid_text
from src.session import GameSession
from src.solve_worker import SolveWorker
from src.settings import load_settings, save_settings


logger = logging.getLogger(__name__)


def setup_logging(debug: bool) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("manifold.log", mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Command line host.

    Owns the session and the solve worker, connecting signals between
    them and the Qt event loop.
    """

    def __init__(self, app: QCoreApplication, topology: Topology):
        """
        Initialize the application.

        Args:
            app: Running core application
            topology: Topology to build the engine for
        """
        self.app = app
        self.session = GameSession(topology)
        self.worker: Optional[SolveWorker] = None

    def load(self, puzzle_name: Optional[str], file_path: Optional[str], use_random: bool) -> bool:
        """
        Load the requested puzzle into the session.

        File beats random, random beats a named preset.

        Returns:
            True if a puzzle was loaded
        """
        if file_path:
            path = Path(file_path)
            try:
                text = path.read_text(encoding='utf-8')
            except OSError as e:
                logger.error(f"Cannot read puzzle file {path}: {e}")
                return False
            values = parse_grid_text(text)
            return self.session.load_puzzle(values, path.stem)

        if use_random:
            return self.session.load_random_puzzle()

        try:
            return self.session.load_preset(puzzle_name or "")
        except ValueError as e:
            logger.error(str(e))
            return False

    def start(self) -> None:
        """Start solving on the worker thread."""
        logger.info(f"Solving: {self.session.puzzle_name or 'unnamed puzzle'}")
        log_grid(logger, self.session.grid, self.session.face_names)

        self.worker = SolveWorker(self.session.engine)
        self.worker.status_changed.connect(self._on_status)
        self.worker.solve_finished.connect(self._on_finished)
        self.worker.error_occurred.connect(self._on_error)
        self.worker.start()

    def _on_status(self, status: str):
        """Handle worker status change."""
        logger.debug(f"Worker status: {status}")

    def _on_finished(self, stats: SolveStats, grid: List[int], elapsed_ms: float):
        """Handle solve result from worker."""
        self.worker.wait()
        self.session.apply_result(stats)

        if stats.success:
            log_grid(logger, grid, self.session.face_names)
        logger.info(f"{self.session.get_state_string()} - {stats.summary()}, {elapsed_ms:.1f}ms")

        self.app.exit(0 if stats.success else 1)

    def _on_error(self, error_msg: str):
        """Handle worker error."""
        logger.error(f"Worker error: {error_msg}")
        self.worker.wait()
        self.app.exit(2)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    topologies = ", ".join(f"{t['name']} ({t['description']})" for t in get_topology_info())
    parser = argparse.ArgumentParser(
        description="Manifold Sudoku - constraint-graph solver for planar and cube grids"
    )
    parser.add_argument(
        "--topology", "-t",
        default=None,
        help=f"Topology to solve on: {topologies}"
    )
    parser.add_argument(
        "--puzzle", "-p",
        default=None,
        help=f"Built-in puzzle: {', '.join(get_puzzle_names())}"
    )
    parser.add_argument(
        "--file", "-f",
        default=None,
        help="Text file with the puzzle (digits, 0 or . for empty)"
    )
    parser.add_argument(
        "--random", "-r",
        action="store_true",
        help="Load a random built-in puzzle (stitched across faces on the cube)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main():
    """Initialize and run Manifold Sudoku."""
    args = parse_args()
    settings = load_settings()

    setup_logging(args.debug or settings.get("debug_enabled", False))

    try:
        topology = topology_from_name(args.topology or settings["topology"])
    except ValueError as e:
        logger.error(str(e))
        sys.exit(2)

    # Remember command line choices
    settings["topology"] = topology.value
    if args.puzzle:
        settings["puzzle_name"] = args.puzzle
    save_settings(settings)

    app = QCoreApplication(sys.argv)

    application = Application(app, topology)
    if not application.load(settings["puzzle_name"], args.file, args.random):
        sys.exit(2)
    application.start()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
