"""Main entry point for the Game of Life community simulator."""

import argparse
import logging
import sys
from typing import List, Optional

from life_communities.config import (
    DEFAULT_CELL_SIZE,
    DEFAULT_FPS,
    DEFAULT_GENERATIONS,
    DISPLAY_MODES,
    MAX_FPS,
    MIN_FPS,
    SimulationConfig,
)
from life_communities.errors import GridError
from life_communities.renderers.text_grid import render_summary, render_text
from life_communities.simulation.engine import GameOfLife


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Conway's Game of Life on a wrap-around grid, with community counts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Grid file format:
  <rows> <cols>
  <rows * cols true/false values, row by row>

Examples:
  # Built-in 5x5 seed, printed for four generations
  python -m life_communities

  # Load a grid and run 20 generations without printing the board
  python -m life_communities grid.txt --generations 20 --display none

  # Watch the grid in a window
  python -m life_communities grid.txt --display window --generations 200
        """,
    )

    parser.add_argument(
        "grid_file",
        nargs="?",
        default=None,
        help="Grid file to load (default: built-in 5x5 seed)",
    )
    parser.add_argument(
        "--generations",
        "-g",
        type=int,
        default=DEFAULT_GENERATIONS,
        help=f"Number of generations to run (default: {DEFAULT_GENERATIONS})",
    )
    parser.add_argument(
        "--display",
        "-d",
        choices=DISPLAY_MODES,
        default="text",
        help="How to show each generation (default: text)",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=DEFAULT_CELL_SIZE,
        help="Size of each cell in pixels (window mode)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=DEFAULT_FPS,
        help="Generations per second (window mode)",
    )
    parser.add_argument(
        "--no-stats",
        action="store_true",
        help="Hide the stats panel (window mode)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Create a SimulationConfig from parsed arguments."""
    return SimulationConfig(
        grid_file=args.grid_file,
        generations=args.generations,
        display=args.display,
        cell_size=args.cell_size,
        fps=args.fps,
        show_stats=not args.no_stats,
    )


def load_game(config: SimulationConfig) -> GameOfLife:
    """Build the engine from the configured grid file, or the built-in seed."""
    if config.grid_file:
        game = GameOfLife.from_file(config.grid_file)
    else:
        game = GameOfLife()
    config.grid_rows, config.grid_cols = game.dimensions()
    return game


def print_generation(game: GameOfLife, show_grid: bool) -> None:
    """Print the summary line (and optionally the board) for a generation."""
    snapshot = game.snapshot()
    print(render_summary(snapshot, game.count_communities()))
    if show_grid:
        print(render_text(snapshot))
        print()


def run_text(config: SimulationConfig, game: GameOfLife) -> None:
    """
    Run the simulation in the terminal.

    Args:
        config: Simulation configuration.
        game: Engine holding the initial generation.
    """
    show_grid = config.display == "text"

    print("=" * 60)
    print("Game of Life Communities")
    print("=" * 60)
    print(f"Grid: {config.grid_rows}x{config.grid_cols}")
    print(f"Source: {config.grid_file or 'built-in seed'}")
    print(f"Generations: {config.generations}")
    print("=" * 60)

    print_generation(game, show_grid)
    for _ in range(config.generations):
        if not game.is_alive():
            print(f"Grid is extinct at generation {game.generation}")
            break
        game.step_once()
        print_generation(game, show_grid)

    print("=" * 60)
    print(f"Final generation: {game.generation}")
    print(f"Live cells: {game.alive_count()}")
    print(f"Communities: {game.count_communities()}")


def run_window(config: SimulationConfig, game: GameOfLife) -> None:
    """
    Run the simulation in a pygame window.

    Args:
        config: Simulation configuration.
        game: Engine holding the initial generation.
    """
    from life_communities.renderers.pygame_grid import PygameGridRenderer

    print("=" * 60)
    print("Game of Life Communities - Window Mode")
    print("=" * 60)
    print(f"Grid: {config.grid_rows}x{config.grid_cols}")
    print(f"Generations: {config.generations}")
    print("Controls:")
    print("  SPACE     - Pause/Resume")
    print("  N / →     - Step once (when paused)")
    print("  R         - Reset simulation")
    print("  ↑ / ↓     - Speed up/down")
    print("  Q / ESC   - Quit")
    print("=" * 60)

    renderer = PygameGridRenderer(config)
    initial = game.snapshot()

    running = True
    paused = False

    try:
        while running:
            result = renderer.render(game.snapshot(), paused)

            if result.should_quit:
                running = False
            elif result.toggle_pause:
                paused = not paused
                print(f"{'Paused' if paused else 'Resumed'}")
            elif result.step_once and paused:
                game.step_once()
            elif result.reset:
                game = GameOfLife(initial.rows, initial.cols, initial.cells.ravel())
                print("Reset simulation")
            elif result.speed_up:
                config.fps = min(MAX_FPS, config.fps + 2)
                print(f"Speed: {config.fps} FPS")
            elif result.speed_down:
                config.fps = max(MIN_FPS, config.fps - 2)
                print(f"Speed: {config.fps} FPS")

            if not paused and game.generation < config.generations:
                game.step_once()

    finally:
        renderer.cleanup()

    print(f"\nSimulation ended at generation {game.generation}")
    print(f"Communities: {game.count_communities()}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        config = create_config_from_args(args)
        game = load_game(config)
    except (GridError, ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1

    if config.display == "window":
        run_window(config, game)
    else:
        run_text(config, game)
    return 0


if __name__ == "__main__":
    sys.exit(main())
