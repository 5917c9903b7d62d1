"""Entry point for the checkers game
Run: python -m checkers.main [--layout <path>] [--print] [--verbose] [--square-size <n>]
Options:
--layout <path>    : load the starting position from a layout file
--print            : print the starting board as text and exit
--verbose          : log engine decisions at DEBUG level
--square-size <n>  : pixel size of one board square
"""

import logging
import sys
from typing import Optional, Tuple

from checkers.engine.board import Board
from checkers.engine.state import GameState


def parse_args(argv) -> Tuple[Optional[str], bool, bool, int]:
    layout_path: Optional[str] = None
    square_size = 64

    if '--layout' in argv:
        idx = argv.index('--layout')
        if idx + 1 < len(argv):
            layout_path = argv[idx + 1]
        else:
            print('Warning: --layout provided but no path given; ignoring')

    if '--square-size' in argv:
        idx = argv.index('--square-size')
        try:
            square_size = int(argv[idx + 1])
        except (IndexError, ValueError):
            print('Warning: --square-size needs an integer; using 64')

    return layout_path, '--print' in argv, '--verbose' in argv, square_size


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    layout_path, print_only, verbose, square_size = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
    )

    if layout_path is not None:
        try:
            board = Board.from_layout_file(layout_path)
        except (OSError, ValueError) as e:
            print(f"Could not load layout {layout_path}: {e}")
            return 1
    else:
        board = Board.setup_start()

    state = GameState(board)
    if print_only:
        print(state.board)
        return 0

    from checkers.ui import PygameUI
    ui = PygameUI(state, square_size=square_size)
    try:
        ui.run()
    except Exception as e:
        print("Error running UI:", e)
        print("If this is an ImportError for pygame, install it with: python -m pip install pygame")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
