
from __future__ import annotations
import argparse
import os
import sys

from mineterm.driver import GameState
from mineterm.engine import Board
from mineterm.render import render_ascii

RESULT_TEXT = {
    GameState.WON: 'WIN',
    GameState.LOST: 'LOSE',
    GameState.QUIT: 'QUIT',
    GameState.RUNNING: 'QUIT',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Minesweeper in the terminal')
    parser.add_argument('--width', type=int, default=21)
    parser.add_argument('--height', type=int, default=11)
    parser.add_argument('--mines', type=int, default=20)
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--frontend', type=str, default='terminal', choices=['terminal', 'window'])
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1:
        parser.error('--width and --height must be at least 1')
    if not 1 <= args.mines < args.width * args.height:
        parser.error(f'--mines must be between 1 and {args.width * args.height - 1} for a '
                     f'{args.width}x{args.height} board')
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    seed = None if args.seed < 0 else args.seed
    board = Board(args.width, args.height, args.mines, seed=seed)

    if args.frontend == 'window':
        from mineterm.window import play
    else:
        # Short Escape delay so Esc quits promptly
        os.environ.setdefault('ESCDELAY', '25')
        from mineterm.terminal import play

    driver = play(board)

    lost = driver.state is GameState.LOST
    print(render_ascii(board, reveal_mines=lost))
    print()
    print(f"[play] {args.width}x{args.height}, {args.mines} mines, seed={'random' if seed is None else seed}")
    print(f'[play] cleared {board.cleared_count()}/{board.width * board.height - board.num_mines} safe cells')
    print(RESULT_TEXT[driver.state])
    return 0


if __name__ == '__main__':
    sys.exit(main())
