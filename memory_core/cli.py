from __future__ import annotations

import argparse
import random
import unicodedata
from typing import Callable, List, Optional

from .ai import autoplay
from .card import ALLOWED_PAIR_COUNTS
from .config import default_pair_count
from .errors import InvalidPairCount
from .state import GameState

COLUMNS = 4
CELL_WIDTH = 2


def _display_width(text: str) -> int:
    # Emoji and CJK characters take two terminal columns
    return sum(2 if unicodedata.east_asian_width(ch) in ('W', 'F') else 1 for ch in text)


def _cell(text: str) -> str:
    return " " * max(0, CELL_WIDTH - _display_width(text)) + text


def render_board(state: GameState, columns: int = COLUMNS) -> str:
    """Generates a human-readable view: positions for face-down cards, symbols for face-up ones."""
    lines: List[str] = []
    row: List[str] = []
    for pos, card in enumerate(state.cards, start=1):
        if card.matched:
            cell = _cell("")
        elif card.face_up:
            cell = _cell(card.symbol)
        else:
            cell = _cell(str(pos))
        row.append(cell)
        if len(row) == columns:
            lines.append(" ".join(row))
            row = []
    if row:
        lines.append(" ".join(row))
    lines.append(f"Score: {state.score}  Pairs: {state.matched_pairs()}/{state.pair_count}")
    return "\n".join(lines)


def handle_command(state: GameState, text: str) -> bool:
    """Applies one typed command to the game. Returns False when the user asked to quit."""
    text = text.strip().lower()
    if not text:
        return True
    if text in ('q', 'quit', 'exit'):
        return False
    if text in ('r', 'reset', 'new'):
        state.reset_game()
        return True
    if text.startswith('p'):
        parts = text.split()
        try:
            n = int(parts[1])
        except (IndexError, ValueError):
            print(f"Usage: p N  (N one of {', '.join(str(x) for x in ALLOWED_PAIR_COUNTS)})")
            return True
        try:
            state.set_pair_count(n)
        except InvalidPairCount as e:
            print(f"error: {e}")
        return True
    try:
        pos = int(text)
    except ValueError:
        print('Could not parse. Enter a card number, r, p N or q.')
        return True
    if not 1 <= pos <= len(state.cards):
        print('No card at that position.')
        return True
    if not state.select_card(state.cards[pos - 1].id):
        print('That card cannot be chosen.')
    return True


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> None:
    parser = argparse.ArgumentParser(description='Memory matching game in the terminal')
    parser.add_argument('--pairs', type=int, choices=ALLOWED_PAIR_COUNTS, default=None,
                        help='Number of pairs in the deck')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the shuffle')
    parser.add_argument('--autoplay', action='store_true', help='Let a perfect-memory player finish the game')
    args = parser.parse_args(argv)

    pairs = args.pairs if args.pairs is not None else default_pair_count()
    state = GameState.new(pair_count=pairs, seed=args.seed)

    if args.autoplay:
        selections = autoplay(state, rng=random.Random(args.seed))
        print(render_board(state))
        print(f"Solved in {selections} selections.")
        return

    print(render_board(state))
    state.subscribe(lambda s: print("\n" + render_board(s)))
    while True:
        if state.won:
            print(f"All pairs found! Final score: {state.score}. Type r to play again or q to quit.")
        try:
            text = input_fn('> ')
        except EOFError:
            break
        if not handle_command(state, text):
            break


if __name__ == '__main__':
    main()
