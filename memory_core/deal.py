from __future__ import annotations

import random
from typing import List, Optional

from .card import Card, SYMBOLS, Symbol
from .errors import InvalidPairCount


def build_deck(pair_count: int, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> List[Card]:
    """Creates a shuffled deck of 2 * pair_count face-down cards, each symbol appearing twice."""
    if pair_count < 1 or pair_count > len(SYMBOLS):
        raise InvalidPairCount(pair_count, range(1, len(SYMBOLS) + 1))
    if rng is None:
        rng = random.Random(seed)
    chosen: List[Symbol] = rng.sample(SYMBOLS, pair_count)
    symbols = chosen + chosen
    rng.shuffle(symbols)
    return [Card(symbol=s) for s in symbols]
