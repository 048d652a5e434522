from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Tuple

Symbol = str  # one of SYMBOLS

SYMBOLS: Tuple[Symbol, ...] = (
    "🐶", "🐱", "🐭", "🐹", "🐰", "🦊", "🐻", "🐼",
    "🐨", "🐯", "🦁", "🐮", "🐷", "🐸", "🐵", "🐔",
)
ALLOWED_PAIR_COUNTS: Tuple[int, ...] = (2, 4, 6, 8, 10, 12)
DEFAULT_PAIRS = 4
MATCH_REWARD = 10


def new_card_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Card:
    """A single card of the deck. Mutated in place by the game state."""
    symbol: Symbol
    id: str = field(default_factory=new_card_id)
    face_up: bool = False
    matched: bool = False

    def is_selectable(self) -> bool:
        return not self.face_up and not self.matched
