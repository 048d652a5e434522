from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .card import ALLOWED_PAIR_COUNTS, Card, DEFAULT_PAIRS, MATCH_REWARD, SYMBOLS
from .config import debug, default_pair_count
from .deal import build_deck
from .errors import InvalidCardReference, InvalidPairCount

Listener = Callable[['GameState'], None]


def check_pair_count(n: int) -> int:
    """Validates a requested pair count, returning it unchanged."""
    if n not in ALLOWED_PAIR_COUNTS or n > len(SYMBOLS):
        raise InvalidPairCount(n, ALLOWED_PAIR_COUNTS)
    return n


@dataclass
class GameState:
    """Represents the mutable state of one game: the deck, the pending card and the score."""
    cards: List[Card] = field(default_factory=list)
    score: int = 0
    pair_count: int = DEFAULT_PAIRS
    pending_card_id: Optional[str] = None
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    _listeners: List[Listener] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def new(cls, pair_count: Optional[int] = None, seed: Optional[int] = None) -> 'GameState':
        n = check_pair_count(default_pair_count() if pair_count is None else pair_count)
        state = cls(pair_count=n, rng=random.Random(seed))
        state.reset_game()
        return state

    # ---------- Queries ----------

    @property
    def won(self) -> bool:
        return bool(self.cards) and all(c.matched for c in self.cards)

    def find(self, card_id: str) -> Optional[Card]:
        for c in self.cards:
            if c.id == card_id:
                return c
        return None

    def card(self, card_id: str) -> Card:
        found = self.find(card_id)
        if found is None:
            raise InvalidCardReference(card_id)
        return found

    def pending_card(self) -> Optional[Card]:
        if self.pending_card_id is None:
            return None
        return self.find(self.pending_card_id)

    def matched_pairs(self) -> int:
        return sum(1 for c in self.cards if c.matched) // 2

    def snapshot(self) -> Dict[str, Any]:
        return {
            "cards": [
                {"id": c.id, "symbol": c.symbol, "faceUp": c.face_up, "matched": c.matched}
                for c in self.cards
            ],
            "score": self.score,
            "pairCount": self.pair_count,
            "pendingCardId": self.pending_card_id,
            "won": self.won,
        }

    # ---------- Observers ----------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers a listener called after every mutation. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ---------- Transitions ----------

    def select_card(self, card_id: str) -> bool:
        """Flips the chosen card and resolves a pair if one is pending.

        Ignored clicks (unknown id, card already face-up or matched) leave the
        state untouched and return False.
        """
        chosen = self.find(card_id)
        if chosen is None or not chosen.is_selectable():
            debug('game', f"ignored selection {card_id}")
            return False

        pending = self.pending_card()
        if pending is not None:
            if chosen.symbol == pending.symbol:
                chosen.matched = True
                pending.matched = True
                self.score += MATCH_REWARD
                debug('game', f"match {chosen.symbol} score={self.score}")
            else:
                debug('game', f"mismatch {pending.symbol} / {chosen.symbol}")
            self.pending_card_id = None
        else:
            # Hide any leftovers from a mismatched pair before revealing the new card
            for c in self.cards:
                if not c.matched:
                    c.face_up = False
            self.pending_card_id = chosen.id

        chosen.face_up = True
        self._notify()
        return True

    def reset_game(self) -> None:
        self.cards = build_deck(self.pair_count, rng=self.rng)
        self.score = 0
        self.pending_card_id = None
        debug('game', f"reset with {self.pair_count} pairs")
        self._notify()

    def set_pair_count(self, n: int) -> None:
        self.pair_count = check_pair_count(n)
        debug('game', f"pair count set to {n}")
        self.reset_game()
