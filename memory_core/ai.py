from __future__ import annotations

import random
from typing import Dict, List, Optional

from .card import Symbol
from .state import GameState

Memory = Dict[str, Symbol]  # card id -> symbol seen face-up


def remember(state: GameState, memory: Memory) -> None:
    """Records every face-up unmatched card and forgets cards that have been matched."""
    for c in state.cards:
        if c.matched:
            memory.pop(c.id, None)
        elif c.face_up:
            memory[c.id] = c.symbol


def _selectable(state: GameState, card_id: str) -> bool:
    card = state.find(card_id)
    return card is not None and card.is_selectable()


def _known_pair(state: GameState, memory: Memory) -> Optional[str]:
    by_symbol: Dict[Symbol, List[str]] = {}
    for card_id, symbol in memory.items():
        by_symbol.setdefault(symbol, []).append(card_id)
    for ids in by_symbol.values():
        if len(ids) < 2:
            continue
        for card_id in ids:
            if _selectable(state, card_id):
                return card_id
    return None


def ai_pick_card(state: GameState, memory: Memory, rng: Optional[random.Random] = None) -> Optional[str]:
    """Picks the next card to select for a player with perfect memory, or None when the game is won."""
    if state.won:
        return None
    rng = rng or random.Random()
    remember(state, memory)
    pending = state.pending_card()

    if pending is not None:
        for card_id, symbol in memory.items():
            if card_id != pending.id and symbol == pending.symbol and _selectable(state, card_id):
                return card_id
    else:
        known = _known_pair(state, memory)
        if known is not None:
            return known

    # Cards left face-up by a mismatch cannot be chosen until the next selection flips them
    candidates = [c.id for c in state.cards if c.is_selectable()]
    unseen = [card_id for card_id in candidates if card_id not in memory]
    if unseen:
        return rng.choice(unseen)
    if candidates:
        return rng.choice(candidates)
    return None


def autoplay(state: GameState, rng: Optional[random.Random] = None, max_selections: Optional[int] = None) -> int:
    """Plays the game until every card is matched. Returns the number of selections made."""
    rng = rng or random.Random()
    memory: Memory = {}
    limit = max_selections if max_selections is not None else 4 * len(state.cards) + 4
    selections = 0
    while not state.won and selections < limit:
        card_id = ai_pick_card(state, memory, rng)
        if card_id is None:
            break
        state.select_card(card_id)
        remember(state, memory)
        selections += 1
    return selections
