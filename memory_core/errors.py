from __future__ import annotations


class InvalidCardReference(LookupError):
    """Raised when a card id is not part of the current deck."""

    def __init__(self, card_id: str) -> None:
        super().__init__(f'Unknown card id: {card_id!r}')
        self.card_id = card_id


class InvalidPairCount(ValueError):
    """Raised when a pair count is outside the allowed set or larger than the alphabet."""

    def __init__(self, pair_count: object, allowed) -> None:
        allowed_txt = ', '.join(str(n) for n in allowed)
        super().__init__(f'Invalid pair count {pair_count!r}; expected one of: {allowed_txt}')
        self.pair_count = pair_count
