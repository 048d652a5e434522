from __future__ import annotations

# Facade module that re-exports the memory game core.
# Used by the Flask app and tests; single-responsibility modules live under memory_core/*.

try:
    from .memory_core.card import (  # type: ignore
        ALLOWED_PAIR_COUNTS,
        DEFAULT_PAIRS,
        MATCH_REWARD,
        SYMBOLS,
        Card,
        Symbol,
        new_card_id,
    )
    from .memory_core.deal import build_deck  # type: ignore
    from .memory_core.errors import InvalidCardReference, InvalidPairCount  # type: ignore
    from .memory_core.state import GameState, check_pair_count  # type: ignore
    from .memory_core.ai import ai_pick_card, autoplay, remember  # type: ignore
    from .memory_core.config import debug, default_pair_count  # type: ignore
except ImportError:
    from memory_core.card import (  # type: ignore
        ALLOWED_PAIR_COUNTS,
        DEFAULT_PAIRS,
        MATCH_REWARD,
        SYMBOLS,
        Card,
        Symbol,
        new_card_id,
    )
    from memory_core.deal import build_deck  # type: ignore
    from memory_core.errors import InvalidCardReference, InvalidPairCount  # type: ignore
    from memory_core.state import GameState, check_pair_count  # type: ignore
    from memory_core.ai import ai_pick_card, autoplay, remember  # type: ignore
    from memory_core.config import debug, default_pair_count  # type: ignore


def new_game(pair_count: int | None = None, seed: int | None = None) -> GameState:
    return GameState.new(pair_count=pair_count, seed=seed)


def main() -> None:
    # CLI driver delegated to memory_core.cli
    try:
        from .memory_core.cli import main as _main  # type: ignore
    except ImportError:
        from memory_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
