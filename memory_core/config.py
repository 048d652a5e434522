from __future__ import annotations

import os

from .card import ALLOWED_PAIR_COUNTS, DEFAULT_PAIRS

_TRUTHY = ('1', 'true', 'yes', 'on')


def env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def debug_enabled() -> bool:
    """Set MEMORY_DEBUG=1 to print the game trace."""
    return env_flag('MEMORY_DEBUG')


def debug(tag: str, message: str) -> None:
    if debug_enabled():
        print(f"[{tag}] {message}")


def default_pair_count() -> int:
    """Pair count for new games, from MEMORY_DEFAULT_PAIRS when it names an allowed value."""
    raw = os.getenv('MEMORY_DEFAULT_PAIRS')
    if not raw:
        return DEFAULT_PAIRS
    try:
        n = int(raw)
    except ValueError:
        debug('config', f"MEMORY_DEFAULT_PAIRS not an integer: {raw!r}")
        return DEFAULT_PAIRS
    if n not in ALLOWED_PAIR_COUNTS:
        debug('config', f"MEMORY_DEFAULT_PAIRS not allowed: {n}")
        return DEFAULT_PAIRS
    return n
