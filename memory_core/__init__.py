"""
Memory game core Python package.

This package contains the card model and the pure-logic game state that the
terminal and web front ends drive.
Modules:
- card.py: Card, symbol alphabet, allowed pair counts
- deal.py: paired deck building
- state.py: GameState
- ai.py: perfect-memory auto-player
- cli.py: terminal front end
"""
