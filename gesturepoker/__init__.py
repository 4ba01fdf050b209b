"""
gesturepoker - Texas Hold'em engine for a gesture-driven table

A small Texas Hold'em project with:
- Pure Python game core logic (immutable state, pure transitions)
- A heuristic bot for the non-human seats
- A session runner and pydantic snapshots for front-ends

Usage:
    from gesturepoker.core import Card, create_game, start_new_hand
    from gesturepoker.session import GameSession
"""

__version__ = "0.1.0"

from gesturepoker.core.card import Card
from gesturepoker.core.player import Player
from gesturepoker.core.game import GameState, PlayerAction, create_game, start_new_hand, process_player_action
from gesturepoker.core.hand import HandRank, evaluate_hand

__all__ = [
    "Card",
    "Player",
    "GameState",
    "PlayerAction",
    "create_game",
    "start_new_hand",
    "process_player_action",
    "HandRank",
    "evaluate_hand",
    "__version__",
]
