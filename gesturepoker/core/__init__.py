"""
gesturepoker Core - Pure Python Texas Hold'em Game Logic

This module contains all game logic without any UI or third-party dependencies.
"""

from gesturepoker.core.card import Card, Rank, Suit, create_deck, shuffle_deck, deal_cards
from gesturepoker.core.player import Player, PlayerStatus
from gesturepoker.core.hand import HandRank, HandEvaluation, evaluate_hand, compare_evaluations
from gesturepoker.core.game import (
    GameState,
    PlayerAction,
    create_game,
    start_new_hand,
    process_player_action,
)
from gesturepoker.core.rules import GamePhase, ActionType
from gesturepoker.core.showdown import ShowdownResult, evaluate_showdown, distribute_pot

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "create_deck",
    "shuffle_deck",
    "deal_cards",
    "Player",
    "PlayerStatus",
    "HandRank",
    "HandEvaluation",
    "evaluate_hand",
    "compare_evaluations",
    "GameState",
    "PlayerAction",
    "create_game",
    "start_new_hand",
    "process_player_action",
    "GamePhase",
    "ActionType",
    "ShowdownResult",
    "evaluate_showdown",
    "distribute_pot",
]
