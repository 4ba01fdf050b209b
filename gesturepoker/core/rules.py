"""
Texas Hold'em Rules and Constants.

The table this engine models is deliberately small and fixed:

1. Three seats, 1000 starting chips each, blinds of 5 and 10.

2. The small blind sits immediately after the dealer, the big blind after the
   small blind, and the seat after the big blind opens the pre-flop betting.
   After the flop the first seat after the dealer acts first.

3. A raise names the new total bet for the round and must exceed the current
   table bet. There is no minimum raise increment.

4. There are no side pots: all-in players stay in the single pot.
"""

from enum import Enum
from typing import Dict, Optional, Tuple


class GamePhase(Enum):
    """Phases of a Texas Hold'em hand."""
    WAITING = "waiting"      # Waiting for hand to start
    PREFLOP = "pre-flop"     # After hole cards dealt, before flop
    FLOP = "flop"            # After 3 community cards
    TURN = "turn"            # After 4th community card
    RIVER = "river"          # After 5th community card
    SHOWDOWN = "showdown"    # Determine winner


class ActionType(Enum):
    """Possible player actions."""
    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    RAISE = "raise"
    ALL_IN = "all-in"


# Default game settings
DEFAULT_STARTING_CHIPS = 1000
DEFAULT_SMALL_BLIND = 5
DEFAULT_BIG_BLIND = 10
DEFAULT_NUM_PLAYERS = 3
MIN_PLAYERS = 2
MAX_PLAYERS = 10

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5

# Hand evaluation
HAND_SIZE = 5  # Best 5-card hand

# Phase -> (next phase, community cards dealt on entering it)
PHASE_TRANSITIONS: Dict[GamePhase, Tuple[GamePhase, int]] = {
    GamePhase.PREFLOP: (GamePhase.FLOP, FLOP_CARDS),
    GamePhase.FLOP: (GamePhase.TURN, TURN_CARDS),
    GamePhase.TURN: (GamePhase.RIVER, RIVER_CARDS),
    GamePhase.RIVER: (GamePhase.SHOWDOWN, 0),
}

# Community cards visible in each phase
COMMUNITY_CARDS_BY_PHASE: Dict[GamePhase, int] = {
    GamePhase.WAITING: 0,
    GamePhase.PREFLOP: 0,
    GamePhase.FLOP: 3,
    GamePhase.TURN: 4,
    GamePhase.RIVER: 5,
    GamePhase.SHOWDOWN: 5,
}

BETTING_PHASES = (GamePhase.PREFLOP, GamePhase.FLOP, GamePhase.TURN, GamePhase.RIVER)


def get_blind_positions(num_players: int, dealer_position: int) -> Tuple[int, int]:
    """
    Calculate small blind and big blind positions.

    Args:
        num_players: Number of seats at the table
        dealer_position: Position of the dealer (0-indexed)

    Returns:
        Tuple of (small_blind_position, big_blind_position)
    """
    if num_players < MIN_PLAYERS:
        raise ValueError("Need at least 2 players")

    sb_pos = (dealer_position + 1) % num_players
    bb_pos = (dealer_position + 2) % num_players
    return sb_pos, bb_pos


def get_first_to_act_preflop(num_players: int, dealer_position: int) -> int:
    """Position of the seat after the big blind."""
    _, bb_pos = get_blind_positions(num_players, dealer_position)
    return (bb_pos + 1) % num_players


def get_first_to_act_postflop(num_players: int, dealer_position: int) -> int:
    """Position of the seat after the dealer."""
    return (dealer_position + 1) % num_players


def next_phase(phase: GamePhase) -> Optional[Tuple[GamePhase, int]]:
    """Next phase and the cards it deals, or None when no betting phase follows."""
    return PHASE_TRANSITIONS.get(phase)
