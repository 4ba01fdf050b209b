"""
Heuristic Agent Implementation.

A rule-of-thumb opponent: it ranks its current holding, weighs that against
the pot odds of calling, and bluffs now and then.

The hand ranking is a rough one on purpose. Pre-flop the two hole cards are
padded with fixed low clubs to make a five-card hand, and after the flop only
the first five of hole + board cards are ranked, not the best five-card
combination the showdown would find.
"""

from __future__ import annotations
import logging
import random
from typing import Optional, Sequence

from gesturepoker.agents.base import BaseAgent
from gesturepoker.core.card import Card, Rank, Suit
from gesturepoker.core.game import GameState, PlayerAction
from gesturepoker.core.hand import HandEvaluation, HandRank, evaluate_hand
from gesturepoker.core.player import Player
from gesturepoker.core.rules import FLOP_CARDS, HAND_SIZE


logger = logging.getLogger(__name__)

GOOD_POT_ODDS_THRESHOLD = 0.2
FAIR_POT_ODDS_THRESHOLD = 0.3
TERRIBLE_POT_ODDS_THRESHOLD = 0.5
AMAZING_POT_ODDS_THRESHOLD = 0.1

BLUFF_PROBABILITY = 0.15
BLUFF_RAISE = 20
BLUFF_MIN_CHIPS = 50

PREFLOP_FILLER = (
    Card(Rank.TWO, Suit.CLUBS),
    Card(Rank.THREE, Suit.CLUBS),
    Card(Rank.FOUR, Suit.CLUBS),
)


def evaluate_player_hand(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
) -> HandEvaluation:
    """Rank a holding the quick way (see module docstring)."""
    if len(community_cards) >= FLOP_CARDS:
        all_cards = list(hole_cards) + list(community_cards)
        return evaluate_hand(all_cards[:HAND_SIZE])

    padded = list(hole_cards) + list(PREFLOP_FILLER[:HAND_SIZE - len(hole_cards)])
    return evaluate_hand(padded[:HAND_SIZE])


def decide_action(
    state: GameState,
    player_index: int,
    rng: Optional[random.Random] = None,
) -> PlayerAction:
    """
    Decide what a bot should do from hand strength, pot odds and randomness.

    Args:
        state: Current game state
        player_index: Seat of the deciding player
        rng: Random source for bluff rolls

    Returns:
        A legal action for the seat; raises never exceed chips + bet
    """
    rng = rng or random.Random()
    player = state.players[player_index]

    # Nothing to play with (sitting out)
    if not player.hand:
        return PlayerAction.fold()

    call_amount = state.current_bet - player.bet

    strength = evaluate_player_hand(player.hand, state.community_cards).ranking

    # If no bet to call
    if call_amount == 0:
        # Strong hands should raise
        if strength >= HandRank.STRAIGHT:
            return _raise_to(state, player, state.current_bet + state.pot // 2)

        # Occasionally bluff with weak hands
        if rng.random() < BLUFF_PROBABILITY and player.chips > BLUFF_MIN_CHIPS:
            return _raise_to(state, player, state.current_bet + BLUFF_RAISE)

        return PlayerAction.check()

    pot_odds = call_amount / (state.pot + call_amount)

    # Very strong hands (flush or better) - always raise
    if strength >= HandRank.FLUSH:
        return _raise_to(state, player, state.current_bet + state.pot * 3 // 4)

    # Pair or better with good pot odds
    if strength >= HandRank.ONE_PAIR and pot_odds < GOOD_POT_ODDS_THRESHOLD:
        if strength >= HandRank.THREE_OF_A_KIND and rng.random() < BLUFF_PROBABILITY:
            return _raise_to(state, player, state.current_bet + state.pot // 3)
        return _call(player, call_amount)

    # Medium hands - evaluate pot odds
    if strength >= HandRank.ONE_PAIR:
        if pot_odds < FAIR_POT_ODDS_THRESHOLD:
            return _call(player, call_amount)
        return PlayerAction.fold()

    # Weak hands - fold unless pot odds are amazing
    if pot_odds > TERRIBLE_POT_ODDS_THRESHOLD:
        return PlayerAction.fold()

    if pot_odds < AMAZING_POT_ODDS_THRESHOLD:
        return _call(player, call_amount)

    return PlayerAction.fold()


def _call(player: Player, call_amount: int) -> PlayerAction:
    """Call, or go all-in when the stack can't cover the call."""
    if call_amount >= player.chips:
        return PlayerAction.all_in()
    return PlayerAction.call()


def _raise_to(state: GameState, player: Player, amount: int) -> PlayerAction:
    """Raise, capped at what the player can cover."""
    amount = min(amount, player.chips + player.bet)
    if amount <= state.current_bet:
        call_amount = state.current_bet - player.bet
        return PlayerAction.check() if call_amount == 0 else _call(player, call_amount)
    return PlayerAction.raise_to(amount)


class HeuristicAgent(BaseAgent):
    """
    A bot seat driven by `decide_action`.

    Each agent owns its random source so a seeded agent plays reproducibly.
    """

    def __init__(
        self,
        player_id: str,
        name: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(player_id, name or f"Bot-{player_id}")
        self.rng = rng or random.Random()

    def act(self, state: GameState, player_index: int) -> PlayerAction:
        action = decide_action(state, player_index, self.rng)
        logger.debug(f"{self.name} decides to {action}")
        return action
