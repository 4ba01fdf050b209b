"""
Showdown resolution.

At showdown every player still holding cards shows the best five-card hand
they can make from their hole cards plus the board. The best hand wins the
pot; tied hands split it evenly. There are no side pots: every remaining
player, all-in or not, is eligible for the whole pot.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from itertools import combinations
from typing import List, Sequence, Tuple
import logging

from gesturepoker.core.card import Card
from gesturepoker.core.errors import InvalidHandSizeError
from gesturepoker.core.game import GameState
from gesturepoker.core.hand import HandEvaluation, compare_evaluations, evaluate_hand
from gesturepoker.core.player import Player
from gesturepoker.core.rules import HAND_SIZE


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerHandResult:
    """A participant's best hand at showdown."""
    player: Player
    player_index: int
    best_hand: Tuple[Card, ...]
    evaluation: HandEvaluation


@dataclass(frozen=True)
class ShowdownResult:
    """
    Outcome of a showdown.

    Attributes:
        winners: Results sharing the best hand
        all_player_results: Results for every participant, in seat order
        pot_per_winner: Chips each winner receives
    """
    winners: Tuple[PlayerHandResult, ...]
    all_player_results: Tuple[PlayerHandResult, ...]
    pot_per_winner: int

    @property
    def winner_indices(self) -> List[int]:
        return [w.player_index for w in self.winners]


def find_best_hand(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
) -> Tuple[Tuple[Card, ...], HandEvaluation]:
    """
    Find the best five-card hand among hole and community cards.

    Every C(n, 5) combination is evaluated; with at most 7 cards that is 21
    evaluations.

    Returns:
        Tuple of (best five cards, their evaluation)

    Raises:
        InvalidHandSizeError: If fewer than 5 cards are available
    """
    all_cards = tuple(hole_cards) + tuple(community_cards)
    if len(all_cards) < HAND_SIZE:
        raise InvalidHandSizeError(
            f"Need at least {HAND_SIZE} cards for a showdown hand, got {len(all_cards)}"
        )

    best_hand: Tuple[Card, ...] = ()
    best_eval = None

    for combo in combinations(all_cards, HAND_SIZE):
        evaluation = evaluate_hand(combo)
        if best_eval is None or compare_evaluations(evaluation, best_eval) > 0:
            best_hand = combo
            best_eval = evaluation

    return best_hand, best_eval


def evaluate_showdown(state: GameState) -> ShowdownResult:
    """
    Determine the winner(s) of the pot.

    Returns:
        ShowdownResult; empty when nobody is left to show down
    """
    results = []
    for index, player in enumerate(state.players):
        if not player.is_in_hand:
            continue
        best_hand, evaluation = find_best_hand(player.hand, state.community_cards)
        results.append(PlayerHandResult(player, index, best_hand, evaluation))

    if not results:
        return ShowdownResult(winners=(), all_player_results=(), pot_per_winner=0)

    winners = [results[0]]
    for result in results[1:]:
        comparison = compare_evaluations(result.evaluation, winners[0].evaluation)
        if comparison > 0:
            winners = [result]
        elif comparison == 0:
            winners.append(result)

    pot_per_winner = state.pot // len(winners)

    logger.info(
        f"Hand #{state.hand_number} showdown: "
        f"{', '.join(w.player.name for w in winners)} win ${pot_per_winner} each"
    )

    return ShowdownResult(
        winners=tuple(winners),
        all_player_results=tuple(results),
        pot_per_winner=pot_per_winner,
    )


def distribute_pot(state: GameState, result: ShowdownResult) -> GameState:
    """
    Credit each winner with their share and empty the pot.

    Chips that don't divide evenly between tied winners are dropped.
    """
    winner_indices = set(result.winner_indices)
    players = tuple(
        replace(player, chips=player.chips + result.pot_per_winner)
        if index in winner_indices else player
        for index, player in enumerate(state.players)
    )

    remainder = state.pot - result.pot_per_winner * len(winner_indices)
    if winner_indices and remainder:
        logger.warning(
            f"Hand #{state.hand_number}: {remainder} chip(s) left over "
            f"from a {len(winner_indices)}-way split are discarded"
        )

    return replace(state, players=players, pot=0)
