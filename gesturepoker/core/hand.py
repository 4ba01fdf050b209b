"""
Hand Evaluation for Texas Hold'em.

This module ranks exactly five cards into one of ten categories and attaches
the ordered tiebreakers needed to compare two hands of the same category.

Hand Rankings (best to worst):
10. Royal Flush: A♠ K♠ Q♠ J♠ 10♠
9. Straight Flush: 5 consecutive cards of same suit
8. Four of a Kind: 4 cards of same rank
7. Full House: 3 of a kind + pair
6. Flush: 5 cards of same suit
5. Straight: 5 consecutive cards
4. Three of a Kind: 3 cards of same rank
3. Two Pair: 2 different pairs
2. One Pair: 2 cards of same rank
1. High Card: No made hand

Note: Ace can be low in A-2-3-4-5 straight (wheel), which is then five-high.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Sequence, Tuple

from gesturepoker.core.card import Card, Rank
from gesturepoker.core.errors import InvalidHandSizeError
from gesturepoker.core.rules import HAND_SIZE


class HandRank(IntEnum):
    """Hand categories from best (highest value) to worst (lowest value)."""
    ROYAL_FLUSH = 10
    STRAIGHT_FLUSH = 9
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 7
    FLUSH = 6
    STRAIGHT = 5
    THREE_OF_A_KIND = 4
    TWO_PAIR = 3
    ONE_PAIR = 2
    HIGH_CARD = 1


# Hand rank names for display
HAND_RANK_NAMES = {
    HandRank.ROYAL_FLUSH: "Royal Flush",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FLUSH: "Flush",
    HandRank.STRAIGHT: "Straight",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.ONE_PAIR: "Pair",
    HandRank.HIGH_CARD: "High Card",
}

WHEEL = (2, 3, 4, 5, 14)


@dataclass(frozen=True)
class HandEvaluation:
    """
    The ranking of a five-card hand.

    Attributes:
        ranking: Hand category
        tiebreakers: Numeric ranks (2-14) in order of significance
    """
    ranking: HandRank
    tiebreakers: Tuple[int, ...] = ()

    @property
    def value(self) -> int:
        """Ordinal of the category, 1 (high card) to 10 (royal flush)."""
        return int(self.ranking)


def evaluate_hand(cards: Sequence[Card]) -> HandEvaluation:
    """
    Evaluate exactly five cards.

    Args:
        cards: The five cards of the hand

    Returns:
        HandEvaluation with category and tiebreakers

    Raises:
        InvalidHandSizeError: If not exactly 5 cards are given
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHandSizeError(
            f"Hand must contain exactly {HAND_SIZE} cards, got {len(cards)}"
        )

    values = sorted(int(c.rank) for c in cards)
    descending = tuple(reversed(values))

    is_flush = len({c.suit for c in cards}) == 1
    is_straight, straight_high = _check_straight(values)
    groups = _group_by_count(values)

    if is_flush and is_straight:
        if values[0] == Rank.TEN:
            return HandEvaluation(HandRank.ROYAL_FLUSH)
        return HandEvaluation(HandRank.STRAIGHT_FLUSH, (straight_high,))

    if 4 in groups:
        return HandEvaluation(HandRank.FOUR_OF_A_KIND, (groups[4][0], groups[1][0]))

    if 3 in groups and 2 in groups:
        return HandEvaluation(HandRank.FULL_HOUSE, (groups[3][0], groups[2][0]))

    if is_flush:
        return HandEvaluation(HandRank.FLUSH, descending)

    if is_straight:
        return HandEvaluation(HandRank.STRAIGHT, (straight_high,))

    if 3 in groups:
        return HandEvaluation(HandRank.THREE_OF_A_KIND, (groups[3][0], *groups[1]))

    if len(groups.get(2, [])) == 2:
        return HandEvaluation(HandRank.TWO_PAIR, (*groups[2], groups[1][0]))

    if 2 in groups:
        return HandEvaluation(HandRank.ONE_PAIR, (groups[2][0], *groups[1]))

    return HandEvaluation(HandRank.HIGH_CARD, descending)


def _check_straight(values: List[int]) -> Tuple[bool, int]:
    """
    Check if ascending rank values form a straight.

    Returns:
        Tuple of (is_straight, effective_high_card)
    """
    if tuple(values) == WHEEL:
        return True, 5

    for low, high in zip(values, values[1:]):
        if high != low + 1:
            return False, 0

    return True, values[-1]


def _group_by_count(values: List[int]) -> Dict[int, List[int]]:
    """Map multiplicity -> ranks with that multiplicity, highest rank first."""
    groups: Dict[int, List[int]] = {}
    for rank, count in Counter(values).items():
        groups.setdefault(count, []).append(rank)
    for ranks in groups.values():
        ranks.sort(reverse=True)
    return groups


def compare_evaluations(first: HandEvaluation, second: HandEvaluation) -> int:
    """
    Compare two evaluated hands.

    Returns:
        Positive if first wins, negative if second wins, 0 if tie
    """
    if first.value != second.value:
        return first.value - second.value

    for a, b in zip(first.tiebreakers, second.tiebreakers):
        if a != b:
            return a - b

    return 0


def compare_hands(cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
    """Evaluate and compare two five-card hands (positive if cards1 wins)."""
    return compare_evaluations(evaluate_hand(cards1), evaluate_hand(cards2))


def get_ranking_display_name(evaluation: HandEvaluation) -> str:
    """Display name of the hand category, e.g. 'Full House'."""
    return HAND_RANK_NAMES[evaluation.ranking]


def get_hand_description(evaluation: HandEvaluation) -> str:
    """Get a human-readable description of the hand."""
    hand_type = evaluation.ranking
    tb = evaluation.tiebreakers

    if hand_type == HandRank.ROYAL_FLUSH:
        return "Royal Flush"
    elif hand_type == HandRank.STRAIGHT_FLUSH:
        return f"Straight Flush, {_rank_name(tb[0])} high"
    elif hand_type == HandRank.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_plural(tb[0])}"
    elif hand_type == HandRank.FULL_HOUSE:
        return f"Full House, {_plural(tb[0])} full of {_plural(tb[1])}"
    elif hand_type == HandRank.FLUSH:
        return f"Flush, {_rank_name(tb[0])} high"
    elif hand_type == HandRank.STRAIGHT:
        if tb[0] == 5:
            return "Straight, Five high (Wheel)"
        return f"Straight, {_rank_name(tb[0])} high"
    elif hand_type == HandRank.THREE_OF_A_KIND:
        return f"Three of a Kind, {_plural(tb[0])}"
    elif hand_type == HandRank.TWO_PAIR:
        return f"Two Pair, {_plural(tb[0])} and {_plural(tb[1])}"
    elif hand_type == HandRank.ONE_PAIR:
        return f"Pair of {_plural(tb[0])}"
    else:
        return f"High Card, {_rank_name(tb[0])}"


def _rank_name(value: int) -> str:
    """Get the name of a rank."""
    names = {
        Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
        Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven",
        Rank.EIGHT: "Eight", Rank.NINE: "Nine", Rank.TEN: "Ten",
        Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King",
        Rank.ACE: "Ace"
    }
    return names[Rank(value)]


def _plural(value: int) -> str:
    name = _rank_name(value)
    return f"{name}es" if name == "Six" else f"{name}s"
