"""
Tests for hand evaluation.
"""

import pytest
from gesturepoker.core.card import Card, Suit, parse_cards
from gesturepoker.core.errors import InvalidHandSizeError
from gesturepoker.core.hand import (
    evaluate_hand, compare_hands, compare_evaluations, HandRank, HandEvaluation,
    get_hand_description, get_ranking_display_name,
)


class TestHandRanking:
    """Tests for hand ranking."""

    def test_royal_flush(self, royal_flush):
        """Test royal flush recognition."""
        evaluation = evaluate_hand(royal_flush)
        assert evaluation.ranking == HandRank.ROYAL_FLUSH
        assert evaluation.tiebreakers == ()
        assert evaluation.value == 10

    def test_straight_flush(self, straight_flush):
        """Test straight flush recognition."""
        evaluation = evaluate_hand(straight_flush)
        assert evaluation == HandEvaluation(HandRank.STRAIGHT_FLUSH, (9,))

    def test_steel_wheel(self):
        """Test that A-2-3-4-5 suited is a five-high straight flush."""
        evaluation = evaluate_hand(parse_cards("Ah 2h 3h 4h 5h"))
        assert evaluation == HandEvaluation(HandRank.STRAIGHT_FLUSH, (5,))

    def test_four_of_a_kind(self):
        """Test four of a kind recognition."""
        evaluation = evaluate_hand(parse_cards("As Ah Ad Ac Ks"))
        assert evaluation == HandEvaluation(HandRank.FOUR_OF_A_KIND, (14, 13))

    def test_full_house(self):
        """Test full house recognition."""
        evaluation = evaluate_hand(parse_cards("As Ah Ad Kc Ks"))
        assert evaluation == HandEvaluation(HandRank.FULL_HOUSE, (14, 13))

    def test_flush(self):
        """Test flush recognition."""
        evaluation = evaluate_hand(parse_cards("As Ks Js 9s 2s"))
        assert evaluation == HandEvaluation(HandRank.FLUSH, (14, 13, 11, 9, 2))

    def test_straight(self):
        """Test straight recognition."""
        evaluation = evaluate_hand(parse_cards("9s 8h 7d 6c 5s"))
        assert evaluation == HandEvaluation(HandRank.STRAIGHT, (9,))

    def test_broadway_straight(self):
        """Test ace-high straight recognition."""
        evaluation = evaluate_hand(parse_cards("As Kh Qd Jc 10s"))
        assert evaluation == HandEvaluation(HandRank.STRAIGHT, (14,))

    def test_wheel_straight(self, wheel_straight):
        """Test that the wheel is a five-high straight."""
        evaluation = evaluate_hand(wheel_straight)
        assert evaluation == HandEvaluation(HandRank.STRAIGHT, (5,))

    def test_three_of_a_kind(self):
        """Test three of a kind recognition."""
        evaluation = evaluate_hand(parse_cards("7s 7h 7d Kc 2s"))
        assert evaluation == HandEvaluation(HandRank.THREE_OF_A_KIND, (7, 13, 2))

    def test_two_pair(self):
        """Test two pair recognition with the kicker last."""
        evaluation = evaluate_hand(parse_cards("Ks Kh 5d 5c As"))
        assert evaluation == HandEvaluation(HandRank.TWO_PAIR, (13, 5, 14))

    def test_one_pair(self, sample_hand):
        """Test one pair recognition."""
        evaluation = evaluate_hand(sample_hand)
        assert evaluation == HandEvaluation(HandRank.ONE_PAIR, (14, 13, 12, 11))

    def test_high_card(self):
        """Test high card recognition."""
        evaluation = evaluate_hand(parse_cards("As Kh 9d 7c 2s"))
        assert evaluation == HandEvaluation(HandRank.HIGH_CARD, (14, 13, 9, 7, 2))

    def test_ace_cannot_wrap_around(self):
        """Test that Q-K-A-2-3 is not a straight."""
        evaluation = evaluate_hand(parse_cards("Qs Kh Ad 2c 3s"))
        assert evaluation.ranking == HandRank.HIGH_CARD

    def test_order_does_not_matter(self, sample_hand):
        """Test that card order doesn't change the evaluation."""
        assert evaluate_hand(sample_hand) == evaluate_hand(list(reversed(sample_hand)))

    @pytest.mark.parametrize("count", [0, 4, 6, 7])
    def test_wrong_hand_size(self, count):
        """Test that only five-card hands are evaluated."""
        cards = parse_cards("As Kh Qd Jc 9s 8h 7d")[:count]
        with pytest.raises(InvalidHandSizeError):
            evaluate_hand(cards)


class TestHandComparison:
    """Tests for comparing hands."""

    def test_higher_category_wins(self, royal_flush, straight_flush):
        """Test that a better category beats a worse one."""
        assert compare_hands(royal_flush, straight_flush) > 0
        assert compare_hands(straight_flush, royal_flush) < 0

    def test_flush_beats_straight(self):
        """Test flush beats straight."""
        flush = parse_cards("2s 4s 6s 8s 10s")
        straight = parse_cards("As Kh Qd Jc 10h")
        assert compare_hands(flush, straight) > 0

    def test_six_high_straight_beats_wheel(self, wheel_straight):
        """Test that the wheel is the lowest straight."""
        six_high = parse_cards("2s 3h 4d 5c 6s")
        assert compare_hands(six_high, wheel_straight) > 0

    def test_pair_kicker_decides(self):
        """Test that kickers break ties between equal pairs."""
        ace_kicker = parse_cards("Ks Kh Ad 7c 2s")
        queen_kicker = parse_cards("Kd Kc Qd 7h 2h")
        assert compare_hands(ace_kicker, queen_kicker) > 0

    def test_two_pair_kicker_decides(self):
        """Test the fifth card of two pair."""
        first = parse_cards("Ks Kh 5d 5c As")
        second = parse_cards("Kd Kc 5h 5s Qs")
        assert compare_hands(first, second) > 0

    def test_full_house_trips_decide(self):
        """Test that the three of a kind decides between full houses."""
        threes_full = parse_cards("3s 3h 3d Ac As")
        twos_full = parse_cards("2s 2h 2d Kc Ks")
        assert compare_hands(threes_full, twos_full) > 0

    def test_identical_ranks_tie(self):
        """Test that suits never break a tie."""
        first = parse_cards("As Kh 9d 7c 2s")
        second = parse_cards("Ah Kd 9c 7s 2h")
        assert compare_hands(first, second) == 0

    def test_royal_flushes_tie(self, royal_flush):
        """Test that two royal flushes tie."""
        hearts = [Card(c.rank, Suit.HEARTS) for c in royal_flush]
        assert compare_hands(royal_flush, hearts) == 0

    def test_compare_evaluations_directly(self):
        """Test comparing precomputed evaluations."""
        low = HandEvaluation(HandRank.ONE_PAIR, (2, 14, 13, 12))
        high = HandEvaluation(HandRank.ONE_PAIR, (3, 4, 5, 6))
        assert compare_evaluations(high, low) > 0
        assert compare_evaluations(low, low) == 0


class TestHandDescription:
    """Tests for hand display text."""

    def test_ranking_display_name(self, sample_hand):
        """Test the category name."""
        assert get_ranking_display_name(evaluate_hand(sample_hand)) == "Pair"

    @pytest.mark.parametrize("cards,expected", [
        ("As Ks Qs Js 10s", "Royal Flush"),
        ("9h 8h 7h 6h 5h", "Straight Flush, Nine high"),
        ("6s 6h 6d 6c Ks", "Four of a Kind, Sixes"),
        ("Ks Kh Kd 2c 2s", "Full House, Kings full of Twos"),
        ("As Ks Js 9s 2s", "Flush, Ace high"),
        ("As 2h 3d 4c 5s", "Straight, Five high (Wheel)"),
        ("10s 9h 8d 7c 6s", "Straight, Ten high"),
        ("7s 7h 7d Kc 2s", "Three of a Kind, Sevens"),
        ("Ks Kh 5d 5c As", "Two Pair, Kings and Fives"),
        ("5s 5h Kd Qc 2s", "Pair of Fives"),
        ("As Kh 9d 7c 2s", "High Card, Ace"),
    ])
    def test_descriptions(self, cards, expected):
        """Test human-readable descriptions."""
        assert get_hand_description(evaluate_hand(parse_cards(cards))) == expected

    def test_royal_flush_fixture_description(self, royal_flush):
        """Test the royal flush description."""
        evaluation = evaluate_hand(royal_flush)
        assert get_hand_description(evaluation) == "Royal Flush"
