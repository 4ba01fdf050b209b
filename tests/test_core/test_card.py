"""
Tests for Card and Deck primitives.
"""

import random
from dataclasses import FrozenInstanceError

import pytest
from gesturepoker.core.card import (
    Card, Rank, Suit, DECK_SIZE,
    create_deck, shuffle_deck, deal_cards, parse_cards,
)
from gesturepoker.core.errors import InsufficientCardsError, PokerError


class TestCard:
    """Tests for Card values."""

    def test_create_card(self):
        """Test creating a card from enums."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_create_card_coerces_raw_values(self):
        """Test that raw rank and suit values become enums."""
        card = Card(14, "spades")
        assert card.rank is Rank.ACE
        assert card.suit is Suit.SPADES

    def test_card_equality(self):
        """Test that cards with the same rank and suit are equal."""
        assert Card(Rank.KING, Suit.HEARTS) == Card(Rank.KING, Suit.HEARTS)
        assert Card(Rank.KING, Suit.HEARTS) != Card(Rank.KING, Suit.SPADES)

    def test_card_is_immutable(self):
        """Test that a card cannot be changed after creation."""
        card = Card(Rank.TWO, Suit.CLUBS)
        with pytest.raises(FrozenInstanceError):
            card.rank = Rank.ACE

    def test_card_is_hashable(self):
        """Test that cards can be used in sets."""
        cards = {Card(Rank.ACE, Suit.SPADES), Card(Rank.ACE, Suit.SPADES)}
        assert len(cards) == 1

    def test_card_sorting(self):
        """Test that cards sort by rank."""
        cards = [
            Card(Rank.KING, Suit.CLUBS),
            Card(Rank.TWO, Suit.SPADES),
            Card(Rank.TEN, Suit.HEARTS),
        ]
        assert [c.rank for c in sorted(cards)] == [Rank.TWO, Rank.TEN, Rank.KING]

    def test_card_str(self):
        """Test the symbol display of a card."""
        assert str(Card(Rank.ACE, Suit.SPADES)) == "A♠"
        assert str(Card(Rank.TEN, Suit.HEARTS)) == "10♥"

    def test_card_short_str_and_repr(self):
        """Test the letter display of a card."""
        card = Card(Rank.TEN, Suit.DIAMONDS)
        assert card.short_str == "10d"
        assert repr(card) == "Card(10d)"

    def test_card_color(self):
        """Test red and black suits."""
        assert Card(Rank.ACE, Suit.HEARTS).color == "red"
        assert Card(Rank.ACE, Suit.DIAMONDS).color == "red"
        assert Card(Rank.ACE, Suit.CLUBS).color == "black"
        assert Card(Rank.ACE, Suit.SPADES).color == "black"

    def test_card_to_dict(self):
        """Test card serialization."""
        assert Card(Rank.QUEEN, Suit.HEARTS).to_dict() == {
            "rank": "Q",
            "suit": "hearts",
            "text": "Q♥",
            "color": "red",
        }


class TestCardParsing:
    """Tests for parsing card strings."""

    @pytest.mark.parametrize("text,rank,suit", [
        ("As", Rank.ACE, Suit.SPADES),
        ("Kh", Rank.KING, Suit.HEARTS),
        ("10d", Rank.TEN, Suit.DIAMONDS),
        ("Td", Rank.TEN, Suit.DIAMONDS),
        ("2c", Rank.TWO, Suit.CLUBS),
        ("A♠", Rank.ACE, Suit.SPADES),
        ("10♥", Rank.TEN, Suit.HEARTS),
        ("jS", Rank.JACK, Suit.SPADES),
    ])
    def test_from_string(self, text, rank, suit):
        """Test parsing letter and symbol notation."""
        assert Card.from_string(text) == Card(rank, suit)

    @pytest.mark.parametrize("text", ["A", "", "1s", "Ax", "11h"])
    def test_from_string_invalid(self, text):
        """Test that malformed strings are rejected."""
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_parse_cards(self):
        """Test parsing several cards at once."""
        cards = parse_cards("As Kh 10d")
        assert cards == [
            Card(Rank.ACE, Suit.SPADES),
            Card(Rank.KING, Suit.HEARTS),
            Card(Rank.TEN, Suit.DIAMONDS),
        ]


class TestDeck:
    """Tests for deck creation, shuffling and dealing."""

    def test_create_deck_has_52_unique_cards(self):
        """Test that a new deck is complete."""
        deck = create_deck()
        assert len(deck) == DECK_SIZE
        assert len(set(deck)) == DECK_SIZE

    def test_create_deck_order(self):
        """Test that a new deck is ordered by suit, then rank."""
        deck = create_deck()
        assert deck[0] == Card(Rank.TWO, Suit.HEARTS)
        assert deck[12] == Card(Rank.ACE, Suit.HEARTS)
        assert deck[-1] == Card(Rank.ACE, Suit.SPADES)

    def test_shuffle_keeps_cards(self):
        """Test that shuffling is a permutation of the input."""
        deck = create_deck()
        shuffled = shuffle_deck(deck, random.Random(1))
        assert len(shuffled) == DECK_SIZE
        assert set(shuffled) == set(deck)

    def test_shuffle_does_not_mutate_input(self):
        """Test that the input deck is left untouched."""
        deck = list(create_deck())
        before = list(deck)
        shuffle_deck(deck, random.Random(1))
        assert deck == before

    def test_shuffle_is_deterministic_with_seed(self):
        """Test that the same seed gives the same order."""
        deck = create_deck()
        assert shuffle_deck(deck, random.Random(7)) == shuffle_deck(deck, random.Random(7))

    def test_shuffle_changes_order(self):
        """Test that a shuffle actually moves cards."""
        deck = create_deck()
        assert shuffle_deck(deck, random.Random(7)) != deck

    def test_deal_cards(self):
        """Test dealing from the top of the deck."""
        deck = create_deck()
        cards, remaining = deal_cards(deck, 2)
        assert cards == deck[:2]
        assert remaining == deck[2:]
        assert len(deck) == DECK_SIZE

    def test_deal_result_fields(self):
        """Test the named fields of a deal."""
        result = deal_cards(create_deck(), 3)
        assert len(result.cards) == 3
        assert len(result.remaining_deck) == DECK_SIZE - 3

    def test_deal_zero_cards(self):
        """Test dealing nothing."""
        cards, remaining = deal_cards(create_deck(), 0)
        assert cards == ()
        assert len(remaining) == DECK_SIZE

    def test_deal_whole_deck(self):
        """Test dealing every card."""
        cards, remaining = deal_cards(create_deck(), DECK_SIZE)
        assert len(cards) == DECK_SIZE
        assert remaining == ()

    def test_deal_too_many_cards(self):
        """Test that over-dealing raises a typed error."""
        deck = create_deck()[:3]
        with pytest.raises(InsufficientCardsError):
            deal_cards(deck, 4)

    def test_insufficient_cards_is_poker_error(self):
        """Test the error hierarchy."""
        with pytest.raises(PokerError):
            deal_cards((), 1)
