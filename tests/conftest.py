"""
Pytest configuration and shared fixtures for gesturepoker tests.
"""

import random

import pytest
from gesturepoker.core.card import Card, Rank, Suit
from gesturepoker.core.game import create_game, start_new_hand


@pytest.fixture
def rng():
    """Create a seeded random source."""
    return random.Random(42)


@pytest.fixture
def new_game(rng):
    """Create a 3-player table waiting for its first hand."""
    return create_game(rng=rng)


@pytest.fixture
def started_game(new_game, rng):
    """Create a 3-player table with the first hand dealt and blinds posted."""
    return start_new_hand(new_game, rng=rng)


@pytest.fixture
def heads_up_game(rng):
    """Create a 2-player table with the first hand dealt."""
    return start_new_hand(create_game(rng=rng, num_players=2), rng=rng)


@pytest.fixture
def sample_hand():
    """Create a sample 5-card hand (pair of aces)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.KING, Suit.DIAMONDS),
        Card(Rank.QUEEN, Suit.CLUBS),
        Card(Rank.JACK, Suit.SPADES),
    ]


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TEN, Suit.SPADES),
    ]


@pytest.fixture
def straight_flush():
    """Create a straight flush (9-high)."""
    return [
        Card(Rank.NINE, Suit.HEARTS),
        Card(Rank.EIGHT, Suit.HEARTS),
        Card(Rank.SEVEN, Suit.HEARTS),
        Card(Rank.SIX, Suit.HEARTS),
        Card(Rank.FIVE, Suit.HEARTS),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.SPADES),
    ]
