"""
Card and Deck primitives for Texas Hold'em.

Cards are small immutable values. A deck is just a tuple of cards: it is
created fresh for every hand, shuffled into a new tuple, and dealing returns
the dealt cards together with a new remaining deck. Nothing here mutates its
input.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from gesturepoker.core.errors import InsufficientCardsError


class Suit(Enum):
    """Card suits."""
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class Rank(IntEnum):
    """Card ranks; the value is the numeric rank used by the evaluator."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


# String mappings
SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.HEARTS: "h",
    Suit.DIAMONDS: "d",
    Suit.CLUBS: "c",
    Suit.SPADES: "s",
}

RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Reverse mappings
CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_RANK["T"] = Rank.TEN  # Also accept "T"
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

DECK_SIZE = 52


@dataclass(frozen=True)
class Card:
    """
    A playing card identified by rank and suit.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As"), Card.from_string("10♥")

    Instances are immutable and compare equal when rank and suit match.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts formats:
        - "As", "Kh", "10d", "Td", "2c" (rank + suit char)
        - "A♠", "K♥", "10♦", "2♣" (rank + suit symbol)
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_part = s[:-1].upper()
        suit_part = s[-1]

        if rank_part not in CHAR_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")

        rank = CHAR_TO_RANK[rank_part]

        # Try suit char first, then symbol
        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(rank, suit)

    def __lt__(self, other: Card) -> bool:
        """Compare by rank only (for sorting)."""
        return self.rank < other.rank

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', '10h'."""
        return f"{RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_CHARS[self.rank],
            "suit": self.suit.value,
            "text": str(self),
            "color": self.color,
        }


Deck = Tuple[Card, ...]


class DealResult(NamedTuple):
    """Cards taken from the top of a deck and what is left of it."""
    cards: Tuple[Card, ...]
    remaining_deck: Deck


def create_deck() -> Deck:
    """Return the 52 cards of a standard deck in suit-then-rank order."""
    return tuple(Card(rank, suit) for suit in Suit for rank in Rank)


def shuffle_deck(deck: Sequence[Card], rng: Optional[random.Random] = None) -> Deck:
    """
    Return a uniformly shuffled copy of the deck (Fisher-Yates).

    Args:
        deck: Cards to shuffle; left untouched
        rng: Random source, injectable for deterministic tests
    """
    rng = rng or random.Random()
    shuffled = list(deck)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return tuple(shuffled)


def deal_cards(deck: Sequence[Card], count: int) -> DealResult:
    """
    Deal `count` cards from the top of the deck.

    Raises:
        InsufficientCardsError: If not enough cards remain.
    """
    if count > len(deck):
        raise InsufficientCardsError(
            f"Cannot deal {count} cards from deck with {len(deck)} cards"
        )
    return DealResult(tuple(deck[:count]), tuple(deck[count:]))


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse space-separated cards, e.g. "As Kh 10d" or "A♠ K♥ T♦".

    Returns:
        List of Card objects
    """
    return [Card.from_string(s) for s in cards_str.split()]
