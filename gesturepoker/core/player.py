"""
Player record for Texas Hold'em.

A player is an immutable snapshot of one seat:
- Chips still behind (stack)
- Hole cards
- Contribution to the current betting round
- Status (active, folded, all-in, out)

The betting state machine produces updated copies with `commit`,
`fold` and friends rather than changing a player in place.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Tuple

from gesturepoker.core.card import Card
from gesturepoker.core.rules import DEFAULT_STARTING_CHIPS


class PlayerStatus(Enum):
    """Player states during a hand."""
    ACTIVE = "active"     # Still in the hand, can act
    FOLDED = "folded"     # Has folded
    ALL_IN = "all-in"     # All-in, no more actions
    OUT = "out"           # Out of the game (no chips)


@dataclass(frozen=True)
class Player:
    """
    A seat at the table.

    Attributes:
        id: Unique identifier for the player
        name: Display name
        chips: Chips behind, never negative
        hand: Hole cards (empty between hands or when out)
        bet: Amount put in during the current betting round
        status: Current player status
        is_human: Whether the seat is driven by a person
        has_acted: Whether the player acted since the last bet-level change
    """
    id: str
    name: str
    chips: int
    hand: Tuple[Card, ...] = ()
    bet: int = 0
    status: PlayerStatus = PlayerStatus.ACTIVE
    is_human: bool = False
    has_acted: bool = False

    def __post_init__(self) -> None:
        if self.chips < 0:
            raise ValueError(f"Player {self.id} cannot have negative chips ({self.chips})")
        if self.bet < 0:
            raise ValueError(f"Player {self.id} cannot have a negative bet ({self.bet})")

    def commit(self, amount: int) -> Player:
        """
        Move `amount` chips from the stack into the current bet.

        The player goes all-in when the stack reaches zero.
        """
        chips = self.chips - amount
        status = PlayerStatus.ALL_IN if chips == 0 else self.status
        return replace(self, chips=chips, bet=self.bet + amount, status=status)

    def fold(self) -> Player:
        """Fold the hand."""
        return replace(self, status=PlayerStatus.FOLDED, has_acted=True)

    def reset_for_new_round(self) -> Player:
        """Clear the round bet when a new street starts."""
        return replace(self, bet=0, has_acted=False)

    @property
    def is_active(self) -> bool:
        """Check if player can still act."""
        return self.status == PlayerStatus.ACTIVE

    @property
    def is_in_hand(self) -> bool:
        """Check if player still contests the pot (not folded)."""
        return self.status != PlayerStatus.FOLDED and bool(self.hand)

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include hole cards
        """
        result = {
            "id": self.id,
            "name": self.name,
            "chips": self.chips,
            "bet": self.bet,
            "status": self.status.value,
            "is_human": self.is_human,
        }

        if not hide_cards and self.hand:
            result["hand"] = [card.to_dict() for card in self.hand]

        return result

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.hand) if self.hand else "??"
        return f"{self.name} [{cards_str}] ${self.chips}"


def create_player(
    id: str,
    name: str,
    is_human: bool = False,
    chips: int = DEFAULT_STARTING_CHIPS,
) -> Player:
    """Create a player sitting down with a fresh stack."""
    return Player(id=id, name=name, chips=chips, is_human=is_human)
