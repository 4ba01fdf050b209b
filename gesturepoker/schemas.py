"""
Pydantic schemas for configuration, inbound actions and state snapshots.

The core works on frozen dataclasses; these models are the validated edge
around it. Snapshots are what a rendering layer (console, web page, gesture
overlay) consumes.
"""

from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gesturepoker.core.game import GameState, PlayerAction
from gesturepoker.core.hand import get_hand_description, get_ranking_display_name
from gesturepoker.core.rules import (
    ActionType, GamePhase,
    DEFAULT_BIG_BLIND, DEFAULT_NUM_PLAYERS, DEFAULT_SMALL_BLIND, DEFAULT_STARTING_CHIPS,
    MAX_PLAYERS, MIN_PLAYERS,
)
from gesturepoker.core.showdown import PlayerHandResult, ShowdownResult


# ============= Configuration =============

class SessionConfig(BaseModel):
    """Table configuration for a game session."""
    num_players: int = Field(ge=MIN_PLAYERS, le=MAX_PLAYERS, default=DEFAULT_NUM_PLAYERS)
    starting_chips: int = Field(gt=0, default=DEFAULT_STARTING_CHIPS)
    small_blind: int = Field(gt=0, default=DEFAULT_SMALL_BLIND)
    big_blind: int = Field(gt=0, default=DEFAULT_BIG_BLIND)
    human_seat: Optional[int] = Field(default=0, ge=0, description="Seat typed by a person, None for bots only")
    seed: Optional[int] = Field(default=None, description="Seed for shuffles and bot bluffs")

    @model_validator(mode="after")
    def _check_table(self) -> SessionConfig:
        if self.big_blind <= self.small_blind:
            raise ValueError("big_blind must be larger than small_blind")
        if self.human_seat is not None and self.human_seat >= self.num_players:
            raise ValueError(f"human_seat must be below num_players ({self.num_players})")
        return self


# ============= Request Schemas =============

class ActionRequest(BaseModel):
    """Request to take a game action."""
    action_type: ActionType = Field(..., description="Action type: fold, check, call, raise, all-in")
    amount: Optional[int] = Field(default=None, ge=0, description="New total bet for raise")

    @field_validator("action_type", mode="before")
    @classmethod
    def _normalize_action(cls, value):
        if isinstance(value, str):
            value = value.strip().lower().replace("_", "-")
            if value == "allin":
                value = "all-in"
        return value

    @model_validator(mode="after")
    def _check_amount(self) -> ActionRequest:
        if self.action_type == ActionType.RAISE and self.amount is None:
            raise ValueError("raise needs an amount")
        return self

    @classmethod
    def parse_command(cls, text: str) -> ActionRequest:
        """Parse typed input such as 'call' or 'raise 40'."""
        parts = text.split()
        if not parts:
            raise ValueError("Empty command")
        amount = parts[1] if len(parts) > 1 else None
        return cls(action_type=parts[0], amount=amount)

    def to_action(self) -> PlayerAction:
        if self.action_type == ActionType.RAISE:
            return PlayerAction(self.action_type, self.amount)
        return PlayerAction(self.action_type)


# ============= Response Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    text: str
    color: str


class PlayerSchema(BaseModel):
    """Seat information; hand is None when hidden from the viewer."""
    id: str
    name: str
    chips: int = Field(ge=0)
    bet: int = Field(ge=0)
    status: str
    is_human: bool
    hand: Optional[List[CardSchema]] = None


class GameStateSchema(BaseModel):
    """Game state as seen by one viewer."""
    phase: GamePhase
    hand_number: int
    pot: int = Field(ge=0)
    current_bet: int = Field(ge=0)
    community_cards: List[CardSchema]
    dealer_index: int
    current_player_index: int
    last_raiser_index: int = Field(ge=-1)
    players: List[PlayerSchema]

    model_config = ConfigDict(use_enum_values=True)

    @classmethod
    def from_state(cls, state: GameState, viewer_index: Optional[int] = None) -> GameStateSchema:
        """
        Build a snapshot.

        Hole cards are revealed only to their owner, or to everyone once the
        hand reaches showdown.
        """
        reveal_all = state.phase == GamePhase.SHOWDOWN
        players = [
            player.to_dict(hide_cards=not (reveal_all or index == viewer_index))
            for index, player in enumerate(state.players)
        ]
        return cls(
            phase=state.phase,
            hand_number=state.hand_number,
            pot=state.pot,
            current_bet=state.current_bet,
            community_cards=[c.to_dict() for c in state.community_cards],
            dealer_index=state.dealer_index,
            current_player_index=state.current_player_index,
            last_raiser_index=state.last_raiser_index,
            players=players,
        )


class HandResultSchema(BaseModel):
    """One participant's showdown hand."""
    player_id: str
    player_index: int
    ranking: str
    description: str
    best_hand: List[CardSchema]

    @classmethod
    def from_result(cls, result: PlayerHandResult) -> HandResultSchema:
        return cls(
            player_id=result.player.id,
            player_index=result.player_index,
            ranking=get_ranking_display_name(result.evaluation),
            description=get_hand_description(result.evaluation),
            best_hand=[c.to_dict() for c in result.best_hand],
        )


class ShowdownResultSchema(BaseModel):
    """Showdown outcome for display."""
    winners: List[HandResultSchema]
    all_player_results: List[HandResultSchema]
    pot_per_winner: int = Field(ge=0)

    @classmethod
    def from_result(cls, result: ShowdownResult) -> ShowdownResultSchema:
        return cls(
            winners=[HandResultSchema.from_result(r) for r in result.winners],
            all_player_results=[HandResultSchema.from_result(r) for r in result.all_player_results],
            pot_per_winner=result.pot_per_winner,
        )
