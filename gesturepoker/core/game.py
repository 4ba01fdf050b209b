"""
Texas Hold'em Game Engine - State Machine Implementation.

This module implements the betting state machine as pure functions over an
immutable GameState. It handles:
- Hand setup (fresh deck, hole cards, blinds)
- Player actions (fold, check, call, raise, all-in)
- Turn order, betting round completion and phase advancement
- Dealing the board straight through when no more betting is possible

Every operation returns a new GameState; the caller owns the single current
value and threads it through calls.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging
import random

from gesturepoker.core.card import Card, Deck, create_deck, deal_cards, shuffle_deck
from gesturepoker.core.errors import (
    IllegalCheckError,
    IllegalRaiseError,
    InactivePlayerError,
    InsufficientChipsError,
    NoHandInProgressError,
)
from gesturepoker.core.player import Player, PlayerStatus, create_player
from gesturepoker.core.rules import (
    GamePhase, ActionType, BETTING_PHASES,
    get_blind_positions, get_first_to_act_preflop, get_first_to_act_postflop,
    next_phase,
    DEFAULT_BIG_BLIND, DEFAULT_SMALL_BLIND, DEFAULT_STARTING_CHIPS,
    DEFAULT_NUM_PLAYERS, MIN_PLAYERS, MAX_PLAYERS, HOLE_CARDS,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerAction:
    """
    An action submitted for the seat on turn.

    For RAISE, `amount` is the player's new total bet for the round,
    not the increment.
    """
    type: ActionType
    amount: Optional[int] = None

    @classmethod
    def fold(cls) -> PlayerAction:
        return cls(ActionType.FOLD)

    @classmethod
    def check(cls) -> PlayerAction:
        return cls(ActionType.CHECK)

    @classmethod
    def call(cls) -> PlayerAction:
        return cls(ActionType.CALL)

    @classmethod
    def raise_to(cls, amount: int) -> PlayerAction:
        return cls(ActionType.RAISE, amount)

    @classmethod
    def all_in(cls) -> PlayerAction:
        return cls(ActionType.ALL_IN)

    def __str__(self) -> str:
        if self.type == ActionType.RAISE:
            return f"raise to {self.amount}"
        return self.type.value


@dataclass(frozen=True)
class GameState:
    """
    The whole table at one point in time.

    Attributes:
        players: Seats in turn order
        deck: Cards not dealt yet
        community_cards: Board cards revealed so far
        pot: Every chip committed since the last distribution
        current_player_index: Seat on turn
        dealer_index: Dealer button seat
        phase: Current phase of the hand
        current_bet: Bet to match in the current round
        last_raiser_index: Seat that set the current bet level, -1 if none.
            Informational only; round completion is decided by each
            player's `has_acted` flag
        hand_number: Hands started so far
    """
    players: Tuple[Player, ...]
    deck: Deck = ()
    community_cards: Tuple[Card, ...] = ()
    pot: int = 0
    current_player_index: int = 0
    dealer_index: int = 0
    phase: GamePhase = GamePhase.WAITING
    current_bet: int = 0
    last_raiser_index: int = -1
    hand_number: int = 0

    @property
    def num_players(self) -> int:
        """Number of seats at the table."""
        return len(self.players)

    @property
    def current_player(self) -> Player:
        """The player whose turn it is to act."""
        return self.players[self.current_player_index]

    @property
    def total_chips(self) -> int:
        """Chips behind plus chips in the pot."""
        return sum(p.chips for p in self.players) + self.pot


def create_game(
    rng: Optional[random.Random] = None,
    starting_chips: int = DEFAULT_STARTING_CHIPS,
    num_players: int = DEFAULT_NUM_PLAYERS,
    human_seat: Optional[int] = 0,
) -> GameState:
    """
    Create a new table waiting for its first hand.

    The seat at `human_seat` is the human player; the other seats are bots.

    Args:
        rng: Random source for the initial shuffle
        starting_chips: Stack for each player
        num_players: Number of seats (2-10)
        human_seat: Seat played by a person, None for bots only
    """
    if num_players < MIN_PLAYERS or num_players > MAX_PLAYERS:
        raise ValueError(f"Number of players must be {MIN_PLAYERS}-{MAX_PLAYERS}")
    if human_seat is not None and not 0 <= human_seat < num_players:
        raise ValueError(f"Human seat must be 0-{num_players - 1}, got {human_seat}")

    players = [
        create_player("human", "You", is_human=True, chips=starting_chips)
        if i == human_seat else
        create_player(f"ai-{i}", f"Bot {i}", chips=starting_chips)
        for i in range(num_players)
    ]

    return GameState(
        players=tuple(players),
        deck=shuffle_deck(create_deck(), rng),
        current_player_index=1 % num_players,  # Player after dealer starts
        dealer_index=0,
        phase=GamePhase.WAITING,
    )


def start_new_hand(
    state: GameState,
    rng: Optional[random.Random] = None,
    small_blind: int = DEFAULT_SMALL_BLIND,
    big_blind: int = DEFAULT_BIG_BLIND,
) -> GameState:
    """
    Shuffle a fresh deck, deal hole cards and post the blinds.

    Players without chips sit the hand out. A blind bigger than the poster's
    stack takes the whole stack and puts them all-in.
    """
    if sum(1 for p in state.players if p.chips > 0) < MIN_PLAYERS:
        raise ValueError("Cannot start hand: not enough players with chips")

    n = state.num_players
    deck = shuffle_deck(create_deck(), rng)

    players: List[Player] = []
    for player in state.players:
        if player.chips == 0:
            players.append(replace(
                player, hand=(), bet=0, status=PlayerStatus.OUT, has_acted=False
            ))
            continue
        cards, deck = deal_cards(deck, HOLE_CARDS)
        players.append(replace(
            player, hand=cards, bet=0, status=PlayerStatus.ACTIVE, has_acted=False
        ))

    # Post blinds
    sb_pos, bb_pos = get_blind_positions(n, state.dealer_index)
    pot = 0
    for pos, blind in ((sb_pos, small_blind), (bb_pos, big_blind)):
        if not players[pos].is_active:
            continue
        amount = min(blind, players[pos].chips)
        players[pos] = players[pos].commit(amount)
        pot += amount

    hand_number = state.hand_number + 1
    logger.info(
        f"Starting hand #{hand_number}: dealer={state.dealer_index} "
        f"SB={sb_pos} BB={bb_pos}"
    )

    new_state = replace(
        state,
        players=tuple(players),
        deck=deck,
        community_cards=(),
        pot=pot,
        current_bet=max(p.bet for p in players),
        phase=GamePhase.PREFLOP,
        current_player_index=_next_actor(players, get_first_to_act_preflop(n, state.dealer_index)),
        last_raiser_index=bb_pos,  # Big blind is the initial "raiser"
        hand_number=hand_number,
    )

    if _betting_closed(new_state):
        return _advance_phase(new_state)
    return new_state


def is_hand_running(state: GameState) -> bool:
    """Check if a betting round is open."""
    return state.phase in BETTING_PHASES


def validate_action(state: GameState, action: PlayerAction) -> None:
    """
    Check an action for the seat on turn without applying it.

    Raises:
        NoHandInProgressError: If no betting round is open
        InactivePlayerError: If the seat on turn cannot act
        IllegalCheckError: If checking while a bet is owed
        IllegalRaiseError: If a raise does not exceed the current bet
        InsufficientChipsError: If a call or raise costs more than the stack
    """
    if not is_hand_running(state):
        raise NoHandInProgressError(f"No betting round in phase {state.phase.value}")

    player = state.current_player
    if not player.is_active:
        raise InactivePlayerError(
            f"Player {player.id} is {player.status.value} and cannot act"
        )

    chips_to_call = state.current_bet - player.bet

    if action.type == ActionType.CHECK:
        if player.bet < state.current_bet:
            raise IllegalCheckError(f"Cannot check, must call ${chips_to_call}")

    elif action.type == ActionType.CALL:
        if chips_to_call > player.chips:
            raise InsufficientChipsError(
                f"Cannot call ${chips_to_call} with ${player.chips}, go all-in instead"
            )

    elif action.type == ActionType.RAISE:
        if action.amount is None or action.amount <= state.current_bet:
            raise IllegalRaiseError(
                f"Raise must be to more than ${state.current_bet}, got {action.amount}"
            )
        if action.amount - player.bet > player.chips:
            raise InsufficientChipsError(
                f"Cannot raise to ${action.amount}, at most ${player.chips + player.bet}"
            )


def process_player_action(state: GameState, action: PlayerAction) -> GameState:
    """
    Apply an action for the seat on turn and advance the game.

    Args:
        state: Current state
        action: Action for state.current_player_index

    Returns:
        The state after the action, with the turn moved on and the phase
        advanced if the betting round completed
    """
    validate_action(state, action)

    index = state.current_player_index
    player = state.players[index]
    pot = state.pot
    current_bet = state.current_bet
    last_raiser_index = state.last_raiser_index
    reopened = False

    if action.type == ActionType.FOLD:
        player = player.fold()

    elif action.type == ActionType.CALL:
        chips_to_call = current_bet - player.bet
        player = player.commit(chips_to_call)
        pot += chips_to_call

    elif action.type == ActionType.RAISE:
        added = action.amount - player.bet
        player = player.commit(added)
        pot += added
        current_bet = action.amount
        last_raiser_index = index
        reopened = True

    elif action.type == ActionType.ALL_IN:
        added = player.chips
        player = player.commit(added)
        pot += added
        # An all-in that doesn't exceed the current bet is just a call
        if player.bet > current_bet:
            current_bet = player.bet
            last_raiser_index = index
            reopened = True

    players = list(state.players)
    players[index] = replace(player, has_acted=True)

    if reopened:
        for i, other in enumerate(players):
            if i != index and other.is_active:
                players[i] = replace(other, has_acted=False)

    logger.debug(
        f"Hand #{state.hand_number} {state.phase.value}: "
        f"{player.name} {action} (bet={player.bet}, pot={pot})"
    )

    new_state = replace(
        state,
        players=tuple(players),
        pot=pot,
        current_bet=current_bet,
        last_raiser_index=last_raiser_index,
    )

    if _count_contenders(new_state) <= 1 or _is_round_complete(new_state):
        return _advance_phase(new_state)

    return replace(
        new_state,
        current_player_index=_next_actor(players, index + 1),
    )


def _next_actor(players: Sequence[Player], start: int) -> int:
    """First seat at or after `start` that can act, wrapping around."""
    n = len(players)
    for offset in range(n):
        pos = (start + offset) % n
        if players[pos].is_active:
            return pos
    return start % n


def _count_contenders(state: GameState) -> int:
    """Players still contesting the pot."""
    return sum(1 for p in state.players if p.is_in_hand)


def _is_round_complete(state: GameState) -> bool:
    """
    Check if the current betting round is complete.

    Every active player must have matched the current bet, and the action
    must have come back round to whoever set it: everyone still active has
    acted since the last raise. A lone active player has nobody left to
    answer, so matching is enough.
    """
    actors = [p for p in state.players if p.is_active]

    if any(p.bet != state.current_bet for p in actors):
        return False

    return len(actors) <= 1 or all(p.has_acted for p in actors)


def _betting_closed(state: GameState) -> bool:
    """Check if nobody can bet any more this hand."""
    if _count_contenders(state) <= 1:
        return True
    return sum(1 for p in state.players if p.is_active) <= 1 and _is_round_complete(state)


def _deal_next_street(state: GameState) -> GameState:
    """Move to the next phase, dealing its community cards and resetting bets."""
    transition = next_phase(state.phase)
    if transition is None:
        return state

    phase, cards_to_deal = transition
    community_cards = state.community_cards
    deck = state.deck

    if cards_to_deal > 0:
        cards, deck = deal_cards(deck, cards_to_deal)
        community_cards = community_cards + cards

    players = tuple(p.reset_for_new_round() for p in state.players)
    first = get_first_to_act_postflop(state.num_players, state.dealer_index)

    logger.info(
        f"Hand #{state.hand_number}: {phase.value} "
        f"[{' '.join(str(c) for c in community_cards)}] pot={state.pot}"
    )

    return replace(
        state,
        phase=phase,
        community_cards=community_cards,
        deck=deck,
        players=players,
        current_bet=0,
        current_player_index=_next_actor(players, first),
        last_raiser_index=-1,
    )


def _advance_phase(state: GameState) -> GameState:
    """
    Advance past a completed betting round.

    When no further betting is possible the remaining streets are dealt
    straight through to the showdown.
    """
    state = _deal_next_street(state)
    while state.phase != GamePhase.SHOWDOWN and _betting_closed(state):
        state = _deal_next_street(state)
    return state


def get_legal_actions(state: GameState) -> List[Dict[str, Any]]:
    """
    Get legal actions for the seat on turn.

    Returns:
        List of action dicts with type and constraints
    """
    if not is_hand_running(state):
        return []

    player = state.current_player
    if not player.is_active:
        return []

    actions: List[Dict[str, Any]] = [{"type": ActionType.FOLD.value}]
    chips_to_call = state.current_bet - player.bet
    max_bet = player.chips + player.bet

    if chips_to_call == 0:
        actions.append({"type": ActionType.CHECK.value})
    elif chips_to_call <= player.chips:
        actions.append({"type": ActionType.CALL.value, "amount": chips_to_call})

    if max_bet > state.current_bet:
        actions.append({
            "type": ActionType.RAISE.value,
            "min": state.current_bet + 1,
            "max": max_bet,
        })

    if player.chips > 0:
        actions.append({"type": ActionType.ALL_IN.value, "amount": max_bet})

    return actions


def rotate_dealer(state: GameState) -> GameState:
    """Move the dealer button one seat and wait for the next hand."""
    return replace(
        state,
        dealer_index=(state.dealer_index + 1) % state.num_players,
        phase=GamePhase.WAITING,
    )
