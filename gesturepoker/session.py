"""
Game session: the owner of the authoritative GameState.

The core functions are pure; something still has to hold the current state,
ask the right agent for an action, and settle the pot when a hand reaches
showdown. That is this class. Front-ends (the console, a gesture overlay)
talk to a GameSession and render its snapshots.

Usage:
    session = GameSession(SessionConfig(seed=7, human_seat=None))
    while not session.is_game_over():
        result = session.play_hand()
"""

from __future__ import annotations
import logging
import random
from typing import Dict, List, Optional, Sequence

from gesturepoker.agents.base import BaseAgent
from gesturepoker.agents.heuristic_agent import HeuristicAgent
from gesturepoker.core.errors import NoHandInProgressError
from gesturepoker.core.game import (
    GameState,
    PlayerAction,
    create_game,
    is_hand_running,
    process_player_action,
    rotate_dealer,
    start_new_hand,
)
from gesturepoker.core.rules import GamePhase
from gesturepoker.core.showdown import ShowdownResult, distribute_pot, evaluate_showdown
from gesturepoker.schemas import GameStateSchema, SessionConfig


logger = logging.getLogger(__name__)


class GameSession:
    """
    Runs hands at one table.

    Args:
        config: Table configuration
        agents: Seat index -> agent. Seats without an agent get a
            HeuristicAgent, except the configured human seat, whose actions
            must come through `apply_action`.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        agents: Optional[Dict[int, BaseAgent]] = None,
    ):
        self.config = config or SessionConfig()
        self.rng = random.Random(self.config.seed)
        self.state: GameState = create_game(
            rng=self.rng,
            starting_chips=self.config.starting_chips,
            num_players=self.config.num_players,
            human_seat=self.config.human_seat,
        )

        self.agents: Dict[int, BaseAgent] = dict(agents or {})
        for index, player in enumerate(self.state.players):
            if index in self.agents or index == self.config.human_seat:
                continue
            self.agents[index] = HeuristicAgent(
                player.id, player.name, rng=random.Random(self.rng.random())
            )

        self.last_result: Optional[ShowdownResult] = None

    def is_game_over(self) -> bool:
        """Check if fewer than two players have chips left."""
        return sum(1 for p in self.state.players if p.chips > 0) < 2

    def is_hand_running(self) -> bool:
        return is_hand_running(self.state)

    def is_human_turn(self) -> bool:
        """Check if the seat on turn has to be played by a person."""
        return (
            self.is_hand_running()
            and self.state.current_player_index not in self.agents
        )

    def start_hand(self) -> GameState:
        """Deal a new hand."""
        self.last_result = None
        self.state = start_new_hand(
            self.state,
            rng=self.rng,
            small_blind=self.config.small_blind,
            big_blind=self.config.big_blind,
        )
        for agent in self.agents.values():
            agent.on_hand_start(self.state.hand_number)
        return self.state

    def apply_action(self, action: PlayerAction) -> GameState:
        """
        Apply an action for the seat on turn.

        Errors from the state machine propagate unchanged; the state is left
        as it was.
        """
        self.state = process_player_action(self.state, action)
        return self.state

    def step(self) -> GameState:
        """Ask the agent on turn for one action and apply it."""
        if not self.is_hand_running():
            raise NoHandInProgressError("No betting round to play")

        index = self.state.current_player_index
        agent = self.agents.get(index)
        if agent is None:
            raise LookupError(f"Seat {index} has no agent; use apply_action")

        return self.apply_action(agent.act(self.state, index))

    def run_agents(self) -> GameState:
        """Let agents act until a person is on turn or betting is over."""
        while self.is_hand_running() and not self.is_human_turn():
            self.step()
        return self.state

    def settle_showdown(self) -> ShowdownResult:
        """
        Resolve the showdown, pay the winners and move the dealer button.

        Returns:
            The showdown result
        """
        if self.state.phase != GamePhase.SHOWDOWN:
            raise NoHandInProgressError(
                f"Cannot settle a hand in phase {self.state.phase.value}"
            )

        result = evaluate_showdown(self.state)
        self.state = rotate_dealer(distribute_pot(self.state, result))
        self.last_result = result

        for agent in self.agents.values():
            agent.on_hand_end(result)

        return result

    def play_hand(self) -> ShowdownResult:
        """
        Play a full hand with agents on every seat.

        Returns:
            The showdown result
        """
        self.start_hand()
        self.run_agents()
        if self.is_hand_running():
            raise LookupError(
                f"Seat {self.state.current_player_index} has no agent; use apply_action"
            )
        return self.settle_showdown()

    def play(self, max_hands: int) -> List[ShowdownResult]:
        """Play hands until the game is over or `max_hands` were played."""
        results = []
        while len(results) < max_hands and not self.is_game_over():
            results.append(self.play_hand())
        logger.info(
            f"Session finished after {len(results)} hand(s): "
            + ", ".join(f"{p.name}=${p.chips}" for p in self.state.players)
        )
        return results

    def snapshot(self, viewer_index: Optional[int] = None) -> GameStateSchema:
        """Render-ready view of the table for one seat."""
        return GameStateSchema.from_state(self.state, viewer_index)


def standings(players: Sequence) -> List[str]:
    """Player names ordered by chip count, richest first."""
    return [p.name for p in sorted(players, key=lambda p: p.chips, reverse=True)]
