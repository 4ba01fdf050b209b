"""
Base Agent Interface for gesturepoker.

An agent is anything that chooses actions for a seat: the heuristic bot, a
person typing at the console, or a translated hand gesture. The session asks
the agent on turn for one action at a time.

Usage:
    class MyAgent(BaseAgent):
        def act(self, state, player_index):
            return PlayerAction.call()
"""

from abc import ABC, abstractmethod
from typing import Optional

from gesturepoker.core.game import GameState, PlayerAction
from gesturepoker.core.showdown import ShowdownResult


class BaseAgent(ABC):
    """
    Abstract base class for poker agents.

    Attributes:
        player_id: Identifier of the seat's player
        name: Human-readable name
    """

    def __init__(self, player_id: str, name: Optional[str] = None):
        """
        Initialize the agent.

        Args:
            player_id: Identifier of the seat's player
            name: Optional human-readable name
        """
        self.player_id = player_id
        self.name = name or f"Agent-{player_id}"

    @abstractmethod
    def act(self, state: GameState, player_index: int) -> PlayerAction:
        """
        Choose an action for the seat on turn.

        Args:
            state: Current game state (read-only)
            player_index: Seat the agent plays

        Returns:
            The action to submit
        """

    def on_hand_start(self, hand_number: int) -> None:
        """Called when a new hand starts."""

    def on_hand_end(self, result: ShowdownResult) -> None:
        """Called with the showdown result when a hand ends."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.player_id}, {self.name})"
