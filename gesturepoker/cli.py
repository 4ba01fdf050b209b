"""
Console front-end for gesturepoker.

One seat is typed by a person (`fold`, `check`, `call`, `raise 40`,
`all-in`); the heuristic bots play the others. This stands in for the
gesture-recognition layer: both produce the same PlayerAction values.

Usage:
    python run.py [--seed N] [--hands N] [--bots-only] [--log-level LEVEL]
"""

from __future__ import annotations
import argparse
import logging
from typing import Callable, Optional

from gesturepoker.agents.base import BaseAgent
from gesturepoker.core.game import GameState, PlayerAction, get_legal_actions, validate_action
from gesturepoker.schemas import ActionRequest, GameStateSchema, SessionConfig, ShowdownResultSchema
from gesturepoker.session import GameSession, standings


logger = logging.getLogger(__name__)


class ConsoleAgent(BaseAgent):
    """
    Agent for a person at the keyboard.

    Input is re-prompted until it parses and passes the same checks the
    state machine applies.
    """

    def __init__(
        self,
        player_id: str,
        name: Optional[str] = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        super().__init__(player_id, name or f"Human-{player_id}")
        self.read = read
        self.write = write

    def act(self, state: GameState, player_index: int) -> PlayerAction:
        self.write(render_table(GameStateSchema.from_state(state, player_index)))
        options = ", ".join(_describe_legal(a) for a in get_legal_actions(state))
        while True:
            text = self.read(f"Your move ({options}): ")
            try:
                action = ActionRequest.parse_command(text).to_action()
                validate_action(state, action)
            except ValueError as e:
                self.write(f"  Not allowed: {e}")
                continue
            return action


def _describe_legal(action: dict) -> str:
    if "min" in action:
        return f"{action['type']} {action['min']}-{action['max']}"
    if "amount" in action:
        return f"{action['type']} ({action['amount']})"
    return action["type"]


def render_table(snapshot: GameStateSchema) -> str:
    """Plain-text picture of a snapshot."""
    board = " ".join(c.text for c in snapshot.community_cards) or "--"
    lines = [
        f"--- Hand #{snapshot.hand_number} | {snapshot.phase} | "
        f"pot ${snapshot.pot} | to match ${snapshot.current_bet} ---",
        f"Board: {board}",
    ]
    for index, player in enumerate(snapshot.players):
        cards = " ".join(c.text for c in player.hand) if player.hand else "?? ??"
        markers = ""
        if index == snapshot.dealer_index:
            markers += " (D)"
        if index == snapshot.current_player_index:
            markers += " <-"
        lines.append(
            f"  {player.name:<8} {cards:<8} ${player.chips:<6} bet ${player.bet:<5} "
            f"{player.status}{markers}"
        )
    return "\n".join(lines)


def render_result(result: ShowdownResultSchema) -> str:
    lines = ["=== Showdown ==="]
    for hand in result.all_player_results:
        cards = " ".join(c.text for c in hand.best_hand)
        lines.append(f"  seat {hand.player_index}: {cards}  {hand.description}")
    winners = ", ".join(w.player_id for w in result.winners)
    lines.append(f"Winner(s): {winners} take ${result.pot_per_winner} each")
    return "\n".join(lines)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="gesturepoker console table")
    parser.add_argument("--seed", type=int, default=None, help="Seed for shuffles and bots")
    parser.add_argument("--hands", type=int, default=10, help="Maximum hands to play")
    parser.add_argument("--bots-only", action="store_true", help="Let bots play every seat")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    config = SessionConfig(seed=args.seed, human_seat=None if args.bots_only else 0)
    agents = {}
    if config.human_seat is not None:
        agents[config.human_seat] = ConsoleAgent("human", "You")

    session = GameSession(config, agents)

    try:
        while session.state.hand_number < args.hands and not session.is_game_over():
            result = session.play_hand()
            print(render_result(ShowdownResultSchema.from_result(result)))
    except (KeyboardInterrupt, EOFError):
        print("\nLeaving the table.")

    print("Final standings: " + ", ".join(standings(session.state.players)))
    for player in session.state.players:
        print(f"  {player.name}: ${player.chips}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
