"""CLI entry point: python -m yahtzee --player NAME:KIND ..."""

import argparse
import sys

from yahtzee.agents.base import AgentKind
from yahtzee.config.settings import configure_logging, get_settings
from yahtzee.engine.player import Player
from yahtzee.session.manager import GameSession

DEFAULT_PLAYERS = ["Ada:four_and_up", "Grace:of_a_kinder"]


def _parse_player(spec: str) -> tuple[str, AgentKind]:
    name, _, kind = spec.partition(":")
    try:
        agent_kind = AgentKind(kind or AgentKind.RANDOM.value)
    except ValueError:
        choices = ", ".join(k.value for k in AgentKind if k is not AgentKind.HUMAN)
        raise argparse.ArgumentTypeError(f"unknown agent {kind!r} (choose from {choices})")
    if agent_kind is AgentKind.HUMAN:
        raise argparse.ArgumentTypeError("human players need an interactive driver")
    return name, agent_kind


def _print_results(session: GameSession, games: int) -> None:
    print("=" * 60)
    print(f"RESULTS ({games} game{'s' if games != 1 else ''})")
    print("=" * 60)
    for rank, player in enumerate(
        sorted(session.players, key=lambda p: p.cumulative_score, reverse=True), 1
    ):
        print(f"  {rank}. {player.name:20s} {player.strategy_name:15s} {player.cumulative_score:>6d}")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="yahtzee",
        description="Play Yahtzee between computer strategies",
    )
    parser.add_argument(
        "-p", "--player",
        dest="players",
        action="append",
        type=_parse_player,
        help="NAME:KIND, e.g. Ada:four_and_up (repeatable)",
    )
    parser.add_argument(
        "-g", "--games",
        type=int,
        default=1,
        help="Number of games to play (default: 1)",
    )
    parser.add_argument(
        "-s", "--speed",
        type=int,
        default=100,
        help="Play speed 0-100; 100 plays without pauses (default: 100)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override LOG_LEVEL from the environment",
    )
    args = parser.parse_args()

    configure_logging(args.log_level)
    players = args.players or [_parse_player(spec) for spec in DEFAULT_PLAYERS]

    failures: list[BaseException] = []

    def on_error(player: Player, error: BaseException) -> None:
        failures.append(error)
        session.reset_game()

    session = GameSession(get_settings(), on_error=on_error)
    session.set_play_speed(args.speed)
    for name, kind in players:
        session.add_player(name, kind)

    for _ in range(args.games):
        if not session.new_game():
            print("Not enough players to start a game.", file=sys.stderr)
            sys.exit(1)
        session.wait_until_finished()
        if failures:
            print(f"Game aborted: {failures[0]}", file=sys.stderr)
            sys.exit(1)

    session.coordinator.record_scores()
    _print_results(session, args.games)


if __name__ == "__main__":
    main()
