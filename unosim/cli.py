"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Console UNO for 2-4 players")


def _setup_logging(log_level: str) -> None:
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _check_players(players: int) -> int:
    from unosim.engine import MAX_PLAYERS, MIN_PLAYERS

    if not MIN_PLAYERS <= players <= MAX_PLAYERS:
        raise typer.BadParameter(f"Number of players must be {MIN_PLAYERS}-{MAX_PLAYERS}.")
    return players


@app.command()
def play(
    players: Optional[int] = typer.Option(
        None,
        "--players",
        "-n",
        envvar="UNO_PLAYERS",
        help="Number of players (2-4); prompted for when omitted",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
    max_turns: Optional[int] = typer.Option(None, "--max-turns", "-t", help="Stop after this many turns"),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="UNO_LOG_LEVEL", help="Logging level"),
) -> None:
    """Play an interactive game at this terminal."""
    from unosim.agents.human_agent import HumanAgent
    from unosim.orchestration import GameRunner, attach_console_reporter

    _setup_logging(log_level)
    typer.echo("Welcome to UNO!")
    typer.echo("===============")

    while players is None:
        count = typer.prompt("Enter number of players (2-4)", type=int)
        try:
            players = _check_players(count)
        except typer.BadParameter as e:
            typer.echo(str(e))
    _check_players(players)

    names = [typer.prompt(f"Enter name for Player {i + 1}") for i in range(players)]

    runner = GameRunner(names, seed=seed, max_turns=max_turns)
    runner.decisions = HumanAgent(runner.controller)
    attach_console_reporter(runner.controller, echo=typer.echo)
    result = runner.run()
    if result.winner is None:
        typer.echo(f"\nGame stopped after {result.num_turns} turns without a winner.")


@app.command()
def simulate(
    players: int = typer.Option(2, "--players", "-n", envvar="UNO_PLAYERS", help="Number of players (2-4)"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
    max_turns: int = typer.Option(1000, "--max-turns", "-t", help="Stop after this many turns"),
    history: bool = typer.Option(False, "--history", help="Print every recorded event"),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="UNO_LOG_LEVEL", help="Logging level"),
) -> None:
    """Run a headless game with the default decisions."""
    from unosim.orchestration import GameRunner

    _setup_logging(log_level)
    _check_players(players)

    runner = GameRunner([f"player_{i}" for i in range(players)], seed=seed, max_turns=max_turns)
    result = runner.run()

    if history:
        for event in result.history:
            typer.echo(f"> {event}")
    typer.echo(f"Winner: {result.winner or 'None (unfinished)'}")
    typer.echo(f"Turns: {result.num_turns}")
    for name, size in result.hand_sizes.items():
        typer.echo(f"  {name}: {size} cards")


if __name__ == "__main__":
    app()
