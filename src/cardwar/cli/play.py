"""CLI command for watching a game of War."""

from __future__ import annotations

import logging

import click

from cardwar.playtest.session import SessionConfig, WatchSession

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--max-rounds", type=click.IntRange(min=1), default=10_000, help="Round limit before forced end")
@click.option("--player1", default="Player 1", help="Name of the first player")
@click.option("--player2", default="Player 2", help="Name of the second player")
@click.option("-q", "--quiet", is_flag=True, help="Only print the winner")
@click.option("--show-counts", is_flag=True, help="Print hand sizes after every round")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    seed: int | None,
    max_rounds: int,
    player1: str,
    player2: str,
    quiet: bool,
    show_counts: bool,
    verbose: bool,
):
    """Deal a shuffled deck to two players and play War to the end."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    config = SessionConfig(
        seed=seed,
        max_rounds=max_rounds,
        player_names=(player1, player2),
        quiet=quiet,
        show_counts=show_counts,
    )

    if not quiet:
        click.echo(f"Seed: {config.seed}")
        click.echo("")

    session = WatchSession(config)

    try:
        result = session.run(output_fn=click.echo)
    except KeyboardInterrupt:
        click.echo("\n\nGame interrupted.")
        return

    if quiet:
        click.echo(f"Seed: {config.seed}")
    else:
        click.echo(f"\n{result.rounds} rounds, {result.wars} wars.")


if __name__ == "__main__":
    main()
