"""CLI for batch statistics and the shuffle fairness check."""

from __future__ import annotations

import logging

import click

from cardwar.analysis.batch import simulate_games
from cardwar.analysis.fairness import check_shuffle_fairness

logger = logging.getLogger(__name__)


@click.command()
@click.option("-n", "--games", type=click.IntRange(min=1), default=1000, help="Games to simulate")
@click.option("--shuffles", type=click.IntRange(min=1), default=5200, help="Shuffles for the fairness test")
@click.option("--seed", type=int, default=0, help="Base random seed")
@click.option("--max-rounds", type=click.IntRange(min=1), default=10_000, help="Round limit per game")
@click.option("--alpha", type=float, default=0.01, help="Significance level for the fairness test")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(games: int, shuffles: int, seed: int, max_rounds: int, alpha: float, verbose: bool):
    """Simulate many games and test the shuffle for uniformity."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    logger.info(f"Simulating {games} games (seed {seed})...")
    summary = simulate_games(games, seed=seed, max_rounds=max_rounds)
    rate1, rate2 = summary.win_rates

    click.echo("=== Games ===")
    click.echo(f"Games:        {summary.games}")
    click.echo(f"Player 1 won: {summary.wins[0]} ({rate1:.1%})")
    click.echo(f"Player 2 won: {summary.wins[1]} ({rate2:.1%})")
    click.echo(f"Rounds:       mean {summary.mean_rounds:.1f}, max {summary.max_rounds}")
    click.echo(f"Wars:         mean {summary.mean_wars:.1f}")
    if summary.truncated:
        click.echo(f"Truncated:    {summary.truncated} (hit {max_rounds} rounds)")

    logger.info(f"Shuffling {shuffles} decks...")
    fairness = check_shuffle_fairness(trials=shuffles, seed=seed, alpha=alpha)

    click.echo("")
    click.echo("=== Shuffle ===")
    click.echo(f"Chi-square:   {fairness.chi2:.1f} (dof {fairness.dof})")
    click.echo(f"p-value:      {fairness.pvalue:.4f}")
    verdict = "uniform" if fairness.is_uniform else "NOT uniform"
    click.echo(f"Verdict:      {verdict} at alpha={alpha}")


if __name__ == "__main__":
    main()
