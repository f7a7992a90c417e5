# SPDX-FileCopyrightText: 2025 Pôle d'Expertise de la Régulation Numérique <contact@peren.gouv.fr>
#
# SPDX-License-Identifier: MIT

"""Command line interface."""

import argparse
import logging
import os
from collections.abc import Callable
from pathlib import Path

import numpy as np

from rock_paper_scissors.choice import ChoiceError
from rock_paper_scissors.config import BestOf, ConfigError, MatchConfig
from rock_paper_scissors.match import MatchResult, RoundRecord, play_match
from rock_paper_scissors.player import ComputerPlayer, ConsolePlayer
from rock_paper_scissors.plot import plot_rounds_played, plot_winner_counts
from rock_paper_scissors.simulation import SimulationPipeline
from rock_paper_scissors.table import ScoreTable
from rock_paper_scissors.utils import configure_logging, save_chart, save_data

logger = logging.getLogger(__name__)

SEED_VARIABLE = "RPS_SEED"


def best_of_argument(value: str) -> BestOf:
    try:
        return BestOf.from_string(value)
    except ConfigError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def seed_argument(value: str) -> int:
    try:
        seed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer seed, got {value!r}") from exc
    if seed < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer seed, got {value!r}")
    return seed


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rps",
        description="Simple rock-paper-scissors game with nice output formatting",
    )
    parser.add_argument(
        "-r",
        "--rounds",
        dest="best_of",
        type=best_of_argument,
        default=BestOf.default(),
        help="Number of rounds to be played, an odd number greater than 2 (default: 5)",
    )
    parser.add_argument(
        "--stop-early",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Stop as soon as one side has won a majority of the rounds",
    )
    parser.add_argument(
        "--seed",
        type=seed_argument,
        default=os.environ.get(SEED_VARIABLE),
        help=f"Seed of the random generator (default: ${SEED_VARIABLE})",
    )
    parser.add_argument(
        "--simulate",
        type=positive_int,
        metavar="MATCHES",
        help="Simulate MATCHES computer-vs-computer matches instead of playing",
    )
    parser.add_argument("--export", type=Path, metavar="DIR", help="Export simulation data and charts to DIR")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def print_round(record: RoundRecord) -> None:
    print(f"{record.round}. Your choice: {record.human_choice}, Computer choice: {record.computer_choice}")


def play(config: MatchConfig, rng: np.random.Generator, read_line: Callable[[], str] | None = None) -> MatchResult:
    """Play one interactive match and print the score table."""
    table = ScoreTable()

    def on_round(record: RoundRecord) -> None:
        print_round(record)
        table.add_round(record)

    print()
    print("Welcome to the ROCK - PAPER - SCISSORS game")
    print("Type 'Scissors(s)', 'Rock(r)' or 'Paper(p)' to select your option")
    if config.stop_early_on_clinch:
        print(f"Playing best of {config.best_of} rounds, first to {config.best_of.majority} points wins")
    else:
        print(f"Playing total of {config.best_of} rounds")
    print()

    result = play_match(config, ConsolePlayer(read_line), ComputerPlayer(rng), on_round=on_round)
    table.finish(result)
    print()
    print(table.render())
    return result


def simulate(config: MatchConfig, matches: int, seed: int | None, export_path: Path | None) -> None:
    pipeline = SimulationPipeline(config.best_of, config.stop_early_on_clinch, matches, seed=seed)
    results = pipeline.run()
    summary = pipeline.summary(results)
    frequencies = pipeline.choice_frequencies()
    print(summary)
    print(frequencies)
    if export_path is not None:
        logger.info("Exporting simulation to %s", export_path)
        save_data(results, "matches", export_path)
        save_data(summary, "summary", export_path)
        save_data(frequencies, "choices", export_path)
        save_chart(plot_winner_counts(summary), "winner counts", export_path)
        save_chart(plot_rounds_played(results), "rounds played", export_path)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    seed = args.seed
    config = MatchConfig(best_of=args.best_of, stop_early_on_clinch=args.stop_early)
    logger.info(
        "Configuration: best of %s, stop early: %s, seed: %s", config.best_of, config.stop_early_on_clinch, seed
    )

    if args.simulate is not None:
        simulate(config, args.simulate, seed, args.export)
        return 0
    if args.export is not None:
        parser.error("--export requires --simulate")

    try:
        play(config, np.random.default_rng(seed))
    except ChoiceError as exc:
        logger.error("%s", exc)
        return 1
    except (EOFError, OSError) as exc:
        logger.error("Could not read your choice: %s", str(exc) or "end of input")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
