# SPDX-FileCopyrightText: 2025 Pôle d'Expertise de la Régulation Numérique <contact@peren.gouv.fr>
#
# SPDX-License-Identifier: MIT

"""Simulation pipeline."""

import logging
from collections import Counter
from dataclasses import dataclass, field

import numpy as np
import polars as pl
from tqdm import tqdm

from rock_paper_scissors.choice import Choice
from rock_paper_scissors.config import BestOf, MatchConfig
from rock_paper_scissors.match import MatchResult, RoundRecord, Winner, play_match
from rock_paper_scissors.player import ComputerPlayer

logger = logging.getLogger(__name__)


@dataclass
class SimulationPipeline:
    """
    Plays batches of matches between two random players.
    """

    best_of: BestOf  # number of rounds of each match
    stop_early_on_clinch: bool  # whether matches stop once clinched
    matches: int  # number of matches to play
    seed: int | None = None  # seed of the random generator shared by both players
    progress: bool = True  # whether or not to display a progress bar
    config: MatchConfig = field(init=False)  # match configuration

    def __post_init__(self):
        if self.matches < 1:
            raise ValueError("At least one match must be simulated.")
        if self.seed is not None and self.seed < 0:
            raise ValueError("Seed must be a non-negative integer.")
        self.config = MatchConfig(best_of=self.best_of, stop_early_on_clinch=self.stop_early_on_clinch)
        self.rng = np.random.default_rng(self.seed)
        self.choices: Counter[Choice] = Counter()

    def run(self) -> pl.DataFrame:
        """
        Play all matches.

        Returns:
            pl.DataFrame: One row per match with columns "match", "rounds_played",
                "human_points", "computer_points" and "winner".
        """
        logger.info("Simulating %d best-of-%s matches.", self.matches, self.best_of)
        human = ComputerPlayer(self.rng)
        computer = ComputerPlayer(self.rng)
        rows = []
        for index in tqdm(range(self.matches), desc="Playing matches", disable=not self.progress):
            result = play_match(self.config, human, computer, on_round=self._count_choices)
            rows.append(self._result_row(index, result))
        return pl.DataFrame(
            rows,
            schema={
                "match": pl.Int64,
                "rounds_played": pl.Int64,
                "human_points": pl.Int64,
                "computer_points": pl.Int64,
                "winner": pl.String,
            },
        )

    def summary(self, results: pl.DataFrame) -> pl.DataFrame:
        """
        Count matches won by each side.

        Args:
            results (pl.DataFrame): Output of `run`.

        Returns:
            pl.DataFrame: Columns "winner", "matches" and "share", one row per `Winner`.
        """
        winners = pl.DataFrame({"winner": [str(winner) for winner in Winner]})
        counts = results.group_by("winner").agg(pl.len().alias("matches"))
        summary = (
            winners.join(counts, on="winner", how="left")
            .with_columns(pl.col("matches").fill_null(0).cast(pl.Int64))
            .with_columns((pl.col("matches") / len(results)).round(4).alias("share"))
        )
        logger.info(
            "Human won %d, computer won %d, %d draws.",
            *[summary.filter(pl.col("winner") == str(winner))["matches"].item() for winner in Winner],
        )
        return summary

    def choice_frequencies(self) -> pl.DataFrame:
        """
        Count how often each choice was drawn by both players.

        Returns:
            pl.DataFrame: Columns "choice", "count" and "share".
        """
        total = sum(self.choices.values())
        return pl.DataFrame(
            {
                "choice": [str(choice) for choice in Choice],
                "count": [self.choices[choice] for choice in Choice],
            },
            schema={"choice": pl.String, "count": pl.Int64},
        ).with_columns((pl.col("count") / max(total, 1)).round(4).alias("share"))

    def _count_choices(self, record: RoundRecord) -> None:
        self.choices.update([record.human_choice, record.computer_choice])

    @staticmethod
    def _result_row(index: int, result: MatchResult) -> dict:
        return {
            "match": index,
            "rounds_played": result.rounds_played,
            "human_points": result.human_points,
            "computer_points": result.computer_points,
            "winner": str(result.winner),
        }

