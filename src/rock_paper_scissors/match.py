# SPDX-FileCopyrightText: 2025 Pôle d'Expertise de la Régulation Numérique <contact@peren.gouv.fr>
#
# SPDX-License-Identifier: MIT

"""Match state and match loop."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from rock_paper_scissors.choice import Choice, Outcome, compare
from rock_paper_scissors.config import MatchConfig
from rock_paper_scissors.player import Player

logger = logging.getLogger(__name__)


class Winner(Enum):
    Human = "Human"
    Computer = "Computer"
    Draw = "Draw"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> "Winner":
        """Map an outcome where the human is the first side."""
        if outcome is Outcome.FirstWins:
            return cls.Human
        if outcome is Outcome.SecondWins:
            return cls.Computer
        return cls.Draw


@dataclass(frozen=True)
class RoundRecord:
    round: int
    human_choice: Choice
    computer_choice: Choice
    winner: Winner  # also tells which side to highlight


@dataclass(frozen=True)
class MatchResult:
    human_points: int
    computer_points: int
    rounds_played: int
    winner: Winner
    rounds: tuple[RoundRecord, ...] = ()


@dataclass
class MatchState:
    config: MatchConfig
    human_points: int = 0
    computer_points: int = 0
    round: int = 1

    @classmethod
    def new(cls, config: MatchConfig | None = None) -> "MatchState":
        return cls(config=config if config is not None else MatchConfig())

    @property
    def best_of(self) -> int:
        return self.config.best_of.value

    @property
    def rounds_played(self) -> int:
        return self.round - 1

    def round_winner(self, human_choice: Choice, computer_choice: Choice) -> Winner:
        return Winner.from_outcome(compare(human_choice, computer_choice))

    def record_round(self, outcome: Outcome) -> None:
        """
        Award the round and move on to the next one.

        Args:
            outcome (Outcome): Round outcome, the human being the first side.
        """
        if outcome is Outcome.FirstWins:
            self.human_points += 1
        elif outcome is Outcome.SecondWins:
            self.computer_points += 1
        self.round += 1

    def can_end_early(self) -> bool:
        """Whether one side already holds a majority of the best-of rounds."""
        majority = self.config.best_of.majority
        return self.human_points >= majority or self.computer_points >= majority

    def match_winner(self) -> Winner:
        if self.human_points > self.computer_points:
            return Winner.Human
        if self.human_points < self.computer_points:
            return Winner.Computer
        return Winner.Draw

    def result(self, rounds: list[RoundRecord] | None = None) -> MatchResult:
        return MatchResult(
            human_points=self.human_points,
            computer_points=self.computer_points,
            rounds_played=self.rounds_played,
            winner=self.match_winner(),
            rounds=tuple(rounds or ()),
        )


@dataclass
class Match:
    """
    Sequential match between a human side and a computer side.

    Each round collects the human choice, then the computer choice, records the
    outcome and notifies `on_round`. Errors raised by the players (unparseable input,
    closed input stream) abort the match and are propagated unchanged.
    """

    config: MatchConfig
    human: Player
    computer: Player
    on_round: Callable[[RoundRecord], None] | None = None

    def play(self) -> MatchResult:
        state = MatchState.new(self.config)
        records: list[RoundRecord] = []
        while state.round <= state.best_of:
            human_choice = self.human.choose()
            computer_choice = self.computer.choose()
            outcome = compare(human_choice, computer_choice)
            record = RoundRecord(state.round, human_choice, computer_choice, Winner.from_outcome(outcome))

            state.record_round(outcome)
            records.append(record)
            logger.debug(
                "Round %d: %s vs %s -> %s (%d-%d)",
                record.round,
                human_choice,
                computer_choice,
                record.winner,
                state.human_points,
                state.computer_points,
            )
            if self.on_round is not None:
                self.on_round(record)

            if self.config.stop_early_on_clinch and state.can_end_early():
                logger.debug("Match clinched after %d rounds.", state.rounds_played)
                break
        return state.result(records)


def play_match(
    config: MatchConfig,
    human: Player,
    computer: Player,
    on_round: Callable[[RoundRecord], None] | None = None,
) -> MatchResult:
    return Match(config, human, computer, on_round).play()
