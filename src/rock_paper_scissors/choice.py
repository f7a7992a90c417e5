# SPDX-FileCopyrightText: 2025 Pôle d'Expertise de la Régulation Numérique <contact@peren.gouv.fr>
#
# SPDX-License-Identifier: MIT

"""Choices, round outcomes and the text parser."""

from enum import Enum

import numpy as np


class ChoiceError(ValueError):
    """Base error for invalid choices."""


class UnrecognizedChoice(ChoiceError):
    def __init__(self, text: str):
        super().__init__(f"Unknown choice: {text!r}")
        self.text = text


class Outcome(int, Enum):
    """Result of comparing a first choice against a second one."""

    FirstWins = 2
    SecondWins = 0
    Draw = 1

    def reverse(self) -> "Outcome":
        return Outcome(2 - self.value)


class Choice(Enum):
    Rock = 0
    Paper = 1
    Scissors = 2

    def __str__(self) -> str:
        return self.name

    def beats(self, other: "Choice") -> bool:
        return BEATS[self] is other


# each choice mapped to the only choice it defeats
BEATS: dict[Choice, Choice] = {
    Choice.Rock: Choice.Scissors,
    Choice.Scissors: Choice.Paper,
    Choice.Paper: Choice.Rock,
}

ALIASES: dict[str, Choice] = {
    "rock": Choice.Rock,
    "r": Choice.Rock,
    "paper": Choice.Paper,
    "p": Choice.Paper,
    "scissors": Choice.Scissors,
    "s": Choice.Scissors,
}


def compare(a: Choice, b: Choice) -> Outcome:
    """
    Compare two choices.

    The relation is cyclic, not a ranking: rock beats scissors, scissors
    beats paper and paper beats rock.

    Args:
        a (Choice): First choice.
        b (Choice): Second choice.

    Returns:
        Outcome: `FirstWins` if `a` beats `b`, `SecondWins` if `b` beats `a`, `Draw` otherwise.
    """
    if a is b:
        return Outcome.Draw
    if a.beats(b):
        return Outcome.FirstWins
    return Outcome.SecondWins


def parse_choice(text: str) -> Choice:
    """
    Parse a line typed by the player.

    Surrounding whitespace and line terminators are ignored, case does not matter,
    and both full names and single letters ("r", "p", "s") are accepted.

    Args:
        text (str): Raw input line.

    Raises:
        UnrecognizedChoice: The text does not name a choice.

    Returns:
        Choice: Parsed choice.
    """
    try:
        return ALIASES[text.strip().lower()]
    except KeyError:
        raise UnrecognizedChoice(text) from None


def random_choice(rng: np.random.Generator) -> Choice:
    # integers() excludes the upper bound: draws from {0, 1, 2}
    return Choice(int(rng.integers(0, 3)))
