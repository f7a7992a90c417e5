# SPDX-FileCopyrightText: 2025 Pôle d'Expertise de la Régulation Numérique <contact@peren.gouv.fr>
#
# SPDX-License-Identifier: MIT

"""Base player class."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator

import numpy as np

from rock_paper_scissors.choice import Choice, parse_choice, random_choice


class Player(ABC):
    @abstractmethod
    def choose(self) -> Choice:
        raise NotImplementedError()


class ComputerPlayer(Player):
    """Plays uniformly at random, without memory of previous rounds."""

    def __init__(self, rng: np.random.Generator | None = None):
        super().__init__()
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose(self) -> Choice:
        return random_choice(self.rng)


class ConsolePlayer(Player):
    """
    Reads one line per round and parses it.

    Read errors (`EOFError`, `OSError`) and `UnrecognizedChoice` are propagated:
    the caller decides whether the match goes on.
    """

    def __init__(self, read_line: Callable[[], str] | None = None):
        super().__init__()
        self.read_line = read_line

    def choose(self) -> Choice:
        read_line = self.read_line if self.read_line is not None else input
        return parse_choice(read_line())


class ScriptedPlayer(Player):
    """Plays a fixed sequence of choices, one per round."""

    def __init__(self, choices: Iterable[Choice]):
        super().__init__()
        self._choices: Iterator[Choice] = iter(choices)

    def choose(self) -> Choice:
        try:
            return next(self._choices)
        except StopIteration:
            raise RuntimeError("Scripted player ran out of choices.") from None
