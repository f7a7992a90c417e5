# SPDX-FileCopyrightText: 2025 Pôle d'Expertise de la Régulation Numérique <contact@peren.gouv.fr>
#
# SPDX-License-Identifier: MIT

"""Match configuration."""

import operator
from dataclasses import dataclass, field

DEFAULT_BEST_OF = 5


class ConfigError(ValueError):
    """Base error for invalid match configuration."""


class InvalidRoundCount(ConfigError):
    def __init__(self, value: int):
        super().__init__(f"Number of rounds must be odd and greater than 2, got {value}")
        self.value = value


@dataclass(frozen=True)
class BestOf:
    """
    Number of rounds of a best-of-N match.

    An odd N guarantees a winner once all rounds are played without draws;
    single round matches (N=1) are not allowed.
    """

    value: int = DEFAULT_BEST_OF

    def __post_init__(self):
        if isinstance(self.value, bool):
            raise InvalidRoundCount(self.value)
        try:
            value = operator.index(self.value)
        except TypeError:
            raise InvalidRoundCount(self.value) from None
        if value % 2 == 0 or value <= 2:
            raise InvalidRoundCount(value)
        # numpy integers are stored as plain ints
        object.__setattr__(self, "value", value)

    @classmethod
    def default(cls) -> "BestOf":
        return cls(DEFAULT_BEST_OF)

    @classmethod
    def from_string(cls, text: str) -> "BestOf":
        """
        Parse a command line value.

        Args:
            text (str): Raw value, e.g. "7".

        Raises:
            ConfigError: The text is not an integer.
            InvalidRoundCount: The integer is even or lower than 3.

        Returns:
            BestOf: Validated number of rounds.
        """
        try:
            value = int(text.strip())
        except ValueError:
            raise ConfigError(f"Could not parse number: {text!r}") from None
        return cls(value)

    @property
    def majority(self) -> int:
        """Points needed to clinch the match."""
        return self.value // 2 + 1

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MatchConfig:
    best_of: BestOf = field(default_factory=BestOf.default)
    stop_early_on_clinch: bool = False  # stop as soon as one side cannot be caught up
