# SPDX-FileCopyrightText: 2025 Pôle d'Expertise de la Régulation Numérique <contact@peren.gouv.fr>
#
# SPDX-License-Identifier: MIT

"""Score table printed at the end of a match."""

import polars as pl

from rock_paper_scissors.match import MatchResult, RoundRecord, Winner

COLUMNS = ["Round", "Player", "Computer", "Winner"]
WIN_MARK = " *"
DRAW_MARK = " ="


def highlight(label: str, side: Winner, winner: Winner) -> str:
    if winner is Winner.Draw:
        return label + DRAW_MARK
    return label + WIN_MARK if winner is side else label


class ScoreTable:
    """
    Collects one row per round and the final totals.

    The choice of the round winner is marked with a trailing `*`, both choices
    of a drawn round with a trailing `=`.
    """

    def __init__(self):
        self.rows: list[dict[str, str]] = []
        self.result: MatchResult | None = None

    def add_round(self, record: RoundRecord) -> None:
        self.rows.append(
            {
                "Round": str(record.round),
                "Player": highlight(str(record.human_choice), Winner.Human, record.winner),
                "Computer": highlight(str(record.computer_choice), Winner.Computer, record.winner),
                "Winner": str(record.winner),
            }
        )

    def finish(self, result: MatchResult) -> None:
        self.result = result

    def to_frame(self) -> pl.DataFrame:
        rows = list(self.rows)
        if self.result is not None:
            rows.append(
                {
                    "Round": "Total",
                    "Player": str(self.result.human_points),
                    "Computer": str(self.result.computer_points),
                    "Winner": "",
                }
            )
            rows.append({"Round": "Winner", "Player": str(self.result.winner), "Computer": "", "Winner": ""})
        return pl.DataFrame(rows, schema={column: pl.String for column in COLUMNS})

    def render(self) -> str:
        frame = self.to_frame()
        with pl.Config(
            tbl_formatting="ASCII_FULL",
            tbl_hide_column_data_types=True,
            tbl_hide_dataframe_shape=True,
            tbl_rows=-1,
            tbl_cell_alignment="CENTER",
            fmt_str_lengths=32,
        ):
            return str(frame)
