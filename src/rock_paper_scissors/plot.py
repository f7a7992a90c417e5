# SPDX-FileCopyrightText: 2025 Pôle d'Expertise de la Régulation Numérique <contact@peren.gouv.fr>
#
# SPDX-License-Identifier: MIT
"""
Plot functions.
"""

import altair as alt
import polars as pl

WINNER_ORDER = ["Human", "Computer", "Draw"]


def plot_winner_counts(summary: pl.DataFrame) -> alt.LayerChart:
    """
    Plot the number of matches won by each side.

    Args:
        summary (pl.DataFrame): Summary DataFrame with columns "winner", "matches" and "share".
    Returns:
        alt.LayerChart: Bar chart.
    """
    base = alt.Chart(summary).encode(
        x=alt.X("winner:N", sort=WINNER_ORDER, title="Winner"),
        y=alt.Y("matches:Q", title="Matches"),
    )
    bars = base.mark_bar(opacity=0.8).encode(
        color=alt.Color("winner:N", sort=WINNER_ORDER, legend=None),
        tooltip=["winner", "matches", "share"],
    )
    text = base.mark_text(dy=-6, color="black").encode(text=alt.Text("share:Q", format=".1%"))

    return (bars + text).properties(width=400, height=300)


def plot_rounds_played(results: pl.DataFrame) -> alt.Chart:
    """
    From simulation results with columns "rounds_played" and "winner",
    plot how many rounds the matches lasted.

    Args:
        results (pl.DataFrame): Simulation results.
    Returns:
        alt.Chart: Stacked bar chart.
    """
    counts = results.group_by(["rounds_played", "winner"]).agg(pl.len().alias("matches"))
    return (
        alt.Chart(counts)
        .mark_bar()
        .encode(
            x=alt.X("rounds_played:O", title="Rounds played"),
            y=alt.Y("matches:Q", title="Matches"),
            color=alt.Color("winner:N", sort=WINNER_ORDER, scale=alt.Scale(scheme="tableau10")),
            tooltip=["rounds_played", "winner", "matches"],
        )
        .properties(width=400, height=300)
    )
