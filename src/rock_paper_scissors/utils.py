# SPDX-FileCopyrightText: 2025 Pôle d'Expertise de la Régulation Numérique <contact@peren.gouv.fr>
#
# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

import altair as alt
import polars as pl

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbosity: int = 0) -> None:
    """
    Configure root logging from the number of `-v` flags.

    Args:
        verbosity (int): 0 for warnings, 1 for info, 2 or more for debug.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)


def save_chart(chart: alt.TopLevelMixin, title: str, save_path: Path) -> Path:
    """
    Save an altair chart as an html file.

    Args:
        chart (alt.TopLevelMixin): Chart.
        title (str): File name.
        save_path (Path): Repository.

    Returns:
        Path: Written file.
    """
    save_path.mkdir(parents=True, exist_ok=True)
    file_friendly_title = "_".join(title.split())
    path = save_path / f"{file_friendly_title}.html"
    chart.save(fp=path, format="html")
    return path


def save_data(data: pl.DataFrame, title: str, save_path: Path) -> Path:
    """
    Save polars DataFrame as a csv file.

    Args:
        data (pl.DataFrame): DataFrame.
        title (str): File name.
        save_path (Path): Repository.

    Returns:
        Path: Written file.
    """
    save_path.mkdir(parents=True, exist_ok=True)
    path = save_path / f"{title}.csv"
    data.write_csv(file=path, separator=";")
    return path
