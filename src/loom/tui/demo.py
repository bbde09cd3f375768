"""``loom-table``: show a CSV file (or generated data) in a table. Uses Click."""

from __future__ import annotations

import asyncio
import csv
import logging

import click

from loom.tui.components.table import Table, TableCell
from loom.tui.config import TuiSettings, apply_keybindings, apply_table_settings, load_settings
from loom.tui.terminal import ProcessTerminal
from loom.tui.tui import Application
from loom.tui.utils import text_length

logger = logging.getLogger(__name__)

_WORDS = (
    "Lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua Ut enim ad minim "
    "veniam quis nostrud exercitation ullamco laboris nisi aliquip ex ea "
    "commodo consequat"
).split()

_SELECT_MODES: dict[str, tuple[bool, bool]] = {
    "none": (False, False),
    "rows": (True, False),
    "columns": (False, True),
    "cells": (True, True),
}


def load_csv(path: str) -> list[list[str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return [row for row in csv.reader(f)]


def generate_rows(rows: int, columns: int) -> list[list[str]]:
    """A header row of letters followed by rows of words."""
    data = [[chr(ord("A") + c % 26) * (1 + c // 26) for c in range(columns)]]
    for r in range(rows):
        data.append(
            [_WORDS[(r * columns + c) % len(_WORDS)] for c in range(columns)]
        )
    return data


def build_table(
    data: list[list[str]],
    settings: TuiSettings,
    fixed_rows: int = 1,
    fixed_columns: int = 0,
    select_mode: str = "cells",
) -> Table:
    """Fill a table from *data*; the first *fixed_rows* rows act as headers."""
    table = Table()
    apply_table_settings(table, settings.table)
    table.frame.set_border(True)
    table.frame.set_title(" loom-table ")

    for r, row in enumerate(data):
        for c, text in enumerate(row):
            if r < fixed_rows or c < fixed_columns:
                cell = TableCell(text, align="center", color="yellow")
            else:
                cell = TableCell(text, color="white", selectable=True)
            table.set_cell(r, c, cell)

    rows_selectable, columns_selectable = _SELECT_MODES[select_mode]
    table.set_fixed(fixed_rows, fixed_columns)
    table.set_selectable(rows_selectable, columns_selectable)
    table.set_selected(fixed_rows, fixed_columns)
    return table


def _configure_logging(level: str, log_file: str | None) -> None:
    # Log records on the terminal would corrupt the screen
    if log_file is None:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@click.command()
@click.argument("csv_file", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--borders/--no-borders", default=None, help="Draw borders around cells")
@click.option("--fixed-rows", default=1, show_default=True, type=click.IntRange(min=0))
@click.option("--fixed-columns", default=0, show_default=True, type=click.IntRange(min=0))
@click.option(
    "--select",
    "select_mode",
    type=click.Choice(list(_SELECT_MODES)),
    default="cells",
    show_default=True,
    help="What can be selected",
)
@click.option("--separator", default=None, help="Column separator when borders are off")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    show_default=True,
)
@click.option("--log-file", default=None, type=click.Path(dir_okay=False), help="Write logs here")
def main(csv_file, borders, fixed_rows, fixed_columns, select_mode, separator, log_level, log_file):
    """Browse CSV_FILE (or generated data) in a terminal table."""
    _configure_logging(log_level, log_file)

    settings = load_settings()
    if settings.load_error is not None:
        click.echo(f"warning: settings not loaded: {settings.load_error}", err=True)
    if borders is not None:
        settings.table.borders = borders
    if separator is not None:
        if text_length(separator) != 1:
            raise click.BadParameter("must be a single character", param_hint="--separator")
        settings.table.separator = separator
    apply_keybindings(settings)

    data = load_csv(csv_file) if csv_file else generate_rows(60, 12)
    logger.info("loaded %d rows", len(data))

    table = build_table(data, settings, fixed_rows, fixed_columns, select_mode)
    app = Application(ProcessTerminal())

    def on_selected(row: int, column: int) -> None:
        cell = table.get_cell(row, column)
        cell.color = "red"
        table.set_cell(row, column, cell)

    def on_done(key: str) -> None:
        if key == "escape":
            app.stop()

    table.set_selected_func(on_selected)
    table.set_done_func(on_done)
    app.set_root(table)
    asyncio.run(app.run())


if __name__ == "__main__":
    main()
