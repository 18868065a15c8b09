"""
Command‑line interface for the BMI calculator.
Computes a single BMI from typed values, or a whole table of measurements
loaded from CSV/Excel, and prints the category legend.
"""

import click
import logging
import pathlib
import sys
import typing

from datetime import datetime
from stairval.notepad import create_notepad

from .batch import BatchCalculator
from .category import Category
from .form import FormState, Notification
from .loader import load_measurement_tables
from .measurement import HeightUnit

UNIT_ENVVAR = "BMICALC_HEIGHT_UNIT"

# terminal colors standing in for the badge colors of the web form
CATEGORY_STYLES = {
    Category.UNDERWEIGHT: {"fg": "blue"},
    Category.NORMAL: {"fg": "green"},
    Category.OVERWEIGHT: {"fg": "yellow"},
    Category.OBESITY_I: {"fg": "bright_red"},
    Category.OBESITY_II: {"fg": "red"},
    Category.OBESITY_III: {"fg": "red", "bold": True},
}

unit_option = click.option(
    "-u",
    "--unit",
    "unit_label",
    type=click.Choice(["cm", "m"], case_sensitive=False),
    default="cm",
    envvar=UNIT_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="height unit",
)


@click.group()
def main():
    """bmicalc: Body Mass Index from weight and height, with health category."""
    pass


@main.command(name="calculate")
@click.option("-w", "--weight", prompt="Weight (kg)", help="body weight in kilograms")
@click.option("-H", "--height", prompt="Height", help="height in the chosen unit")
@unit_option
def calculate(weight: str, height: str, unit_label: str):
    """
    Compute the BMI for one person and print it with its category.
    Exits with status 1 when the input is rejected.
    """
    state = FormState(weight=weight, height=height, height_unit=HeightUnit.from_label(unit_label))
    state, notification = state.submit()
    _echo_notification(notification)
    if state.result is None:
        sys.exit(1)
    click.echo(
        click.style(state.result.description, **CATEGORY_STYLES[state.result.category])
    )


@main.command(name="batch")
@click.argument(
    "measurement_path",
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    help="CSV file for the results (default: bmi_results/<timestamp>/results.csv)",
)
@unit_option
@click.option(
    "--verbose-logging",
    is_flag=True,
    help="Also emit debug logs to stderr",
)
@click.option(
    "--log-file-path",
    type=click.Path(dir_okay=False, writable=True),
    help="Append timestamped logs to this file",
)
def batch(
    measurement_path: str,
    output_path: typing.Optional[str],
    unit_label: str,
    verbose_logging: bool,
    log_file_path: typing.Optional[str],
):
    """
    Read every table in a CSV file or Excel workbook (first column = subject ID,
    plus weight, height and an optional height_unit column), compute each BMI and
    write the accepted rows to CSV. Rejected rows are reported, not fatal.
    """
    _configure_logging(verbose_logging, log_file_path)

    # 1) Read all tables into DataFrames
    logging.info(f"Beginning batch calculation of '{measurement_path}'")
    try:
        tables = load_measurement_tables(measurement_path)
    except (OSError, ValueError) as e:
        logging.error(f"Failed to read '{measurement_path}': {e}")
        click.echo(f"Error: cannot read {measurement_path}: {e}", err=True)
        sys.exit(1)
    logging.debug(f"Loaded tables: {list(tables.keys())}")

    # 2) Compute and collect issues
    notepad = create_notepad("measurements")
    calculator = BatchCalculator(default_unit=HeightUnit.from_label(unit_label))
    results = calculator.apply(tables, notepad)

    # 3) Report any errors or warnings
    _report_issues(notepad)

    # 4) Write results
    if output_path:
        out = pathlib.Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
    else:
        out = _prepare_output_dir() / "results.csv"
    results.to_csv(out, index=False)
    logging.info(f"Wrote {len(results)} rows to {out}")

    # 5) Final summary
    rejected = sum(len(df) for df in tables.values()) - len(results)
    click.echo(f"Computed {len(results)} BMI results")
    click.echo(f"Rejected {rejected} rows")
    click.echo(f"Wrote results to {out}")


@main.command(name="categories")
def categories():
    """Print the BMI category legend."""
    for category in Category:
        line = f"{category.label:20} {category.description}"
        click.echo(click.style(line, **CATEGORY_STYLES[category]))


def _echo_notification(notification: Notification):
    if notification.destructive:
        click.echo(click.style(f"{notification.title}: {notification.description}", fg="red"), err=True)
    else:
        click.echo(f"{notification.title}: {notification.description}")


def _configure_logging(verbose_logging: bool, log_file_path: typing.Optional[str]):
    handlers: list[logging.Handler] = []
    if log_file_path:
        handlers.append(logging.FileHandler(log_file_path, mode="a", encoding="utf-8"))
    if verbose_logging:
        handlers.append(logging.StreamHandler(sys.stderr))
    if handlers:
        logging.basicConfig(
            level=logging.DEBUG if verbose_logging else logging.INFO,
            format="%(asctime)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )


def _report_issues(notepad):
    # if there were errors, show them
    if notepad.has_errors(include_subsections=True):
        click.echo("Errors found in measurements:")
        for err in notepad.errors():
            click.echo(f"- {err.message}")
    # show any warnings but keep going
    if notepad.has_warnings(include_subsections=True):
        click.echo("Warnings found in measurements:")
        for w in notepad.warnings():
            click.echo(f"- {w.message}")


def _prepare_output_dir() -> pathlib.Path:
    # use YYYY-MM-DD_HH-MM-SS for human-readable timestamps
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    output_dir = pathlib.Path.cwd() / "bmi_results" / timestamp
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


if __name__ == "__main__":
    main()
