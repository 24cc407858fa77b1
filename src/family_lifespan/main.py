from pathlib import Path

import click

from family_lifespan.config import AppConfig, load_config
from family_lifespan.csv_parser import CsvParseError, parse_csv
from family_lifespan.models import Person, Registry
from family_lifespan.report import full_report
from family_lifespan.seed import seed_people
from family_lifespan.shell import run_shell

_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
    default=None,
    help="Settings file (defaults to config.toml in the current directory if present)",
)

_INPUT_OPTION = click.option(
    "--input",
    "input_path",
    default=None,
    help="Members CSV file (defaults to the built-in family list)",
)


def _load_people(input_path: str | None) -> list[Person]:
    if input_path is None:
        return seed_people()
    try:
        return parse_csv(input_path)
    except CsvParseError as e:
        raise click.ClickException(str(e))


def _load_config(config_path: str | None) -> AppConfig:
    return load_config(Path(config_path) if config_path else None)


@click.group()
def cli() -> None:
    """Family lifespan analyzer"""
    pass


@cli.command()
@_INPUT_OPTION
@_CONFIG_OPTION
def interactive(input_path: str | None, config_path: str | None) -> None:
    """Start the interactive menu"""
    registry = Registry(_load_people(input_path))
    config = _load_config(config_path)
    run_shell(registry, config)


@cli.command()
@_INPUT_OPTION
@_CONFIG_OPTION
@click.option(
    "--current-year",
    type=int,
    default=None,
    help="Year used for living members (overrides the settings file)",
)
def report(input_path: str | None, config_path: str | None, current_year: int | None) -> None:
    """Print every report once and exit"""
    people = _load_people(input_path)
    config = _load_config(config_path)
    year = current_year if current_year is not None else config.effective_current_year()
    for line in full_report(people, year):
        click.echo(line)
