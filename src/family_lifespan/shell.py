"""対話メニューのループ。"""

from __future__ import annotations

from collections.abc import Callable

import click

from family_lifespan.config import AppConfig
from family_lifespan.models import Person, Registry
from family_lifespan.prompts import (
    read_non_empty,
    read_optional_year,
    read_relation,
    read_side,
    read_year,
)
from family_lifespan.report import (
    full_report,
    members_report,
    overall_report,
    relation_report,
    side_relation_report,
    side_report,
)

MENU = """
MENU
1) List members
2) Overall average
3) Averages by side (Father/Mother)
4) Averages by relation (Blood/Other)
5) Side x Relation combo (Father/Mother x Blood/Other)
6) Add a member
7) Remove a member
8) Print EVERYTHING (all reports)
0) Exit"""

_REPORTS: dict[str, Callable[[list[Person], int | None], list[str]]] = {
    "1": members_report,
    "2": overall_report,
    "3": side_report,
    "4": relation_report,
    "5": side_relation_report,
    "8": full_report,
}


def _echo_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


def add_member(registry: Registry, config: AppConfig) -> Person:
    """対話入力で一人追加する。没年の下限は生年。"""
    click.echo("\nAdd member:")
    max_year = config.input.effective_max_year()
    name = read_non_empty("Name")
    side = read_side()
    birth = read_year("Birth year", config.input.min_year, max_year)
    death = read_optional_year("Death year", birth, max_year)
    relation = read_relation()

    person = Person(name, side, birth, death, relation)
    registry.add(person)
    click.echo(f"Added {name}")
    return person


def remove_member(registry: Registry) -> Person | None:
    if registry.is_empty:
        click.echo("No members to remove.")
        return None
    target = read_non_empty("\nRemove member - enter exact name")
    removed = registry.remove(target)
    if removed is None:
        click.echo(f"Not found: {target}")
    else:
        click.echo(f"Removed {removed.name}")
    return removed


def run_shell(registry: Registry, config: AppConfig) -> None:
    """メニューを表示し、0 が選ばれるか入力が終わるまで繰り返す。"""
    click.echo("~~~~~~~~~~ FAMILY LIFESPAN ANALYZER ~~~~~~~~~~")
    current_year = config.effective_current_year()

    try:
        while True:
            click.echo(MENU)
            choice = click.prompt("Select", default="", show_default=False).strip()
            if choice in _REPORTS:
                _echo_lines(_REPORTS[choice](registry.people, current_year))
            elif choice == "6":
                add_member(registry, config)
            elif choice == "7":
                remove_member(registry)
            elif choice == "0":
                click.echo("Goodbye! Come back with more family names soon!")
                return
            else:
                click.echo("Pick 0-8")
    except click.Abort:
        # 入力の終端（EOF / Ctrl-C）
        click.echo()
