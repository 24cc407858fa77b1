"""対話入力の読み取り。

不正な入力は click がエラーを表示して再入力を促す。
"""

from __future__ import annotations

import click

from family_lifespan.models import FamilySide, RelationType, parse_relation, parse_side


def _non_empty(value: str) -> str:
    value = value.strip()
    if not value:
        raise click.BadParameter("Please enter a value.")
    return value


def read_non_empty(prompt: str) -> str:
    return click.prompt(prompt, value_proc=_non_empty)


def read_year(prompt: str, min_year: int, max_year: int) -> int:
    """min_year〜max_year（両端含む）の整数を読み取る。"""
    return click.prompt(prompt, type=click.IntRange(min_year, max_year))


def read_optional_year(prompt: str, min_year: int, max_year: int) -> int | None:
    """空入力なら None（存命）を返す。"""
    year_range = click.IntRange(min_year, max_year)

    def convert(value: str) -> int | None:
        value = value.strip()
        if not value:
            return None
        return year_range.convert(value, None, None)

    return click.prompt(
        f"{prompt} (leave blank if living)",
        default="",
        show_default=False,
        value_proc=convert,
    )


def _side(value: str) -> FamilySide:
    side = parse_side(value)
    if side is None:
        raise click.BadParameter("Please enter F or M.")
    return side


def _relation(value: str) -> RelationType:
    relation = parse_relation(value)
    if relation is None:
        raise click.BadParameter("Please enter B or O.")
    return relation


def read_side() -> FamilySide:
    return click.prompt("Side (F=Father, M=Mother)", value_proc=_side)


def read_relation() -> RelationType:
    return click.prompt("Relation (B=Blood, O=Other)", value_proc=_relation)
