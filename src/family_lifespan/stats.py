"""寿命の算出と集計。

不整合データ（死亡年 < 生年）や対象者ゼロの集計は例外ではなく None で表す。
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from family_lifespan.models import FamilySide, Person, RelationType

SIDES = (FamilySide.FATHER, FamilySide.MOTHER)
RELATIONS = (RelationType.BLOOD, RelationType.OTHER)


def lifespan_years(person: Person, current_year: int | None = None) -> int | None:
    """生存年数を返す。

    Args:
        person: 対象の人物
        current_year: 存命者の計算に使う年。None の場合は今年

    Returns:
        年数。負になる場合（不整合データ）は None
    """
    if person.death_year is not None:
        end = person.death_year
    else:
        end = current_year if current_year is not None else date.today().year
    years = end - person.birth_year
    return years if years >= 0 else None


def average_lifespan(
    people: Iterable[Person], current_year: int | None = None
) -> float | None:
    """有効な寿命の平均。有効値がなければ None。"""
    values = [
        years
        for years in (lifespan_years(p, current_year) for p in people)
        if years is not None
    ]
    if not values:
        return None
    return sum(values) / len(values)


def average_for(
    people: Iterable[Person],
    side: FamilySide | None = None,
    relation: RelationType | None = None,
    current_year: int | None = None,
) -> float | None:
    """side / relation で絞り込んだ上での平均寿命（None の条件は無視）。"""
    filtered = [
        p
        for p in people
        if (side is None or p.side == side)
        and (relation is None or p.relationship_type == relation)
    ]
    return average_lifespan(filtered, current_year)


def average_by_side(
    people: Iterable[Person], current_year: int | None = None
) -> dict[FamilySide, float | None]:
    people = list(people)
    return {side: average_for(people, side=side, current_year=current_year) for side in SIDES}


def average_by_relation(
    people: Iterable[Person], current_year: int | None = None
) -> dict[RelationType, float | None]:
    people = list(people)
    return {
        rel: average_for(people, relation=rel, current_year=current_year)
        for rel in RELATIONS
    }


def average_by_side_relation(
    people: Iterable[Person], current_year: int | None = None
) -> dict[tuple[FamilySide, RelationType], float | None]:
    """父方/母方 × 血縁/その他 の全4組み合わせの平均寿命。"""
    people = list(people)
    return {
        (side, rel): average_for(people, side, rel, current_year)
        for side in SIDES
        for rel in RELATIONS
    }
