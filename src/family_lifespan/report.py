"""レポート用テキストの組み立て。

各関数は出力行のリストを返すだけで、表示は呼び出し側が行う。
"""

from __future__ import annotations

from collections.abc import Sequence

from family_lifespan.models import FamilySide, Person, RelationType
from family_lifespan.stats import (
    average_by_relation,
    average_by_side,
    average_by_side_relation,
    average_lifespan,
    lifespan_years,
)

RULE = "-" * 46

SIDE_LABELS = {
    FamilySide.FATHER: "Father's side average",
    FamilySide.MOTHER: "Mother's side average",
}

RELATION_LABELS = {
    RelationType.BLOOD: "Blood relatives",
    RelationType.OTHER: "Other relatives",
}


def format_avg(label: str, avg: float | None) -> str:
    """平均値を "<label>: 79.9 years" 形式に整形する（None は N/A）。"""
    if avg is None:
        return f"{label}: N/A"
    return f"{label}: {avg:.1f} years"


def member_line(person: Person, current_year: int | None = None) -> str:
    death = str(person.death_year) if person.death_year is not None else "Living"
    years = lifespan_years(person, current_year)
    life = str(years) if years is not None else "N/A"
    return (
        f"{person.name} | Side: {person.side.value} | Born: {person.birth_year} "
        f"| Died: {death} | Relation: {person.relationship_type.value} | Lifespan: {life}"
    )


def members_report(people: Sequence[Person], current_year: int | None = None) -> list[str]:
    if not people:
        return ["No members yet."]
    lines = ["", "Family Members Entered:", RULE]
    lines.extend(member_line(p, current_year) for p in people)
    lines.append(RULE)
    lines.append(f"Total family members listed: {len(people)}")
    lines.append(RULE)
    return lines


def overall_report(people: Sequence[Person], current_year: int | None = None) -> list[str]:
    avg = average_lifespan(people, current_year)
    return [RULE, format_avg("Overall average lifespan (so far)", avg), RULE]


def side_report(people: Sequence[Person], current_year: int | None = None) -> list[str]:
    by_side = average_by_side(people, current_year)
    # 辞書には常に両方のキーがある
    return [RULE, *(format_avg(SIDE_LABELS[s], by_side[s]) for s in SIDE_LABELS), RULE]


def relation_report(people: Sequence[Person], current_year: int | None = None) -> list[str]:
    by_rel = average_by_relation(people, current_year)
    return [
        RULE,
        *(format_avg(RELATION_LABELS[r], by_rel[r]) for r in RELATION_LABELS),
        RULE,
    ]


def side_relation_report(
    people: Sequence[Person], current_year: int | None = None
) -> list[str]:
    """"Father BLOOD" などの4組み合わせの平均。"""
    combos = average_by_side_relation(people, current_year)
    lines = ["", "Side x Relation Averages:"]
    for (side, rel), avg in combos.items():
        label = f"{side.value.capitalize()} {rel.value}"
        lines.append(format_avg(label, avg))
    return lines


def full_report(people: Sequence[Person], current_year: int | None = None) -> list[str]:
    """メニュー 8（全レポート）の内容。"""
    return [
        *members_report(people, current_year),
        *overall_report(people, current_year),
        *side_report(people, current_year),
        *relation_report(people, current_year),
        *side_relation_report(people, current_year),
        RULE,
    ]
