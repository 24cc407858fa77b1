from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class FamilySide(Enum):
    FATHER = "FATHER"
    MOTHER = "MOTHER"


class RelationType(Enum):
    BLOOD = "BLOOD"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Person:
    """家族の一人を表す不変データクラス。

    death_year が None の場合は存命中。
    death_year < birth_year のような不整合データも保持できる（寿命計算側で弾く）。
    """

    name: str
    side: FamilySide
    birth_year: int
    death_year: int | None
    relationship_type: RelationType

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("name must not be empty")


@dataclass
class Registry:
    """セッション中の家族リスト（挿入順・名前の重複可）。"""

    persons: list[Person] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.persons)

    @property
    def people(self) -> list[Person]:
        return list(self.persons)

    @property
    def is_empty(self) -> bool:
        return not self.persons

    def add(self, person: Person) -> None:
        self.persons.append(person)

    def remove(self, name: str) -> Person | None:
        """名前（大文字小文字を区別しない完全一致）で最初の一人を削除する。

        Returns:
            削除した Person。見つからなければ None
        """
        target = name.strip().lower()
        for i, person in enumerate(self.persons):
            if person.name.lower() == target:
                return self.persons.pop(i)
        return None


_SIDE_ALIASES = {
    "F": FamilySide.FATHER,
    "FATHER": FamilySide.FATHER,
    "M": FamilySide.MOTHER,
    "MOTHER": FamilySide.MOTHER,
}

_RELATION_ALIASES = {
    "B": RelationType.BLOOD,
    "BLOOD": RelationType.BLOOD,
    "O": RelationType.OTHER,
    "OTHER": RelationType.OTHER,
}


def parse_side(text: str) -> FamilySide | None:
    """"F" / "Father" / "m" などを FamilySide に変換する。不明なら None。"""
    return _SIDE_ALIASES.get(text.strip().upper())


def parse_relation(text: str) -> RelationType | None:
    return _RELATION_ALIASES.get(text.strip().upper())
