from __future__ import annotations

import dataclasses

import pytest

from family_lifespan.models import (
    FamilySide,
    Person,
    RelationType,
    Registry,
    parse_relation,
    parse_side,
)
from family_lifespan.seed import seed_people


def _person(name: str, side: FamilySide = FamilySide.FATHER) -> Person:
    return Person(name, side, 1950, None, RelationType.BLOOD)


class TestPerson:
    def test_fields(self) -> None:
        p = Person("Bart", FamilySide.FATHER, 1927, 2013, RelationType.OTHER)
        assert p.name == "Bart"
        assert p.side == FamilySide.FATHER
        assert p.birth_year == 1927
        assert p.death_year == 2013
        assert p.relationship_type == RelationType.OTHER

    def test_immutable(self) -> None:
        p = _person("Bart")
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.name = "Other"  # type: ignore[misc]

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            _person("   ")

    def test_inconsistent_years_representable(self) -> None:
        """没年 < 生年でも生成できる。"""
        p = Person("Odd", FamilySide.MOTHER, 2000, 1990, RelationType.BLOOD)
        assert p.death_year == 1990


class TestRegistry:
    def test_add_appends_in_order(self) -> None:
        registry = Registry()
        registry.add(_person("A"))
        registry.add(_person("B"))
        assert [p.name for p in registry] == ["A", "B"]
        assert len(registry) == 2

    def test_remove_case_insensitive(self) -> None:
        registry = Registry([_person("Bart"), _person("Donna")])
        removed = registry.remove("bART")
        assert removed is not None
        assert removed.name == "Bart"
        assert [p.name for p in registry] == ["Donna"]

    def test_remove_twice_reports_not_found(self) -> None:
        registry = Registry([_person("Bart")])
        assert registry.remove("bart") is not None
        assert registry.remove("Bart") is None
        assert registry.is_empty

    def test_remove_first_of_duplicates(self) -> None:
        first = _person("Pat", FamilySide.FATHER)
        second = _person("Pat", FamilySide.MOTHER)
        registry = Registry([first, second])
        assert registry.remove("pat") is first
        assert registry.people == [second]

    def test_remove_uses_simple_case_folding(self) -> None:
        """大文字小文字のみ無視し、"ß" と "SS" は別の名前として扱う。"""
        registry = Registry([_person("Straße")])
        assert registry.remove("STRASSE") is None
        assert registry.remove("STRAßE") is not None

    def test_remove_requires_exact_match(self) -> None:
        registry = Registry([_person("Norman 'Big Pat'")])
        assert registry.remove("Pat") is None
        assert len(registry) == 1

    def test_people_is_snapshot(self) -> None:
        registry = Registry([_person("A")])
        snapshot = registry.people
        registry.add(_person("B"))
        assert len(snapshot) == 1


class TestAliases:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("F", FamilySide.FATHER),
            ("father", FamilySide.FATHER),
            (" m ", FamilySide.MOTHER),
            ("Mother", FamilySide.MOTHER),
            ("X", None),
        ],
    )
    def test_parse_side(self, text: str, expected: FamilySide | None) -> None:
        assert parse_side(text) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("b", RelationType.BLOOD),
            ("BLOOD", RelationType.BLOOD),
            ("o", RelationType.OTHER),
            ("other", RelationType.OTHER),
            ("", None),
        ],
    )
    def test_parse_relation(self, text: str, expected: RelationType | None) -> None:
        assert parse_relation(text) == expected


class TestSeed:
    def test_seed_members(self) -> None:
        people = seed_people()
        assert len(people) == 11
        assert people[0].name == "Bart"
        assert people[-1].name == "Pat"
        assert people[-1].death_year is None

    def test_seed_returns_new_list(self) -> None:
        people = seed_people()
        people.pop()
        assert len(seed_people()) == 11
