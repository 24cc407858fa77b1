from __future__ import annotations

from family_lifespan.models import FamilySide, Person, RelationType

F, M = FamilySide.FATHER, FamilySide.MOTHER
BLOOD, OTHER = RelationType.BLOOD, RelationType.OTHER

# (名前, 家系, 生年, 没年, 続柄)
_SEED_ROWS: tuple[tuple[str, FamilySide, int, int | None, RelationType], ...] = (
    ("Bart", F, 1927, 2013, OTHER),
    ("Donna", M, 1950, 2008, BLOOD),
    ("Glea", M, 1911, 2003, BLOOD),
    ("Norman 'Big Pat'", M, 1907, 1987, OTHER),
    ("Jim", M, 1932, 2024, BLOOD),
    ("Paulene", M, 1930, 2024, BLOOD),
    ("Jerry", M, 1937, 2023, BLOOD),
    ("Clyde", M, 1934, 1997, BLOOD),
    ("Anna", F, 1909, 2000, BLOOD),
    ("Ulyss", F, 1907, 1998, BLOOD),
    ("Pat", M, 1979, None, BLOOD),
)


def seed_people() -> list[Person]:
    """起動時に登録される初期メンバー（呼び出しごとに新しいリスト）。"""
    return [Person(*row) for row in _SEED_ROWS]
