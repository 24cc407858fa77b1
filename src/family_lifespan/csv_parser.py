from __future__ import annotations

import csv
import re
from pathlib import Path

from family_lifespan.models import Person, parse_relation, parse_side

REQUIRED_COLUMNS = {"name", "side", "birth_year", "death_year", "relationship_type"}
_YEAR_PATTERN = re.compile(r"-?[0-9]+")


class CsvParseError(Exception):
    """CSV読み込み時のエラー。"""


def parse_csv(path: str | Path) -> list[Person]:
    """CSVファイルを読み込み、Person のリストをファイル順で返す。

    Args:
        path: CSVファイルのパス

    Returns:
        Person のリスト

    Raises:
        CsvParseError: CSV読み込み・バリデーションエラー
    """
    path = Path(path)
    if not path.exists():
        raise CsvParseError(f"File not found: {path}")
    if not path.is_file():
        raise CsvParseError(f"Not a file: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            reader = csv.DictReader(f)

            if reader.fieldnames is None:
                raise CsvParseError("CSV file is empty")

            _validate_columns(set(reader.fieldnames))
            rows = list(reader)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise CsvParseError(f"Cannot read {path}: {e}") from e

    persons: list[Person] = []
    for i, row in enumerate(rows, start=2):  # ヘッダー行が1行目
        try:
            persons.append(_parse_row(row))
        except ValueError as e:
            raise CsvParseError(f"Row {i}: {e}") from e
    return persons


def _validate_columns(headers: set[str]) -> None:
    """必須カラムの存在を確認する。"""
    missing = REQUIRED_COLUMNS - headers
    if missing:
        raise CsvParseError(f"Missing required columns: {', '.join(sorted(missing))}")


def _parse_year(value: str, column: str) -> int:
    # int() は "1_927" や全角数字も受け付けるので ASCII の数字だけに限定する
    if not _YEAR_PATTERN.fullmatch(value):
        raise ValueError(f"{column} is not a whole number: {value!r}")
    return int(value)


def _parse_row(row: dict[str, str]) -> Person:
    """1行のCSVデータをPersonオブジェクトに変換する。"""
    name = (row["name"] or "").strip()
    if not name:
        raise ValueError("name is empty")

    side = parse_side(row["side"] or "")
    if side is None:
        raise ValueError(f"invalid side: {row['side']!r}")

    relation = parse_relation(row["relationship_type"] or "")
    if relation is None:
        raise ValueError(f"invalid relationship_type: {row['relationship_type']!r}")

    birth_year = _parse_year((row["birth_year"] or "").strip(), "birth_year")
    death_str = (row["death_year"] or "").strip()
    death_year = _parse_year(death_str, "death_year") if death_str else None

    return Person(
        name=name,
        side=side,
        birth_year=birth_year,
        death_year=death_year,
        relationship_type=relation,
    )
