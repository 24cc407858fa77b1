"""設定ファイルの読み込みと設定値の管理。

TOML 形式の設定ファイルを読み込み、AppConfig として返す。
設定ファイルが存在しない場合はデフォルト値を使用する。
"""

from __future__ import annotations

import sys
import tomllib
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import NoReturn


@dataclass
class AnalysisConfig:
    """集計パラメータの設定。"""

    current_year: int | None = None  # None の場合は実行時の年


@dataclass
class InputConfig:
    """対話入力で受け付ける年の範囲。"""

    min_year: int = 1700
    max_year: int | None = None  # None の場合は実行時の年

    def effective_max_year(self) -> int:
        return self.max_year if self.max_year is not None else date.today().year


@dataclass
class AppConfig:
    """アプリケーション全体の設定。"""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    input: InputConfig = field(default_factory=InputConfig)

    def effective_current_year(self) -> int:
        if self.analysis.current_year is not None:
            return self.analysis.current_year
        return date.today().year


# ---------------------------------------------------------------------------
# バリデーション
# ---------------------------------------------------------------------------


def _fail(message: str) -> NoReturn:
    print(f"Config error: {message}", file=sys.stderr)
    sys.exit(1)


def _validate_year(value: object, key: str) -> int:
    # bool は int のサブクラスなので除外する
    if not isinstance(value, int) or isinstance(value, bool):
        _fail(f"{key} must be an integer year")
    return int(value)  # type: ignore[arg-type]


def _build_analysis(data: dict[str, object]) -> AnalysisConfig:
    cfg = AnalysisConfig()
    if "current_year" in data:
        cfg.current_year = _validate_year(data["current_year"], "analysis.current_year")
    return cfg


def _build_input(data: dict[str, object]) -> InputConfig:
    cfg = InputConfig()
    for key in ("min_year", "max_year"):
        if key in data:
            setattr(cfg, key, _validate_year(data[key], f"input.{key}"))
    if cfg.min_year > cfg.effective_max_year():
        _fail("input.min_year must not be greater than input.max_year")
    return cfg


# ---------------------------------------------------------------------------
# ロード
# ---------------------------------------------------------------------------


def load_config(path: Path | None) -> AppConfig:
    """設定ファイルを読み込んで AppConfig を返す。

    Args:
        path: 設定ファイルのパス。None の場合はカレントディレクトリの
              config.toml を探索し、存在しなければデフォルト値を使用する。

    Returns:
        AppConfig オブジェクト。
    """
    config_path = path if path is not None else Path("config.toml")

    if not config_path.exists():
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        _fail(f"{config_path} is not valid TOML: {e}")

    app_config = AppConfig()

    analysis = data.get("analysis")
    if isinstance(analysis, dict):
        app_config.analysis = _build_analysis(analysis)

    input_section = data.get("input")
    if isinstance(input_section, dict):
        app_config.input = _build_input(input_section)

    return app_config
