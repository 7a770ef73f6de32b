# dsu_scheduler/domain/models.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import FrozenSet, Tuple

from dsu_scheduler.domain.errors import EmptyRosterError, ValidationError


class EntryKind(str, Enum):
    """出力行の種別（描画側は文字列を見ずにこれでスタイルを決める）"""
    DATA = "data"
    HOLIDAY = "holiday"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class Roster:
    """表示名の並び（重複なし・空でない）。1回の実行中は不変。"""
    names: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.names:
            raise EmptyRosterError("Team member roster is empty.")
        if len(set(self.names)) != len(self.names):
            raise ValidationError("Team member roster contains duplicate names.")

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self):
        return iter(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.names


@dataclass(frozen=True)
class RotationConfig:
    start_date: date
    day_count: int
    min_roster_size: int = 5
    date_format: str = "%m/%d/%Y"


@dataclass(frozen=True)
class CalendarDay:
    day: date
    weekday_name: str
    is_weekend: bool
    formatted: str   # date_format の文字列（祝日照合用）
    display: str     # "Monday, 01/03/2022"


@dataclass(frozen=True)
class ScheduleEntry:
    name: str = ""
    date: str = ""
    kind: EntryKind = EntryKind.SEPARATOR

    @classmethod
    def separator(cls) -> ScheduleEntry:
        return cls("", "", EntryKind.SEPARATOR)

    @property
    def is_separator(self) -> bool:
        return self.kind is EntryKind.SEPARATOR


@dataclass(frozen=True)
class RunSettings:
    """設定ファイル/GUIから解決済みの1回分の実行パラメータ"""
    team_name: str
    output_path: str
    open_after_creation: bool
    rotation: RotationConfig
    roster: Roster
    holidays: FrozenSet[str]
