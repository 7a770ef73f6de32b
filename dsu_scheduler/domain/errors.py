# dsu_scheduler/domain/errors.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ValidationError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class InvalidDateFormatError(ValidationError):
    """開始日などが設定された日付形式で解釈できない"""


@dataclass(eq=False)
class EmptyRosterError(ValidationError):
    """ロスターが空（上流で最低人数まで補われているはず）"""
