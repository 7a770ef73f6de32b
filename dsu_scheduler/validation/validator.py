# dsu_scheduler/validation/validator.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Tuple

from dateutil import tz

from dsu_scheduler.config import AppConfig, DEFAULT_CONFIG
from dsu_scheduler.domain.calendar_walker import CalendarWalker
from dsu_scheduler.domain.errors import EmptyRosterError, InvalidDateFormatError, ValidationError
from dsu_scheduler.domain.models import Roster, RotationConfig, RunSettings


@dataclass(frozen=True)
class ValidationWarning:
    message: str


def first_value(raw: Mapping[str, str], keys) -> Optional[str]:
    """keys のうち最初に値がある（空文字でない）ものを返す"""
    if isinstance(keys, str):
        keys = (keys,)
    for k in keys:
        v = raw.get(k)
        if v is not None and str(v).strip():
            return str(v)
    return None


def _split_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [x.strip() for x in value.split(",") if x.strip()]


def normalize_name(name: str) -> str:
    """前後空白を除き、空白区切りの各語の先頭だけ大文字にする（残りはそのまま）"""
    return " ".join(tok[:1].upper() + tok[1:] for tok in name.split())


def pad_roster(names: Sequence[str], cfg: AppConfig = DEFAULT_CONFIG) -> List[str]:
    """
    最低人数に満たなければ "Person 1", "Person 2", ... を追加する。
    既存の "Person N" とは衝突しない番号を使う。
    """
    out = list(names)
    n = 1
    while len(out) < cfg.min_roster_size:
        placeholder = f"{cfg.placeholder_prefix} {n}"
        n += 1
        if placeholder in out:
            continue
        out.append(placeholder)
    return out


def clamp_day_count(day_count: int, cfg: AppConfig = DEFAULT_CONFIG) -> int:
    # 上限超過はエラーにせず既定値へ
    if day_count > cfg.max_day_count:
        return cfg.fallback_day_count
    return day_count


def resolve_roster(raw_members: Optional[str], cfg: AppConfig = DEFAULT_CONFIG) -> Tuple[List[str], List[ValidationWarning]]:
    warnings: List[ValidationWarning] = []
    names: List[str] = []
    for member in _split_csv(raw_members):
        nm = normalize_name(member)
        if nm in names:
            warnings.append(ValidationWarning(f"Duplicate team member '{nm}' ignored."))
            continue
        names.append(nm)

    if not names:
        warnings.append(ValidationWarning("Team members list was empty. Placeholder names have been added."))
    elif len(names) < cfg.min_roster_size:
        warnings.append(ValidationWarning(
            f"Team members list has {len(names)} names, fewer than the required {cfg.min_roster_size}. "
            "Placeholder names have been added."
        ))
    return pad_roster(names, cfg), warnings


def resolve_holidays(raw_holidays: Optional[str], walker) -> Tuple[frozenset, List[ValidationWarning]]:
    warnings: List[ValidationWarning] = []
    out = set()
    for h in _split_csv(raw_holidays):
        try:
            out.add(walker.format(walker.parse(h)))
        except InvalidDateFormatError as e:
            warnings.append(ValidationWarning(f"Holiday ignored: {e.message}"))
    return frozenset(out), warnings


def resolve_day_count(raw_days: Optional[str], cfg: AppConfig = DEFAULT_CONFIG) -> Tuple[int, List[ValidationWarning]]:
    warnings: List[ValidationWarning] = []
    if raw_days is None or not raw_days.strip():
        return cfg.default_day_count, warnings
    text = raw_days.strip()
    if not text.isdecimal() or int(text) < 1:
        warnings.append(ValidationWarning(
            f"Rotation days '{text}' is not a positive number. Using {cfg.default_day_count} days."
        ))
        return cfg.default_day_count, warnings
    days = int(text)
    clamped = clamp_day_count(days, cfg)
    if clamped != days:
        warnings.append(ValidationWarning(
            f"Max days allowed in rotation schedule ({cfg.max_day_count}) exceeded. "
            f"Using {clamped} days for rotation."
        ))
    return clamped, warnings


def resolve_output_path(raw_path: Optional[str], cfg: AppConfig = DEFAULT_CONFIG) -> Tuple[str, List[ValidationWarning]]:
    warnings: List[ValidationWarning] = []
    path = (raw_path or "").strip() or cfg.default_output_file
    p = Path(path)
    # ".xlsx" 単体もファイル名として扱う（Path.suffix は "" を返す）
    if not p.name.lower().endswith(".xlsx"):
        name = p.name
        if "." in name.lstrip("."):
            name = name[: name.rfind(".")]
        stem = name.rstrip(".") or Path(cfg.default_output_file).stem
        p = p.parent / f"{stem}.xlsx"
        warnings.append(ValidationWarning(
            f"Output file '{path}' does not have an .xlsx extension. Saving as '{p}'."
        ))
    return str(p), warnings


def resolve_run_settings(
    raw: Mapping[str, str],
    cfg: AppConfig = DEFAULT_CONFIG,
    today: Optional[date] = None,
):
    """
    生の設定値（.properties / GUI入力）を検証・正規化して RunSettings を返す。
    開始日が解釈できない場合は InvalidDateFormatError（ここで実行中止）。
    それ以外の不備は既定値で補い、警告として返す。
    """
    keys = cfg.properties
    walker = CalendarWalker(date_format=cfg.date_format, display_format=cfg.display_format)
    warnings: List[ValidationWarning] = []

    team_name = (first_value(raw, keys.team_name) or "").strip() or cfg.default_team_name

    raw_start = (first_value(raw, keys.start_date) or "").strip()
    if raw_start:
        start_date = walker.parse(raw_start)
    else:
        if today is None:
            today = datetime.now(tz=tz.gettz(cfg.timezone_name)).date()
        start_date = today

    day_count, w = resolve_day_count(first_value(raw, keys.rotation_days), cfg)
    warnings.extend(w)

    names, w = resolve_roster(first_value(raw, keys.team_members), cfg)
    warnings.extend(w)

    holidays, w = resolve_holidays(first_value(raw, keys.holidays), walker)
    warnings.extend(w)

    output_path, w = resolve_output_path(first_value(raw, keys.output_path), cfg)
    warnings.extend(w)

    open_flag = (first_value(raw, keys.open_after_creation) or "false").strip().lower() == "true"

    settings = RunSettings(
        team_name=team_name,
        output_path=output_path,
        open_after_creation=open_flag,
        rotation=RotationConfig(
            start_date=start_date,
            day_count=day_count,
            min_roster_size=cfg.min_roster_size,
            date_format=cfg.date_format,
        ),
        roster=Roster(tuple(names)),
        holidays=holidays,
    )
    return settings, warnings
