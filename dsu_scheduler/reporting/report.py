# dsu_scheduler/reporting/report.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from dsu_scheduler.config import AppConfig, DEFAULT_CONFIG
from dsu_scheduler.domain.models import EntryKind, ScheduleEntry


def build_schedule_table(entries: Sequence[ScheduleEntry], cfg: AppConfig = DEFAULT_CONFIG) -> pd.DataFrame:
    """出力シート用の表。行順 = entries の順（並べ替えない）"""
    rows = [
        {
            cfg.sheet.name_header: e.name,
            cfg.sheet.date_header: e.date,
            "kind": e.kind.value,
        }
        for e in entries
    ]
    return pd.DataFrame(rows, columns=[cfg.sheet.name_header, cfg.sheet.date_header, "kind"])


def build_member_summary(
    entries: Sequence[ScheduleEntry],
    roster: Optional[Iterable[str]] = None,
) -> pd.DataFrame:
    # ロスターを渡せば一度も当たらなかった人も 0 回で出す
    counts: Dict[str, Dict[str, object]] = {}
    for name in roster or []:
        counts[name] = dict(lead_count=0, first_date="", last_date="")

    for e in entries:
        if e.kind is not EntryKind.DATA:
            continue
        d = counts.setdefault(e.name, dict(lead_count=0, first_date="", last_date=""))
        d["lead_count"] += 1
        if not d["first_date"]:
            d["first_date"] = e.date
        d["last_date"] = e.date

    rows: List[dict] = []
    for name, d in counts.items():
        rows.append(dict(
            team_member=name,
            lead_count=d["lead_count"],
            first_date=d["first_date"],
            last_date=d["last_date"],
        ))
    df = pd.DataFrame(rows, columns=["team_member", "lead_count", "first_date", "last_date"])
    if not df.empty:
        df = df.sort_values(["lead_count", "team_member"], ascending=[False, True]).reset_index(drop=True)
    return df
