# dsu_scheduler/pipeline.py
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from dsu_scheduler.config import AppConfig, DEFAULT_CONFIG
from dsu_scheduler.domain.models import RunSettings, ScheduleEntry
from dsu_scheduler.reporting.export_xlsx import sheet_title
from dsu_scheduler.reporting.report import build_member_summary, build_schedule_table
from dsu_scheduler.rotation.builder import ScheduleBuilder


@dataclass
class ScheduleResult:
    entries: List[ScheduleEntry]
    schedule_df: pd.DataFrame
    summary_df: pd.DataFrame
    title: str


def generate_schedule(
    settings: RunSettings,
    cfg: AppConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> ScheduleResult:
    """CLIとGUIで共通：解決済み設定 → 割当 → 出力用の表"""
    builder = ScheduleBuilder(cfg=cfg, rng=rng)
    entries = builder.build(settings.rotation, settings.roster, settings.holidays)
    return ScheduleResult(
        entries=entries,
        schedule_df=build_schedule_table(entries, cfg),
        summary_df=build_member_summary(entries, settings.roster.names),
        title=sheet_title(settings.team_name, cfg),
    )
