# dsu_scheduler/rotation/builder.py
from __future__ import annotations

import random
from typing import AbstractSet, List, Optional, Set

from dsu_scheduler.config import AppConfig, DEFAULT_CONFIG
from dsu_scheduler.domain.calendar_walker import CalendarWalker
from dsu_scheduler.domain.errors import ValidationError
from dsu_scheduler.domain.models import EntryKind, Roster, RotationConfig, ScheduleEntry
from dsu_scheduler.rotation.sequencer import FairRotationSequencer
from dsu_scheduler.validation.validator import clamp_day_count


class ScheduleBuilder:
    """
    暦を順に歩き、平日1日につき1名を割り当てる。

    - 祝日: "Company Holiday" 行を追加（名前は消費しない。週末判定より優先）
    - 土日: 何も追加しない
    - 金曜の行の後: 空行（週の区切り）を追加し、今週使った名前をリセット
    - 先頭に空行を1つ（ヘッダと1行目の間）

    同じ週の重複回避は、ロスターが週の日数より多いときだけ行う（それ以下では回避不能）。
    """

    def __init__(
        self,
        cfg: AppConfig = DEFAULT_CONFIG,
        walker: Optional[CalendarWalker] = None,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.walker = walker or CalendarWalker(date_format=cfg.date_format, display_format=cfg.display_format)
        self.rng = rng

    def avoids_weekly_repeats(self, roster: Roster) -> bool:
        return len(roster) > self.cfg.week_length

    def walker_for(self, rotation: RotationConfig) -> CalendarWalker:
        # 祝日文字列は rotation.date_format で照合する
        if self.walker.date_format == rotation.date_format:
            return self.walker
        return CalendarWalker(date_format=rotation.date_format, display_format=self.walker.display_format)

    def build(
        self,
        rotation: RotationConfig,
        roster: Roster,
        holidays: AbstractSet[str] = frozenset(),
    ) -> List[ScheduleEntry]:
        if len(roster) < rotation.min_roster_size:
            raise ValidationError(
                f"Roster has {len(roster)} names, fewer than the required {rotation.min_roster_size}."
            )
        walker = self.walker_for(rotation)
        sequencer = FairRotationSequencer(roster.names, rng=self.rng)
        avoid_repeats = self.avoids_weekly_repeats(roster)
        used_this_week: Set[str] = set()
        day_count = clamp_day_count(rotation.day_count, self.cfg)

        entries: List[ScheduleEntry] = [ScheduleEntry.separator()]

        for cd in walker.walk(rotation.start_date, day_count):
            if cd.formatted in holidays:
                entries.append(ScheduleEntry(self.cfg.holiday_label, cd.display, EntryKind.HOLIDAY))
            elif cd.is_weekend:
                continue
            else:
                name = sequencer.next_name()
                if avoid_repeats:
                    # 今週の使用済みは最大 week_length-1 名なので必ず抜ける
                    while name in used_this_week:
                        name = sequencer.next_name()
                    used_this_week.add(name)
                entries.append(ScheduleEntry(name, cd.display, EntryKind.DATA))

            if not cd.is_weekend and walker.is_friday(cd):
                entries.append(ScheduleEntry.separator())
                used_this_week.clear()

        return entries
