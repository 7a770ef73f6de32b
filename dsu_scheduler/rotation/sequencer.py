# dsu_scheduler/rotation/sequencer.py
from __future__ import annotations

import random
from typing import List, Optional, Sequence

from dsu_scheduler.domain.errors import EmptyRosterError


class FairRotationSequencer:
    """
    ロスター全員が1回ずつ回るまで同じ人を出さない。
    サイクルが空になったら、ロスター全体を新たにシャッフルして補充する（スタックとして pop）。
    サイクル間の重複回避はしない。
    """

    def __init__(self, roster: Sequence[str], rng: Optional[random.Random] = None):
        names = list(roster)
        if not names:
            raise EmptyRosterError("Cannot rotate through an empty roster.")
        self._roster = tuple(names)
        # 既定はOSエントロピーでシードされる（実行ごとに異なる順番）
        self._rng = rng if rng is not None else random.Random()
        self._cycle: List[str] = []
        self.refills = 0

    @property
    def remaining(self) -> int:
        return len(self._cycle)

    def _refill(self) -> None:
        cycle = list(self._roster)
        self._rng.shuffle(cycle)
        self._cycle = cycle
        self.refills += 1

    def next_name(self) -> str:
        if not self._cycle:
            self._refill()
        return self._cycle.pop()
