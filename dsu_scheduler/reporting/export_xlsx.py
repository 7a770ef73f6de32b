# dsu_scheduler/reporting/export_xlsx.py
from __future__ import annotations

import re
from io import BytesIO
from pathlib import Path
from typing import Union

import pandas as pd
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from dsu_scheduler.config import AppConfig, DEFAULT_CONFIG
from dsu_scheduler.domain.models import EntryKind

MAX_SHEET_TITLE = 31
_FORBIDDEN_TITLE_CHARS = re.compile(r"[\[\]:*?/\\]")

THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)


def sheet_title(team_name: str, cfg: AppConfig = DEFAULT_CONFIG) -> str:
    # Excelのシート名は31文字まで・一部記号不可
    title = f"{team_name.strip()} {cfg.sheet.title_suffix}".strip()
    title = _FORBIDDEN_TITLE_CHARS.sub("", title)
    return title[:MAX_SHEET_TITLE].rstrip()


def _fill(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _autosize(ws: Worksheet) -> None:
    for col_cells in ws.columns:
        width = max((len(str(c.value)) for c in col_cells if c.value is not None), default=0)
        ws.column_dimensions[get_column_letter(col_cells[0].column)].width = width + 2


def _style_schedule_sheet(ws: Worksheet, kinds: pd.Series, cfg: AppConfig) -> None:
    style = cfg.sheet
    bold = Font(bold=True, size=style.font_size)

    for cell in ws[1]:
        cell.fill = _fill(style.header_color)
        cell.font = bold
        cell.border = THIN_BORDER

    # 行2以降が entries と1対1（区切り行は無装飾のまま）
    for row_idx, kind in enumerate(kinds, start=2):
        if kind == EntryKind.SEPARATOR.value:
            continue
        holiday = kind == EntryKind.HOLIDAY.value
        for cell in ws[row_idx]:
            cell.fill = _fill(style.holiday_color if holiday else style.data_color)
            cell.border = THIN_BORDER
            if holiday:
                cell.font = bold

    _autosize(ws)


def _write_workbook(
    target: Union[str, BytesIO],
    schedule_df: pd.DataFrame,
    summary_df: pd.DataFrame,
    title: str,
    cfg: AppConfig,
) -> None:
    visible = schedule_df[[cfg.sheet.name_header, cfg.sheet.date_header]]
    with pd.ExcelWriter(target, engine="openpyxl") as w:
        visible.to_excel(w, sheet_name=title, index=False)
        summary_df.to_excel(w, sheet_name=cfg.sheet.summary_sheet, index=False)

        _style_schedule_sheet(w.sheets[title], schedule_df["kind"], cfg)
        _autosize(w.sheets[cfg.sheet.summary_sheet])


def export_schedule_xlsx(
    out_path: str,
    schedule_df: pd.DataFrame,
    summary_df: pd.DataFrame,
    title: str,
    cfg: AppConfig = DEFAULT_CONFIG,
) -> str:
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    _write_workbook(out_path, schedule_df, summary_df, title, cfg)
    return out_path


def export_schedule_bytes(
    schedule_df: pd.DataFrame,
    summary_df: pd.DataFrame,
    title: str,
    cfg: AppConfig = DEFAULT_CONFIG,
) -> bytes:
    """Streamlitダウンロード用にメモリへ書き出す"""
    buf = BytesIO()
    _write_workbook(buf, schedule_df, summary_df, title, cfg)
    return buf.getvalue()
