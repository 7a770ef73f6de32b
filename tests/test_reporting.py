"""Tests for reporting/report.py and reporting/export_xlsx.py"""

import pytest
from openpyxl import load_workbook

from dsu_scheduler.domain.models import EntryKind, ScheduleEntry
from dsu_scheduler.reporting.export_xlsx import (
    export_schedule_bytes,
    export_schedule_xlsx,
    sheet_title,
)
from dsu_scheduler.reporting.report import build_member_summary, build_schedule_table

ENTRIES = [
    ScheduleEntry.separator(),
    ScheduleEntry("Alice Smith", "Monday, 01/03/2022", EntryKind.DATA),
    ScheduleEntry("Company Holiday", "Tuesday, 01/04/2022", EntryKind.HOLIDAY),
    ScheduleEntry("Bob Jones", "Wednesday, 01/05/2022", EntryKind.DATA),
    ScheduleEntry("Alice Smith", "Thursday, 01/06/2022", EntryKind.DATA),
    ScheduleEntry("Carol Lee", "Friday, 01/07/2022", EntryKind.DATA),
    ScheduleEntry.separator(),
]


@pytest.fixture
def schedule_df():
    return build_schedule_table(ENTRIES)


@pytest.fixture
def summary_df():
    return build_member_summary(ENTRIES, ["Alice Smith", "Bob Jones", "Carol Lee", "Dan Kim"])


def test_schedule_table_keeps_entry_order(schedule_df):
    assert list(schedule_df.columns) == ["Team Member", "DSU Date", "kind"]
    assert len(schedule_df) == len(ENTRIES)
    assert schedule_df.iloc[2]["Team Member"] == "Company Holiday"
    assert list(schedule_df["kind"]) == [e.kind.value for e in ENTRIES]


def test_member_summary(summary_df):
    rows = summary_df.set_index("team_member")
    assert list(summary_df["team_member"]) == ["Alice Smith", "Bob Jones", "Carol Lee", "Dan Kim"]
    assert rows.loc["Alice Smith", "lead_count"] == 2
    assert rows.loc["Alice Smith", "first_date"] == "Monday, 01/03/2022"
    assert rows.loc["Alice Smith", "last_date"] == "Thursday, 01/06/2022"
    assert rows.loc["Dan Kim", "lead_count"] == 0
    assert "Company Holiday" not in rows.index


def test_member_summary_without_roster():
    df = build_member_summary(ENTRIES)
    assert set(df["team_member"]) == {"Alice Smith", "Bob Jones", "Carol Lee"}


@pytest.mark.parametrize("team,expected", [
    ("Team Orion", "Team Orion DSU lead schedule"),
    ("Team/Apollo?", "TeamApollo DSU lead schedule"),
    ("", "DSU lead schedule"),
])
def test_sheet_title(team, expected):
    assert sheet_title(team) == expected


def test_sheet_title_truncated():
    assert len(sheet_title("A very long engineering team name")) <= 31


def test_export_xlsx_layout_and_styles(tmp_path, schedule_df, summary_df):
    out = tmp_path / "nested" / "schedule.xlsx"
    path = export_schedule_xlsx(str(out), schedule_df, summary_df, "Team Orion DSU lead schedule")
    assert out.exists() and path == str(out)

    wb = load_workbook(path)
    assert wb.sheetnames == ["Team Orion DSU lead schedule", "member_summary"]
    ws = wb["Team Orion DSU lead schedule"]

    assert ws["A1"].value == "Team Member"
    assert ws["B1"].value == "DSU Date"
    assert ws["A1"].font.bold
    assert ws["A1"].fill.fgColor.rgb.endswith("00CCFF")
    assert ws.max_column == 2

    # 行2 = 先頭の区切り
    assert not ws["A2"].value
    assert ws["A2"].fill.fill_type is None

    assert ws["A3"].value == "Alice Smith"
    assert ws["A3"].fill.fgColor.rgb.endswith("C0C0C0")
    assert ws["B3"].border.left.style == "thin"

    assert ws["A4"].value == "Company Holiday"
    assert ws["A4"].fill.fgColor.rgb.endswith("FFFF99")
    assert ws["B4"].font.bold

    assert ws.column_dimensions["B"].width >= len("Wednesday, 01/05/2022")


def test_export_bytes_is_a_workbook(tmp_path, schedule_df, summary_df):
    data = export_schedule_bytes(schedule_df, summary_df, "Team Orion DSU lead schedule")
    p = tmp_path / "mem.xlsx"
    p.write_bytes(data)
    wb = load_workbook(p)
    assert wb["member_summary"]["A1"].value == "team_member"
