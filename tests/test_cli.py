"""End-to-end tests for main_cli.py"""

import pytest
from openpyxl import load_workbook

import main_cli
from dsu_scheduler.domain.models import EntryKind, Roster
from dsu_scheduler.pipeline import generate_schedule
from dsu_scheduler.validation.validator import resolve_run_settings


@pytest.fixture
def props_file(tmp_path):
    out = tmp_path / "out" / "Apollo DSU.xlsx"
    p = tmp_path / "excel-sheet.properties"
    p.write_text(
        "team.name=Apollo\n"
        "team.members=alice smith, bob jones, carol lee\n"
        "start.date=01/03/2022\n"
        "rotation.days=14\n"
        "com.us.fy22.holidays=01/07/2022\n"
        f"excel.file.save.location={out.as_posix()}\n",
        encoding="utf-8",
    )
    return p, out


def test_cli_writes_schedule(props_file, capsys):
    p, out = props_file
    assert main_cli.main([str(p)]) == 0

    printed = capsys.readouterr().out
    assert "[WARN]" in printed and "Placeholder names" in printed
    assert f"[RESULT] OK: {out}" in printed

    ws = load_workbook(out)["Apollo DSU lead schedule"]
    values = [(r[0], r[1]) for r in ws.iter_rows(min_row=2, values_only=True)]
    names = [n for n, _ in values if n]
    assert "Company Holiday" in names
    # 平日10日 - 祝日1日
    assert len([n for n in names if n != "Company Holiday"]) == 9
    assert set(names) <= {"Alice Smith", "Bob Jones", "Carol Lee", "Person 1", "Person 2", "Company Holiday"}


def test_cli_overrides(props_file, tmp_path):
    p, _ = props_file
    out = tmp_path / "override.xlsx"
    code = main_cli.main([str(p), "--days", "5", "--holidays", "", "--out", str(out), "--members", "a,b,c,d,e,f"])
    assert code == 0
    ws = load_workbook(out)["Apollo DSU lead schedule"]
    names = [r[0] for r in ws.iter_rows(min_row=2, values_only=True) if r[0]]
    assert sorted(names) == sorted(set(names))
    assert len(names) == 5


def test_cli_bad_start_date(props_file, capsys):
    p, out = props_file
    assert main_cli.main([str(p), "--start", "2022-01-03"]) == 1
    assert "[ERROR]" in capsys.readouterr().out
    assert not out.exists()


def test_cli_missing_properties_uses_defaults(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main_cli.main(["missing.properties", "--start", "01/03/2022"]) == 0
    printed = capsys.readouterr().out
    assert "not found" in printed
    assert (tmp_path / "Team DSU Schedule.xlsx").exists()


def test_cli_open_after_creation(props_file, monkeypatch):
    p, out = props_file
    opened = []
    monkeypatch.setattr(main_cli, "open_file", lambda path: opened.append(path) or True)
    assert main_cli.main([str(p), "--open"]) == 0
    assert opened == [str(out)]


def test_pipeline_end_to_end(rng):
    raw = {
        "team.members": "Alice Smith,Bob Jones,Carol Lee,Dan Kim,Eve Park",
        "start.date": "01/03/2022",
        "rotation.days": "5",
    }
    settings, warnings = resolve_run_settings(raw)
    assert warnings == []
    assert settings.roster == Roster(("Alice Smith", "Bob Jones", "Carol Lee", "Dan Kim", "Eve Park"))

    result = generate_schedule(settings, rng=rng)
    kinds = [e.kind for e in result.entries]
    assert kinds == [EntryKind.SEPARATOR] + [EntryKind.DATA] * 5 + [EntryKind.SEPARATOR]
    assert len({e.name for e in result.entries if e.kind is EntryKind.DATA}) == 5
    assert result.title == "Team Orion DSU lead schedule"
    assert list(result.summary_df["lead_count"]) == [1] * 5
