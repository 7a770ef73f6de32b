# dsu_scheduler/gui/app.py
from __future__ import annotations

import configparser
from datetime import date, datetime
from pathlib import Path
import sys

import streamlit as st
from dateutil import tz

# Streamlitは実行ディレクトリが変わるため、リポジトリルートをパスに追加する。
ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from dsu_scheduler.config import AppConfig, DEFAULT_CONFIG
from dsu_scheduler.domain.calendar_walker import CalendarWalker
from dsu_scheduler.io_layer.properties_reader import parse_properties
from dsu_scheduler.pipeline import generate_schedule
from dsu_scheduler.reporting.export_xlsx import export_schedule_bytes
from dsu_scheduler.validation.validator import ValidationError, first_value, resolve_day_count, resolve_run_settings


def form_defaults(base, cfg: AppConfig, today: date) -> dict:
    """
    読み込んだ .properties からフォームの初期値を作る。
    開始日が解釈できなければ InvalidDateFormatError（CLIと同じく中止）。
    """
    keys = cfg.properties
    raw_start = (first_value(base, keys.start_date) or "").strip()
    start = CalendarWalker(cfg.date_format, cfg.display_format).parse(raw_start) if raw_start else today
    days, _ = resolve_day_count(first_value(base, keys.rotation_days), cfg)
    return {
        "team_name": first_value(base, keys.team_name) or cfg.default_team_name,
        "members": first_value(base, keys.team_members) or "",
        "start": start,
        "days": days,
        "holidays": first_value(base, keys.holidays) or "",
        "output_path": first_value(base, keys.output_path) or cfg.default_output_file,
    }


def main():
    cfg = DEFAULT_CONFIG
    keys = cfg.properties

    st.title("DSU Lead Rotation Scheduler")

    now = datetime.now(tz=tz.gettz(cfg.timezone_name))

    # 既存の .properties があれば初期値として使う
    uploaded = st.file_uploader("Properties file (optional)", type=["properties", "txt"])
    base = {}
    if uploaded is not None:
        try:
            base = parse_properties(uploaded.getvalue().decode("utf-8"))
        except (UnicodeDecodeError, configparser.Error) as e:
            st.error(f"Could not read the properties file: {e}")
            st.stop()

    try:
        defaults = form_defaults(base, cfg, now.date())
    except ValidationError as e:
        st.error(e.message)
        st.stop()

    st.header("Team")
    team_name = st.text_input("Team name", value=defaults["team_name"])
    members = st.text_area("Team members (comma or newline separated)", value=defaults["members"])

    st.header("Rotation")
    start = st.date_input("Start date", value=defaults["start"])
    days = st.number_input("Calendar days in rotation", min_value=1, max_value=cfg.max_day_count, value=defaults["days"])
    holidays = st.text_area(
        "Company holidays (MM/DD/YYYY, comma or newline separated)",
        value=defaults["holidays"],
    )

    run = st.button("Start")

    if not run:
        st.stop()

    raw = {
        keys.team_name: team_name,
        keys.team_members: ",".join(members.splitlines()),
        keys.start_date: start.strftime(cfg.date_format),
        keys.rotation_days[0]: str(int(days)),
        keys.holidays[0]: ",".join(holidays.splitlines()),
        keys.output_path: defaults["output_path"],
    }

    try:
        settings, warnings = resolve_run_settings(raw, cfg)
    except ValidationError as e:
        st.error(e.message)
        st.stop()
    for w in warnings:
        st.warning(w.message)

    result = generate_schedule(settings, cfg)

    st.success("Schedule created.")

    tab1, tab2 = st.tabs(["Schedule", "Member summary"])
    with tab1:
        visible = result.schedule_df[[cfg.sheet.name_header, cfg.sheet.date_header]]
        st.dataframe(visible, use_container_width=True)
    with tab2:
        st.dataframe(result.summary_df, use_container_width=True)

    xlsx_bytes = export_schedule_bytes(result.schedule_df, result.summary_df, result.title, cfg)
    st.download_button(
        label="Download xlsx",
        data=xlsx_bytes,
        file_name=Path(settings.output_path).name,
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )


if __name__ == "__main__":
    main()
