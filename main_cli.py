# main_cli.py
from __future__ import annotations

import argparse
import configparser
from pathlib import Path
from typing import Dict, List, Optional

from dsu_scheduler.config import DEFAULT_CONFIG
from dsu_scheduler.io_layer.desktop import open_file
from dsu_scheduler.io_layer.paths import RunPaths
from dsu_scheduler.io_layer.properties_reader import load_properties
from dsu_scheduler.pipeline import generate_schedule
from dsu_scheduler.reporting.export_xlsx import export_schedule_xlsx
from dsu_scheduler.validation.validator import ValidationError, resolve_run_settings


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Generate a DSU lead rotation schedule (xlsx).")
    p.add_argument("properties", nargs="?", default=RunPaths().properties_file, help="設定ファイル（.properties）")
    p.add_argument("--start", help="開始日（MM/dd/yyyy）。設定ファイルの start.date を上書き")
    p.add_argument("--days", help="ローテーションの暦日数。rotation.days を上書き")
    p.add_argument("--members", help="メンバー（カンマ区切り）。team.members を上書き")
    p.add_argument("--holidays", help="祝日（カンマ区切り、MM/dd/yyyy）")
    p.add_argument("--out", help="出力xlsx")
    p.add_argument("--open", action="store_true", help="作成後にファイルを開く")
    return p.parse_args(argv)


def _apply_overrides(raw: Dict[str, str], args) -> Dict[str, str]:
    keys = DEFAULT_CONFIG.properties
    out = dict(raw)
    if args.start is not None:
        out[keys.start_date] = args.start
    if args.days is not None:
        for k in keys.rotation_days:
            out.pop(k, None)
        out[keys.rotation_days[0]] = args.days
    if args.members is not None:
        out[keys.team_members] = args.members
    if args.holidays is not None:
        for k in keys.holidays:
            out.pop(k, None)
        out[keys.holidays[0]] = args.holidays
    if args.out is not None:
        out[keys.output_path] = args.out
    if args.open:
        for k in keys.open_after_creation:
            out.pop(k, None)
        out[keys.open_after_creation[0]] = "true"
    return out


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    cfg = DEFAULT_CONFIG
    paths = RunPaths(properties_file=args.properties)

    raw: Dict[str, str] = {}
    if Path(paths.properties_file).exists():
        try:
            raw = load_properties(paths.properties_file)
        except (OSError, UnicodeDecodeError, configparser.Error) as e:
            print(f"[ERROR] Could not read '{paths.properties_file}': {e}")
            return 1
    else:
        print(f"[WARN] Properties file '{paths.properties_file}' not found. Using default settings.")

    try:
        settings, warnings = resolve_run_settings(_apply_overrides(raw, args), cfg)
    except ValidationError as e:
        print(f"[ERROR] {e.message}")
        return 1
    for w in warnings:
        print(f"[WARN] {w.message}")

    result = generate_schedule(settings, cfg)

    try:
        out_path = export_schedule_xlsx(settings.output_path, result.schedule_df, result.summary_df, result.title, cfg)
    except OSError as e:
        print(f"[ERROR] Could not write '{settings.output_path}': {e}")
        return 2
    print(f"[RESULT] OK: {out_path}")

    if settings.open_after_creation:
        print(f"[RESULT] Opening '{out_path}' ...")
        if not open_file(out_path):
            print(f"[WARN] Could not open '{out_path}'.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
