# dsu_scheduler/config.py
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class PropertyKeys:
    """.properties のキー名（旧レイアウトの別名も受け付ける）"""
    team_name: str = "team.name"
    team_members: str = "team.members"
    start_date: str = "start.date"
    rotation_days: Tuple[str, ...] = ("rotation.days", "days.in.rotation")
    holidays: Tuple[str, ...] = ("com.us.fy22.holidays", "com.fy22.holidays")
    output_path: str = "excel.file.save.location"
    open_after_creation: Tuple[str, ...] = ("excel.file.opening.enabled", "excel.file.open.after.creation")


@dataclass(frozen=True)
class SheetStyle:
    """出力シートの見た目"""
    name_header: str = "Team Member"
    date_header: str = "DSU Date"
    title_suffix: str = "DSU lead schedule"
    summary_sheet: str = "member_summary"
    header_color: str = "00CCFF"   # sky blue
    data_color: str = "C0C0C0"     # grey 25%
    holiday_color: str = "FFFF99"  # light yellow
    font_size: int = 12


@dataclass(frozen=True)
class AppConfig:
    # 日付の入力形式（MM/dd/yyyy）と表示形式（Monday, 01/03/2022）
    date_format: str = "%m/%d/%Y"
    display_format: str = "%A, %m/%d/%Y"

    # ローテーション
    min_roster_size: int = 5
    week_length: int = 5            # 月〜金
    default_day_count: int = 5
    max_day_count: int = 1000
    fallback_day_count: int = 100   # 上限超過時はここに落とす
    placeholder_prefix: str = "Person"
    holiday_label: str = "Company Holiday"

    # 既定値
    default_team_name: str = "Team Orion"
    default_output_file: str = "Team DSU Schedule.xlsx"

    # None = ローカルタイムゾーン（開始日未指定時の「今日」）
    timezone_name: Optional[str] = None

    properties: PropertyKeys = field(default_factory=PropertyKeys)
    sheet: SheetStyle = field(default_factory=SheetStyle)


DEFAULT_CONFIG = AppConfig()
