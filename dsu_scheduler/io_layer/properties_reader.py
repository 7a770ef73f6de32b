# dsu_scheduler/io_layer/properties_reader.py
from __future__ import annotations

import configparser
from pathlib import Path
from typing import Dict, List

_SECTION = "properties"


def _ends_with_continuation(line: str) -> bool:
    # 末尾の連続した "\" が奇数個なら次の行へ続く（"\\" はエスケープされた "\"）
    n = len(line) - len(line.rstrip("\\"))
    return n % 2 == 1


def _logical_lines(text: str) -> List[str]:
    """
    物理行を .properties の論理行にまとめる。
    - 行頭の空白は無視（configparser では前の値の継続行扱いになるため）
    - "#" / "!" で始まる行はコメント
    - 末尾 "\" の行は次の行（行頭空白を除く）と連結
    """
    out: List[str] = []
    pending = None
    for raw in text.splitlines():
        line = raw.lstrip()
        if pending is None:
            if not line or line.startswith(("#", "!")):
                continue
            current = line
        else:
            current = pending + line
        if _ends_with_continuation(current):
            pending = current[:-1]
            continue
        pending = None
        out.append(current)
    if pending is not None:
        out.append(pending)
    return out


def parse_properties(text: str) -> Dict[str, str]:
    """
    Java形式の .properties（key=value / key: value、# と ! はコメント、末尾 \\ で行継続）を dict にする。
    configparser はセクション必須なので仮のヘッダを付けて読む。
    """
    parser = configparser.RawConfigParser(
        delimiters=("=", ":"),
        comment_prefixes=("#",),
        strict=False,
        default_section="__none__",
    )
    parser.optionxform = str  # キーの大文字小文字を保持
    parser.read_string(f"[{_SECTION}]\n" + "\n".join(_logical_lines(text)))
    return {k: v.strip() for k, v in parser.items(_SECTION)}


def load_properties(path: str) -> Dict[str, str]:
    p = Path(path)
    return parse_properties(p.read_text(encoding="utf-8"))
