# dsu_scheduler/io_layer/desktop.py
from __future__ import annotations

import os
import subprocess
import sys


def open_file(path: str) -> bool:
    """作成したファイルをOSの既定アプリで開く。開けなければ False（例外は出さない）"""
    try:
        if sys.platform.startswith("win"):
            os.startfile(path)  # type: ignore[attr-defined]
        elif sys.platform == "darwin":
            subprocess.Popen(["open", path])
        else:
            subprocess.Popen(["xdg-open", path])
    except OSError:
        return False
    return True
