# dsu_scheduler/io_layer/paths.py
from dataclasses import dataclass


@dataclass(frozen=True)
class RunPaths:
    """
    properties_file: 設定ファイル（既定は作業ディレクトリの excel-sheet.properties）
    """
    properties_file: str = "excel-sheet.properties"
