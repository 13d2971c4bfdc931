"""スケジュール検証ヘルパーの公開モジュール。"""

from .schedule import (
    SCHEDULE_COLUMNS,
    check_column_nonnegative,
    check_column_unique,
    check_dataframe_has_columns,
    check_schedule_frame,
)

__all__ = [
    "SCHEDULE_COLUMNS",
    "check_dataframe_has_columns",
    "check_column_nonnegative",
    "check_column_unique",
    "check_schedule_frame",
]
