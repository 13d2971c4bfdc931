"""スケジュール表 (DataFrame) の検証関数群。"""

from __future__ import annotations

import pandas as pd

SCHEDULE_COLUMNS: tuple[str, ...] = (
    "id",
    "name",
    "duration",
    "earliest_start",
    "critical",
)


def check_dataframe_has_columns(
    df: pd.DataFrame,
    columns: tuple[str, ...] | list[str],
) -> None:
    """指定した列が全て存在することを検証する。"""
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def check_column_nonnegative(df: pd.DataFrame, column: str) -> None:
    """列の値が非負であることを検証する。"""
    if (df[column] < 0).any():
        raise ValueError(f"Column {column} must contain only non-negative values")


def check_column_unique(df: pd.DataFrame, column: str) -> None:
    """列の値に重複がないことを検証する。"""
    duplicated = df[column][df[column].duplicated()].tolist()
    if duplicated:
        raise ValueError(f"Column {column} contains duplicate values: {duplicated}")


def check_schedule_frame(df: pd.DataFrame) -> None:
    """schedule_frame() の出力がスケジュール表として整合することを検証する。"""
    check_dataframe_has_columns(df, SCHEDULE_COLUMNS)
    check_column_unique(df, "id")
    check_column_nonnegative(df, "duration")
    check_column_nonnegative(df, "earliest_start")
    if not df.empty and not pd.api.types.is_bool_dtype(df["critical"]):
        raise TypeError(f"Column critical has dtype {df['critical'].dtype}, expected bool")


__all__ = [
    "SCHEDULE_COLUMNS",
    "check_dataframe_has_columns",
    "check_column_nonnegative",
    "check_column_unique",
    "check_schedule_frame",
]
