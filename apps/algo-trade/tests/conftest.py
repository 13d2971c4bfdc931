from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest


def _ensure_package_paths() -> None:
    repo_root = Path(__file__).resolve().parents[3]
    for package_dir in (
        repo_root / "packages" / "taskdag-core",
        repo_root / "apps" / "algo-trade",
    ):
        if str(package_dir) not in sys.path:
            sys.path.insert(0, str(package_dir))


_ensure_package_paths()


@pytest.fixture(autouse=True)
def _trading_workflow_registered() -> Iterator[None]:
    from algo_trade_dag.workflow import register

    register()
    yield
