import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from examscore.contracts.scores import BaseSubjectScore  # noqa: E402

# ── 共享 fixture ──────────────────────────────────────────────────────

ENGINE_CONFIG_PATH = ROOT / "configs" / "score_engine.yaml"


class RecordingErrorLogger:
    """记录每次 error() 调用，便于断言副作用。"""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def error(self, message: str, context: Any) -> None:
        self.calls.append((message, dict(context)))


class FakeClock:
    """可手动推进的毫秒时钟。"""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def engine_config_path() -> Path:
    """返回仓库内 configs/score_engine.yaml 的路径。"""
    return ENGINE_CONFIG_PATH


@pytest.fixture
def error_logger() -> RecordingErrorLogger:
    return RecordingErrorLogger()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sample_subjects() -> dict[str, BaseSubjectScore]:
    """一个典型科目组合：地歴公缺失，英語L 仅有共通分数。总分 480。"""
    return {
        "英語R": BaseSubjectScore(common_test=70, second_test=30),
        "英語L": BaseSubjectScore(common_test=20, second_test=0),
        "数学": BaseSubjectScore(common_test=80, second_test=60),
        "国語": BaseSubjectScore(common_test=90, second_test=50),
        "理科": BaseSubjectScore(common_test=40, second_test=40),
    }
