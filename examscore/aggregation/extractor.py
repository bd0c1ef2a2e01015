"""科目分数提取：明细环按科目展开前的逐项筛选。

对一个科目：
- 分数条目完全缺失 → 一条 SubjectScoreError（MISSING_SCORE）
- 按 TEST_TYPES 顺序取各项原始分，仅保留 > 0 的值；0、负数、非数值静默丢弃
- 全部被丢弃 → 一条 SubjectScoreError（INVALID_SCORE）
"""

from __future__ import annotations

__all__ = ["ExtractedScore", "SubjectScoreError", "extract_scores"]

import math
import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal

from examscore.contracts.constants import TEST_TYPES
from examscore.contracts.scores import BaseSubjectScore


@dataclass(frozen=True, slots=True)
class ExtractedScore:
    subject_name: str
    type: str
    value: float


@dataclass(frozen=True, slots=True)
class SubjectScoreError:
    subject_name: str
    message: str
    code: Literal["MISSING_SCORE", "INVALID_SCORE"]


def _positive(value: Any) -> bool:
    return (
        not isinstance(value, bool)
        and isinstance(value, numbers.Real)
        and math.isfinite(value)
        and value > 0
    )


def extract_scores(
    score: BaseSubjectScore | None,
    subject_name: str,
    test_types: Sequence[tuple[str, str]] = TEST_TYPES,
) -> list[ExtractedScore | SubjectScoreError]:
    """提取一个科目的有效分数行，或返回仅含一条错误的列表。"""
    if score is None:
        return [
            SubjectScoreError(
                subject_name=subject_name,
                message=f"科目「{subject_name}」のスコアが見つかりません",
                code="MISSING_SCORE",
            )
        ]

    extracted: list[ExtractedScore | SubjectScoreError] = [
        ExtractedScore(subject_name=subject_name, type=label, value=getattr(score, field))
        for field, label in test_types
        if _positive(getattr(score, field))
    ]
    if not extracted:
        return [
            SubjectScoreError(
                subject_name=subject_name,
                message=f"科目「{subject_name}」の有効なスコアがありません",
                code="INVALID_SCORE",
            )
        ]
    return extracted
