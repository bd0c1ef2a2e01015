"""分数运算辅助函数。

- calculate_percentage()      : value / total * 100，total 为 0 时返回 0
- round1()                    : 保留 1 位小数，半数进位（外环百分比）
- calculate_total_score()     : 全体总分，按 ScoreValidator.calculate_total 语义（非法科目记 0）
- calculate_category_total()  : 默认的大类合计函数，原始分直接相加（负值原样保留，交给聚合器拒绝）
- calculate_test_type_total() : 某一考试区分（共通 / 二次）的合计
- calculate_subject_scores()  : 每科目 共通 / 二次 / 合计 的得分与占比
"""

from __future__ import annotations

__all__ = [
    "ScoreShare",
    "SubjectScoreDetail",
    "calculate_percentage",
    "round1",
    "calculate_total_score",
    "calculate_category_total",
    "calculate_test_type_total",
    "calculate_subject_scores",
]

import math
import numbers
from dataclasses import dataclass
from typing import Any

from examscore.contracts.constants import category_of
from examscore.contracts.scores import SubjectScores
from examscore.validation.score_validator import ScoreValidator


def _numeric(value: Any) -> float:
    """有限实数原样返回，其余（None、字符串、NaN、bool）记 0。"""
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        return 0
    return value


def calculate_percentage(value: float, total: float) -> float:
    return 0.0 if total == 0 else value / total * 100


def round1(value: float) -> float:
    """保留 1 位小数，0.5 一律进位（0.25 → 0.3）；内置 round() 会按二进制近似值向偶数舍入。"""
    return math.floor(value * 10 + 0.5) / 10


def calculate_total_score(subjects: SubjectScores, validator: ScoreValidator | None = None) -> float:
    """全体总分：逐科目 calculate_total 后求和。"""
    validator = validator or ScoreValidator()
    return sum(validator.calculate_total(score) for score in subjects.values())


def calculate_category_total(subjects: SubjectScores, category: str) -> float:
    """大类合计：所有归属该大类的科目（英語R / 英語L → 英語）两项原始分之和。"""
    return sum(
        _numeric(score.common_test) + _numeric(score.second_test)
        for name, score in subjects.items()
        if category_of(name) == category
    )


def calculate_test_type_total(subjects: SubjectScores, field: str) -> float:
    """某考试区分的合计；field 为 "common_test" 或 "second_test"。"""
    return sum(_numeric(getattr(score, field)) for score in subjects.values())


@dataclass(frozen=True, slots=True)
class ScoreShare:
    score: float
    percentage: float


@dataclass(frozen=True, slots=True)
class SubjectScoreDetail:
    subject: str
    common_test: ScoreShare
    second_test: ScoreShare
    total: ScoreShare


def calculate_subject_scores(subjects: SubjectScores) -> list[SubjectScoreDetail]:
    """每科目的得分明细，占比均以全体总分为分母。"""
    grand_total = sum(
        _numeric(s.common_test) + _numeric(s.second_test) for s in subjects.values()
    )
    details: list[SubjectScoreDetail] = []
    for name, score in subjects.items():
        common = _numeric(score.common_test)
        second = _numeric(score.second_test)
        details.append(
            SubjectScoreDetail(
                subject=name,
                common_test=ScoreShare(common, calculate_percentage(common, grand_total)),
                second_test=ScoreShare(second, calculate_percentage(second, grand_total)),
                total=ScoreShare(common + second, calculate_percentage(common + second, grand_total)),
            )
        )
    return details
