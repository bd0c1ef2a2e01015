"""组合图表数据：明细环 + 大类外环 + 考试区分环。

build_chart_data() 是界面层读取一个科目组合图表数据的入口：
1. 未给出 grand_total 时按 ScoreValidator 语义计算全体总分
2. aggregate_detailed_data() 生成明细环（逐行部分成功），再按顺时针顺序排列英语行
3. aggregate_category_data() 生成大类外环（整批成败）
4. aggregate_test_type_data() 生成 共通 / 二次 两段的考试区分环
5. errors 拼接明细与外环的错误，供页面统一展示
"""

from __future__ import annotations

__all__ = [
    "aggregate_test_type_data",
    "sort_detailed_for_chart",
    "build_chart_data",
]

import dataclasses
from collections.abc import Sequence
from typing import TYPE_CHECKING

from examscore.aggregation.calculations import (
    calculate_category_total,
    calculate_percentage,
    calculate_test_type_total,
    calculate_total_score,
    round1,
)
from examscore.aggregation.category import CategoryTotalFn, aggregate_category_data
from examscore.aggregation.detailed import aggregate_detailed_data
from examscore.contracts.chart import ChartData, DetailedPieData, PieData
from examscore.contracts.constants import (
    SUBJECT_CATEGORIES,
    SUBJECT_DISPLAY_NAMES,
    SUBJECTS,
    TEST_TYPE_COMMON,
    TEST_TYPES,
    english_part,
)
from examscore.contracts.scores import SubjectScores
from examscore.validation.score_validator import ScoreValidator

if TYPE_CHECKING:
    from examscore.config import EngineConfig


def aggregate_test_type_data(
    subjects: SubjectScores,
    grand_total: float,
    *,
    test_types: Sequence[tuple[str, str]] = TEST_TYPES,
) -> list[PieData]:
    """每个考试区分一行（按 test_types 顺序）。"""
    rows: list[PieData] = []
    for field, label in test_types:
        total = calculate_test_type_total(subjects, field)
        rows.append(
            PieData(name=label, value=total, percentage=round1(calculate_percentage(total, grand_total)))
        )
    return rows


# (R/L 部分, 是否共通) → 顺时针位置；英語R + L 等组合行与其他科目同样排在后面
_CLOCKWISE_POSITIONS = {
    ("L", True): 0,
    ("R", True): 1,
    ("L", False): 2,
    ("R", False): 3,
}


def _clockwise_order(row: DetailedPieData) -> int:
    part = english_part(row.subject_name)
    return _CLOCKWISE_POSITIONS.get((part, row.type == TEST_TYPE_COMMON), 999)


def sort_detailed_for_chart(rows: Sequence[DetailedPieData]) -> list[DetailedPieData]:
    """英语行按 L(共通) → R(共通) → L(二次) → R(二次) 顺时针排在前，其余保持原顺序。

    build_chart_data() 用它排列明细环的 data；单独调用 aggregate_detailed_data() 时保持科目顺序。
    """
    return sorted(rows, key=_clockwise_order)


def build_chart_data(
    subjects: SubjectScores,
    *,
    grand_total: float | None = None,
    validator: ScoreValidator | None = None,
    config: EngineConfig | None = None,
    category_total: CategoryTotalFn = calculate_category_total,
) -> ChartData:
    """生成一个科目组合的完整图表数据，不向调用方抛出校验/越界错误。"""
    subject_order = config.subjects if config else SUBJECTS
    categories = config.categories if config else SUBJECT_CATEGORIES
    test_types = config.test_types if config else TEST_TYPES
    display_names = config.display_names if config else SUBJECT_DISPLAY_NAMES

    if grand_total is None:
        grand_total = calculate_total_score(subjects, validator)

    detailed = aggregate_detailed_data(
        subjects,
        grand_total,
        subject_order=subject_order,
        test_types=test_types,
        display_names=display_names,
    )
    detailed = dataclasses.replace(detailed, data=sort_detailed_for_chart(detailed.data))
    outer = aggregate_category_data(subjects, grand_total, category_total, categories=categories)
    return ChartData(
        detailed=detailed,
        outer=outer,
        test_types=aggregate_test_type_data(subjects, grand_total, test_types=test_types),
        grand_total=grand_total,
        errors=[*detailed.errors, *outer.errors],
    )
