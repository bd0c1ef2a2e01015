"""外环（大类）聚合。

对每个大类（按 categories 顺序、同名只处理一次）调用调用方提供的
calculate_category_total(subjects, category) 求合计，并检查：
- 合计 < 0           → NEGATIVE_TOTAL
- 合计 > 全体总分    → EXCEEDS_TOTAL

任一大类越界即整批作废：data 为空、仅一条 CALCULATION_ERROR、status="error"。
这与明细环（detailed.py）的逐行部分成功不同，两种语义都是界面层的既有约定。

越界以 CategoryDataError 值的形式从 _build_category_rows() 返回，不经由 raise。
calculate_category_total 自身抛出的异常不捕获，直接传给调用方。
"""

from __future__ import annotations

__all__ = [
    "CategoryTotalFn",
    "aggregate_category_data",
    "CategoryAggregator",
]

import logging
from collections.abc import Callable, Sequence

from examscore.aggregation.calculations import calculate_category_total as default_category_total
from examscore.aggregation.calculations import calculate_percentage, round1
from examscore.aggregation.memo import LastCallMemo
from examscore.contracts.chart import ChartResult, PieData
from examscore.contracts.constants import CATEGORY_DATA_FIELD, SUBJECT_CATEGORIES
from examscore.contracts.error import (
    chart_error_from_exception,
    create_chart_error_result,
    create_chart_metadata,
    now_ms,
)
from examscore.contracts.exceptions import EXCEEDS_TOTAL, NEGATIVE_TOTAL, CategoryDataError
from examscore.contracts.scores import SubjectScores

logger = logging.getLogger(__name__)

CategoryTotalFn = Callable[[SubjectScores, str], float]


def _build_category_rows(
    subjects: SubjectScores,
    grand_total: float,
    calculate_category_total: CategoryTotalFn,
    categories: Sequence[str],
) -> list[PieData] | CategoryDataError:
    rows: list[PieData] = []
    for category in categories:
        total = calculate_category_total(subjects, category)
        if total < 0:
            return CategoryDataError(NEGATIVE_TOTAL, category=category, value=total)
        if total > grand_total:
            return CategoryDataError(
                EXCEEDS_TOTAL, category=category, value=total, grand_total=grand_total,
            )
        rows.append(
            PieData(
                name=category,
                value=total,
                percentage=round1(calculate_percentage(total, grand_total)),
            )
        )
    return rows


def aggregate_category_data(
    subjects: SubjectScores,
    grand_total: float,
    calculate_category_total: CategoryTotalFn = default_category_total,
    *,
    categories: Sequence[str] = SUBJECT_CATEGORIES,
) -> ChartResult[PieData]:
    """生成外环数据：每个大类一行，全部成功或整批失败。"""
    start_time = now_ms()
    ordered = list(dict.fromkeys(categories))

    outcome = _build_category_rows(subjects, grand_total, calculate_category_total, ordered)
    if isinstance(outcome, CategoryDataError):
        logger.warning(
            "category aggregation aborted (%s): %s", outcome.code, outcome.message,
        )
        error = chart_error_from_exception(
            outcome,
            CATEGORY_DATA_FIELD,
            extra_details={"category": outcome.category, "value": outcome.value},
        )
        return create_chart_error_result([error])

    return ChartResult(
        data=outcome,
        errors=[],
        has_errors=False,
        status="success",
        metadata=create_chart_metadata(start_time, len(ordered), outcome, []),
    )


class CategoryAggregator:
    """带记忆化的外环聚合器。

    subjects 映射、grand_total、合计函数三者都未变化时
    （映射与函数按 identity 比较）直接返回上一次的结果对象。
    """

    def __init__(self, *, categories: Sequence[str] = SUBJECT_CATEGORIES) -> None:
        self.categories = tuple(categories)
        self._memo: LastCallMemo[ChartResult[PieData]] = LastCallMemo()

    def __call__(
        self,
        subjects: SubjectScores,
        grand_total: float,
        calculate_category_total: CategoryTotalFn = default_category_total,
    ) -> ChartResult[PieData]:
        return self._memo.get_or_compute(
            (subjects, grand_total, calculate_category_total),
            lambda: aggregate_category_data(
                subjects,
                grand_total,
                calculate_category_total,
                categories=self.categories,
            ),
        )
