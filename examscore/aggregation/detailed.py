"""明细环（科目 × 考试区分）聚合。

按 subject_order 逐科目提取分数（见 extractor.py），每个有效分数生成一行
DetailedPieData；缺失或无有效分数的科目各产生一条行级 ChartError。
逐行部分成功：某科目失败不影响其他科目的数据行，status 始终为 "success"。
"""

from __future__ import annotations

__all__ = ["aggregate_detailed_data", "DetailedAggregator"]

import logging
from collections.abc import Mapping, Sequence

from examscore.aggregation.calculations import calculate_percentage
from examscore.aggregation.extractor import SubjectScoreError, extract_scores
from examscore.aggregation.memo import LastCallMemo
from examscore.contracts.chart import ChartError, ChartResult, DetailedPieData
from examscore.contracts.constants import (
    SUBJECT_DISPLAY_NAMES,
    SUBJECTS,
    TEST_TYPES,
    category_of,
    format_exam_type_name,
)
from examscore.contracts.error import create_chart_error, create_chart_metadata, now_ms
from examscore.contracts.scores import SubjectScores

logger = logging.getLogger(__name__)


def aggregate_detailed_data(
    subjects: SubjectScores,
    grand_total: float,
    *,
    subject_order: Sequence[str] = SUBJECTS,
    test_types: Sequence[tuple[str, str]] = TEST_TYPES,
    display_names: Mapping[str, str] = SUBJECT_DISPLAY_NAMES,
) -> ChartResult[DetailedPieData]:
    """生成明细环数据与行级错误。"""
    start_time = now_ms()
    data: list[DetailedPieData] = []
    errors: list[ChartError] = []

    for subject_name in subject_order:
        for item in extract_scores(subjects.get(subject_name), subject_name, test_types):
            if isinstance(item, SubjectScoreError):
                errors.append(
                    create_chart_error(
                        item.code,
                        item.subject_name,
                        item.message,
                        details={"original_message": item.message},
                        timestamp=start_time,
                    )
                )
                continue
            display = display_names.get(subject_name, subject_name)
            data.append(
                DetailedPieData(
                    subject_name=subject_name,
                    value=item.value,
                    percentage=calculate_percentage(item.value, grand_total),
                    type=item.type,
                    name=format_exam_type_name(subject_name, item.type),
                    category=category_of(subject_name),
                    display_name=format_exam_type_name(display, item.type),
                )
            )

    if errors:
        logger.warning(
            "detailed chart data: %d row error(s): %s",
            len(errors), ", ".join(e.field for e in errors),
        )
    return ChartResult(
        data=data,
        errors=errors,
        has_errors=bool(errors),
        status="success",
        metadata=create_chart_metadata(start_time, len(subject_order), data, errors),
    )


class DetailedAggregator:
    """带记忆化的明细环聚合器；subjects（identity）与 grand_total 不变时复用结果。"""

    def __init__(
        self,
        *,
        subject_order: Sequence[str] = SUBJECTS,
        test_types: Sequence[tuple[str, str]] = TEST_TYPES,
        display_names: Mapping[str, str] = SUBJECT_DISPLAY_NAMES,
    ) -> None:
        self.subject_order = tuple(subject_order)
        self.test_types = tuple(test_types)
        self.display_names = dict(display_names)
        self._memo: LastCallMemo[ChartResult[DetailedPieData]] = LastCallMemo()

    def __call__(self, subjects: SubjectScores, grand_total: float) -> ChartResult[DetailedPieData]:
        return self._memo.get_or_compute(
            (subjects, grand_total),
            lambda: aggregate_detailed_data(
                subjects,
                grand_total,
                subject_order=self.subject_order,
                test_types=self.test_types,
                display_names=self.display_names,
            ),
        )
