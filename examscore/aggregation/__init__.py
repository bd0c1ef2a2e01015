"""分数聚合层：把一个科目组合转换为图表数据。

子模块：
- calculations.py : 合计 / 百分比 / 大类合计等运算
- extractor.py    : 单科目有效分数提取
- category.py     : 大类外环聚合（整批成败）+ CategoryAggregator
- detailed.py     : 明细环聚合（逐行部分成功）+ DetailedAggregator
- chart_data.py   : build_chart_data() 组合入口
- memo.py         : LastCallMemo 记忆化
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from examscore_utils.lazy_import import make_lazy_module_dir, make_lazy_module_getattr

if TYPE_CHECKING:
    from examscore.aggregation.calculations import (
        calculate_category_total,
        calculate_percentage,
        calculate_subject_scores,
        calculate_test_type_total,
        calculate_total_score,
    )
    from examscore.aggregation.category import CategoryAggregator, aggregate_category_data
    from examscore.aggregation.chart_data import (
        aggregate_test_type_data,
        build_chart_data,
        sort_detailed_for_chart,
    )
    from examscore.aggregation.detailed import DetailedAggregator, aggregate_detailed_data
    from examscore.aggregation.extractor import extract_scores

__all__ = [
    "calculate_total_score",
    "calculate_category_total",
    "calculate_percentage",
    "calculate_test_type_total",
    "calculate_subject_scores",
    "extract_scores",
    "aggregate_category_data",
    "CategoryAggregator",
    "aggregate_detailed_data",
    "DetailedAggregator",
    "aggregate_test_type_data",
    "sort_detailed_for_chart",
    "build_chart_data",
]

_SYMBOLS: dict[str, tuple[str, str]] = {
    "calculate_total_score": ("examscore.aggregation.calculations", "calculate_total_score"),
    "calculate_category_total": ("examscore.aggregation.calculations", "calculate_category_total"),
    "calculate_percentage": ("examscore.aggregation.calculations", "calculate_percentage"),
    "calculate_test_type_total": ("examscore.aggregation.calculations", "calculate_test_type_total"),
    "calculate_subject_scores": ("examscore.aggregation.calculations", "calculate_subject_scores"),
    "extract_scores": ("examscore.aggregation.extractor", "extract_scores"),
    "aggregate_category_data": ("examscore.aggregation.category", "aggregate_category_data"),
    "CategoryAggregator": ("examscore.aggregation.category", "CategoryAggregator"),
    "aggregate_detailed_data": ("examscore.aggregation.detailed", "aggregate_detailed_data"),
    "DetailedAggregator": ("examscore.aggregation.detailed", "DetailedAggregator"),
    "aggregate_test_type_data": ("examscore.aggregation.chart_data", "aggregate_test_type_data"),
    "sort_detailed_for_chart": ("examscore.aggregation.chart_data", "sort_detailed_for_chart"),
    "build_chart_data": ("examscore.aggregation.chart_data", "build_chart_data"),
}
__getattr__ = make_lazy_module_getattr(_SYMBOLS, __name__)
__dir__ = make_lazy_module_dir(_SYMBOLS, globals())
