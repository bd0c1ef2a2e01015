"""核心数据契约层：跨模块共享的类型定义与错误分类。

本包使用惰性导入，按需加载子模块：
    from examscore.contracts import BaseSubjectScore, ChartResult, create_chart_error

子模块：
- constants.py : 科目 / 大类 / 考试区分枚举，category_of()
- scores.py    : BaseSubjectScore / ValidationResult / ValidationMetrics
- chart.py     : PieData / DetailedPieData / ChartError / ChartResult / ChartData
- error.py     : ChartError 工厂与信封构建
- exceptions.py: ScoreEngineError 异常层级
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from examscore_utils.lazy_import import make_lazy_module_dir, make_lazy_module_getattr

if TYPE_CHECKING:
    from examscore.contracts.chart import (
        ChartData,
        ChartError,
        ChartMetadata,
        ChartResult,
        DetailedPieData,
        PieData,
    )
    from examscore.contracts.constants import SUBJECT_CATEGORIES, SUBJECTS, TEST_TYPES, category_of, english_part
    from examscore.contracts.error import (
        chart_error_from_exception,
        create_chart_error,
        create_chart_error_result,
        create_chart_metadata,
    )
    from examscore.contracts.exceptions import (
        CategoryDataError,
        ConfigError,
        ScoreEngineError,
        ScoreInputError,
    )
    from examscore.contracts.scores import (
        BaseSubjectScore,
        SubjectScores,
        ValidationMetrics,
        ValidationResult,
        parse_subject_scores,
    )

__all__ = [
    "BaseSubjectScore",
    "SubjectScores",
    "ValidationResult",
    "ValidationMetrics",
    "parse_subject_scores",
    "PieData",
    "DetailedPieData",
    "ChartError",
    "ChartMetadata",
    "ChartResult",
    "ChartData",
    "create_chart_error",
    "create_chart_metadata",
    "create_chart_error_result",
    "chart_error_from_exception",
    "ScoreEngineError",
    "CategoryDataError",
    "ScoreInputError",
    "ConfigError",
    "SUBJECTS",
    "SUBJECT_CATEGORIES",
    "TEST_TYPES",
    "category_of",
    "english_part",
]

_SYMBOLS: dict[str, tuple[str, str]] = {
    "BaseSubjectScore": ("examscore.contracts.scores", "BaseSubjectScore"),
    "SubjectScores": ("examscore.contracts.scores", "SubjectScores"),
    "ValidationResult": ("examscore.contracts.scores", "ValidationResult"),
    "ValidationMetrics": ("examscore.contracts.scores", "ValidationMetrics"),
    "parse_subject_scores": ("examscore.contracts.scores", "parse_subject_scores"),
    "PieData": ("examscore.contracts.chart", "PieData"),
    "DetailedPieData": ("examscore.contracts.chart", "DetailedPieData"),
    "ChartError": ("examscore.contracts.chart", "ChartError"),
    "ChartMetadata": ("examscore.contracts.chart", "ChartMetadata"),
    "ChartResult": ("examscore.contracts.chart", "ChartResult"),
    "ChartData": ("examscore.contracts.chart", "ChartData"),
    "create_chart_error": ("examscore.contracts.error", "create_chart_error"),
    "create_chart_metadata": ("examscore.contracts.error", "create_chart_metadata"),
    "create_chart_error_result": ("examscore.contracts.error", "create_chart_error_result"),
    "chart_error_from_exception": ("examscore.contracts.error", "chart_error_from_exception"),
    "ScoreEngineError": ("examscore.contracts.exceptions", "ScoreEngineError"),
    "CategoryDataError": ("examscore.contracts.exceptions", "CategoryDataError"),
    "ScoreInputError": ("examscore.contracts.exceptions", "ScoreInputError"),
    "ConfigError": ("examscore.contracts.exceptions", "ConfigError"),
    "SUBJECTS": ("examscore.contracts.constants", "SUBJECTS"),
    "SUBJECT_CATEGORIES": ("examscore.contracts.constants", "SUBJECT_CATEGORIES"),
    "TEST_TYPES": ("examscore.contracts.constants", "TEST_TYPES"),
    "category_of": ("examscore.contracts.constants", "category_of"),
    "english_part": ("examscore.contracts.constants", "english_part"),
}
__getattr__ = make_lazy_module_getattr(_SYMBOLS, __name__)
__dir__ = make_lazy_module_dir(_SYMBOLS, globals())
