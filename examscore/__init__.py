"""大学入试成绩分析前端的分数校验与图表聚合引擎。

包结构概览：
  examscore/
  ├── contracts/    → 跨模块数据契约（BaseSubjectScore / ChartResult / 异常层级 / 错误工厂）
  ├── validation/   → ScoreValidator + TTL 缓存 + 错误日志接口
  ├── aggregation/  → 大类外环 / 明细环 / 考试区分环聚合与记忆化
  ├── reporting/    → Markdown / JSON 报告生成
  ├── config.py     → configs/score_engine.yaml 加载
  └── cli/runner.py → CLI 执行入口

使用惰性导入（lazy import）避免 import examscore 时拉入全部子模块。
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from examscore_utils.lazy_import import make_lazy_module_dir, make_lazy_module_getattr

if TYPE_CHECKING:
    from examscore.aggregation.category import CategoryAggregator, aggregate_category_data
    from examscore.aggregation.chart_data import build_chart_data
    from examscore.aggregation.detailed import DetailedAggregator, aggregate_detailed_data
    from examscore.config import EngineConfig, load_config
    from examscore.contracts.chart import ChartData, ChartError, ChartResult, DetailedPieData, PieData
    from examscore.contracts.exceptions import CategoryDataError, ScoreEngineError
    from examscore.contracts.scores import BaseSubjectScore, ValidationMetrics, ValidationResult
    from examscore.validation.score_validator import ScoreValidator

__all__ = [
    "BaseSubjectScore",
    "ValidationResult",
    "ValidationMetrics",
    "PieData",
    "DetailedPieData",
    "ChartError",
    "ChartResult",
    "ChartData",
    "ScoreEngineError",
    "CategoryDataError",
    "ScoreValidator",
    "aggregate_category_data",
    "CategoryAggregator",
    "aggregate_detailed_data",
    "DetailedAggregator",
    "build_chart_data",
    "EngineConfig",
    "load_config",
]

_SYMBOLS: dict[str, tuple[str, str]] = {
    "BaseSubjectScore": ("examscore.contracts.scores", "BaseSubjectScore"),
    "ValidationResult": ("examscore.contracts.scores", "ValidationResult"),
    "ValidationMetrics": ("examscore.contracts.scores", "ValidationMetrics"),
    "PieData": ("examscore.contracts.chart", "PieData"),
    "DetailedPieData": ("examscore.contracts.chart", "DetailedPieData"),
    "ChartError": ("examscore.contracts.chart", "ChartError"),
    "ChartResult": ("examscore.contracts.chart", "ChartResult"),
    "ChartData": ("examscore.contracts.chart", "ChartData"),
    "ScoreEngineError": ("examscore.contracts.exceptions", "ScoreEngineError"),
    "CategoryDataError": ("examscore.contracts.exceptions", "CategoryDataError"),
    "ScoreValidator": ("examscore.validation.score_validator", "ScoreValidator"),
    "aggregate_category_data": ("examscore.aggregation.category", "aggregate_category_data"),
    "CategoryAggregator": ("examscore.aggregation.category", "CategoryAggregator"),
    "aggregate_detailed_data": ("examscore.aggregation.detailed", "aggregate_detailed_data"),
    "DetailedAggregator": ("examscore.aggregation.detailed", "DetailedAggregator"),
    "build_chart_data": ("examscore.aggregation.chart_data", "build_chart_data"),
    "EngineConfig": ("examscore.config", "EngineConfig"),
    "load_config": ("examscore.config", "load_config"),
}
__getattr__ = make_lazy_module_getattr(_SYMBOLS, __name__)
__dir__ = make_lazy_module_dir(_SYMBOLS, globals())
