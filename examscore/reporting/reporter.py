"""报告器抽象与内置实现。

Reporter 定义通用报告接口：
- MarkdownReporter 委托 report.py 中的 generate_report()
- JsonReporter 输出 ChartData.to_dict() 的 camelCase 结构（前端消费形态）
"""

from __future__ import annotations

__all__ = ["Reporter", "MarkdownReporter", "JsonReporter"]

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from examscore.contracts.chart import ChartData
from examscore.contracts.scores import ValidationMetrics, ValidationResult


class Reporter(ABC):
    """报告生成抽象接口。"""

    @abstractmethod
    def render(
        self,
        chart_data: ChartData,
        metrics: ValidationMetrics | None = None,
        validations: Mapping[str, ValidationResult] | None = None,
    ) -> str:
        """渲染为文本。"""
        ...

    def generate(
        self,
        chart_data: ChartData,
        out_path: str | Path,
        metrics: ValidationMetrics | None = None,
        validations: Mapping[str, ValidationResult] | None = None,
    ) -> Path:
        """渲染并写入 out_path，返回文件路径。"""
        path = Path(out_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(chart_data, metrics, validations), encoding="utf-8")
        return path


class MarkdownReporter(Reporter):
    def render(self, chart_data, metrics=None, validations=None) -> str:
        from examscore.reporting.report import render_markdown_report
        return render_markdown_report(chart_data, metrics, validations)

    def generate(self, chart_data, out_path, metrics=None, validations=None) -> Path:
        from examscore.reporting.report import generate_report
        return generate_report(chart_data, out_path, metrics, validations)


class JsonReporter(Reporter):
    def render(self, chart_data, metrics=None, validations=None) -> str:
        payload: dict[str, Any] = chart_data.to_dict()
        if validations:
            payload["validations"] = {
                name: {"isValid": r.is_valid, "errors": list(r.errors), "timestamp": r.timestamp}
                for name, r in validations.items()
            }
        if metrics is not None:
            payload["metrics"] = {
                "totalValidations": metrics.total_validations,
                "cacheHits": metrics.cache_hits,
                "cacheMisses": metrics.cache_misses,
                "errors": metrics.errors,
                "averageValidationTime": metrics.average_validation_time,
                "totalValidationTime": metrics.total_validation_time,
            }
        return json.dumps(payload, ensure_ascii=False, indent=2)
