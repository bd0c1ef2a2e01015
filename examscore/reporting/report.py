"""从图表数据生成 Markdown 报告。

模板使用 Jinja2（与表格渲染逻辑分离，便于调整版式）。报告包括：
- 概览：全体总分、外环状态、错误数
- 大类外环表 / 考试区分表 / 明细环表
- 科目校验结果（可选）
- 错误列表
- ScoreValidator 计数器（可选）
"""

from __future__ import annotations

__all__ = ["render_markdown_report", "generate_report"]

import logging
from collections.abc import Mapping
from pathlib import Path

from jinja2 import BaseLoader, Environment

from examscore.contracts.chart import ChartData
from examscore.contracts.scores import ValidationMetrics, ValidationResult

logger = logging.getLogger(__name__)

_TEMPLATE = """\
# Exam Score Report

- Grand Total: {{ data.grand_total | num }}
- Category Status: `{{ data.outer.status }}`
- Errors: {{ data.errors | length }}

## 大类外环：Category x Score

{% if data.outer.data -%}
| category | value | percentage |
| --- | --- | --- |
{% for row in data.outer.data -%}
| {{ row.name }} | {{ row.value | num }} | {{ row.percentage | num }}% |
{% endfor %}
{%- else -%}
_no category rows_
{% endif %}
## 考试区分：Test Type x Score

| type | value | percentage |
| --- | --- | --- |
{% for row in data.test_types -%}
| {{ row.name }} | {{ row.value | num }} | {{ row.percentage | num }}% |
{% endfor %}
## 明细环：Subject x Test Type

{% if data.detailed.data -%}
| name | category | value | percentage |
| --- | --- | --- | --- |
{% for row in data.detailed.data -%}
| {{ row.name }} | {{ row.category }} | {{ row.value | num }} | {{ row.percentage | num }}% |
{% endfor %}
{%- else -%}
_no detailed rows_
{% endif %}
{%- if validations %}
## 科目校验

| subject | valid | errors |
| --- | --- | --- |
{% for name, result in validations.items() -%}
| {{ name }} | {{ "yes" if result.is_valid else "no" }} | {{ result.errors | join("; ") }} |
{% endfor %}
{%- endif %}
{%- if data.errors %}
## 错误

| code | field | severity | message |
| --- | --- | --- | --- |
{% for e in data.errors -%}
| {{ e.code }} | {{ e.field }} | {{ e.severity }} | {{ e.message }} |
{% endfor %}
{%- endif %}
{%- if metrics %}
## Validator Metrics

| total_validations | cache_hits | cache_misses | errors | avg_validation_ms |
| --- | --- | --- | --- | --- |
| {{ metrics.total_validations }} | {{ metrics.cache_hits }} | {{ metrics.cache_misses }} | {{ metrics.errors }} | {{ "%.4f" | format(metrics.average_validation_time) }} |
{% endif %}
"""


def _num(value: float) -> str:
    """最多保留两位小数并去掉末尾的 0：25.0 → 25，29.20 → 29.2。"""
    return f"{float(value):.2f}".rstrip("0").rstrip(".")


_env = Environment(loader=BaseLoader(), keep_trailing_newline=True)
_env.filters["num"] = _num
_report_template = _env.from_string(_TEMPLATE)


def render_markdown_report(
    chart_data: ChartData,
    metrics: ValidationMetrics | None = None,
    validations: Mapping[str, ValidationResult] | None = None,
) -> str:
    return _report_template.render(data=chart_data, metrics=metrics, validations=validations or {})


def generate_report(
    chart_data: ChartData,
    out_path: str | Path,
    metrics: ValidationMetrics | None = None,
    validations: Mapping[str, ValidationResult] | None = None,
) -> Path:
    """渲染并写入 Markdown 报告，返回报告路径。"""
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_markdown_report(chart_data, metrics, validations), encoding="utf-8")
    logger.info("Report written: %s", path)
    return path
