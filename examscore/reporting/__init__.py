"""报告层：从图表数据生成可读报告。

- report.py   : render_markdown_report() / generate_report() Markdown 渲染
- reporter.py : Reporter 抽象接口 + MarkdownReporter / JsonReporter
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from examscore_utils.lazy_import import make_lazy_module_dir, make_lazy_module_getattr

if TYPE_CHECKING:
    from examscore.reporting.report import generate_report, render_markdown_report
    from examscore.reporting.reporter import JsonReporter, MarkdownReporter, Reporter

__all__ = ["render_markdown_report", "generate_report", "Reporter", "MarkdownReporter", "JsonReporter"]

_SYMBOLS: dict[str, tuple[str, str]] = {
    "render_markdown_report": ("examscore.reporting.report", "render_markdown_report"),
    "generate_report": ("examscore.reporting.report", "generate_report"),
    "Reporter": ("examscore.reporting.reporter", "Reporter"),
    "MarkdownReporter": ("examscore.reporting.reporter", "MarkdownReporter"),
    "JsonReporter": ("examscore.reporting.reporter", "JsonReporter"),
}
__getattr__ = make_lazy_module_getattr(_SYMBOLS, __name__)
__dir__ = make_lazy_module_dir(_SYMBOLS, globals())
