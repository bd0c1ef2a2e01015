import json

from examscore.aggregation.chart_data import build_chart_data
from examscore.contracts.scores import BaseSubjectScore
from examscore.reporting.report import generate_report, render_markdown_report
from examscore.reporting.reporter import JsonReporter, MarkdownReporter
from examscore.validation.score_validator import ScoreValidator


def test_markdown_report_tables(sample_subjects) -> None:
    validator = ScoreValidator()
    validations = {name: validator.validate_score(s) for name, s in sample_subjects.items()}
    chart = build_chart_data(sample_subjects, validator=validator)

    text = render_markdown_report(chart, validator.get_metrics(), validations)
    assert "# Exam Score Report" in text
    assert "- Grand Total: 480" in text
    assert "| 英語 | 120 | 25% |" in text
    assert "| 数学 | 140 | 29.2% |" in text
    assert "| 共通 | 300 | 62.5% |" in text
    assert "| 英語R(共通) | 英語 | 70 | 14.58% |" in text
    assert "| MISSING_SCORE | 地歴公 | error |" in text
    assert "## Validator Metrics" in text
    assert "| 数学 | yes |" in text


def test_markdown_report_for_aborted_categories(sample_subjects) -> None:
    chart = build_chart_data(sample_subjects, grand_total=100)
    text = render_markdown_report(chart)

    assert "- Category Status: `error`" in text
    assert "_no category rows_" in text
    assert "| CALCULATION_ERROR | category-data | error |" in text
    assert "Validator Metrics" not in text


def test_generate_report_writes_file(tmp_path) -> None:
    chart = build_chart_data({"数学": BaseSubjectScore(80, 20)})
    path = generate_report(chart, tmp_path / "out" / "report.md")

    assert path.exists()
    assert "| 数学 | 100 | 100% |" in path.read_text(encoding="utf-8")


def test_markdown_reporter_delegates(tmp_path, sample_subjects) -> None:
    chart = build_chart_data(sample_subjects)
    reporter = MarkdownReporter()
    assert reporter.render(chart) == render_markdown_report(chart)
    assert reporter.generate(chart, tmp_path / "r.md").exists()


def test_json_reporter_payload(sample_subjects) -> None:
    validator = ScoreValidator()
    validations = {"数学": validator.validate_score(sample_subjects["数学"])}
    chart = build_chart_data(sample_subjects, validator=validator)

    payload = json.loads(JsonReporter().render(chart, validator.get_metrics(), validations))
    assert payload["grandTotal"] == 480
    assert payload["outerData"]["status"] == "success"
    assert payload["detailedData"]["hasErrors"] is True
    assert payload["testTypeData"][0] == {"name": "共通", "value": 300, "percentage": 62.5}
    assert payload["validations"]["数学"]["isValid"] is True
    assert payload["metrics"]["totalValidations"] == 1
