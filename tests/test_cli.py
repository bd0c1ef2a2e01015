import argparse
import json

import pytest

from examscore.cli.runner import load_scores_file, main, run
from examscore.contracts.exceptions import ScoreInputError

@pytest.fixture(autouse=True)
def _no_global_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() 会配置 root logger；测试中跳过，避免 handler 残留到其他用例。"""
    monkeypatch.setattr("examscore_utils.logging_config.setup_logging", lambda *args, **kwargs: None)


SCORES = {
    "subjects": {
        "英語R": {"commonTest": 70, "secondTest": 30},
        "数学": {"commonTest": 80, "secondTest": 60},
        "国語": {"commonTest": -5, "secondTest": 50},
    }
}


def _args(scores, **overrides) -> argparse.Namespace:
    values = {
        "scores": str(scores),
        "config": None,
        "format": "markdown",
        "out": None,
        "grand_total": None,
        "log_file": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def test_load_scores_json_and_yaml(tmp_path) -> None:
    json_path = tmp_path / "scores.json"
    json_path.write_text(json.dumps(SCORES, ensure_ascii=False), encoding="utf-8")
    yaml_path = tmp_path / "scores.yaml"
    yaml_path.write_text("数学:\n  commonTest: 80\n  secondTest: 60\n", encoding="utf-8")

    assert set(load_scores_file(json_path)) == {"英語R", "数学", "国語"}
    assert load_scores_file(yaml_path)["数学"].second_test == 60


def test_load_scores_rejects_bad_input(tmp_path) -> None:
    with pytest.raises(ScoreInputError):
        load_scores_file(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ScoreInputError):
        load_scores_file(bad)


def test_run_renders_markdown(tmp_path) -> None:
    path = tmp_path / "scores.json"
    path.write_text(json.dumps(SCORES, ensure_ascii=False), encoding="utf-8")

    text = run(_args(path))
    assert "# Exam Score Report" in text
    # 国語 有负分，calculate_total 记 0
    assert "- Grand Total: 240" in text
    assert "| 国語 | no |" in text


def test_main_writes_json_output(tmp_path, capsys) -> None:
    path = tmp_path / "scores.json"
    path.write_text(json.dumps(SCORES, ensure_ascii=False), encoding="utf-8")
    out = tmp_path / "out" / "chart.json"

    main(["--scores", str(path), "--format", "json", "--out", str(out), "--grand-total", "400"])

    assert capsys.readouterr().out.strip() == str(out)
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["grandTotal"] == 400
    assert payload["metrics"]["totalValidations"] == 3
    assert payload["metrics"]["errors"] == 1


def test_main_exits_on_malformed_scores(tmp_path) -> None:
    path = tmp_path / "scores.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["--scores", str(path)])
    assert exc_info.value.code == 2
