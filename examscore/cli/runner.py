"""分数引擎 CLI 入口：读取一份科目分数文件，输出图表数据报告。

使用方式：
  python -m examscore.cli.runner --scores data/scores.json
  python -m examscore.cli.runner --scores data/scores.yaml --format json --out out/chart.json
  python -m examscore.cli.runner --scores data/scores.json --grand-total 1000 --log-file out/engine.log

执行流程：
  1. 参数解析，load_config() 加载引擎配置
  2. 读取分数文件（JSON / YAML，可选顶层 "subjects" 键）并解析为 BaseSubjectScore
  3. 按配置新建 ScoreValidator，逐科目 validate_score()
  4. build_chart_data() 生成明细环 / 大类外环 / 考试区分环
  5. 渲染为 Markdown 或 JSON，写入 --out 或打印到 stdout

输入格式错误（非映射、缺字段、配置错误）以退出码 2 结束。
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from examscore.aggregation.chart_data import build_chart_data
from examscore.config import load_config
from examscore.contracts.exceptions import ConfigError, ScoreInputError
from examscore.contracts.scores import BaseSubjectScore, ValidationResult, parse_subject_scores
from examscore.reporting.reporter import JsonReporter, MarkdownReporter, Reporter
from examscore_utils.logging_config import LOG_LEVELS

logger = logging.getLogger(__name__)

__all__ = [
    "load_scores_file",
    "run",
    "main",
]

_REPORTERS: dict[str, type[Reporter]] = {
    "markdown": MarkdownReporter,
    "json": JsonReporter,
}


def load_scores_file(path: str | Path) -> dict[str, BaseSubjectScore]:
    """读取分数文件：.yaml/.yml 按 YAML 解析，其余按 JSON 解析。"""
    path = Path(path)
    if not path.exists():
        raise ScoreInputError(f"scores file not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            raw: Any = yaml.safe_load(text)
        else:
            raw = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ScoreInputError(f"cannot parse scores file {path}: {exc}") from exc
    if isinstance(raw, dict) and isinstance(raw.get("subjects"), dict):
        raw = raw["subjects"]
    return parse_subject_scores(raw)


def run(args: argparse.Namespace) -> str:
    """主执行函数：校验、聚合并渲染，返回渲染后的文本。"""
    config = load_config(args.config)
    subjects = load_scores_file(args.scores)
    logger.info("Loaded %d subjects from %s", len(subjects), args.scores)

    validator = config.build_validator()
    validations: dict[str, ValidationResult] = {
        name: validator.validate_score(score) for name, score in subjects.items()
    }
    invalid = [name for name, result in validations.items() if not result.is_valid]
    if invalid:
        logger.warning("Invalid subjects: %s", ", ".join(invalid))

    chart_data = build_chart_data(
        subjects,
        grand_total=args.grand_total,
        validator=validator,
        config=config,
    )
    logger.info(
        "Chart data built: grand_total=%s category_status=%s errors=%d",
        chart_data.grand_total,
        chart_data.outer.status,
        len(chart_data.errors),
    )

    reporter = _REPORTERS[args.format]()
    return reporter.render(chart_data, validator.get_metrics(), validations)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Exam score validation and chart aggregation")
    parser.add_argument("--scores", required=True, help="Scores JSON/YAML path")
    parser.add_argument("--config", default=None, help="Engine config YAML (default: configs/score_engine.yaml)")
    parser.add_argument("--format", choices=sorted(_REPORTERS), default="markdown")
    parser.add_argument("--out", default=None, help="Write the report to this path instead of stdout")
    parser.add_argument(
        "--grand-total",
        type=float,
        default=None,
        help="全体总分；省略时按各科目有效分数之和计算",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI 入口。"""
    from examscore_utils.logging_config import setup_logging

    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, log_file=args.log_file)

    try:
        output = run(args)
    except (ScoreInputError, ConfigError) as exc:
        logger.error("%s", exc)
        parser.error(str(exc))

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output, encoding="utf-8")
        logger.info("Report written: %s", out_path)
        print(str(out_path))
    else:
        print(output)


if __name__ == "__main__":
    main()
