"""跨模块共享常量：科目、科目大类与考试区分的固定枚举。

这些枚举是引擎的静态配置输入，顺序有意义：
- SUBJECTS            : 明细环（detailed）按此顺序逐科目展开
- SUBJECT_CATEGORIES  : 外环（category）按此顺序输出，每个大类一行
- TEST_TYPES          : 每个科目内按 共通 → 二次 的顺序取分

configs/score_engine.yaml 可覆盖这些默认值（见 examscore.config）。
"""

from __future__ import annotations

__all__ = [
    "SUBJECTS",
    "SUBJECT_CATEGORIES",
    "TEST_TYPE_COMMON",
    "TEST_TYPE_SECONDARY",
    "TEST_TYPES",
    "SUBJECT_DISPLAY_NAMES",
    "CATEGORY_DATA_FIELD",
    "english_part",
    "category_of",
    "format_exam_type_name",
]

import re

SUBJECTS: tuple[str, ...] = ("英語R", "英語L", "数学", "国語", "理科", "地歴公")

SUBJECT_CATEGORIES: tuple[str, ...] = ("英語", "数学", "国語", "理科", "地歴公")

TEST_TYPE_COMMON = "共通"
TEST_TYPE_SECONDARY = "二次"

# (字段名, 标签)；字段名对应 BaseSubjectScore 的属性
TEST_TYPES: tuple[tuple[str, str], ...] = (
    ("common_test", TEST_TYPE_COMMON),
    ("second_test", TEST_TYPE_SECONDARY),
)

SUBJECT_DISPLAY_NAMES: dict[str, str] = {
    "英語R": "英語（リーディング）",
    "英語L": "英語（リスニング）",
    "英語R + L": "英語（総合）",
    "数学": "数学",
    "国語": "国語",
    "理科": "理科",
    "地歴公": "地理歴史・公民",
}

CATEGORY_DATA_FIELD = "category-data"   # 外环整批失败时 ChartError.field 的取值

_ENGLISH_PREFIX = "英語"
_ENGLISH_SUBJECT = re.compile(r"^英語\s*([RL](?:\s*\+\s*[RL])?)$")


def english_part(subject_name: str) -> str | None:
    """英语科目的 R/L 部分（"R" / "L" / "R+L"），其他科目返回 None。"""
    match = _ENGLISH_SUBJECT.match(subject_name.strip())
    if match is None:
        return None
    return re.sub(r"\s+", "", match.group(1))


def category_of(subject_name: str) -> str:
    """科目名 → 大类名。只有英语去掉 R/L 后缀（英語R / 英語L / 英語R + L → 英語），其余原样返回。"""
    name = subject_name.strip()
    if english_part(name) is not None:
        return _ENGLISH_PREFIX
    return name


def format_exam_type_name(name: str, test_type: str) -> str:
    """明细行名称：``英語R(共通)``。"""
    return f"{name}({test_type})"
