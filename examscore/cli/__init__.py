"""CLI entrypoints for the score engine."""

from __future__ import annotations

from typing import TYPE_CHECKING
from examscore_utils.lazy_import import make_lazy_module_dir, make_lazy_module_getattr

if TYPE_CHECKING:
    from examscore.cli.runner import load_scores_file, main, run

__all__ = ["load_scores_file", "run", "main"]

_SYMBOLS: dict[str, tuple[str, str]] = {
    "load_scores_file": ("examscore.cli.runner", "load_scores_file"),
    "run": ("examscore.cli.runner", "run"),
    "main": ("examscore.cli.runner", "main"),
}

__getattr__ = make_lazy_module_getattr(_SYMBOLS, __name__)
__dir__ = make_lazy_module_dir(_SYMBOLS, globals())
