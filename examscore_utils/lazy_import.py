"""惰性导入辅助工具：用于包级 __getattr__ / __dir__ 钩子。

examscore/ 下各 __init__.py 通过符号表声明公开接口，
访问 examscore.xxx 时才导入对应子模块，避免循环引用。
解析过的符号写回包的命名空间，之后的访问不再经过 __getattr__。
"""

from __future__ import annotations

import importlib
import sys
from collections.abc import Callable

__all__ = ["make_lazy_module_getattr", "make_lazy_module_dir"]


def make_lazy_module_getattr(
    symbols: dict[str, tuple[str, str]],
    module_name: str,
) -> Callable[[str], object]:
    """Build a module-level __getattr__ from a symbol -> (module, attr) table."""

    def _lazy_getattr(name: str) -> object:
        target = symbols.get(name)
        if target is None:
            raise AttributeError(f"module {module_name!r} has no attribute {name!r}")
        mod_path, attr = target
        value = getattr(importlib.import_module(mod_path), attr)
        module = sys.modules.get(module_name)
        if module is not None:
            setattr(module, name, value)
        return value

    return _lazy_getattr


def make_lazy_module_dir(
    symbols: dict[str, tuple[str, str]],
    module_globals: dict[str, object],
) -> Callable[[], list[str]]:
    """dir(package) 同时列出已加载的名字与尚未导入的惰性符号。"""

    def _lazy_dir() -> list[str]:
        return sorted(set(module_globals) | set(symbols))

    return _lazy_dir
