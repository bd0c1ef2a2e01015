"""examscore_utils：分数引擎跨模块基础工具包。

提供：
- lazy_import : 延迟导入工具，供各包 __init__.py 按需暴露符号
- logging_config : 统一日志配置（格式、级别）
"""
