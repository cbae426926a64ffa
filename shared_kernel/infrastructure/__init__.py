"""
基础设施层包。
提供日志配置等基础设施组件。
"""

# 日志配置
from shared_kernel.infrastructure.logging import configure_logging, disable_logging, remove_handler

__all__ = [
    'configure_logging',
    'disable_logging',
    'remove_handler',
]
