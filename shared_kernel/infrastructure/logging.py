"""
日志配置模块。
基于loguru为共享内核提供统一的日志输出配置。
"""
import sys
from typing import Any, Optional

from loguru import logger

from shared_kernel.config import env

PACKAGE_NAME = 'shared_kernel'

# configure_logging()添加的处理器ID，宿主应用自己的处理器不受影响
_handler_id: Optional[int] = None


def configure_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    sink: Any = sys.stderr,
) -> int:
    """
    添加共享内核的日志处理器，并启用共享内核的日志输出。
    重复调用时只替换上一次由本函数添加的处理器。

    Args:
        level: 日志级别，默认读取配置中的LOG_LEVEL
        fmt: 日志格式，默认读取配置中的LOG_FORMAT
        sink: 日志输出目标，默认为标准错误输出

    Returns:
        新添加的处理器ID
    """
    global _handler_id

    remove_handler()
    level = level or env.LOG_LEVEL
    _handler_id = logger.add(
        sink,
        level=level,
        format=fmt or env.LOG_FORMAT,
        filter=PACKAGE_NAME,
    )
    logger.enable(PACKAGE_NAME)
    logger.debug(f"日志已配置: level={level}")
    return _handler_id


def remove_handler() -> None:
    """移除configure_logging()添加的处理器。"""
    global _handler_id

    if _handler_id is not None:
        logger.remove(_handler_id)
        _handler_id = None


def disable_logging() -> None:
    """关闭共享内核的日志输出。"""
    logger.disable(PACKAGE_NAME)
