"""
共享内核包。
提供具有一次性不可变标识的Entity基类和基于结构相等性的ValueObject基类。
"""
from loguru import logger

# 默认不输出库内部日志，需要时调用configure_logging()或设置SHARED_KERNEL_LOG_ENABLED
logger.disable('shared_kernel')

from shared_kernel.config import LOG_ENABLED  # noqa: E402
from shared_kernel.domain import (  # noqa: E402
    Entity,
    EMPTY_IDENTIFIER,
    ValueObject,
    Money,
    values_equal,
    DomainException,
    InvalidOperationException,
    IdentityAlreadyEstablishedException,
)
from shared_kernel.infrastructure import configure_logging, disable_logging, remove_handler  # noqa: E402

if LOG_ENABLED:
    logger.enable('shared_kernel')

__version__ = '1.0.0'

__all__ = [
    'Entity',
    'EMPTY_IDENTIFIER',
    'ValueObject',
    'Money',
    'values_equal',
    'DomainException',
    'InvalidOperationException',
    'IdentityAlreadyEstablishedException',
    'configure_logging',
    'disable_logging',
    'remove_handler',
]
