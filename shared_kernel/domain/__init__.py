"""
领域模型包。
提供实体和值对象这两个领域驱动设计(DDD)的基础抽象。
"""

# 基础类
from shared_kernel.domain.base import Entity, EMPTY_IDENTIFIER
from shared_kernel.domain.value_objects import (
    ValueObject,
    Money,
    values_equal,
    HASH_SEED,
    HASH_MULTIPLIER,
)

# 领域异常
from shared_kernel.domain.exceptions import (
    DomainException,
    InvalidOperationException,
    IdentityAlreadyEstablishedException,
)

__all__ = [
    # 基础类
    'Entity',
    'EMPTY_IDENTIFIER',
    'ValueObject',
    'Money',
    'values_equal',
    'HASH_SEED',
    'HASH_MULTIPLIER',

    # 领域异常
    'DomainException',
    'InvalidOperationException',
    'IdentityAlreadyEstablishedException',
]
