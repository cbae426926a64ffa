"""
领域异常模块。
包含实体和值对象基类使用的异常类。
"""
from typing import Any


class DomainException(Exception):
    """
    领域异常基类。
    所有领域模型中的异常都应继承自此类。
    """

    def __init__(self, message: str):
        """
        初始化领域异常。

        Args:
            message: 异常消息
        """
        self.message = message
        super().__init__(self.message)


class InvalidOperationException(DomainException):
    """
    非法操作异常。
    当对象的当前状态不允许执行某个操作时抛出。
    """

    def __init__(self, operation: str, reason: str):
        """
        初始化非法操作异常。

        Args:
            operation: 操作名称
            reason: 不允许执行的原因
        """
        message = f"不允许执行'{operation}'操作: {reason}"
        super().__init__(message)
        self.operation = operation
        self.reason = reason


class IdentityAlreadyEstablishedException(InvalidOperationException):
    """
    标识已确立异常。
    当实体的标识已经分配后再次尝试分配时抛出。
    """

    def __init__(self, entity_name: str, identifier: Any):
        """
        初始化标识已确立异常。

        Args:
            entity_name: 实体名称
            identifier: 已确立的实体标识
        """
        super().__init__(
            "assign_identity",
            f"{entity_name}(ID={identifier})的标识已经确立，无法更改",
        )
        self.entity_name = entity_name
        self.identifier = identifier
