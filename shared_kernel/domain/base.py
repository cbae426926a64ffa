"""
核心领域模型基类模块。
包含Entity基类，用于所有具有唯一标识的领域对象。
"""
from typing import Any
import uuid

from loguru import logger

from shared_kernel.domain.exceptions import IdentityAlreadyEstablishedException

# 未分配标识时使用的空UUID
EMPTY_IDENTIFIER = uuid.UUID(int=0)


class Entity:
    """
    实体基类。
    实体是具有唯一标识的领域对象，其相等性通过标识而非属性值判断。

    标识在创建时为空，由具体实体的构造函数调用_assign_identity()分配一次，
    之后在对象的整个生命周期内保持不变。
    """

    def __init__(self) -> None:
        """
        初始化实体，标识为空。
        """
        self._identifier: uuid.UUID = EMPTY_IDENTIFIER

    @property
    def identifier(self) -> uuid.UUID:
        """
        获取实体标识。

        Returns:
            实体标识，未分配时为EMPTY_IDENTIFIER
        """
        return self._identifier

    @property
    def has_identity(self) -> bool:
        """实体标识是否已经分配。"""
        return self._identifier != EMPTY_IDENTIFIER

    def _assign_identity(self) -> None:
        """
        为实体生成唯一标识。
        只能在具体实体的构造过程中调用一次。

        Raises:
            IdentityAlreadyEstablishedException: 当实体标识已经分配时抛出，
                此时原有标识保持不变
        """
        entity_name = type(self).__name__
        if self.has_identity:
            logger.warning(f"拒绝重新分配{entity_name}的标识: {self._identifier}")
            raise IdentityAlreadyEstablishedException(entity_name, self._identifier)

        self._identifier = uuid.uuid4()
        logger.debug(f"{entity_name}已分配标识: {self._identifier}")

    def __eq__(self, other: Any) -> bool:
        """
        判断两个实体是否相等，通过比较它们的标识。
        未分配标识的实体只与自身相等。

        Args:
            other: 另一个实体

        Returns:
            如果两个实体类型相同且标识相等，则返回True；否则返回False
        """
        if self is other:
            return True
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        if not self.has_identity:
            return False
        return self._identifier == other._identifier

    def __hash__(self) -> int:
        """
        计算实体的哈希值，基于其类型和标识。
        标识分配前后哈希值会变化，分配标识前不要将实体放入集合或用作字典键。

        Returns:
            实体标识的哈希值；未分配标识时使用对象默认哈希值
        """
        if not self.has_identity:
            return object.__hash__(self)
        return hash((type(self), self._identifier))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(identifier={self._identifier})"
