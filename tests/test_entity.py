"""
Entity基类测试。
覆盖标识的一次性分配、重复分配的拒绝以及基于标识的相等性。
"""
import uuid

import pytest

from shared_kernel.domain import (
    EMPTY_IDENTIFIER,
    DomainException,
    Entity,
    IdentityAlreadyEstablishedException,
    InvalidOperationException,
)


class Order(Entity):
    """在构造函数中分配标识的实体。"""

    def __init__(self, customer: str):
        super().__init__()
        self.customer = customer
        self._assign_identity()


class Shipment(Entity):
    def __init__(self):
        super().__init__()
        self._assign_identity()


class Draft(Entity):
    """不分配标识的实体。"""


class TestIdentityAssignment:
    """标识分配测试。"""

    def test_fresh_entity_has_empty_identifier(self):
        draft = Draft()

        assert draft.identifier == EMPTY_IDENTIFIER
        assert draft.identifier == uuid.UUID(int=0)
        assert draft.has_identity is False

    def test_assignment_sets_non_empty_uuid(self):
        order = Order("alice")

        assert isinstance(order.identifier, uuid.UUID)
        assert order.identifier != EMPTY_IDENTIFIER
        assert order.identifier.version == 4
        assert order.has_identity is True

    def test_first_assignment_returns_normally(self):
        draft = Draft()

        assert draft._assign_identity() is None
        assert draft.has_identity

    def test_two_orders_get_distinct_identifiers(self):
        first = Order("alice")
        second = Order("alice")

        assert first.identifier != second.identifier

    def test_reassignment_is_rejected(self):
        order = Order("alice")
        original = order.identifier

        with pytest.raises(IdentityAlreadyEstablishedException) as exc_info:
            order._assign_identity()

        assert order.identifier == original
        assert exc_info.value.identifier == original
        assert exc_info.value.entity_name == "Order"
        assert exc_info.value.operation == "assign_identity"
        assert "无法更改" in str(exc_info.value)

    def test_reassignment_error_is_invalid_operation(self):
        order = Order("bob")

        with pytest.raises(InvalidOperationException):
            order._assign_identity()
        with pytest.raises(DomainException):
            order._assign_identity()

    def test_identifier_is_read_only(self):
        order = Order("alice")

        with pytest.raises(AttributeError):
            order.identifier = uuid.uuid4()


class TestEntityEquality:
    """基于标识的相等性测试。"""

    def test_entity_equals_itself(self):
        order = Order("alice")

        assert order == order
        assert Draft() != Draft()

    def test_entities_with_different_identity_are_not_equal(self):
        assert Order("alice") != Order("alice")

    def test_same_identifier_means_equal(self):
        first = Order("alice")
        second = Order("bob")
        second._identifier = first.identifier

        assert first == second
        assert hash(first) == hash(second)

    def test_different_types_with_same_identifier_are_not_equal(self):
        order = Order("alice")
        shipment = Shipment()
        shipment._identifier = order.identifier

        assert order != shipment

    def test_entity_is_not_equal_to_none_or_identifier(self):
        order = Order("alice")

        assert order != None  # noqa: E711
        assert order != order.identifier

    def test_entities_usable_in_sets(self):
        first = Order("alice")
        second = Order("bob")

        assert len({first, second, first}) == 2

    def test_hash_changes_when_identity_is_assigned(self):
        draft = Draft()
        hash_before = hash(draft)
        draft._assign_identity()

        assert hash(draft) == hash((Draft, draft.identifier))
        assert hash(draft) != hash_before

    def test_repr_shows_identifier(self):
        order = Order("alice")

        assert repr(order) == f"Order(identifier={order.identifier})"


class TestIdentityLogging:
    """标识分配日志测试。"""

    def test_assignment_logged_at_debug(self, log_messages):
        order = Order("alice")

        assert any(
            message.startswith("DEBUG|") and str(order.identifier) in message
            for message in log_messages
        )

    def test_rejected_reassignment_logged_at_warning(self, log_messages):
        order = Order("alice")

        with pytest.raises(IdentityAlreadyEstablishedException):
            order._assign_identity()

        assert any(message.startswith("WARNING|") for message in log_messages)
