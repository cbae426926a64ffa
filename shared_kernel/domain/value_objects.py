"""
值对象模块。
包含ValueObject基类和常用值对象实现，如Money。

ValueObject根据对象存储的数据进行结构相等性比较和哈希计算，
具体值对象类型无需自行实现相等性逻辑。
"""
import dataclasses
import weakref
from decimal import Decimal
from typing import Any, Dict, FrozenSet, Generic, Optional, Tuple, TypeVar

# 哈希初始种子值
HASH_SEED = 17
# 哈希累加乘数
HASH_MULTIPLIER = 59
# 哈希累加结果保持在64位以内
HASH_MASK = 0xFFFFFFFFFFFFFFFF

T = TypeVar('T', bound='ValueObject')

# 每个值对象类型解析出的字段，类型被回收时条目随之释放
_FIELD_CACHE: 'weakref.WeakKeyDictionary[type, Tuple[Tuple[str, ...], FrozenSet[str]]]' = (
    weakref.WeakKeyDictionary()
)


def _declared_fields(cls: type) -> Tuple[Tuple[str, ...], FrozenSet[str]]:
    """
    解析值对象类型在整个继承链上声明的字段。

    Args:
        cls: 具体值对象类型

    Returns:
        (参与比较的固定字段名元组, 读取实例__dict__时需要跳过的字段名集合) 的元组
    """
    cached = _FIELD_CACHE.get(cls)
    if cached is not None:
        return cached

    names = []
    skipped = set()
    if dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(cls):
            skipped.add(f.name)
            if f.compare:
                names.append(f.name)

    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ('__dict__', '__weakref__'):
                continue
            if name.startswith('__') and not name.endswith('__'):
                # 私有槽位以改编后的名称存储
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in skipped:
                names.append(name)
                skipped.add(name)

    result = tuple(names), frozenset(skipped)
    _FIELD_CACHE[cls] = result
    return result


def _component_equal(value: Any, other_value: Any) -> bool:
    """同一对象、两侧都为None，或都不为None且值相等时返回True。"""
    if value is other_value:
        return True
    if value is None or other_value is None:
        return False
    return bool(value == other_value)


class ValueObject(Generic[T]):
    """
    值对象基类。
    值对象是通过其属性值而非标识定义的对象。
    相同类型且属性值相同的值对象被视为相等。

    具体类型以自身作为类型参数继承，例如 ``class Money(ValueObject['Money'])``。
    字段在整个继承链上收集：dataclass字段、各层声明的__slots__以及实例__dict__，
    相等性比较和哈希计算使用同一组字段。

    使用dataclass定义值对象时需要指定 ``eq=False``，
    否则dataclass生成的__eq__会覆盖本类的实现。
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls is ValueObject:
            raise TypeError("ValueObject是抽象基类，只能由具体值对象类型实例化")
        return super().__new__(cls)

    def equality_fields(self) -> Tuple[Tuple[str, Any], ...]:
        """
        按确定顺序返回参与比较的字段名和字段值。
        先是dataclass字段和槽位，再是按名称排序的其余实例属性；
        dataclass中声明为compare=False的字段不参与比较。

        Returns:
            (字段名, 字段值) 元组构成的元组，未赋值的槽位视为None
        """
        names, skipped = _declared_fields(type(self))
        fields = [(name, getattr(self, name, None)) for name in names]
        if hasattr(self, '__dict__'):
            instance_dict = vars(self)
            fields.extend(
                (name, instance_dict[name])
                for name in sorted(instance_dict)
                if name not in skipped
            )
        return tuple(fields)

    def equality_components(self) -> Tuple[Any, ...]:
        """
        返回参与相等性比较的组成值。
        子类可以重写此方法，显式给出比较用的值元组。

        Returns:
            按顺序排列的组成值元组
        """
        return tuple(value for _, value in self.equality_fields())

    def _comparison_fields(self) -> Tuple[Tuple[Any, Any], ...]:
        if type(self).equality_components is ValueObject.equality_components:
            return self.equality_fields()
        return tuple(enumerate(self.equality_components()))

    def equals(self, other: Optional[T]) -> bool:
        """
        判断当前值对象与另一个同类型值对象是否相等。

        Args:
            other: 另一个值对象

        Returns:
            如果两者的具体类型相同且所有字段相等，则返回True；否则返回False
        """
        if other is None:
            return False
        if type(self) is not type(other):
            return False

        mine = self._comparison_fields()
        theirs = other._comparison_fields()
        if len(mine) != len(theirs):
            return False

        for (name, value), (other_name, other_value) in zip(mine, theirs):
            if name != other_name or not _component_equal(value, other_value):
                return False
        return True

    def equals_object(self, target: Any) -> bool:
        """
        判断当前值对象与任意对象是否相等。

        Args:
            target: 任意对象

        Returns:
            target不是值对象时返回False；否则按equals的规则比较
        """
        if target is None or not isinstance(target, ValueObject):
            return False
        return self.equals(target)

    def hash_code(self) -> int:
        """
        计算值对象的哈希值。
        从HASH_SEED开始，对每个非None字段执行 hash = hash * HASH_MULTIPLIER + hash(value)。

        Returns:
            值对象的哈希值

        Raises:
            TypeError: 当某个字段值不可哈希时抛出
        """
        result = HASH_SEED
        for _, value in self._comparison_fields():
            if value is not None:
                result = (result * HASH_MULTIPLIER + hash(value)) & HASH_MASK
        return result

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if other is None or not isinstance(other, ValueObject):
            return False
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return self.hash_code()

    def __repr__(self) -> str:
        attrs = ', '.join(f"{name}={value!r}" for name, value in self._comparison_fields())
        return f"{type(self).__name__}({attrs})"


def values_equal(first: Optional[ValueObject], second: Optional[ValueObject]) -> bool:
    """
    比较两个可能为None的值对象。

    Args:
        first: 第一个值对象
        second: 第二个值对象

    Returns:
        两者是同一对象或都为None时返回True；只有一个为None时返回False；
        否则按结构相等性比较
    """
    if first is second:
        return True
    if first is None or second is None:
        return False
    return first.equals_object(second)


class Money(ValueObject['Money']):
    """
    金额值对象，表示带有货币单位的金额。
    """

    def __init__(self, amount: Any, currency: str = "CNY"):
        """
        初始化金额值对象。

        Args:
            amount: 金额数值，将被转换为Decimal
            currency: 货币单位，默认为人民币(CNY)
        """
        self.amount = Decimal(amount)
        self.currency = currency

    def __add__(self, other: 'Money') -> 'Money':
        """
        金额加法运算。

        Raises:
            ValueError: 当两个金额的货币单位不同时抛出
        """
        if self.currency != other.currency:
            raise ValueError(f"不能相加不同货币单位的金额: {self.currency} != {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: 'Money') -> 'Money':
        """
        金额减法运算。

        Raises:
            ValueError: 当两个金额的货币单位不同时抛出
        """
        if self.currency != other.currency:
            raise ValueError(f"不能相减不同货币单位的金额: {self.currency} != {other.currency}")
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, multiplier: Any) -> 'Money':
        return Money(self.amount * Decimal(multiplier), self.currency)

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:.2f}"

    def to_dict(self) -> Dict[str, Any]:
        """
        将金额转换为字典表示。

        Returns:
            包含金额和货币单位的字典
        """
        return {
            "amount": str(self.amount),
            "currency": self.currency
        }
