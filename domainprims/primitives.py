"""Validated domain primitives holding a single value."""

from __future__ import annotations

import re
from typing import Any, ClassVar

from domainprims.errors import DomainError

__all__ = ["primitive_display", "StringPrimitive", "IntegerPrimitive"]


def _has_value_field(cls: type) -> bool:
    if "value" in getattr(cls, "__dataclass_fields__", {}):
        return True
    return any("value" in vars(klass).get("__annotations__", {}) for klass in cls.__mro__)


def primitive_display(cls: type) -> type:
    """Class decorator making ``str(obj)`` render the object's ``value`` field."""
    if not isinstance(cls, type):
        raise TypeError("primitive_display is expected a class")
    if not _has_value_field(cls):
        raise TypeError("PrimitiveDisplay must have the `value` field")

    def __str__(self: Any) -> str:
        return str(self.value)

    cls.__str__ = __str__
    return cls


class StringPrimitive:
    """A trimmed, non-empty string checked against length and pattern rules.

    Subclasses configure it with class keywords::

        class Remarks(StringPrimitive, name="備考", message="...", max_length=400):
            pass
    """

    __slots__ = ("_value",)

    _primitive_name: ClassVar[str]
    _message: ClassVar[str]
    _min_length: ClassVar[int | None]
    _max_length: ClassVar[int | None]
    _pattern: ClassVar[re.Pattern[str] | None]

    def __init_subclass__(
        cls,
        name: str,
        message: str,
        min_length: int | None = None,
        max_length: int | None = None,
        pattern: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        cls._primitive_name = name
        cls._message = message
        cls._min_length = min_length
        cls._max_length = max_length
        cls._pattern = re.compile(pattern) if pattern is not None else None

    def __init__(self, value: object) -> None:
        if type(self) is StringPrimitive:
            raise TypeError("StringPrimitive must be subclassed with a name and message")
        text = str(value).strip()
        if not text:
            raise DomainError.validation(f"{self._primitive_name}は空文字を指定できません。")
        if not self._is_valid(text):
            raise DomainError.validation(self._message)
        self._value = text

    @classmethod
    def _is_valid(cls, text: str) -> bool:
        if cls._min_length is not None and len(text) < cls._min_length:
            return False
        if cls._max_length is not None and len(text) > cls._max_length:
            return False
        if cls._pattern is not None and cls._pattern.search(text) is None:
            return False
        return True

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))


class IntegerPrimitive:
    """An integer checked against an inclusive range.

    Subclasses configure it with class keywords; at least one bound is required::

        class Amount(IntegerPrimitive, name="数量", min_value=0, max_value=20):
            pass
    """

    __slots__ = ("_value",)

    _primitive_name: ClassVar[str]
    _min_value: ClassVar[int | None]
    _max_value: ClassVar[int | None]

    def __init_subclass__(
        cls,
        name: str,
        min_value: int | None = None,
        max_value: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if min_value is None and max_value is None:
            raise TypeError("range must have at least either `min` or `max`")
        cls._primitive_name = name
        cls._min_value = min_value
        cls._max_value = max_value

    def __init__(self, value: int) -> None:
        if type(self) is IntegerPrimitive:
            raise TypeError("IntegerPrimitive must be subclassed with a name and a range")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{self._primitive_name} requires an integer")
        name = self._primitive_name
        if self._min_value is not None and value < self._min_value:
            raise DomainError.validation(f"{name}は{self._min_value}以上の値を指定してください。")
        if self._max_value is not None and value > self._max_value:
            raise DomainError.validation(f"{name}は{self._max_value}以下の値を指定してください。")
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))