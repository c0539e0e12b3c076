"""String primitives that may hold no value."""

from __future__ import annotations

import re
from typing import Any, ClassVar

from domainprims.errors import DomainError

__all__ = ["OptionalStringPrimitive"]


class OptionalStringPrimitive:
    """A trimmed string that may be absent, checked against length and pattern rules.

    Blank input yields an empty primitive. Lengths are measured in UTF-8 bytes.
    Subclasses configure it with class keywords::

        class MobilePhoneNumber(
            OptionalStringPrimitive, name="携帯電話番号", regex=r"^0[789]0-[0-9]{4}-[0-9]{4}$"
        ):
            pass
    """

    __slots__ = ("_value",)

    _primitive_name: ClassVar[str]
    _regex: ClassVar[re.Pattern[str] | None]
    _min_length: ClassVar[int | None]
    _max_length: ClassVar[int | None]

    def __init_subclass__(
        cls,
        name: str,
        regex: str | None = None,
        min_length: int | None = None,
        max_length: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        for label, bound in (("min_length", min_length), ("max_length", max_length)):
            if bound is not None and (isinstance(bound, bool) or not isinstance(bound, int) or bound < 0):
                raise TypeError(f"{label} must be a non-negative integer")
        cls._primitive_name = name
        cls._regex = re.compile(regex) if regex is not None else None
        cls._min_length = min_length
        cls._max_length = max_length

    def __init__(self, value: str | None) -> None:
        if type(self) is OptionalStringPrimitive:
            raise TypeError("OptionalStringPrimitive must be subclassed with a name")
        if value is None:
            self._value: str | None = None
            return
        if not isinstance(value, str):
            raise TypeError(f"{self._primitive_name} requires a string or None")
        self._value = self._validated(value)

    @classmethod
    def _validated(cls, value: str) -> str | None:
        text = value.strip()
        if not text:
            return None
        name = cls._primitive_name
        size = len(text.encode("utf-8"))
        if cls._min_length is not None and size < cls._min_length:
            raise DomainError.validation(
                f"{name}は{cls._min_length}文字以上の文字列を指定してください。"
            )
        if cls._max_length is not None and cls._max_length < size:
            raise DomainError.validation(
                f"{name}は{cls._max_length}文字以下の文字列を指定してください。"
            )
        if cls._regex is not None and cls._regex.search(text) is None:
            raise DomainError.validation(f"{name}に指定した文字列の形式が誤っています。")
        return text

    @classmethod
    def try_from_str(cls, value: str) -> OptionalStringPrimitive:
        """Build the primitive from a string, raising DomainError if it is invalid."""
        return cls(value)

    @classmethod
    def none(cls) -> OptionalStringPrimitive:
        """Return the primitive holding no value."""
        return cls(None)

    def value(self) -> str | None:
        return self._value

    def is_some(self) -> bool:
        return self._value is not None

    def is_none(self) -> bool:
        return self._value is None

    def __str__(self) -> str:
        return "None" if self._value is None else self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))