"""Step-by-step builders for dataclasses."""

from __future__ import annotations

import dataclasses
import enum
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

__all__ = ["BuildError", "Builder", "builder_field", "builder"]

_EACH_KEY = "builder_each"
_MISSING: Any = object()

T = TypeVar("T")


class BuildError(Exception):
    """Raised when a builder lacks a value its target requires."""


class _Kind(enum.Enum):
    RAW = "raw"
    OPTION = "option"
    VEC = "vec"


class _Mode(enum.Enum):
    ASSIGN = "assign"
    PUSH = "push"


@dataclass(frozen=True)
class _FieldInfo:
    field: dataclasses.Field
    kind: _Kind

    @property
    def name(self) -> str:
        return self.field.name

    @property
    def has_default(self) -> bool:
        return (
            self.field.default is not dataclasses.MISSING
            or self.field.default_factory is not dataclasses.MISSING
        )


def _split_top_level(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator`` outside of square brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        if char == separator and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    parts.append("".join(current).strip())
    return parts


def _classify_text(text: str) -> _Kind:
    """Classify an annotation written as a string."""
    text = text.strip().strip("'\"")
    union_parts = _split_top_level(text, "|")
    if len(union_parts) == 2 and "None" in union_parts:
        return _Kind.OPTION
    head, bracket, rest = text.partition("[")
    if not bracket or not text.endswith("]"):
        return _Kind.RAW
    head = head.strip().rsplit(".", 1)[-1]
    args = _split_top_level(rest[:-1], ",")
    if head == "Optional" and len(args) == 1:
        return _Kind.OPTION
    if head == "Union" and len(args) == 2 and "None" in args:
        return _Kind.OPTION
    if head in ("list", "List") and len(args) == 1:
        return _Kind.VEC
    return _Kind.RAW


def _classify(annotation: Any) -> _Kind:
    if isinstance(annotation, str):
        return _classify_text(annotation)
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)
    if origin in (typing.Union, types.UnionType) and len(args) == 2 and type(None) in args:
        return _Kind.OPTION
    if origin is list and len(args) == 1:
        return _Kind.VEC
    return _Kind.RAW


def _check_identifier(value: object, message: str) -> None:
    if not isinstance(value, str) or not value.isidentifier():
        raise TypeError(message)


class Builder:
    """Collects field values for a dataclass and builds it.

    Each field gets a chainable setter of the same name. A ``list[T]`` field
    declared with ``builder_field(each="name")`` gets an ``name`` setter that
    appends one item instead. ``Optional[T]`` fields may be left unset and
    become ``None``; list fields start out empty; every other field must be
    set unless the dataclass gives it a default. Building hands the collected
    values over to the new instance and leaves the builder empty.
    """

    def __init__(self, target: type, validation: str | None = None) -> None:
        if not isinstance(target, type) or not dataclasses.is_dataclass(target):
            raise TypeError("only struct supported")
        if validation is not None:
            _check_identifier(validation, "func must have a function name string")
            if not callable(getattr(target, validation, None)):
                raise TypeError(f"{target.__name__} has no method `{validation}`")

        infos: list[_FieldInfo] = []
        setters: dict[str, tuple[str, _Mode]] = {}
        state: dict[str, Any] = {}
        for fld in dataclasses.fields(target):
            if not fld.init:
                continue
            info = _FieldInfo(fld, _classify(fld.type))
            infos.append(info)
            each = fld.metadata.get(_EACH_KEY)
            if info.kind is _Kind.VEC and each is not None:
                setter_name, mode = each, _Mode.PUSH
            else:
                setter_name, mode = fld.name, _Mode.ASSIGN
            if setter_name in setters or setter_name == "build":
                raise TypeError(f"setter name `{setter_name}` is already in use")
            setters[setter_name] = (fld.name, mode)
            if info.kind is _Kind.VEC:
                state[fld.name] = []

        self._target = target
        self._validation = validation
        self._fields = tuple(infos)
        self._kinds = {info.name: info.kind for info in infos}
        self._setters = setters
        self._state = state

    def __getattr__(self, name: str) -> Callable[[Any], Builder]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            field_name, mode = self._setters[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} for {self._target.__name__} has no setter `{name}`"
            ) from None

        def setter(value: Any) -> Builder:
            if mode is _Mode.PUSH:
                items = self._state.get(field_name)
                if items is not None:
                    items.append(value)
            elif self._kinds[field_name] is _Kind.VEC:
                self._state[field_name] = list(value)
            else:
                self._state[field_name] = value
            return self

        setter.__name__ = name
        return setter

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self._setters})

    def __repr__(self) -> str:
        return f"Builder({self._target.__name__})"

    def build(self) -> Any:
        """Build the target, raising BuildError if a required value is missing."""
        values: dict[str, Any] = {}
        for info in self._fields:
            value = self._state.pop(info.name, _MISSING)
            if value is _MISSING:
                if info.kind is _Kind.OPTION:
                    values[info.name] = None
                elif not info.has_default:
                    raise BuildError(f"{info.name} is not provided")
                continue
            values[info.name] = value

        instance = self._target(**values)
        if self._validation is not None:
            getattr(instance, self._validation)()
        return instance


def builder_field(each: str | None = None, **kwargs: Any) -> Any:
    """Declare a dataclass field; ``each`` names a setter that appends one list item."""
    if each is not None:
        _check_identifier(each, "each must have a method name string")
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[_EACH_KEY] = each
    return dataclasses.field(metadata=metadata, **kwargs)


def builder(cls: type[T] | None = None, *, validation: str | None = None) -> Any:
    """Class decorator adding a ``builder()`` class method to a dataclass.

    ``validation`` names a method of the built instance that is called after
    building; whatever it raises reaches the caller of ``build``.
    """

    def wrap(target: type[T]) -> type[T]:
        Builder(target, validation)

        def make_builder(klass: type[T]) -> Builder:
            return Builder(klass, validation)

        target.builder = classmethod(make_builder)  # type: ignore[attr-defined]
        return target

    if cls is None:
        return wrap
    return wrap(cls)