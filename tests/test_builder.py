from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from domainprims.builder import BuildError, Builder, builder, builder_field


@dataclass
class Command:
    executable: str
    args: List[str] = builder_field(each="arg")
    current_dir: Optional[str] = None
    value: Optional[int] = None


@dataclass
class Plain:
    name: str
    tags: List[str]
    note: Optional[str]


class RangeError(Exception):
    pass


@dataclass
class Range:
    low: int
    high: int

    def check(self):
        if self.high < self.low:
            raise RangeError("high below low")


@dataclass
class Window:
    start: int
    end: int

    def check(self):
        if self.end <= self.start:
            raise RangeError("empty window")


@dataclass
class Label:
    text: str


def test_documented_command_example():
    command = (
        Builder(Command)
        .executable("cargo")
        .arg("build")
        .arg("--release")
        .current_dir("/home")
        .value(None)
        .build()
    )
    assert command.executable == "cargo"
    assert command.args == ["build", "--release"]
    assert command.current_dir == "/home"
    assert command.value is None


def test_missing_required_field_raises():
    with pytest.raises(BuildError, match="executable is not provided"):
        Builder(Command).arg("build").build()


def test_unset_optional_and_list_fields_get_empty_values():
    command = Builder(Command).executable("ls").build()
    assert command.args == []
    assert command.current_dir is None
    assert command.value is None


def test_each_setter_replaces_field_setter():
    b = Builder(Command)
    with pytest.raises(AttributeError):
        b.args(["x"])
    assert b.arg("x") is b


def test_unknown_setter_raises_attribute_error():
    with pytest.raises(AttributeError):
        Builder(Command).nonexistent("x")


def test_list_without_each_is_assigned_whole():
    built = Builder(Plain).name("n").tags(("a", "b")).build()
    assert built.tags == ["a", "b"]
    assert built.note is None


def test_list_without_each_defaults_to_empty():
    built = Builder(Plain).name("n").note("hi").build()
    assert built.tags == []
    assert built.note == "hi"


def test_optional_setter_accepts_value():
    built = Builder(Command).executable("e").value(7).build()
    assert built.value == 7


def test_build_takes_values_out_of_builder():
    b = Builder(Command).executable("cargo").arg("build")
    first = b.build()
    assert first.args == ["build"]
    b.arg("ignored")
    with pytest.raises(BuildError, match="executable is not provided"):
        b.build()


def test_validation_passes():
    built = Builder(Range, "check").low(1).high(2).build()
    assert (built.low, built.high) == (1, 2)


def test_validation_error_propagates():
    with pytest.raises(RangeError, match="high below low"):
        Builder(Range, "check").low(5).high(2).build()


def test_validation_must_name_an_existing_method():
    with pytest.raises(TypeError):
        Builder(Range, "missing")


def test_validation_must_be_a_string():
    with pytest.raises(TypeError, match="func must have a function name string"):
        Builder(Range, 3)


def test_only_dataclasses_are_supported():
    class NotData:
        pass

    with pytest.raises(TypeError, match="only struct supported"):
        Builder(NotData)


def test_instances_are_not_targets():
    with pytest.raises(TypeError, match="only struct supported"):
        Builder(Range(1, 2))


def test_each_must_be_an_identifier():
    with pytest.raises(TypeError, match="each must have a method name string"):
        builder_field(each=5)
    with pytest.raises(TypeError, match="each must have a method name string"):
        builder_field(each="not valid")


def test_builder_field_keeps_other_metadata():
    @dataclass
    class Tagged:
        items: List[int] = builder_field(each="item", metadata={"k": 1})

    built = Builder(Tagged).item(1).item(2).build()
    assert built.items == [1, 2]


def test_dataclass_default_used_for_unset_raw_field():
    @dataclass
    class WithDefault:
        count: int = 3
        names: List[str] = field(default_factory=list)

    built = Builder(WithDefault).build()
    assert built.count == 3


def test_string_annotations_are_classified():
    @dataclass
    class Annotated:
        name: "str"
        items: "list[int]" = builder_field(each="item")
        note: "Optional[str]" = None

    built = Builder(Annotated).name("n").item(1).item(2).build()
    assert built.items == [1, 2]
    assert built.note is None


def test_decorator_adds_builder_with_validation():
    decorated = builder(Window, validation="check")
    assert decorated is Window
    window = decorated.builder().start(1).end(4).build()
    assert (window.start, window.end) == (1, 4)
    with pytest.raises(RangeError, match="empty window"):
        decorated.builder().start(4).end(4).build()


def test_decorator_factory_form():
    wrap = builder(validation="check")
    decorated = wrap(Window)
    assert decorated is Window
    with pytest.raises(RangeError, match="empty window"):
        decorated.builder().start(2).end(1).build()


def test_decorator_without_arguments():
    decorated = builder(Label)
    label = decorated.builder().text("hello").build()
    assert label.text == "hello"
    with pytest.raises(BuildError, match="text is not provided"):
        decorated.builder().build()


def test_decorator_rejects_missing_validation_method():
    @dataclass
    class Broken:
        x: int

    with pytest.raises(TypeError):
        builder(Broken, validation="nope")


def test_setter_named_build_is_rejected():
    @dataclass
    class Clash:
        build: int

    with pytest.raises(TypeError):
        Builder(Clash)


def test_each_on_non_list_field_is_ignored():
    @dataclass
    class Single:
        name: str = builder_field(each="one")

    built = Builder(Single).name("x").build()
    assert built.name == "x"


def test_dir_lists_setters():
    names = dir(Builder(Command))
    assert {"executable", "arg", "current_dir", "value", "build"} <= set(names)