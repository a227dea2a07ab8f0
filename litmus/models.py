"""Data models for the litmus test scaffolder.

SourceClass, MemberDescriptor, MarkupElement, InferredValue, TestScenario:
all the typed structures that flow through members/markup → composer → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Visibility(str, Enum):
    """Declared accessibility of a class member."""

    PUBLIC = "public"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PROTECTED_INTERNAL = "protected internal"
    PRIVATE_PROTECTED = "private protected"
    PRIVATE = "private"


class ValueKind(str, Enum):
    """Primitive classification of a markup attribute literal."""

    BOOLEAN = "boolean"
    ENUM_LIKE = "enum-like"
    INTEGER = "integer"
    STRING = "string"
    UNKNOWN = "unknown"


# Declared type emitted when an enum-like literal has no usable prefix.
UNKNOWN_ENUM_TYPE = "/* UnknownEnumType */"


@dataclass(frozen=True)
class MemberDescriptor:
    """One property declared on the component class."""

    name: str
    visibility: Visibility
    is_bindable_parameter: bool = False
    order: int = 0
    type_name: str = ""

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC


@dataclass(frozen=True)
class SourceClass:
    """The first class declaration found in a C# source text."""

    name: str
    members: tuple[MemberDescriptor, ...] = ()

    def state_members(self) -> list[MemberDescriptor]:
        """Public members whose value is owned by the class itself.

        Bindable parameters are supplied by the parent component, so no
        default can be asserted for them.
        """
        return [m for m in self.members if m.is_public and not m.is_bindable_parameter]


@dataclass(frozen=True)
class ClassNotFound:
    """Sentinel result when the source text holds no class declaration."""

    message: str = "Could not find class declaration."


CLASS_NOT_FOUND = ClassNotFound()


@dataclass(frozen=True)
class AttributeAssignment:
    """A key/raw-value pair found on a markup element."""

    key: str
    raw_value: str


@dataclass(frozen=True)
class MarkupElement:
    """A markup tag that captures its rendered instance with @ref."""

    tag: str
    ref_name: str
    attributes: tuple[AttributeAssignment, ...] = ()
    line: int = 1


@dataclass(frozen=True)
class InferredValue:
    """Result of classifying a raw attribute value."""

    kind: ValueKind
    literal: str
    type_name: str

    @property
    def is_resolved(self) -> bool:
        return self.type_name != UNKNOWN_ENUM_TYPE


@dataclass(frozen=True)
class RefValue:
    """An attribute literal bound to the element reference that carries it."""

    ref_name: str
    key: str
    value: InferredValue


@dataclass(frozen=True)
class TestScenario:
    """One generated test method.

    Scenarios without action lines fold setup and action under a single
    ``given . when`` marker.
    """

    __test__ = False  # keep pytest from collecting this as a test class

    name: str
    setup: tuple[str, ...] = ()
    assertions: tuple[str, ...] = ()
    action: tuple[str, ...] = ()
