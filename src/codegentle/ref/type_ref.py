# codegentle:header:start
#
#   project      : CodeGentle
#   file         : type_ref.py
#   file_relpath : src/codegentle/ref/type_ref.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Type references: a type name plus an extensible status bag.

A [`TypeRef`][codegentle.ref.type_ref.TypeRef] decorates a
[`TypeName`][codegentle.naming.type_name.TypeName] with emission-time details such
as type-use annotations or nullability. Details are stored under typed
[`StatusKey`][codegentle.ref.type_ref.StatusKey] tokens instead of subclassing
``TypeRef`` per language. Each key knows how to create its own sub-builder, so
[`TypeRefBuilder.status`][codegentle.ref.type_ref.TypeRefBuilder.status] hands out a
builder that is typed for that key.

Example:
    ```python
    ref = TypeRef.builder(STRING).add_annotation(nullable_anno).nullable().build()
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from codegentle.naming.type_name import TypeName

if TYPE_CHECKING:
    from codegentle.ref.annotation_ref import AnnotationRef
    from codegentle.writer.strategy import Strategy

V = TypeVar("V")
V_co = TypeVar("V_co", covariant=True)
T = TypeVar("T", bound=TypeName)


class StatusBuilder(Protocol[V_co]):
    """Sub-builder producing the value stored under one status key."""

    def build(self) -> V_co:
        """Return the immutable status value."""
        ...


@dataclass(frozen=True, slots=True, eq=False)
class StatusKey(Generic[V]):
    """Typed key of a [`TypeRef`][codegentle.ref.type_ref.TypeRef] status entry.

    Keys compare by identity, so two keys with the same name never clash.

    Attributes:
        name (str): Human-readable key name, used in reprs.
        new_builder (Callable[[], StatusBuilder[V]]): Factory for the per-key sub-builder.
    """

    name: str
    new_builder: Callable[[], StatusBuilder[V]]

    def __repr__(self) -> str:
        return f"StatusKey({self.name!r})"


class AnnotationsBuilder:
    """Collects type-use annotations in call order."""

    def __init__(self) -> None:
        self.annotations: list[AnnotationRef] = []

    def add(self, *annotations: AnnotationRef) -> AnnotationsBuilder:
        self.annotations.extend(annotations)
        return self

    def build(self) -> tuple[AnnotationRef, ...]:
        return tuple(self.annotations)


class FlagBuilder:
    """Holds a single boolean; the last write wins."""

    def __init__(self) -> None:
        self.value: bool = False

    def set(self, value: bool = True) -> FlagBuilder:
        self.value = value
        return self

    def build(self) -> bool:
        return self.value


ANNOTATIONS: StatusKey[tuple[AnnotationRef, ...]] = StatusKey("annotations", AnnotationsBuilder)
NULLABLE: StatusKey[bool] = StatusKey("nullable", FlagBuilder)


@dataclass(frozen=True, slots=True)
class TypeRefStatus:
    """Immutable mapping from status keys to their values."""

    entries: Mapping[StatusKey[Any], Any] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, key: StatusKey[V], default: V | None = None) -> V | None:
        """Return the value stored under ``key``, or ``default``."""
        if key in self.entries:
            return self.entries[key]
        return default

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeRefStatus):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset((k, _freeze(v)) for k, v in self.entries.items()))


def _freeze(value: Any) -> Any:
    return tuple(value) if isinstance(value, list) else value


EMPTY_STATUS: TypeRefStatus = TypeRefStatus()


@dataclass(frozen=True, slots=True)
class TypeRef(Generic[T]):
    """A type name with its status bag.

    Attributes:
        type_name (T): The referenced type.
        status (TypeRefStatus): Decorations keyed by status keys.
    """

    type_name: T
    status: TypeRefStatus = EMPTY_STATUS

    @classmethod
    def of(cls, type_name: T) -> TypeRef[T]:
        return TypeRef(type_name)

    @classmethod
    def builder(cls, type_name: T) -> TypeRefBuilder[T]:
        return TypeRefBuilder(type_name)

    @property
    def annotations(self) -> tuple[AnnotationRef, ...]:
        """Type-use annotations, empty when none were added."""
        return self.status.get(ANNOTATIONS) or ()

    @property
    def is_nullable(self) -> bool:
        return bool(self.status.get(NULLABLE))

    def to_builder(self) -> TypeRefBuilder[T]:
        """Return a builder seeded with this ref's type name and annotations."""
        builder = TypeRefBuilder(self.type_name)
        if self.annotations:
            builder.add_annotation(*self.annotations)
        if self.is_nullable:
            builder.nullable()
        return builder

    def render(self, strategy: Strategy | None = None) -> str:
        from codegentle.writer.render import render

        return render(self, strategy=strategy)

    def __str__(self) -> str:
        return self.render()


class TypeRefBuilder(Generic[T]):
    """Mutable builder for [`TypeRef`][codegentle.ref.type_ref.TypeRef]."""

    def __init__(self, type_name: T) -> None:
        self.type_name: T = type_name
        self._status_builders: dict[StatusKey[Any], StatusBuilder[Any]] = {}

    def status(self, key: StatusKey[V]) -> Any:
        """Return the sub-builder for ``key``, creating it on first access."""
        builder = self._status_builders.get(key)
        if builder is None:
            builder = key.new_builder()
            self._status_builders[key] = builder
        return builder

    def add_annotation(self, *annotations: AnnotationRef) -> TypeRefBuilder[T]:
        builder: AnnotationsBuilder = self.status(ANNOTATIONS)
        builder.add(*annotations)
        return self

    def nullable(self, value: bool = True) -> TypeRefBuilder[T]:
        builder: FlagBuilder = self.status(NULLABLE)
        builder.set(value)
        return self

    def build(self) -> TypeRef[T]:
        entries: dict[StatusKey[Any], Any] = {
            key: builder.build() for key, builder in self._status_builders.items()
        }
        return TypeRef(self.type_name, TypeRefStatus(MappingProxyType(entries)))


def as_type_ref(value: TypeName | TypeRef[Any]) -> TypeRef[Any]:
    """Coerce a type name to a status-less ref; refs pass through unchanged.

    Raises:
        TypeError: If ``value`` is neither a ``TypeName`` nor a ``TypeRef``.
    """
    if isinstance(value, TypeRef):
        return value
    if isinstance(value, TypeName):
        return TypeRef(value)
    raise TypeError(f"Expected a TypeName or TypeRef, got {type(value).__name__}")
