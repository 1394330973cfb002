# codegentle:header:start
#
#   project      : CodeGentle
#   file         : type_name.py
#   file_relpath : src/codegentle/naming/type_name.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Root of the closed type-name hierarchy.

Every concrete type name (class, member, parameterized, array, type variable,
wildcard and primitive) lives in the `codegentle.naming` package and derives from
[`TypeName`][codegentle.naming.type_name.TypeName]. The writer matches over this
set exhaustively, so new variants are only introduced next to the existing ones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from codegentle.ref.type_ref import TypeRef
    from codegentle.writer.strategy import Strategy

_NAMING_PACKAGE: str = "codegentle.naming."


class TypeName:
    """Base class of all type names. Not meant to be subclassed outside ``codegentle.naming``."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.__module__.startswith(_NAMING_PACKAGE):
            raise TypeError(f"{cls.__qualname__}: TypeName is a closed hierarchy")

    def ref(self) -> TypeRef[Any]:
        """Wrap this type name in a [`TypeRef`][codegentle.ref.type_ref.TypeRef] with no status."""
        from codegentle.ref.type_ref import TypeRef

        return TypeRef.of(self)

    def render(self, strategy: Strategy | None = None) -> str:
        """Render this type name as source text with an in-memory writer."""
        from codegentle.writer.render import render

        return render(self, strategy=strategy)

    def __str__(self) -> str:
        return self.render()
