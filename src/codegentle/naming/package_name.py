# codegentle:header:start
#
#   project      : CodeGentle
#   file         : package_name.py
#   file_relpath : src/codegentle/naming/package_name.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Package names as linked segment chains.

A [`PackageName`][codegentle.naming.package_name.PackageName] is a chain of nodes
rooted at [`PackageName.EMPTY`][codegentle.naming.package_name.PackageName]. Each node
carries one segment and a link to the node before it, so ``java.util`` is
``EMPTY <- "java" <- "util"``.

Segments are not validated against any language grammar; callers that need
syntax checks use a [`Strategy`][codegentle.writer.strategy.Strategy].
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar


@total_ordering
@dataclass(frozen=True, slots=True)
class PackageName:
    """Immutable package name node.

    Attributes:
        previous (PackageName | None): The parent package, ``None`` only for ``EMPTY``.
        name (str): The last segment of this package name.
    """

    previous: PackageName | None
    name: str

    EMPTY: ClassVar[PackageName]

    def __post_init__(self) -> None:
        if self.previous is None and self.name != "":
            raise ValueError(f"Only the empty package may have no parent (segment {self.name!r})")
        if self.previous is not None and self.name == "":
            raise ValueError("A package segment must not be empty")

    @classmethod
    def of(cls, *segments: str, strict: bool = False) -> PackageName:
        """Build a package name from individual segments.

        Args:
            *segments (str): Segments, outermost first.
            strict (bool): If True, reject segments containing ``.``.

        Returns:
            PackageName: The package name; ``EMPTY`` when no segment is given.

        Raises:
            ValueError: If a segment is empty, or contains ``.`` in strict mode.
        """
        result: PackageName = cls.EMPTY
        for segment in segments:
            if strict and "." in segment:
                raise ValueError(f"Package segment {segment!r} must not contain '.'")
            result = PackageName(result, segment)
        return result

    @classmethod
    def parse(cls, dotted: str) -> PackageName:
        """Parse a dotted package name such as ``"java.util"``.

        The empty string parses to ``EMPTY``.
        """
        if not dotted:
            return cls.EMPTY
        return cls.of(*dotted.split("."))

    @property
    def is_empty(self) -> bool:
        """Whether this is the root ``EMPTY`` package."""
        return self.previous is None

    @property
    def parts(self) -> tuple[str, ...]:
        """Segments of this package, outermost first."""
        segments: list[str] = []
        node: PackageName | None = self
        while node is not None and node.previous is not None:
            segments.append(node.name)
            node = node.previous
        return tuple(reversed(segments))

    @property
    def top_level(self) -> PackageName:
        """The outermost non-empty package (``java`` for ``java.util``), or ``EMPTY``."""
        node: PackageName = self
        while node.previous is not None and not node.previous.is_empty:
            node = node.previous
        return node

    def to_relative_path(self, sep: str = "/") -> str:
        """Return the segments joined by ``sep``, e.g. ``java/util``."""
        return sep.join(self.parts)

    def __add__(self, other: str | PackageName) -> PackageName:
        if isinstance(other, PackageName):
            return PackageName.of(*self.parts, *other.parts)
        return PackageName.of(*self.parts, *PackageName.parse(other).parts)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PackageName):
            return NotImplemented
        return self.parts < other.parts

    def __str__(self) -> str:
        return ".".join(self.parts)

    def __repr__(self) -> str:
        return f"PackageName({str(self)!r})"


PackageName.EMPTY = PackageName(None, "")

JAVA_LANG: PackageName = PackageName.of("java", "lang")
