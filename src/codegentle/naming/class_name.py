# codegentle:header:start
#
#   project      : CodeGentle
#   file         : class_name.py
#   file_relpath : src/codegentle/naming/class_name.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Class and member names.

A [`ClassName`][codegentle.naming.class_name.ClassName] is a package plus a chain
of simple names: ``java.util.Map.Entry`` is package ``java.util``, top-level class
``Map`` and nested class ``Entry``. A
[`MemberName`][codegentle.naming.class_name.MemberName] names a field or method,
either inside a class or at package level.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from codegentle.naming.package_name import PackageName
from codegentle.naming.type_name import TypeName


def _as_package(package: str | PackageName) -> PackageName:
    return package if isinstance(package, PackageName) else PackageName.parse(package)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class ClassName(TypeName):
    """A fully-qualified class name.

    Attributes:
        package_name (PackageName): Package of the top-level class.
        enclosing_class_name (ClassName | None): Enclosing class for nested classes.
        simple_name (str): Name of this class without package or enclosing classes.
    """

    package_name: PackageName
    enclosing_class_name: ClassName | None
    simple_name: str

    def __post_init__(self) -> None:
        if not self.simple_name:
            raise ValueError("Class simple name must not be empty")
        if (
            self.enclosing_class_name is not None
            and self.enclosing_class_name.package_name != self.package_name
        ):
            raise ValueError(
                f"Nested class {self.simple_name!r} must share the package of "
                f"{self.enclosing_class_name.canonical_name!r}"
            )

    @classmethod
    def of(cls, package: str | PackageName, simple_name: str, *nested: str) -> ClassName:
        """Build a class name from a package and one or more simple names.

        Args:
            package (str | PackageName): Package, as a dotted string or a ``PackageName``.
            simple_name (str): Top-level class name.
            *nested (str): Nested class names, outermost first.

        Returns:
            ClassName: The innermost class name.
        """
        result = ClassName(_as_package(package), None, simple_name)
        for name in nested:
            result = result.nested_class(name)
        return result

    @classmethod
    def best_guess(cls, name: str) -> ClassName:
        """Guess a class name from a dotted string.

        Leading lowercase segments are taken as the package, the first
        capitalized segment starts the class chain: ``java.util.Map.Entry``
        yields package ``java.util`` and classes ``Map.Entry``.

        Raises:
            ValueError: If no segment looks like a class name.
        """
        segments = name.split(".")
        for index, segment in enumerate(segments):
            if segment and segment[0].isupper():
                names = segments[index:]
                if not all(names):
                    break
                return cls.of(PackageName.of(*segments[:index]), names[0], *names[1:])
            if not segment:
                break
        raise ValueError(f"Couldn't make a guess for {name!r}")

    def _chain(self) -> list[ClassName]:
        """Return this class and its enclosing classes, innermost first."""
        chain: list[ClassName] = []
        seen: set[int] = set()
        node: ClassName | None = self
        while node is not None:
            if id(node) in seen:
                raise ValueError(f"Cyclic enclosing class chain at {node.simple_name!r}")
            seen.add(id(node))
            chain.append(node)
            node = node.enclosing_class_name
        return chain

    @property
    def simple_names(self) -> tuple[str, ...]:
        """Simple names from the top-level class down to this one."""
        return tuple(c.simple_name for c in reversed(self._chain()))

    @property
    def canonical_name(self) -> str:
        """Dotted name, e.g. ``java.util.Map.Entry``."""
        names = ".".join(self.simple_names)
        if self.package_name.is_empty:
            return names
        return f"{self.package_name}.{names}"

    @property
    def top_level_class_name(self) -> ClassName:
        """The outermost class of the enclosing chain."""
        return self._chain()[-1]

    def nested_class(self, name: str) -> ClassName:
        """Return a class nested directly in this one."""
        return ClassName(self.package_name, self, name)

    def peer_class(self, name: str) -> ClassName:
        """Return a class sharing this class's package and enclosing class."""
        return ClassName(self.package_name, self.enclosing_class_name, name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassName):
            return NotImplemented
        return (
            self.package_name == other.package_name and self.simple_names == other.simple_names
        )

    def __hash__(self) -> int:
        return hash((self.package_name, self.simple_names))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ClassName):
            return NotImplemented
        return self.canonical_name < other.canonical_name

    def __repr__(self) -> str:
        return f"ClassName({self.canonical_name!r})"


@total_ordering
@dataclass(frozen=True, slots=True)
class MemberName(TypeName):
    """A field or method name, optionally inside a class.

    Attributes:
        package_name (PackageName): Package of the member (or of its enclosing class).
        enclosing_class_name (ClassName | None): Declaring class, ``None`` for top-level members.
        name (str): The member's simple name.
    """

    package_name: PackageName
    enclosing_class_name: ClassName | None
    name: str

    @classmethod
    def of(cls, owner: ClassName | PackageName | str, name: str) -> MemberName:
        """Build a member of a class, or a top-level member of a package."""
        if isinstance(owner, ClassName):
            return MemberName(owner.package_name, owner, name)
        return MemberName(_as_package(owner), None, name)

    @property
    def simple_name(self) -> str:
        """Same as ``name``; lets members sit in the import table next to classes."""
        return self.name

    @property
    def canonical_name(self) -> str:
        """Dotted name, e.g. ``java.util.Collections.emptyList``."""
        if self.enclosing_class_name is not None:
            return f"{self.enclosing_class_name.canonical_name}.{self.name}"
        if self.package_name.is_empty:
            return self.name
        return f"{self.package_name}.{self.name}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MemberName):
            return NotImplemented
        return self.canonical_name < other.canonical_name

    def __repr__(self) -> str:
        return f"MemberName({self.canonical_name!r})"
