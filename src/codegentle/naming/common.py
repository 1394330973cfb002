# codegentle:header:start
#
#   project      : CodeGentle
#   file         : common.py
#   file_relpath : src/codegentle/naming/common.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Frequently referenced class names."""

from __future__ import annotations

from typing import Final

from codegentle.naming.class_name import ClassName
from codegentle.naming.package_name import JAVA_LANG, PackageName

JAVA_UTIL: Final[PackageName] = PackageName.of("java", "util")

OBJECT: Final[ClassName] = ClassName.of(JAVA_LANG, "Object")
STRING: Final[ClassName] = ClassName.of(JAVA_LANG, "String")
INTEGER: Final[ClassName] = ClassName.of(JAVA_LANG, "Integer")
OVERRIDE: Final[ClassName] = ClassName.of(JAVA_LANG, "Override")
DEPRECATED: Final[ClassName] = ClassName.of(JAVA_LANG, "Deprecated")
SUPPRESS_WARNINGS: Final[ClassName] = ClassName.of(JAVA_LANG, "SuppressWarnings")
EXCEPTION: Final[ClassName] = ClassName.of(JAVA_LANG, "Exception")
SYSTEM: Final[ClassName] = ClassName.of(JAVA_LANG, "System")

LIST: Final[ClassName] = ClassName.of(JAVA_UTIL, "List")
MAP: Final[ClassName] = ClassName.of(JAVA_UTIL, "Map")
MAP_ENTRY: Final[ClassName] = MAP.nested_class("Entry")
COLLECTIONS: Final[ClassName] = ClassName.of(JAVA_UTIL, "Collections")
