"""Enumerated option values used by CompilerOptions."""

from enum import StrEnum


class LanguageMode(StrEnum):
    ECMASCRIPT3 = "ecmascript3"
    ECMASCRIPT5 = "ecmascript5"
    ECMASCRIPT5_STRICT = "ecmascript5_strict"
    ECMASCRIPT_2015 = "ecmascript_2015"
    ECMASCRIPT_2020 = "ecmascript_2020"
    ECMASCRIPT_NEXT = "ecmascript_next"
    STABLE = "stable"
    NO_TRANSPILE = "no_transpile"


class OutputJs(StrEnum):
    NONE = "none"
    SENTINEL = "sentinel"
    NORMAL = "normal"


class CheckLevel(StrEnum):
    OFF = "off"
    WARNING = "warning"
    ERROR = "error"


class AliasStringsMode(StrEnum):
    NONE = "none"
    LARGE = "large"
    ALL = "all"


class PropertyCollapseLevel(StrEnum):
    NONE = "none"
    MODULE_EXPORT = "module_export"
    ALL = "all"


class Reach(StrEnum):
    NONE = "none"
    LOCAL_ONLY = "local_only"
    ALL = "all"


class VariableRenamingPolicy(StrEnum):
    OFF = "off"
    LOCAL = "local"
    ALL = "all"


class PropertyRenamingPolicy(StrEnum):
    OFF = "off"
    ALL_UNQUOTED = "all_unquoted"


class JsDocParsing(StrEnum):
    TYPES_ONLY = "types_only"
    INCLUDE_DESCRIPTIONS_NO_WHITESPACE = "include_descriptions_no_whitespace"
    INCLUDE_DESCRIPTIONS_WITH_WHITESPACE = "include_descriptions_with_whitespace"
