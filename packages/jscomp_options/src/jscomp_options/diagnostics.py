"""Diagnostic groups: named categories of compiler warnings.

Each group can be switched to a CheckLevel on CompilerOptions. The set of
registered groups is what "enable all diagnostic groups" iterates over.
"""

from enum import StrEnum


class DiagnosticGroup(StrEnum):
    ACCESS_CONTROLS = "accessControls"
    CHECK_REGEXP = "checkRegExp"
    CHECK_TYPES = "checkTypes"
    CHECK_USELESS_CODE = "uselessCode"
    CHECK_VARIABLES = "checkVars"
    CONST = "const"
    CONSTANT_PROPERTY = "constantProperty"
    DEPRECATED = "deprecated"
    DEPRECATED_ANNOTATIONS = "deprecatedAnnotations"
    DUPLICATE_MESSAGE = "duplicateMessage"
    ES5_STRICT = "es5Strict"
    EXTERNS_VALIDATION = "externsValidation"
    GLOBAL_THIS = "globalThis"
    LINT_CHECKS = "lintChecks"
    MISPLACED_TYPE_ANNOTATION = "misplacedTypeAnnotation"
    MISSING_OVERRIDE = "missingOverride"
    MISSING_PROPERTIES = "missingProperties"
    MISSING_PROVIDE = "missingProvide"
    MISSING_REQUIRE = "missingRequire"
    MISSING_RETURN = "missingReturn"
    NON_STANDARD_JSDOC = "nonStandardJsDocs"
    STRICT_CHECK_TYPES = "strictCheckTypes"
    SUSPICIOUS_CODE = "suspiciousCode"
    UNDEFINED_VARIABLES = "undefinedVars"
    UNKNOWN_DEFINES = "unknownDefines"
    VISIBILITY = "visibility"


def registered_groups() -> tuple[DiagnosticGroup, ...]:
    """Return every registered diagnostic group in declaration order."""
    return tuple(DiagnosticGroup)
