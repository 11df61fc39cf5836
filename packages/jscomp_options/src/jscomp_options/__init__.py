"""Compiler options model: the configuration object that compilation parameters mutate.

Quick Start:
    from jscomp_options import CompilerOptions, DiagnosticGroup, CheckLevel

    options = CompilerOptions()
    options.check_types = True
    options.set_warning_level(DiagnosticGroup.LINT_CHECKS, CheckLevel.WARNING)
"""

from jscomp_options.diagnostics import DiagnosticGroup, registered_groups
from jscomp_options.options import CompilerOptions
from jscomp_options.types import (
    AliasStringsMode,
    CheckLevel,
    JsDocParsing,
    LanguageMode,
    OutputJs,
    PropertyCollapseLevel,
    PropertyRenamingPolicy,
    Reach,
    VariableRenamingPolicy,
)

__version__ = "0.1.0"

__all__ = [
    "AliasStringsMode",
    "CheckLevel",
    "CompilerOptions",
    "DiagnosticGroup",
    "JsDocParsing",
    "LanguageMode",
    "OutputJs",
    "PropertyCollapseLevel",
    "PropertyRenamingPolicy",
    "Reach",
    "VariableRenamingPolicy",
    "registered_groups",
]
