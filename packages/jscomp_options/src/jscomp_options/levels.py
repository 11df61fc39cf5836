"""Compilation levels that set a bundle of options at once.

A level is applied on top of a CompilerOptions instance and overwrites
every field it names. Fields a level does not name keep their value, so a
caller can apply a level first and fine-tune individual toggles after.
"""

from dataclasses import dataclass

from jscomp_options.diagnostics import DiagnosticGroup
from jscomp_options.options import CompilerOptions
from jscomp_options.types import (
    CheckLevel,
    PropertyCollapseLevel,
    PropertyRenamingPolicy,
    Reach,
    VariableRenamingPolicy,
)


@dataclass(frozen=True)
class CompilationLevel:
    """A named set of option assignments."""

    name: str
    description: str
    adjustments: dict[str, object]
    warnings: tuple[DiagnosticGroup, ...] = ()

    def set_options_for_level(self, options: CompilerOptions) -> None:
        for field, value in self.adjustments.items():
            setattr(options, field, value)
        for group in self.warnings:
            options.set_warning_level(group, CheckLevel.WARNING)


# Every optimization switched off
_NO_OPTIMIZATIONS: dict[str, object] = {
    "fold_constants": False,
    "coalesce_variable_names": False,
    "dead_assignment_elimination": False,
    "collapse_variable_declarations": False,
    "convert_to_dotted_properties": False,
    "label_renaming": False,
    "remove_dead_code": False,
    "optimize_arguments_array": False,
    "collapse_object_literals": False,
    "inline_constant_vars": False,
    "inline_functions": Reach.NONE,
    "inline_variables": False,
    "remove_unused_variables": Reach.NONE,
    "variable_renaming": VariableRenamingPolicy.OFF,
    "closure_pass": False,
    "ambiguate_properties": False,
    "disambiguate_properties": False,
    "collapse_properties_level": PropertyCollapseLevel.NONE,
    "cross_chunk_code_motion": False,
    "cross_chunk_method_motion": False,
    "devirtualize_methods": False,
    "inline_properties": False,
    "smart_name_removal": False,
    "remove_unused_prototype_properties": False,
    "remove_unused_class_properties": False,
    "property_renaming": PropertyRenamingPolicy.OFF,
    "optimize_calls": False,
    "compute_function_side_effects": False,
    "use_types_for_local_optimization": False,
    "remove_abstract_methods": False,
    "extract_prototype_member_declarations": False,
}

WHITESPACE_ONLY = CompilationLevel(
    name="whitespace-only",
    description="Removes comments and whitespace; no renaming or code rewriting",
    adjustments=_NO_OPTIMIZATIONS,
)

SIMPLE_OPTIMIZATIONS = CompilationLevel(
    name="simple",
    description="Local optimizations that keep the global names of the input intact",
    adjustments={
        **_NO_OPTIMIZATIONS,
        "closure_pass": True,
        "fold_constants": True,
        "coalesce_variable_names": True,
        "dead_assignment_elimination": True,
        "collapse_variable_declarations": True,
        "convert_to_dotted_properties": True,
        "label_renaming": True,
        "remove_dead_code": True,
        "optimize_arguments_array": True,
        "collapse_object_literals": True,
        "inline_constant_vars": True,
        "inline_functions": Reach.LOCAL_ONLY,
        "remove_unused_variables": Reach.LOCAL_ONLY,
        "variable_renaming": VariableRenamingPolicy.LOCAL,
    },
)

ADVANCED_OPTIMIZATIONS = CompilationLevel(
    name="advanced",
    description="Whole-program optimizations including global renaming and dead code removal",
    adjustments={
        **SIMPLE_OPTIMIZATIONS.adjustments,
        "check_symbols": True,
        "inline_functions": Reach.ALL,
        "inline_variables": True,
        "remove_unused_variables": Reach.ALL,
        "variable_renaming": VariableRenamingPolicy.ALL,
        "ambiguate_properties": True,
        "disambiguate_properties": True,
        "collapse_properties_level": PropertyCollapseLevel.ALL,
        "cross_chunk_code_motion": True,
        "cross_chunk_method_motion": True,
        "devirtualize_methods": True,
        "inline_properties": True,
        "smart_name_removal": True,
        "remove_unused_prototype_properties": True,
        "remove_unused_class_properties": True,
        "property_renaming": PropertyRenamingPolicy.ALL_UNQUOTED,
        "optimize_calls": True,
        "compute_function_side_effects": True,
        "use_types_for_local_optimization": True,
        "remove_abstract_methods": True,
        "extract_prototype_member_declarations": True,
    },
    warnings=(DiagnosticGroup.GLOBAL_THIS,),
)


LEVELS: dict[str, CompilationLevel] = {
    "whitespace-only": WHITESPACE_ONLY,
    "simple": SIMPLE_OPTIMIZATIONS,
    "advanced": ADVANCED_OPTIMIZATIONS,
}


def get_level(name: str) -> CompilationLevel | None:
    """Look up a compilation level by name."""
    return LEVELS.get(name)


def list_level_names() -> list[str]:
    """Return all available level names."""
    return list(LEVELS.keys())
