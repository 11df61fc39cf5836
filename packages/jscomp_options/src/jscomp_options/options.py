"""CompilerOptions: the mutable configuration object a compilation reads.

Field defaults describe an unconfigured compiler: no checks beyond the
baseline, no optimizations, and no transpilation. Assignments are validated,
so a caller cannot store a value of the wrong type in an enum field.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from jscomp_options.diagnostics import DiagnosticGroup  # noqa: TC001
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


class CompilerOptions(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    # Language
    language_in: LanguageMode = LanguageMode.STABLE
    language_out: LanguageMode = LanguageMode.NO_TRANSPILE
    skip_non_transpilation_passes: bool = False

    # Checks
    check_types: bool = False
    checks_only: bool = False
    output_js: OutputJs = OutputJs.NORMAL
    preserve_types_for_debugging: bool = False
    rewrite_modules_before_typechecking: bool = False
    enable_module_rewriting: bool = True
    check_suspicious_code: bool = False
    check_symbols: bool = False
    warning_levels: dict[DiagnosticGroup, CheckLevel] = {}

    # Optimizations
    alias_strings_mode: AliasStringsMode = AliasStringsMode.NONE
    ambiguate_properties: bool = False
    coalesce_variable_names: bool = False
    collapse_variable_declarations: bool = False
    collapse_anonymous_functions: bool = False
    collapse_properties_level: PropertyCollapseLevel = PropertyCollapseLevel.NONE
    collapse_object_literals: bool = False
    compute_function_side_effects: bool = False
    convert_to_dotted_properties: bool = False
    cross_chunk_code_motion: bool = False
    cross_chunk_method_motion: bool = False
    dead_assignment_elimination: bool = False
    devirtualize_methods: bool = False
    disambiguate_properties: bool = False
    extract_prototype_member_declarations: bool = False
    fold_constants: bool = False
    inline_constant_vars: bool = False
    inline_functions: Reach = Reach.NONE
    inline_properties: bool = False
    inline_variables: bool = False
    label_renaming: bool = False
    optimize_calls: bool = False
    optimize_es_class_constructors: bool = False
    optimize_arguments_array: bool = False
    remove_abstract_methods: bool = False
    remove_dead_code: bool = False
    remove_unused_class_properties: bool = False
    remove_unused_prototype_properties: bool = False
    remove_unused_variables: Reach = Reach.NONE
    rewrite_function_expressions: bool = False
    smart_name_removal: bool = False
    use_types_for_local_optimization: bool = False
    variable_renaming: VariableRenamingPolicy = VariableRenamingPolicy.OFF
    property_renaming: PropertyRenamingPolicy = PropertyRenamingPolicy.OFF
    rewrite_global_declarations_for_try_catch_wrapping: bool = False
    synthetic_block_start_marker: str | None = None
    synthetic_block_end_marker: str | None = None

    # Special passes
    angular_pass: bool = False
    chrome_pass: bool = False
    closure_pass: bool = False
    polymer_version: int | None = None

    # Output and misc
    generate_exports: bool = False
    export_local_property_definitions: bool = False
    generate_pseudo_names: bool = False
    continue_after_errors: bool = False
    preserve_detailed_source_info: bool = False
    parse_jsdoc_documentation: JsDocParsing = JsDocParsing.TYPES_ONLY
    preserve_type_annotations: bool = False
    pretty_print: bool = False

    def set_warning_level(self, group: DiagnosticGroup, level: CheckLevel) -> None:
        """Set the level for a group; raise ValueError for an unknown group or level."""
        self.warning_levels[DiagnosticGroup(group)] = CheckLevel(level)

    def get_warning_level(self, group: DiagnosticGroup) -> CheckLevel | None:
        """Return the explicit level for a group, or None if it was never set."""
        return self.warning_levels.get(group)

    def should_collapse_properties(self) -> bool:
        return self.collapse_properties_level == PropertyCollapseLevel.ALL
