"""The fixed catalog of compilation parameters.

Parameters are declared as data. Most follow one of three shapes, built by
the helpers below:

- a boolean field on CompilerOptions (``_flag``)
- the warning level of one diagnostic group (``_warning``)
- an enum field switched between an "on" and an "off" member (``_choice``)

The rest set several fields at once and get their own apply function.
Declaration order is the presentation order within each group.
"""

from __future__ import annotations

from operator import attrgetter

from jscomp_options import (
    AliasStringsMode,
    CheckLevel,
    CompilerOptions,
    DiagnosticGroup,
    JsDocParsing,
    LanguageMode,
    OutputJs,
    PropertyCollapseLevel,
    PropertyRenamingPolicy,
    Reach,
    VariableRenamingPolicy,
    registered_groups,
)
from jscomp_params.models import CompilationParam, ParamGroup


def _flag(
    name: str,
    field: str,
    group: ParamGroup,
    *,
    default: bool = False,
    introspect: bool = True,
    hint: str | None = None,
) -> CompilationParam:
    def apply(options: CompilerOptions, value: bool) -> None:
        setattr(options, field, value)

    return CompilationParam(
        name=name,
        group=group,
        default_value=default,
        apply_hint=hint,
        apply_fn=apply,
        is_applied_fn=attrgetter(field) if introspect else None,
    )


def _warning_hint(diagnostic: DiagnosticGroup) -> str:
    return f"options.set_warning_level(DiagnosticGroup.{diagnostic.name}, CheckLevel.WARNING)"


def _warning(
    name: str, diagnostic: DiagnosticGroup, *, hint: str | None = None
) -> CompilationParam:
    def apply(options: CompilerOptions, value: bool) -> None:
        options.set_warning_level(diagnostic, CheckLevel.WARNING if value else CheckLevel.OFF)

    return CompilationParam(
        name=name,
        group=ParamGroup.ERROR_CHECKING,
        apply_hint=hint or _warning_hint(diagnostic),
        apply_fn=apply,
    )


def _choice(
    name: str,
    field: str,
    on: object,
    off: object,
    *,
    group: ParamGroup = ParamGroup.OPTIMIZATION,
    introspect: bool = True,
    hint: str | None = None,
) -> CompilationParam:
    def apply(options: CompilerOptions, value: bool) -> None:
        setattr(options, field, on if value else off)

    def is_applied(options: CompilerOptions) -> bool:
        return getattr(options, field) == on

    return CompilationParam(
        name=name,
        group=group,
        apply_hint=hint,
        apply_fn=apply,
        is_applied_fn=is_applied if introspect else None,
    )


# =========================================================================
# Composite parameters
# =========================================================================


def _enable_all_diagnostic_groups(options: CompilerOptions, value: bool) -> None:
    # There is no single "previous level" to restore, so False leaves the
    # options untouched.
    if value:
        for diagnostic in registered_groups():
            options.set_warning_level(diagnostic, CheckLevel.WARNING)


def _transpile(options: CompilerOptions, value: bool) -> None:
    options.language_in = LanguageMode.STABLE
    options.language_out = LanguageMode.ECMASCRIPT5 if value else LanguageMode.NO_TRANSPILE


def _checks_only(options: CompilerOptions, value: bool) -> None:
    options.checks_only = value
    options.output_js = OutputJs.SENTINEL if value else OutputJs.NORMAL


def _disable_module_rewriting(options: CompilerOptions, value: bool) -> None:
    options.enable_module_rewriting = not value


def _synthetic_block_marker(options: CompilerOptions, value: bool) -> None:
    if value:
        options.synthetic_block_start_marker = "start"
        options.synthetic_block_end_marker = "end"
    else:
        options.synthetic_block_start_marker = None
        options.synthetic_block_end_marker = None


def _polymer_pass(options: CompilerOptions, value: bool) -> None:
    options.polymer_version = 1 if value else None


CATALOG: tuple[CompilationParam, ...] = (
    CompilationParam(
        name="ENABLE_ALL_DIAGNOSTIC_GROUPS",
        group=ParamGroup.ERROR_CHECKING,
        apply_hint="Sets every registered DiagnosticGroup to CheckLevel.WARNING",
        apply_fn=_enable_all_diagnostic_groups,
    ),
    CompilationParam(
        name="TRANSPILE",
        group=ParamGroup.TRANSPILATION,
        apply_hint="options.language_out = LanguageMode.ECMASCRIPT5",
        apply_fn=_transpile,
    ),
    _flag(
        "SKIP_NON_TRANSPILATION_PASSES",
        "skip_non_transpilation_passes",
        ParamGroup.TRANSPILATION,
        introspect=False,
    ),
    # =====================================================================
    # Checks
    # =====================================================================
    _flag("CHECK_TYPES", "check_types", ParamGroup.ERROR_CHECKING, default=True),
    _warning("STRICT_CHECK_TYPES", DiagnosticGroup.STRICT_CHECK_TYPES),
    CompilationParam(
        name="CHECKS_ONLY",
        group=ParamGroup.ERROR_CHECKING,
        apply_hint="options.checks_only = True; options.output_js = OutputJs.SENTINEL",
        apply_fn=_checks_only,
    ),
    _flag(
        "PRESERVE_TYPES_FOR_DEBUGGING",
        "preserve_types_for_debugging",
        ParamGroup.ERROR_CHECKING,
        introspect=False,
        hint="options.preserve_types_for_debugging = True",
    ),
    _flag(
        "REWRITE_MODULES_BEFORE_TYPECHECKING",
        "rewrite_modules_before_typechecking",
        ParamGroup.ERROR_CHECKING,
        default=True,
        introspect=False,
        hint="options.rewrite_modules_before_typechecking = True",
    ),
    CompilationParam(
        name="DISABLE_MODULE_REWRITING",
        group=ParamGroup.ERROR_CHECKING,
        apply_hint="options.enable_module_rewriting = not value; only supported with CHECKS_ONLY",
        apply_fn=_disable_module_rewriting,
    ),
    _warning("CHECK_CONSTANTS", DiagnosticGroup.CONST),
    _warning("CHECK_DEPRECATED", DiagnosticGroup.DEPRECATED),
    _warning("CHECK_ES5_STRICT", DiagnosticGroup.ES5_STRICT),
    _warning("CHECK_GLOBAL_THIS", DiagnosticGroup.GLOBAL_THIS),
    _warning("CHECK_LINT", DiagnosticGroup.LINT_CHECKS),
    _warning("CHECK_MISSING_RETURN", DiagnosticGroup.MISSING_RETURN),
    _warning("CHECK_UNREACHABLE_CODE", DiagnosticGroup.CHECK_USELESS_CODE),
    _warning("CHECK_PROVIDES", DiagnosticGroup.MISSING_PROVIDE),
    _warning("CHECK_REQUIRES", DiagnosticGroup.MISSING_REQUIRE),
    _warning("CHECK_REPORT_MISSING_OVERRIDE", DiagnosticGroup.MISSING_OVERRIDE),
    _flag("CHECK_SUSPICIOUS_CODE", "check_suspicious_code", ParamGroup.ERROR_CHECKING),
    _flag("CHECK_SYMBOLS", "check_symbols", ParamGroup.ERROR_CHECKING),
    _warning("CHECK_VISIBILITY", DiagnosticGroup.VISIBILITY),
    _warning("MISSING_PROPERTIES", DiagnosticGroup.MISSING_PROPERTIES),
    # =====================================================================
    # Optimizations
    # =====================================================================
    _choice(
        "ALIAS_ALL_STRINGS",
        "alias_strings_mode",
        AliasStringsMode.ALL,
        AliasStringsMode.NONE,
        hint="options.alias_strings_mode = AliasStringsMode.ALL",
    ),
    _flag("AMBIGUATE_PROPERTIES", "ambiguate_properties", ParamGroup.OPTIMIZATION),
    _flag("COALESCE_VARIABLE_NAMES", "coalesce_variable_names", ParamGroup.OPTIMIZATION),
    _flag(
        "COLLAPSE_VARIABLE_DECLARATIONS",
        "collapse_variable_declarations",
        ParamGroup.OPTIMIZATION,
    ),
    _flag("COLLAPSE_ANONYMOUS_FUNCTIONS", "collapse_anonymous_functions", ParamGroup.OPTIMIZATION),
    _choice(
        "COLLAPSE_PROPERTIES",
        "collapse_properties_level",
        PropertyCollapseLevel.ALL,
        PropertyCollapseLevel.NONE,
        hint="options.collapse_properties_level = PropertyCollapseLevel.ALL",
    ),
    _flag("COLLAPSE_OBJECT_LITERALS", "collapse_object_literals", ParamGroup.OPTIMIZATION),
    _flag(
        "COMPUTE_FUNCTION_SIDE_EFFECTS",
        "compute_function_side_effects",
        ParamGroup.OPTIMIZATION,
    ),
    _flag(
        "CONVERT_TO_DOTTED_PROPERTIES",
        "convert_to_dotted_properties",
        ParamGroup.OPTIMIZATION,
        hint="options.convert_to_dotted_properties = True",
    ),
    _flag("CROSS_CHUNK_CODE_MOTION", "cross_chunk_code_motion", ParamGroup.OPTIMIZATION),
    _flag("CROSS_CHUNK_METHOD_MOTION", "cross_chunk_method_motion", ParamGroup.OPTIMIZATION),
    _flag("DEAD_ASSIGNMENT_ELIMINATION", "dead_assignment_elimination", ParamGroup.OPTIMIZATION),
    _flag("DEVIRTUALIZE_METHODS", "devirtualize_methods", ParamGroup.OPTIMIZATION),
    _flag("DISAMBIGUATE_PROPERTIES", "disambiguate_properties", ParamGroup.OPTIMIZATION),
    _flag(
        "EXTRACT_PROTOTYPE_MEMBER_DECLARATIONS",
        "extract_prototype_member_declarations",
        ParamGroup.OPTIMIZATION,
        introspect=False,
    ),
    _flag("FOLD_CONSTANTS", "fold_constants", ParamGroup.OPTIMIZATION),
    _flag(
        "INLINE_CONSTANTS",
        "inline_constant_vars",
        ParamGroup.OPTIMIZATION,
        hint="options.inline_constant_vars = True",
    ),
    _choice(
        "INLINE_FUNCTIONS",
        "inline_functions",
        Reach.ALL,
        Reach.NONE,
        hint="options.inline_functions = Reach.ALL",
    ),
    _flag("INLINE_PROPERTIES", "inline_properties", ParamGroup.OPTIMIZATION),
    _flag("INLINE_VARIABLES", "inline_variables", ParamGroup.OPTIMIZATION),
    _flag("LABEL_RENAMING", "label_renaming", ParamGroup.OPTIMIZATION),
    _flag("OPTIMIZE_CALLS", "optimize_calls", ParamGroup.OPTIMIZATION),
    _flag(
        "OPTIMIZE_CONSTRUCTORS",
        "optimize_es_class_constructors",
        ParamGroup.OPTIMIZATION,
        hint="options.optimize_es_class_constructors = True",
    ),
    _flag("OPTIMIZE_ARGUMENTS_ARRAY", "optimize_arguments_array", ParamGroup.OPTIMIZATION),
    _flag(
        "REMOVE_ABSTRACT_METHODS",
        "remove_abstract_methods",
        ParamGroup.OPTIMIZATION,
        introspect=False,
        hint="options.remove_abstract_methods = True",
    ),
    _flag("REMOVE_DEAD_CODE", "remove_dead_code", ParamGroup.OPTIMIZATION),
    _flag(
        "REMOVE_UNUSED_CLASS_PROPERTIES",
        "remove_unused_class_properties",
        ParamGroup.OPTIMIZATION,
    ),
    _flag(
        "REMOVE_UNUSED_PROTOTYPE_PROPERTIES",
        "remove_unused_prototype_properties",
        ParamGroup.OPTIMIZATION,
    ),
    _choice(
        "REMOVE_UNUSED_VARIABLES",
        "remove_unused_variables",
        Reach.ALL,
        Reach.NONE,
        hint="options.remove_unused_variables = Reach.ALL",
    ),
    _flag("REWRITE_FUNCTION_EXPRESSIONS", "rewrite_function_expressions", ParamGroup.OPTIMIZATION),
    _flag("SMART_NAME_REMOVAL", "smart_name_removal", ParamGroup.OPTIMIZATION),
    _flag(
        "USE_TYPES_FOR_LOCAL_OPTIMIZATION",
        "use_types_for_local_optimization",
        ParamGroup.OPTIMIZATION,
        hint="options.use_types_for_local_optimization = True",
    ),
    _choice(
        "VARIABLE_RENAMING",
        "variable_renaming",
        VariableRenamingPolicy.ALL,
        VariableRenamingPolicy.OFF,
        hint="options.variable_renaming = VariableRenamingPolicy.ALL",
    ),
    _choice(
        "PROPERTY_RENAMING",
        "property_renaming",
        PropertyRenamingPolicy.ALL_UNQUOTED,
        PropertyRenamingPolicy.OFF,
        hint="options.property_renaming = PropertyRenamingPolicy.ALL_UNQUOTED",
    ),
    _flag(
        "MOVE_FUNCTION_DECLARATIONS",
        "rewrite_global_declarations_for_try_catch_wrapping",
        ParamGroup.OPTIMIZATION,
        hint="options.rewrite_global_declarations_for_try_catch_wrapping = True",
    ),
    _flag("GENERATE_EXPORTS", "generate_exports", ParamGroup.MISC),
    _flag(
        "ALLOW_LOCAL_EXPORTS",
        "export_local_property_definitions",
        ParamGroup.MISC,
        hint="options.export_local_property_definitions = True",
    ),
    CompilationParam(
        name="SYNTHETIC_BLOCK_MARKER",
        group=ParamGroup.OPTIMIZATION,
        apply_hint=(
            'options.synthetic_block_start_marker = "start"; '
            'options.synthetic_block_end_marker = "end"'
        ),
        apply_fn=_synthetic_block_marker,
    ),
    # =====================================================================
    # Special passes
    # =====================================================================
    _flag("ANGULAR_PASS", "angular_pass", ParamGroup.SPECIAL_PASSES, introspect=False),
    _flag("CHROME_PASS", "chrome_pass", ParamGroup.SPECIAL_PASSES, introspect=False),
    _flag("CLOSURE_PASS", "closure_pass", ParamGroup.SPECIAL_PASSES, default=True),
    CompilationParam(
        name="POLYMER_PASS",
        group=ParamGroup.SPECIAL_PASSES,
        apply_hint="options.polymer_version = 1",
        apply_fn=_polymer_pass,
    ),
    # =====================================================================
    # Other
    # =====================================================================
    _flag("GENERATE_PSEUDO_NAMES", "generate_pseudo_names", ParamGroup.MISC),
    _flag("CONTINUE_AFTER_ERRORS", "continue_after_errors", ParamGroup.MISC, introspect=False),
    _flag(
        "PRESERVE_DETAILED_SOURCE_INFO",
        "preserve_detailed_source_info",
        ParamGroup.MISC,
        introspect=False,
    ),
    _choice(
        "PRESERVE_FULL_JSDOC_DESCRIPTIONS",
        "parse_jsdoc_documentation",
        JsDocParsing.INCLUDE_DESCRIPTIONS_NO_WHITESPACE,
        JsDocParsing.TYPES_ONLY,
        group=ParamGroup.MISC,
        introspect=False,
        hint=(
            "options.parse_jsdoc_documentation = "
            "JsDocParsing.INCLUDE_DESCRIPTIONS_NO_WHITESPACE"
        ),
    ),
    _flag(
        "PRESERVE_TYPE_ANNOTATIONS",
        "preserve_type_annotations",
        ParamGroup.MISC,
        default=True,
        introspect=False,
    ),
    _flag("PRETTY_PRINT", "pretty_print", ParamGroup.MISC, default=True, introspect=False),
)
