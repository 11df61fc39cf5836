"""Compilation parameters - a fixed catalog of boolean toggles over CompilerOptions.

Quick Start:
    from jscomp_options import CompilerOptions
    from jscomp_params import default_registry

    registry = default_registry()
    options = CompilerOptions()

    check_types = registry.lookup("CHECK_TYPES")
    check_types.apply(options, True)
    assert check_types.is_applied(options)

    for group, params in registry.by_group().items():
        print(group.display_name, [p.name for p in params])
"""

from jscomp_params.apply import apply_defaults, apply_values, default_values, snapshot
from jscomp_params.models import CompilationParam, ParamGroup
from jscomp_params.registry import (
    DuplicateParameterError,
    ParameterRegistry,
    UnknownParameterError,
    build_default_registry,
    default_registry,
)

__version__ = "0.1.0"

__all__ = [
    "CompilationParam",
    "DuplicateParameterError",
    "ParamGroup",
    "ParameterRegistry",
    "UnknownParameterError",
    "apply_defaults",
    "apply_values",
    "build_default_registry",
    "default_registry",
    "default_values",
    "snapshot",
]
