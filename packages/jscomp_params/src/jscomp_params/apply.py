"""Apply whole parameter sets to CompilerOptions and read them back."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jscomp_params.registry import ParameterRegistry, UnknownParameterError, default_registry

if TYPE_CHECKING:
    from collections.abc import Mapping

    from jscomp_options import CompilerOptions

logger = logging.getLogger(__name__)


def apply_values(
    options: CompilerOptions,
    values: Mapping[str, bool],
    registry: ParameterRegistry | None = None,
) -> None:
    """Apply ``values`` (parameter name → bool) to ``options``.

    Names are validated before anything is applied, so an unknown name leaves
    the options untouched. Parameters are applied in catalog declaration
    order regardless of the mapping's order, which keeps the outcome
    deterministic when two parameters write the same field.
    """
    if registry is None:
        registry = default_registry()
    for name in values:
        if name not in registry:
            raise UnknownParameterError(name)

    for param in registry:
        if param.name in values:
            param.apply(options, values[param.name])
    logger.debug("Applied %d compilation parameters", len(values))


def apply_defaults(options: CompilerOptions, registry: ParameterRegistry | None = None) -> None:
    """Apply every parameter at its declared default value."""
    if registry is None:
        registry = default_registry()
    apply_values(options, default_values(registry), registry)


def default_values(registry: ParameterRegistry | None = None) -> dict[str, bool]:
    if registry is None:
        registry = default_registry()
    return {param.name: param.default_value for param in registry}


def snapshot(
    options: CompilerOptions, registry: ParameterRegistry | None = None
) -> dict[str, bool | None]:
    """Read back the state of every parameter.

    Parameters that cannot be read back from the options map to None rather
    than False, so a form pre-populated from the snapshot can tell "off"
    apart from "unknown".
    """
    if registry is None:
        registry = default_registry()
    return {param.name: param.applied_state(options) for param in registry}
