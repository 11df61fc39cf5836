"""Environment-driven settings for applications that embed the parameter registry.

Values are read from ``JSCOMP_PARAMS_*`` environment variables:

- ``JSCOMP_PARAMS_LOG_LEVEL``: level passed to ``configure_logging``
- ``JSCOMP_PARAMS_OVERRIDES``: JSON object of parameter name → bool that
  replaces catalog defaults, e.g. ``{"CHECK_LINT": true, "PRETTY_PRINT": false}``
"""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jscomp_params.apply import default_values
from jscomp_params.registry import ParameterRegistry, UnknownParameterError, default_registry


class ParamSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="JSCOMP_PARAMS_")

    log_level: str = Field(default="WARNING", description="Logging level for configure_logging")
    overrides: dict[str, bool] = Field(
        default_factory=dict,
        description="Parameter values that replace the catalog defaults",
    )


def resolve_values(
    settings: ParamSettings, registry: ParameterRegistry | None = None
) -> dict[str, bool]:
    """Return the value of every parameter: catalog defaults with settings overrides on top."""
    if registry is None:
        registry = default_registry()
    for name in settings.overrides:
        if name not in registry:
            raise UnknownParameterError(name)

    values = default_values(registry)
    values.update(settings.overrides)
    return values


def configure_logging(settings: ParamSettings | None = None) -> None:
    if settings is None:
        settings = ParamSettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
