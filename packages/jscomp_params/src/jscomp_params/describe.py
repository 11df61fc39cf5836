"""Descriptions of the parameter catalog for front ends and debugging.

These models carry everything a form of toggles needs: names, groups with
their display names, defaults, apply hints and whether the current state can
be read back. They describe the catalog only; they hold no chosen values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from jscomp_params.models import CompilationParam, ParamGroup
from jscomp_params.registry import default_registry

if TYPE_CHECKING:
    from jscomp_params.registry import ParameterRegistry


class ParamDescription(BaseModel):
    name: str
    group: ParamGroup
    group_display_name: str
    default_value: bool
    apply_hint: str | None
    introspectable: bool

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)


class GroupDescription(BaseModel):
    group: ParamGroup
    display_name: str
    params: list[ParamDescription]


class RegistryDescription(BaseModel):
    """All groups in enum order, each with its parameters in declaration order."""

    groups: list[GroupDescription]

    def all_params(self) -> list[ParamDescription]:
        return [p for g in self.groups for p in g.params]

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)


def describe_param(param: CompilationParam) -> ParamDescription:
    return ParamDescription(
        name=param.name,
        group=param.group,
        group_display_name=param.group.display_name,
        default_value=param.default_value,
        apply_hint=param.apply_hint,
        introspectable=param.introspectable,
    )


def describe_registry(registry: ParameterRegistry | None = None) -> RegistryDescription:
    if registry is None:
        registry = default_registry()
    return RegistryDescription(
        groups=[
            GroupDescription(
                group=group,
                display_name=group.display_name,
                params=[describe_param(p) for p in params],
            )
            for group, params in registry.by_group().items()
        ]
    )
