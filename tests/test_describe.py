"""Unit tests for catalog descriptions."""

import json

from jscomp_params.describe import (
    ParamDescription,
    RegistryDescription,
    describe_param,
    describe_registry,
)
from jscomp_params.models import ParamGroup


class TestDescribeParam:
    def test_fields(self, registry):
        desc = describe_param(registry.lookup("CHECKS_ONLY"))
        assert desc.name == "CHECKS_ONLY"
        assert desc.group == ParamGroup.ERROR_CHECKING
        assert desc.group_display_name == "Lint and Error Checking"
        assert desc.default_value is False
        assert desc.introspectable is False
        assert "OutputJs.SENTINEL" in desc.apply_hint

    def test_json_carries_hint(self, registry):
        payload = json.loads(describe_param(registry.lookup("VARIABLE_RENAMING")).to_json())
        assert payload["group_display_name"] == "Optimization"
        assert payload["apply_hint"] == "options.variable_renaming = VariableRenamingPolicy.ALL"

    def test_json_missing_hint_is_null(self, registry):
        payload = json.loads(describe_param(registry.lookup("FOLD_CONSTANTS")).to_json())
        assert payload["apply_hint"] is None

    def test_description_is_data_only(self):
        assert not hasattr(ParamDescription, "to_text")


class TestDescribeRegistry:
    def test_groups_in_enum_order(self, registry):
        desc = describe_registry(registry)
        assert [g.group for g in desc.groups] == list(ParamGroup)
        assert [g.display_name for g in desc.groups][-1] == "Other"

    def test_covers_every_parameter_once(self, registry):
        names = [p.name for p in describe_registry(registry).all_params()]
        assert sorted(names) == sorted(registry.names())

    def test_json_is_plain_data(self, registry):
        payload = json.loads(describe_registry(registry).to_json())
        first = payload["groups"][0]["params"][0]
        assert first == {
            "name": "ENABLE_ALL_DIAGNOSTIC_GROUPS",
            "group": "error_checking",
            "group_display_name": "Lint and Error Checking",
            "default_value": False,
            "apply_hint": "Sets every registered DiagnosticGroup to CheckLevel.WARNING",
            "introspectable": False,
        }

    def test_json_loads_back(self, registry):
        desc = describe_registry(registry)
        assert RegistryDescription.model_validate_json(desc.to_json()) == desc

    def test_default_registry(self):
        assert len(describe_registry().all_params()) == 71
