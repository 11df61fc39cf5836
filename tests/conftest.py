"""Pytest configuration and fixtures for the compilation parameter tests."""

import pytest

from jscomp_options import CompilerOptions
from jscomp_params.registry import ParameterRegistry, build_default_registry


@pytest.fixture
def registry() -> ParameterRegistry:
    """A freshly built registry with the full catalog."""
    return build_default_registry()


@pytest.fixture
def options() -> CompilerOptions:
    """Unconfigured compiler options."""
    return CompilerOptions()
