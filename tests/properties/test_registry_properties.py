"""Property-based tests for the parameter registry and the apply/introspect protocol."""

from __future__ import annotations

from collections import Counter

from hypothesis import given, settings
from hypothesis import strategies as st

from jscomp_options import CheckLevel, registered_groups
from jscomp_params.apply import apply_values, snapshot
from jscomp_params.models import CompilationParam, ParamGroup
from jscomp_params.registry import ParameterRegistry
from .strategies import (
    REGISTRY,
    all_params,
    compiler_options,
    introspectable_params,
    param_values,
)


def _noop(options, value):
    pass


# =========================================================================
# Registry structure
# =========================================================================


def test_names_are_unique():
    counts = Counter(p.name for p in REGISTRY)
    assert all(n == 1 for n in counts.values())


def test_sorted_view_is_sorted_permutation():
    sorted_params = REGISTRY.all_sorted()
    assert Counter(p.name for p in sorted_params) == Counter(REGISTRY.names())
    names = [p.name for p in sorted_params]
    assert all(a < b for a, b in zip(names, names[1:], strict=False))


def test_group_partition_is_complete_and_disjoint():
    grouped = REGISTRY.by_group()
    assert set(grouped) == set(ParamGroup)
    bucketed = [p.name for params in grouped.values() for p in params]
    assert len(bucketed) == len(set(bucketed)) == len(REGISTRY)
    for group, params in grouped.items():
        assert all(p.group == group for p in params)


@settings(max_examples=50)
@given(
    specs=st.lists(
        st.tuples(
            st.text(min_size=1, max_size=8),
            st.sampled_from(list(ParamGroup)),
        ),
        unique_by=lambda spec: spec[0],
        max_size=20,
    )
)
def test_arbitrary_registries_keep_view_invariants(specs: list[tuple[str, ParamGroup]]):
    """Sorting and grouping hold for any set of uniquely named parameters."""
    params = [CompilationParam(name=n, group=g, apply_fn=_noop) for n, g in specs]
    registry = ParameterRegistry(params)

    assert [p.name for p in registry.all_sorted()] == sorted(n for n, _ in specs)

    grouped = registry.by_group()
    assert list(grouped) == list(ParamGroup)
    for group in ParamGroup:
        # Declaration order within a group
        assert [p.name for p in grouped[group]] == [n for n, g in specs if g == group]


@settings(max_examples=20)
@given(param=all_params)
def test_default_value_is_stable(param: CompilationParam):
    first = param.get_default_value()
    assert all(param.get_default_value() is first for _ in range(5))
    assert REGISTRY.lookup(param.name).default_value is first


# =========================================================================
# Apply / introspect
# =========================================================================


@settings(max_examples=100)
@given(param=introspectable_params, options=compiler_options(), value=st.booleans())
def test_apply_then_is_applied_round_trips(param: CompilationParam, options, value: bool):
    param.apply(options, value)
    assert param.is_applied(options) is value
    assert param.applied_state(options) is value


@settings(max_examples=100)
@given(param=all_params, options=compiler_options(), value=st.booleans())
def test_apply_never_raises(param: CompilationParam, options, value: bool):
    param.apply(options, value)
    if not param.introspectable:
        assert param.is_applied(options) is False
        assert param.applied_state(options) is None


@settings(max_examples=50)
@given(options=compiler_options())
def test_enable_all_diagnostic_groups(options):
    param = REGISTRY.lookup("ENABLE_ALL_DIAGNOSTIC_GROUPS")

    before = options.model_dump()
    param.apply(options, False)
    assert options.model_dump() == before

    param.apply(options, True)
    for group in registered_groups():
        assert options.get_warning_level(group) == CheckLevel.WARNING


@settings(max_examples=50)
@given(options=compiler_options(), values=param_values)
def test_snapshot_matches_applied_values(options, values: dict[str, bool]):
    apply_values(options, values, REGISTRY)
    state = snapshot(options, REGISTRY)
    # No two introspectable parameters write the same field
    for name, value in values.items():
        if REGISTRY.lookup(name).introspectable:
            assert state[name] is value
        else:
            assert state[name] is None
