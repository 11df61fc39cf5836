"""Hypothesis strategies for compilation parameters and compiler options."""

from hypothesis import strategies as st

from jscomp_options import CompilerOptions
from jscomp_options.levels import LEVELS
from jscomp_params.registry import build_default_registry

REGISTRY = build_default_registry()

param_names = st.sampled_from(REGISTRY.names())

introspectable_params = st.sampled_from([p for p in REGISTRY if p.introspectable])

all_params = st.sampled_from(list(REGISTRY))

param_values = st.dictionaries(param_names, st.booleans())


@st.composite
def compiler_options(draw):
    """Options reached by an optional compilation level followed by arbitrary toggles."""
    options = CompilerOptions()
    level = draw(st.sampled_from([None, *LEVELS.values()]))
    if level is not None:
        level.set_options_for_level(options)
    for name, value in draw(param_values).items():
        REGISTRY.lookup(name).apply(options, value)
    return options
