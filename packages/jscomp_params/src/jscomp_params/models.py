"""Parameter groups and the CompilationParam descriptor."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from jscomp_options import CompilerOptions

ApplyFn = Callable[[CompilerOptions, bool], None]
IsAppliedFn = Callable[[CompilerOptions], bool]


class ParamGroup(StrEnum):
    """Fixed categories used to present parameters together."""

    ERROR_CHECKING = "error_checking"
    TRANSPILATION = "transpilation"
    OPTIMIZATION = "optimization"
    SPECIAL_PASSES = "special_passes"
    MISC = "misc"

    @property
    def display_name(self) -> str:
        return _GROUP_DISPLAY_NAMES[self]


_GROUP_DISPLAY_NAMES: dict[ParamGroup, str] = {
    ParamGroup.ERROR_CHECKING: "Lint and Error Checking",
    ParamGroup.TRANSPILATION: "Transpilation",
    ParamGroup.OPTIMIZATION: "Optimization",
    ParamGroup.SPECIAL_PASSES: "Specialized Passes",
    ParamGroup.MISC: "Other",
}


class CompilationParam(BaseModel):
    """A named boolean toggle that knows how to apply itself to CompilerOptions.

    ``apply_fn`` performs the mutation. ``is_applied_fn`` reads the state back
    and is None when the options offer no way to tell whether the parameter is
    in effect. In that case ``is_applied`` answers False, meaning "not
    tracked", and ``applied_state`` answers None.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    group: ParamGroup
    default_value: bool = False
    apply_hint: str | None = None
    apply_fn: ApplyFn = Field(exclude=True, repr=False)
    is_applied_fn: IsAppliedFn | None = Field(default=None, exclude=True, repr=False)

    def __str__(self) -> str:
        return self.name

    @property
    def introspectable(self) -> bool:
        return self.is_applied_fn is not None

    def apply(self, options: CompilerOptions, value: bool) -> None:
        self.apply_fn(options, value)

    def is_applied(self, options: CompilerOptions) -> bool:
        if self.is_applied_fn is None:
            return False
        return bool(self.is_applied_fn(options))

    def applied_state(self, options: CompilerOptions) -> bool | None:
        if self.is_applied_fn is None:
            return None
        return bool(self.is_applied_fn(options))

    def get_default_value(self) -> bool:
        return self.default_value

    def get_apply_hint(self) -> str | None:
        return self.apply_hint
