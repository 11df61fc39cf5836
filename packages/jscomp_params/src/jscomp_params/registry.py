"""Parameter Registry: the fixed, read-only collection of compilation parameters."""

from __future__ import annotations

import logging
import threading
from operator import attrgetter
from typing import TYPE_CHECKING

from jscomp_params.catalog import CATALOG
from jscomp_params.models import CompilationParam, ParamGroup

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class UnknownParameterError(ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown compilation parameter '{name}'")


class DuplicateParameterError(ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Parameter '{name}' is already registered")


class ParameterRegistry:
    """Registry of compilation parameters.

    Built once from a sequence of parameters and read-only afterwards. The
    alphabetical view and the per-group view are computed at construction,
    so concurrent readers never observe a partially built state.
    """

    def __init__(self, params: Iterable[CompilationParam]) -> None:
        self._entries: dict[str, CompilationParam] = {}
        for param in params:
            if param.name in self._entries:
                raise DuplicateParameterError(param.name)
            self._entries[param.name] = param

        self._sorted = tuple(sorted(self._entries.values(), key=attrgetter("name")))
        # Every group gets a bucket, in enum order, even when empty
        self._grouped: dict[ParamGroup, tuple[CompilationParam, ...]] = {
            group: tuple(p for p in self._entries.values() if p.group == group)
            for group in ParamGroup
        }

    def get(self, name: str) -> CompilationParam | None:
        return self._entries.get(name)

    def lookup(self, name: str) -> CompilationParam:
        """Return the parameter called ``name``; raise UnknownParameterError if absent."""
        param = self._entries.get(name)
        if param is None:
            raise UnknownParameterError(name)
        return param

    def all_sorted(self) -> tuple[CompilationParam, ...]:
        return self._sorted

    def by_group(self) -> dict[ParamGroup, tuple[CompilationParam, ...]]:
        """Map every group to its parameters in declaration order."""
        return dict(self._grouped)

    def list_by_group(self, group: ParamGroup) -> tuple[CompilationParam, ...]:
        return self._grouped[group]

    def names(self) -> list[str]:
        return list(self._entries.keys())

    def __iter__(self) -> Iterator[CompilationParam]:
        return iter(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def build_default_registry() -> ParameterRegistry:
    """Build a registry populated with the full parameter catalog."""
    registry = ParameterRegistry(CATALOG)
    logger.debug(
        "Built parameter registry with %d parameters in %d groups",
        len(registry),
        len(ParamGroup),
    )
    return registry


_default_registry: ParameterRegistry | None = None
_default_registry_lock = threading.Lock()


def default_registry() -> ParameterRegistry:
    """Return the process-wide registry, building it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = build_default_registry()
    return _default_registry
