"""Symbols the compiler deliberately does NOT polyfill.

Each entry is registered with a null implementation, so the polyfill
injector knows the symbol and skips it instead of reporting it missing.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NoPolyfill:
    symbol: str
    reason: str
    # Language range the suppression applies to
    from_lang: str = "es6"
    to_lang: str = "es6"


NO_POLYFILLS: tuple[NoPolyfill, ...] = (
    NoPolyfill(
        symbol="Proxy",
        reason="Pre-ES6 JS lacks the hooks needed to build it",
    ),
    # Transpilation of `.raw` on tagged template arguments exists now, so a
    # polyfill could be written.
    NoPolyfill(
        symbol="String.raw",
        reason="Not yet implemented",
    ),
    NoPolyfill(
        symbol="String.prototype.normalize",
        reason="Would require a large table of unicode data",
    ),
)


def get_no_polyfill(symbol: str) -> NoPolyfill | None:
    for entry in NO_POLYFILLS:
        if entry.symbol == symbol:
            return entry
    return None


def is_polyfill_suppressed(symbol: str) -> bool:
    return get_no_polyfill(symbol) is not None
