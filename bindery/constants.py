from __future__ import annotations

# Defaults for the store demo; `bindery demo` flags pass overrides
# down as arguments instead of changing these.

# Multiplier applied to an order's price.
vatRate: float = 1.19
# How many times each sample fetch is tried.
fetchAttempts: int = 3
