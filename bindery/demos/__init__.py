from __future__ import annotations

from .. import constants, t
from . import census, checkerboard, properties, store, wrapping

if t.TYPE_CHECKING:
    DemoT: t.TypeAlias = t.Callable[[], None]

# In the order `bindery demo --all` runs them.
DEMOS: dict[str, DemoT] = {
    "wrapping": wrapping.run,
    "census": census.run,
    "store": store.run,
    "checkerboard": checkerboard.run,
    "properties": properties.run,
}


def runDemo(
    name: str,
    vatRate: float = constants.vatRate,
    attempts: int = constants.fetchAttempts,
) -> None:
    # Only the store demo has settings.
    if name == "store":
        store.run(vatRate=vatRate, attempts=attempts)
    else:
        DEMOS[name]()
