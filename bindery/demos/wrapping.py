from __future__ import annotations

from .. import messages as m
from ..func import SafeValue


# Stands in for some external API that hands back wrapped values.
def gimmeSafeValue(value: str) -> SafeValue[str]:
    return SafeValue.unit(value)


def run() -> None:
    safeString = gimmeSafeValue("Python is awesome")

    # extract
    string = safeString.get()
    # transform
    upperString = string.upper()
    # wrap
    upperSafeString = SafeValue(upperString)
    m.say(f"Extract, transform, wrap: {upperSafeString!r}")

    # ETW, in one step
    upperSafeString2 = safeString.bind(lambda s: SafeValue(s.upper()))
    m.say(f"Bound in one step: {upperSafeString2!r}")
    m.say(f"Same result: {upperSafeString == upperSafeString2}")
