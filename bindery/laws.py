from __future__ import annotations

import asyncio
import dataclasses
import operator

from . import t
from .func import SafeValue
from .future import Deferred, sameOutcome
from .listm import ListM
from .option import Nothing, Option

# Any monad has to satisfy these three:
#
# 1. Left identity: unit(x).bind(f) == f(x)
#    Wrapping a value just to bind it is the same as calling f.
#
# 2. Right identity: m.bind(unit) == m
#    Binding to unit() does nothing.
#
# 3. Associativity: m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))
#    A chain of binds can be regrouped freely.


def leftIdentity(
    unit: t.Callable[[t.Any], t.Any],
    x: t.Any,
    fn: t.Callable[[t.Any], t.Any],
    eq: t.Callable[[t.Any, t.Any], bool] = operator.eq,
) -> bool:
    return bool(eq(unit(x).bind(fn), fn(x)))


def rightIdentity(
    unit: t.Callable[[t.Any], t.Any],
    m: t.Any,
    eq: t.Callable[[t.Any, t.Any], bool] = operator.eq,
) -> bool:
    return bool(eq(m.bind(unit), m))


def associativity(
    m: t.Any,
    f: t.Callable[[t.Any], t.Any],
    g: t.Callable[[t.Any], t.Any],
    eq: t.Callable[[t.Any, t.Any], bool] = operator.eq,
) -> bool:
    return bool(eq(m.bind(f).bind(g), m.bind(lambda x: f(x).bind(g))))


@dataclasses.dataclass
class LawCase:
    name: str
    unit: t.Callable[[t.Any], t.Any]
    # Plain values, fed to unit() for left identity.
    values: list[t.Any]
    # Already-wrapped values, for right identity and associativity.
    monads: list[t.Any]
    f: t.Callable[[t.Any], t.Any]
    g: t.Callable[[t.Any], t.Any]
    eq: t.Callable[[t.Any, t.Any], bool] = operator.eq


def verify(case: LawCase) -> list[str]:
    broken = []
    if not all(leftIdentity(case.unit, x, case.f, case.eq) for x in case.values):
        broken.append("left identity")
    if not all(rightIdentity(case.unit, m, case.eq) for m in case.monads):
        broken.append("right identity")
    if not all(associativity(m, case.f, case.g, case.eq) for m in case.monads):
        broken.append("associativity")
    return broken


def deferredEqual(a: Deferred[t.Any], b: Deferred[t.Any]) -> bool:
    return asyncio.run(sameOutcome(a, b))


def standardCases() -> list[LawCase]:
    def halveEvens(x: int) -> Option[int]:
        return Option.of(x // 2 if x % 2 == 0 else None)

    def positive(x: int) -> Option[int]:
        return Option.of(x if x > 0 else None)

    return [
        LawCase(
            name="SafeValue",
            unit=SafeValue.unit,
            values=[0, 7, "monad"],
            monads=[SafeValue(0), SafeValue(7), SafeValue(-3)],
            f=lambda x: SafeValue(x * 2),
            g=lambda x: SafeValue(x + 1),
        ),
        LawCase(
            name="Option",
            unit=Option.unit,
            values=[0, 3, 4, -8],
            monads=[Option.of(4), Option.of(3), Option.of(-8), Nothing],
            f=halveEvens,
            g=positive,
        ),
        LawCase(
            name="ListM",
            unit=ListM.unit,
            values=[0, 1, 5],
            monads=[ListM([1, 2, 3]), ListM([]), ListM([4])],
            f=lambda x: ListM([x, x + 1]),
            g=lambda x: ListM([x, x * 2]),
        ),
        LawCase(
            name="Deferred",
            unit=Deferred.unit,
            values=[0, 99.99],
            monads=[Deferred.unit(1), Deferred.unit(-2.5)],
            f=lambda x: Deferred.unit(x * 1.19),
            g=lambda x: Deferred.unit(round(x, 2)),
            eq=deferredEqual,
        ),
    ]
