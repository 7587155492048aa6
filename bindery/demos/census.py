from __future__ import annotations

import dataclasses

from result import Err, Ok

from .. import messages as m
from .. import t
from ..do import do
from ..option import Option


@dataclasses.dataclass(frozen=True)
class Person:
    firstName: str
    lastName: str

    def __post_init__(self) -> None:
        assert self.firstName is not None and self.lastName is not None


# Don't do this: every caller has to remember to check for None,
# and a missing name comes back as a silent None with no explanation.
def lookupPersonNaive(firstName: str | None, lastName: str | None) -> Person | None:
    if firstName is not None:
        if lastName is not None:
            return Person(firstName, lastName)
        else:
            return None
    else:
        return None


def lookupPersonBound(firstName: str | None, lastName: str | None) -> Option[Person]:
    return Option.of(firstName).bind(
        lambda fName: Option.of(lastName).bind(
            lambda lName: Option.of(Person(fName, lName)),
        ),
    )


@do(Option)
def lookupPerson(firstName: str | None, lastName: str | None) -> t.Generator[Option[str], str, Person]:
    # The None checks happen inside Option.of().
    fName = yield Option.of(firstName)
    lName = yield Option.of(lastName)
    return Person(fName, lName)


def lookupPersonResult(firstName: str | None, lastName: str | None) -> t.Any:
    return (
        Option.of(firstName)
        .toResult("missing first name")
        .and_then(
            lambda fName: Option.of(lastName)
            .toResult("missing last name")
            .and_then(lambda lName: Ok(Person(fName, lName))),
        )
    )


def describe(result: t.Any) -> str:
    if isinstance(result, Err):
        return f"no person ({result.err()})"
    return f"found {result.ok()}"


def run() -> None:
    for firstName, lastName in [("John", "Doe"), ("John", None), (None, "Doe")]:
        m.say(f"Looking up {firstName!r} {lastName!r}:")
        m.say(f"  nested checks: {lookupPersonNaive(firstName, lastName)!r}")
        m.say(f"  bind: {lookupPersonBound(firstName, lastName)!r}")
        m.say(f"  comprehension: {lookupPerson(firstName, lastName)!r}")
        m.say(f"  result: {describe(lookupPersonResult(firstName, lastName))}")
