from __future__ import annotations

from .. import messages as m
from .. import t
from ..do import do
from ..listm import ListM

numbers = [1, 2, 3]
chars = ["a", "b", "c"]


def checkerboardBound(numbers: list[int], chars: list[str]) -> ListM[tuple[int, str]]:
    return ListM(numbers).bind(lambda number: ListM(chars).map(lambda char: (number, char)))


def checkerboardComprehension(numbers: list[int], chars: list[str]) -> list[tuple[int, str]]:
    # Nested bind()s are exactly what a two-level comprehension does.
    return [(number, char) for number in numbers for char in chars]


@do(ListM)
def checkerboardFor(numbers: list[int], chars: list[str]) -> t.Generator[ListM[t.Any], t.Any, tuple[int, str]]:
    number = yield ListM(numbers)
    char = yield ListM(chars)
    return (number, char)


def run() -> None:
    m.say(f"bind/map: {checkerboardBound(numbers, chars).toList()}")
    m.say(f"comprehension: {checkerboardComprehension(numbers, chars)}")
    m.say(f"do: {checkerboardFor(numbers, chars).toList()}")
