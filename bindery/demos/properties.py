from __future__ import annotations

from .. import messages as m
from ..listm import ListM

numbers = ListM([1, 2, 3])


def twoConsecutive(x: int) -> ListM[int]:
    return ListM([x, x + 1])


# twoConsecutive(3) is ListM([3, 4]),
# and so is ListM.unit(3).bind(twoConsecutive): left identity.
# ListM([1, 2, 3]).bind(ListM.unit) gives back ListM([1, 2, 3]): right identity.


def incrementer(x: int) -> ListM[int]:
    return ListM([x, x + 1])


def doubler(x: int) -> ListM[int]:
    return ListM([x, x * 2])


def run() -> None:
    # Associativity: both print [1, 2, 2, 4, 2, 4, 3, 6, 3, 6, 4, 8].
    #   incrementer(1).bind(doubler) -- 1, 2, 2, 4
    #   incrementer(2).bind(doubler) -- 2, 4, 3, 6
    #   incrementer(3).bind(doubler) -- 3, 6, 4, 8
    m.say(str(numbers.bind(incrementer).bind(doubler).toList()))
    m.say(str(numbers.bind(lambda x: incrementer(x).bind(doubler)).toList()))
