from __future__ import annotations

import itertools

from . import t
from .func import Monad, ValT


class ListM(Monad[ValT]):
    """
    A list as a monad: bind() is a flat-map.

    Each value is handed to the function, and the lists it returns
    are concatenated in order. Nested bind()s are nested loops.
    """

    def __init__(self, vals: t.Iterable[ValT] = ()) -> None:
        super().__init__(tuple(vals))

    @classmethod
    def unit(cls, val: t.Any) -> ListM[t.Any]:
        return cls([val])

    def extract(self) -> t.Any:
        return list(self.__val__)

    def toList(self) -> list[ValT]:
        return list(self.__val__)

    def bind(self, fn: t.Callable[[ValT], t.Iterable[t.Any]]) -> ListM[t.Any]:
        return ListM(itertools.chain.from_iterable(fn(val) for val in self.__val__))

    def map(self, fn: t.Callable[[ValT], t.Any]) -> ListM[t.Any]:
        return ListM(fn(val) for val in self.__val__)

    def __iter__(self) -> t.Iterator[ValT]:
        return iter(self.__val__)

    def __len__(self) -> int:
        return len(self.__val__)

    def __repr__(self) -> str:
        return f"ListM({list(self.__val__)!r})"


def flatMap(vals: t.Iterable[t.Any], fn: t.Callable[[t.Any], t.Iterable[t.Any]]) -> list[t.Any]:
    return [result for val in vals for result in fn(val)]
