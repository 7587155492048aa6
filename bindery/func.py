from __future__ import annotations

from . import t

ValT = t.TypeVar("ValT")
OtherT = t.TypeVar("OtherT")


class Functor(t.Generic[ValT]):
    # Pointed and Co-Pointed by default;
    # override these yourself if you need to.
    def __init__(self, val: ValT) -> None:
        object.__setattr__(self, "__val__", val)

    def extract(self) -> ValT:
        return self.__val__

    def map(self, fn: t.Callable[[ValT], OtherT]) -> Functor[OtherT]:
        return self.__class__(fn(self.__val__))

    def __setattr__(self, name: str, value: t.Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; can't set '{name}'.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; can't delete '{name}'.")

    def __eq__(self, other: t.Any) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return bool(self.__val__ == other.__val__)

    def __hash__(self) -> int:
        return hash((type(self), self.__val__))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__val__!r})"


class Monad(Functor[ValT]):
    """
    A Functor that can also sequence computations.

    unit() wraps a plain value; bind() hands the wrapped value
    to a function that returns another wrapper of the same kind,
    and returns that wrapper as-is, rather than wrapping it again.
    Together they satisfy the three laws checked in laws.py.
    """

    @classmethod
    def unit(cls, val: t.Any) -> t.Self:
        return cls(val)

    def get(self) -> ValT:
        return self.extract()

    def bind(self, fn: t.Callable[[ValT], t.Any]) -> t.Any:
        return fn(self.__val__)

    def flatMap(self, fn: t.Callable[[ValT], t.Any]) -> t.Any:
        return self.bind(fn)

    def map(self, fn: t.Callable[[ValT], OtherT]) -> t.Any:
        return self.bind(lambda val: self.unit(fn(val)))


class SafeValue(Monad[ValT]):
    """
    Holds exactly one value, which never changes.

    Reading the value needs no locking, since there's nothing to race on.
    """
