from __future__ import annotations

from result import Err, Ok

from . import t
from .func import Monad, ValT


class NoValueError(LookupError):
    pass


class Option(Monad[ValT]):
    """
    A value that might not be there.

    Use Option.of() at the boundary with code that signals absence with None;
    from then on, bind() and map() skip over the missing case for you,
    so a chain of lookups stops at the first one that came up empty.

    Calling Option(x) directly follows the same rule as Option.of(x),
    and hands back a Some or Nothing, never a bare Option.

    Option.unit() always produces a Some, even for None,
    because unit() has to wrap its argument verbatim for the monad laws to hold.
    """

    def __new__(cls, val: t.Any = None) -> t.Any:
        if cls is Option:
            return Option.of(val)
        return super().__new__(cls)

    @classmethod
    def unit(cls, val: t.Any) -> Option[t.Any]:
        return Some(val)

    @staticmethod
    def of(val: t.Any) -> Option[t.Any]:
        if val is None:
            return Nothing
        return Some(val)

    def isEmpty(self) -> bool:
        return self is Nothing

    def getOrElse(self, default: t.Any) -> t.Any:
        if self.isEmpty():
            return default
        return self.get()

    def orElse(self, alternative: Option[t.Any]) -> Option[t.Any]:
        if self.isEmpty():
            return alternative
        return self

    def filter(self, predicate: t.Callable[[ValT], bool]) -> Option[ValT]:
        return self.bind(lambda val: self if predicate(val) else Nothing)

    def toResult(self, error: t.Any) -> t.Any:
        if self.isEmpty():
            return Err(error)
        return Ok(self.get())

    def __bool__(self) -> bool:
        return not self.isEmpty()

    def __iter__(self) -> t.Iterator[ValT]:
        if not self.isEmpty():
            yield self.get()


class Some(Option[ValT]):
    pass


class NothingType(Option):
    _instance: NothingType | None = None

    def __new__(cls) -> NothingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, val: None = None) -> None:
        super().__init__(None)

    def extract(self) -> t.Any:
        raise NoValueError("Nothing has no value to get.")

    def bind(self, fn: t.Callable[[t.Any], t.Any]) -> NothingType:
        return self

    def map(self, fn: t.Callable[[t.Any], t.Any]) -> NothingType:
        return self

    def __eq__(self, other: t.Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return hash(NothingType)

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> str:
        return "Nothing"


Nothing = NothingType()
