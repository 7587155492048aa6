from __future__ import annotations

import functools
import inspect

from . import t

MonadT = t.TypeVar("MonadT")


def do(monadClass: t.Type[MonadT]) -> t.Callable[[t.ComprehensionT], t.Callable[..., MonadT]]:
    """
    Comprehension sugar for any monad with unit() and bind().

    Decorate a generator function; every `x = yield m` binds m,
    and `return v` wraps v with monadClass.unit():

        @do(Option)
        def person(first, last):
            fName = yield Option.of(first)
            lName = yield Option.of(last)
            return Person(fName, lName)

    Python generators can't be resumed twice from the same point,
    so each bind replays the generator from the start,
    sending back the values seen so far.
    The generator must therefore be free of side effects:
    with ListM, it runs once per branch.

    The decorated function returns a monadClass instance,
    and its return annotation says so.
    """

    def decorator(fn: t.ComprehensionT) -> t.Callable[..., MonadT]:
        if not inspect.isgeneratorfunction(fn):
            raise TypeError(f"@do() needs a generator function, got {fn!r}.")

        @functools.wraps(fn)
        def wrapper(*args: t.Any, **kwargs: t.Any) -> MonadT:
            def step(history: list[t.Any]) -> t.Any:
                gen = fn(*args, **kwargs)
                try:
                    wrapped = next(gen)
                    for val in history:
                        wrapped = gen.send(val)
                except StopIteration as e:
                    return monadClass.unit(e.value)
                return wrapped.bind(lambda val: step([*history, val]))

            return step([])

        wrapper.__annotations__ = {**fn.__annotations__, "return": monadClass}
        return wrapper

    return decorator
