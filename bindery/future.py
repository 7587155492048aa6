from __future__ import annotations

import asyncio
import functools

import tenacity
from result import Err, Ok

from . import t
from .func import Monad, ValT

# Tasks started by onComplete(); held here until they finish
# so the event loop's weak references aren't the only ones.
_running: set[asyncio.Task] = set()


def isOk(x: t.Any) -> t.TypeGuard[Ok]:
    return isinstance(x, Ok)


def isErr(x: t.Any) -> t.TypeGuard[Err]:
    return isinstance(x, Err)


class Deferred(Monad[ValT]):
    """
    A value that will show up later, from some asynchronous work.

    Wraps a zero-argument callable that returns a fresh awaitable.
    Nothing runs until the Deferred is awaited, run with get(),
    or started with onComplete(); every one of those runs the work anew.

    bind() and map() build a new Deferred that runs this one first,
    then feeds its value onward, so two async calls where the second
    needs the first's answer can be chained without nesting callbacks.
    """

    def __init__(self, factory: t.AwaitableFactoryT) -> None:
        super().__init__(factory)

    @classmethod
    def unit(cls, val: t.Any) -> Deferred[t.Any]:
        async def ready() -> t.Any:
            return val

        return cls(ready)

    async def run(self) -> ValT:
        return await self.__val__()

    def __await__(self) -> t.Generator[t.Any, None, ValT]:
        return self.run().__await__()

    def get(self) -> ValT:
        return asyncio.run(self.run())

    def extract(self) -> ValT:
        return self.get()

    def bind(self, fn: t.Callable[[ValT], Deferred[t.Any]]) -> Deferred[t.Any]:
        async def chained() -> t.Any:
            val = await self.run()
            return await fn(val).run()

        return Deferred(chained)

    def map(self, fn: t.Callable[[ValT], t.Any]) -> Deferred[t.Any]:
        async def mapped() -> t.Any:
            return fn(await self.run())

        return Deferred(mapped)

    def retrying(self, attempts: int = 3, wait: t.Any = None) -> Deferred[ValT]:
        if attempts < 1:
            raise ValueError(f"Need at least one attempt, got {attempts}.")
        retryer = tenacity.AsyncRetrying(
            reraise=True,
            stop=tenacity.stop_after_attempt(attempts),
            wait=wait if wait is not None else tenacity.wait_none(),
        )

        async def retried() -> t.Any:
            return await retryer(self.run)

        return Deferred(retried)

    def onComplete(self, callback: t.Callable[[t.OutcomeT], t.Any]) -> asyncio.Task:
        # Must be called with a running event loop.
        task = asyncio.get_running_loop().create_task(self.run())
        _running.add(task)

        def done(task: asyncio.Task) -> None:
            _running.discard(task)
            callback(outcome(task))

        task.add_done_callback(done)
        return task

    def __eq__(self, other: t.Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        name = getattr(self.__val__, "__qualname__", repr(self.__val__))
        return f"Deferred({name})"


def outcome(task: asyncio.Task) -> t.OutcomeT:
    if task.cancelled():
        return Err(asyncio.CancelledError())
    exc = task.exception()
    if exc is not None:
        return Err(exc)
    return Ok(task.result())


def deferred(fn: t.Callable[..., t.Awaitable[t.Any]]) -> t.Callable[..., Deferred[t.Any]]:
    """
    Turns an async function into one that returns a Deferred
    instead of a coroutine. The call's arguments are captured;
    the function body runs each time the Deferred does.
    """

    @functools.wraps(fn)
    def wrapper(*args: t.Any, **kwargs: t.Any) -> Deferred[t.Any]:
        return Deferred(lambda: fn(*args, **kwargs))

    return wrapper


async def sameOutcome(a: Deferred[t.Any], b: Deferred[t.Any]) -> bool:
    return bool(await a == await b)
