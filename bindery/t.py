# pylint: skip-file
# Module for holding types, for easy importing into the rest of the codebase
from __future__ import annotations

# The only things that should be available during runtime.
from typing import TYPE_CHECKING, Generic, TypeVar, cast

if TYPE_CHECKING:
    from typing import (
        Any,
        Awaitable,
        Callable,
        Generator,
        Iterable,
        Iterator,
        Type,
        TypeAlias,
        TypeGuard,
    )

    from typing_extensions import Self

# pylint: disable=wrong-import-position

if TYPE_CHECKING:
    from result import Result

    # What a Deferred wraps: something you can call to get a fresh awaitable.
    AwaitableFactoryT: TypeAlias = Callable[[], Awaitable[Any]]

    # What onComplete() hands to its callback.
    OutcomeT: TypeAlias = Result[Any, BaseException]

    # A generator function usable with @do(...).
    ComprehensionT: TypeAlias = Callable[..., Generator[Any, Any, Any]]

    from .demos import DemoT
