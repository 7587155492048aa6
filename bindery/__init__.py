from __future__ import annotations

import platform
import sys


def verify_python_version() -> None:
    if sys.version_info < (3, 9):
        print(  # noqa: T201
            """Bindery requires Python 3.9 or higher; you are on {}.""".format(
                platform.python_version(),
            ),
        )
        sys.exit(1)


verify_python_version()

from .cli import main
from .do import do
from .func import Functor, Monad, SafeValue
from .future import Deferred, deferred
from .listm import ListM, flatMap
from .option import Nothing, NoValueError, Option, Some
