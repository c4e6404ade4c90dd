from collections.abc import Callable
from typing import TypeVar

_T = TypeVar('_T')


def constant(value: _T, /) -> Callable[[], _T]:
    def result() -> _T:
        return value

    return result


def identity(value: _T, /) -> _T:
    return value
