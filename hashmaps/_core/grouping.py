from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

_ElementT = TypeVar('_ElementT')
_KeyT = TypeVar('_KeyT', bound=Hashable)


def group_by_unique(
    iterable: Iterable[_ElementT],
    key_function: Callable[[_ElementT], _KeyT],
    /,
) -> dict[_KeyT, _ElementT]:
    """Groups elements by derived key keeping only the last one per key."""
    result: dict[_KeyT, _ElementT] = {}
    for element in iterable:
        result[key_function(element)] = element
    return result
