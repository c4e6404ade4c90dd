from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, Final, Generic, TypeVar

from typing_extensions import Self

from .functions import identity

DEFAULT_MAP_NAME: Final[str] = 'unknown'

_KeyT = TypeVar('_KeyT')
_ValueT = TypeVar('_ValueT')
_HashedKeyT = TypeVar('_HashedKeyT', bound=Hashable)
_FallbackT = TypeVar('_FallbackT')

_logger = logging.getLogger(__name__)


class MissingKeyError(KeyError):
    @property
    def key(self, /) -> Any:
        return self._key

    @property
    def map_name(self, /) -> str:
        return self._map_name

    def __init__(self, key: Any, map_name: str, /) -> None:
        super().__init__(key, map_name)
        self._key, self._map_name = key, map_name

    def __str__(self, /) -> str:
        return (
            f'Could not find key {self._key!r} '
            f'in HashMap {self._map_name}.'
        )


class HashMap(Generic[_KeyT, _ValueT, _HashedKeyT]):
    """
    Mapping which stores its values under keys produced
    by the given hash function instead of the keys themselves.

    Keys which hash to the same value address the same entry.
    Storage keys which cannot be hashed never address an entry:
    lookups treat them as missing, while `set` raises `TypeError`.
    """

    @classmethod
    def empty(cls, /, *, name: str = DEFAULT_MAP_NAME) -> Self:
        return cls(identity, name=name)

    @classmethod
    def empty_with_custom_hash(
        cls,
        hash_: Callable[[_KeyT], _HashedKeyT],
        /,
        *,
        name: str = DEFAULT_MAP_NAME,
    ) -> Self:
        return cls(hash_, name=name)

    @classmethod
    def from_custom_entries(
        cls,
        entries: Iterable[tuple[_KeyT, _ValueT]],
        hash_: Callable[[_KeyT], _HashedKeyT],
        /,
        *,
        name: str = DEFAULT_MAP_NAME,
    ) -> Self:
        return cls(hash_, _to_hashed_data(entries, hash_), name=name)

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[tuple[_KeyT, _ValueT]],
        /,
        *,
        name: str = DEFAULT_MAP_NAME,
    ) -> Self:
        return cls(identity, _to_hashed_data(entries, identity), name=name)

    @property
    def hash(self, /) -> Callable[[_KeyT], _HashedKeyT]:
        return self._hash

    @property
    def name(self, /) -> str:
        return self._name

    def clear(self, /) -> None:
        self._data.clear()

    def delete(self, key: _KeyT, /) -> None:
        hashed_key = self._hash(key)
        try:
            del self._data[hashed_key]
        except (KeyError, TypeError):
            raise self._to_missing_key_error(key) from None

    def delete_if_exists(self, key: _KeyT, /) -> bool:
        hashed_key = self._hash(key)
        try:
            del self._data[hashed_key]
        except (KeyError, TypeError):
            return False
        else:
            return True

    def entries(self, /) -> Iterator[tuple[_HashedKeyT, _ValueT]]:
        return iter(list(self._data.items()))

    def filter(
        self,
        predicate: Callable[[_ValueT, _HashedKeyT, int, Self], bool],
        /,
    ) -> Self:
        return self._derive(
            (key, value)
            for index, (key, value) in enumerate(self.entries())
            if predicate(value, key, index, self)
        )

    def get(self, key: _KeyT, /) -> _ValueT:
        hashed_key = self._hash(key)
        try:
            return self._data[hashed_key]
        except (KeyError, TypeError):
            raise self._to_missing_key_error(key) from None

    def get_or(
        self, key: _KeyT, default: _FallbackT, /
    ) -> _ValueT | _FallbackT:
        hashed_key = self._hash(key)
        try:
            return self._data[hashed_key]
        except (KeyError, TypeError):
            return default

    def has(self, key: _KeyT, /) -> bool:
        hashed_key = self._hash(key)
        try:
            return hashed_key in self._data
        except TypeError:
            return False

    def keys(self, /) -> Iterator[_HashedKeyT]:
        return iter(list(self._data))

    def map(
        self,
        function: Callable[
            [_ValueT, _HashedKeyT, int, Self], tuple[_HashedKeyT, _ValueT]
        ],
        /,
    ) -> Self:
        return self._derive(
            function(value, key, index, self)
            for index, (key, value) in enumerate(self.entries())
        )

    def map_keys(
        self,
        function: Callable[[_HashedKeyT, _ValueT, int, Self], _HashedKeyT],
        /,
    ) -> Self:
        return self.map(
            lambda value, key, index, original: (
                function(key, value, index, original),
                value,
            )
        )

    def map_values(
        self,
        function: Callable[[_ValueT, _HashedKeyT, int, Self], _ValueT],
        /,
    ) -> Self:
        return self.map(
            lambda value, key, index, original: (
                key,
                function(value, key, index, original),
            )
        )

    def set(self, key: _KeyT, value: _ValueT, /) -> None:
        self._data[self._hash(key)] = value

    def values(self, /) -> Iterator[_ValueT]:
        return iter(list(self._data.values()))

    def _derive(
        self, entries: Iterable[tuple[_HashedKeyT, _ValueT]], /
    ) -> Self:
        return type(self)(self._hash, dict(entries), name=self._name)

    def _to_missing_key_error(self, key: _KeyT, /) -> MissingKeyError:
        _logger.debug('Key %r is missing from %r map.', key, self._name)
        return MissingKeyError(key, self._name)

    _data: dict[_HashedKeyT, _ValueT]
    _hash: Callable[[_KeyT], _HashedKeyT]
    _name: str

    __slots__ = '_data', '_hash', '_name'

    def __init__(
        self,
        hash_: Callable[[_KeyT], _HashedKeyT],
        data: dict[_HashedKeyT, _ValueT] | None = None,
        /,
        *,
        name: str = DEFAULT_MAP_NAME,
    ) -> None:
        if not callable(hash_):
            raise TypeError(
                'Expected hash function to be callable, '
                f'but got {type(hash_)}.'
            )
        self._data = {} if data is None else dict(data)
        self._hash, self._name = hash_, name

    def __contains__(self, key: _KeyT, /) -> bool:
        return self.has(key)

    def __delitem__(self, key: _KeyT, /) -> None:
        self.delete(key)

    def __getitem__(self, key: _KeyT, /) -> _ValueT:
        return self.get(key)

    def __iter__(self, /) -> Iterator[tuple[_HashedKeyT, _ValueT]]:
        return self.entries()

    def __len__(self, /) -> int:
        return len(self._data)

    def __repr__(self, /) -> str:
        return (
            f'{type(self).__qualname__}'
            '('
            f'{self._hash!r}, {self._data!r}, name={self._name!r}'
            ')'
        )

    def __setitem__(self, key: _KeyT, value: _ValueT, /) -> None:
        self.set(key, value)


def _to_hashed_data(
    entries: Iterable[tuple[_KeyT, _ValueT]],
    hash_: Callable[[_KeyT], _HashedKeyT],
    /,
) -> dict[_HashedKeyT, _ValueT]:
    return {hash_(key): value for key, value in entries}
