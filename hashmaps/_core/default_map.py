from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from typing import Any, Generic, TypeAlias, TypeVar, final

from typing_extensions import Self

from .functions import identity
from .hash_map import DEFAULT_MAP_NAME, HashMap, _to_hashed_data

_KeyT = TypeVar('_KeyT')
_ValueT = TypeVar('_ValueT')
_HashedKeyT = TypeVar('_HashedKeyT', bound=Hashable)

_logger = logging.getLogger(__name__)


@final
class ConstantDefault(Generic[_ValueT]):
    @property
    def value(self, /) -> _ValueT:
        return self._value

    _value: _ValueT

    __slots__ = ('_value',)

    def __new__(cls, value: _ValueT, /) -> Self:
        self = super().__new__(cls)
        self._value = value
        return self

    def __repr__(self, /) -> str:
        return f'{type(self).__qualname__}({self._value!r})'


@final
class GeneratedDefault(Generic[_KeyT, _ValueT]):
    @property
    def generator(self, /) -> Callable[[_KeyT], _ValueT]:
        return self._generator

    _generator: Callable[[_KeyT], _ValueT]

    __slots__ = ('_generator',)

    def __new__(cls, generator: Callable[[_KeyT], _ValueT], /) -> Self:
        if not callable(generator):
            raise TypeError(
                'Expected generator to be callable, '
                f'but got {type(generator)}.'
            )
        self = super().__new__(cls)
        self._generator = generator
        return self

    def __repr__(self, /) -> str:
        return f'{type(self).__qualname__}({self._generator!r})'


DefaultValue: TypeAlias = ConstantDefault[Any] | GeneratedDefault[Any, Any]


class DefaultMap(HashMap[_KeyT, _ValueT, _HashedKeyT]):
    """
    Hash map which never fails on lookup:
    a missing key gets the configured default value inserted
    and returned by `get`.

    Derived maps share the same default value.
    """

    @classmethod
    def empty(  # type: ignore[override]
        cls,
        /,
        *,
        default_value: DefaultValue,
        name: str = DEFAULT_MAP_NAME,
    ) -> Self:
        return cls(default_value, identity, name=name)

    @classmethod
    def empty_with_custom_hash(  # type: ignore[override]
        cls,
        hash_: Callable[[_KeyT], _HashedKeyT],
        /,
        *,
        default_value: DefaultValue,
        name: str = DEFAULT_MAP_NAME,
    ) -> Self:
        return cls(default_value, hash_, name=name)

    @classmethod
    def from_custom_entries(  # type: ignore[override]
        cls,
        entries: Iterable[tuple[_KeyT, _ValueT]],
        hash_: Callable[[_KeyT], _HashedKeyT],
        /,
        *,
        default_value: DefaultValue,
        name: str = DEFAULT_MAP_NAME,
    ) -> Self:
        return cls(
            default_value, hash_, _to_hashed_data(entries, hash_), name=name
        )

    @classmethod
    def from_entries(  # type: ignore[override]
        cls,
        entries: Iterable[tuple[_KeyT, _ValueT]],
        /,
        *,
        default_value: DefaultValue,
        name: str = DEFAULT_MAP_NAME,
    ) -> Self:
        return cls(
            default_value,
            identity,
            _to_hashed_data(entries, identity),
            name=name,
        )

    @property
    def default_value(self, /) -> DefaultValue:
        return self._default_value

    def get(self, key: _KeyT, /) -> _ValueT:
        hashed_key = self._hash(key)
        try:
            return self._data[hashed_key]
        except KeyError:
            result = self._data[hashed_key] = self._to_default(key)
            _logger.debug(
                'Inserted default value %r for missing key %r into %r map.',
                result,
                key,
                self._name,
            )
            return result

    def _derive(
        self, entries: Iterable[tuple[_HashedKeyT, _ValueT]], /
    ) -> Self:
        return type(self)(
            self._default_value, self._hash, dict(entries), name=self._name
        )

    def _to_default(self, key: _KeyT, /) -> _ValueT:
        default_value = self._default_value
        if isinstance(default_value, GeneratedDefault):
            result: _ValueT = default_value.generator(key)
        else:
            result = default_value.value
        return result

    _default_value: DefaultValue

    __slots__ = ('_default_value',)

    def __init__(
        self,
        default_value: DefaultValue,
        hash_: Callable[[_KeyT], _HashedKeyT],
        data: dict[_HashedKeyT, _ValueT] | None = None,
        /,
        *,
        name: str = DEFAULT_MAP_NAME,
    ) -> None:
        if not isinstance(default_value, (ConstantDefault, GeneratedDefault)):
            raise TypeError(
                'Expected default value to be '
                f'{ConstantDefault.__qualname__} '
                f'or {GeneratedDefault.__qualname__}, '
                f'but got {type(default_value)}.'
            )
        super().__init__(hash_, data, name=name)
        self._default_value = default_value

    def __repr__(self, /) -> str:
        return (
            f'{type(self).__qualname__}'
            '('
            f'{self._default_value!r}, {self._hash!r}, {self._data!r}, '
            f'name={self._name!r}'
            ')'
        )
