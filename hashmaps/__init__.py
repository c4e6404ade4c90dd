from typing import TypeAlias

from ._core import (
    default_map as _default_map,
    functions as _functions,
    grouping as _grouping,
    hash_map as _hash_map,
    logging as _logging,
)

__version__ = '0.1.0'

ConstantDefault: TypeAlias = _default_map.ConstantDefault
DefaultMap: TypeAlias = _default_map.DefaultMap
DefaultValue: TypeAlias = _default_map.DefaultValue
GeneratedDefault: TypeAlias = _default_map.GeneratedDefault
HashMap: TypeAlias = _hash_map.HashMap
LevelRangeFilter: TypeAlias = _logging.LevelRangeFilter
MissingKeyError: TypeAlias = _hash_map.MissingKeyError
configure_logging = _logging.configure_logging
constant = _functions.constant
group_by_unique = _grouping.group_by_unique
identity = _functions.identity
