import logging
import logging.config
from pathlib import Path

import tomli

ROOT_LOGGER_NAME = 'hashmaps'


class LevelRangeFilter(logging.Filter):
    """Passes records with levels in the inclusive range only."""

    def __init__(
        self,
        *,
        min_level: int | str | None = None,
        max_level: int | str | None = None,
    ) -> None:
        super().__init__()
        normalized_min_level = _normalize_level(min_level)
        normalized_max_level = _normalize_level(max_level)
        if normalized_min_level is None and normalized_max_level is None:
            raise ValueError(
                'Either minimum or maximum level should be specified.'
            )
        if (
            normalized_min_level is not None
            and normalized_max_level is not None
            and normalized_min_level > normalized_max_level
        ):
            raise ValueError(
                f'Minimum level {min_level!r} should not be greater '
                f'than maximum level {max_level!r}.'
            )
        self._max_level, self._min_level = (
            normalized_max_level,
            normalized_min_level,
        )

    def filter(self, record: logging.LogRecord) -> bool:
        return (
            self._min_level is None or self._min_level <= record.levelno
        ) and (self._max_level is None or record.levelno <= self._max_level)


def configure_logging(
    file_path: Path, /, *, verbose: int = 0
) -> logging.Logger:
    logging_configuration = tomli.loads(file_path.read_text('utf-8'))
    logging.config.dictConfig(logging_configuration)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if verbose:
        logger.setLevel(max(1, logger.getEffectiveLevel() - 10 * verbose))
    return logger


def _normalize_level(level: int | str | None, /) -> int | None:
    if level is None or isinstance(level, int):
        return level
    result = logging.getLevelName(level)
    if not isinstance(result, int):
        raise ValueError(f'Unknown logging level: {level!r}.')
    return result
