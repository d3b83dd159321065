import logging
import os
from pathlib import Path
from typing import Final
from typing import Optional
from typing import final

from dotenv import load_dotenv

LOG_LEVEL_ENV_VARIABLE: Final = "CHAR_ESCAPE_LOG_LEVEL"
DEFINITION_FILE_ENV_VARIABLE: Final = "CHAR_ESCAPE_DEFINITION_FILE"
DEFAULT_LOG_LEVEL: Final = "WARNING"

logger: Final = logging.getLogger(__name__)


def get_environment_variable_or_default(
    key: str,
    default: str | None,
) -> str | None:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _parse_log_level(value: str) -> str:
    log_level: Final = value.upper()
    if log_level not in logging.getLevelNamesMapping():
        logger.warning(
            f"Unknown log level '{value}' in {LOG_LEVEL_ENV_VARIABLE}, falling back to {DEFAULT_LOG_LEVEL}."
        )
        return DEFAULT_LOG_LEVEL
    return log_level


@final
class Config:
    def __init__(self) -> None:
        self._log_level: str = DEFAULT_LOG_LEVEL
        self._definition_file: Optional[Path] = None
        self.reload()

    def reload(self) -> None:
        load_dotenv()
        log_level: Final = get_environment_variable_or_default(LOG_LEVEL_ENV_VARIABLE, None)
        self._log_level = DEFAULT_LOG_LEVEL if log_level is None else _parse_log_level(log_level)
        definition_file: Final = get_environment_variable_or_default(DEFINITION_FILE_ENV_VARIABLE, None)
        self._definition_file = None if definition_file is None else Path(definition_file)

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def definition_file(self) -> Optional[Path]:
        return self._definition_file
