import logging
from typing import Literal

from rsaid.util.config import IdSettings

# Basic setup/config for python logging


class LoggingSettings(IdSettings):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


log_settings = LoggingSettings()


def setup_logging() -> None:
    """
    Initial logging setup.

    Sets default format and level to that specified by `APP_LOG_LEVEL`, or `WARNING` if not set.
    """
    default_handler = logging.StreamHandler()
    default_handler.setLevel(logging.getLevelName(log_settings.log_level))
    default_handler.setFormatter(logging.Formatter("%(asctime)s %(name)-12s %(levelname)-8s %(message)s"))

    # The root logger accepts everything so the rsaid-* loggers can be raised to DEBUG
    # by a caller's own handler while the console only shows the configured level.
    logging.basicConfig(
        level=logging.NOTSET,
        handlers=[default_handler],
    )
