import os
import sys

from loguru import logger

from src.config.log_config import LogConfig

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"

_LOGGER_CONFIGURED = False


def configure_logging(config: LogConfig | None = None, *, force: bool = False) -> None:
    """
    Настройка глобального loguru logger (выполняется один раз).

    - stderr sink всегда
    - файловый sink с ротацией, если задан config.dir
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED and not force:
        return

    config = config or LogConfig()

    logger.remove()
    logger.add(sys.stderr, level=config.level, format=LOG_FORMAT)

    if config.dir:
        os.makedirs(config.dir, exist_ok=True)
        logger.add(
            sink=os.path.join(config.dir, "{time:YYYY-MM-DD}.log"),
            rotation=config.rotation,
            retention=config.retention,
            level=config.level,
            format=LOG_FORMAT,
            backtrace=True,
            diagnose=False,
        )

    _LOGGER_CONFIGURED = True
    logger.debug("Logger initialized: level={}, dir={}", config.level, config.dir)
