"""Light loguru-backed logger used across credential-chain."""

import sys
from typing import Any, Optional

from loguru import logger as _loguru_logger

from credential_chain.constants import LOG_LEVEL

_loggers: dict = {}
_sink_installed = False

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> <blue>[{level}]</blue> <cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"


def _install_sink() -> None:
    global _sink_installed
    if _sink_installed:
        return
    _loguru_logger.remove()
    _loguru_logger.add(sys.stderr, format=LOG_FORMAT, level=LOG_LEVEL, colorize=True)
    _sink_installed = True


class ChainLogger:
    """Minimal logger that forwards to loguru. Same .info/.error/.warning/.debug/.exception API."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._log = _loguru_logger.bind(logger_name=name)

    @property
    def name(self) -> str:
        return self._name

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.info(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.error(msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.warning(msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.debug(msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.exception(msg, *args, **kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.critical(msg, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> ChainLogger:
    """Get a cached logger bound to ``name``."""
    _install_sink()
    if name is None:
        name = "credential_chain.observability.logger_adaptor"
    if name not in _loggers:
        _loggers[name] = ChainLogger(name)
    return _loggers[name]
