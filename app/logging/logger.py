import logging
import sys
from typing import ClassVar

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
    # set by uvicorn for its own colourised formatter
    "color_message",
}


class _ContextFormatter(logging.Formatter):
    """Appends ``key=value`` pairs passed as keyword context to the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{line} | {pairs}"


class Log:
    """Centralized logging for the analysis service.

    Messages go to stdout. Keyword arguments become structured context:
    ``Log.info("File stored", size=1024)``.
    """

    _logger: logging.Logger = logging.getLogger("tabcura")

    FORMATS: ClassVar[dict[str, str]] = {
        "dev": "%(asctime)s [%(levelname)s] %(module)s: %(message)s",
        "production": "%(asctime)s [%(levelname)s] %(message)s",
    }
    SERVER_LOGGERS: ClassVar[tuple[str, ...]] = ("uvicorn", "uvicorn.error", "uvicorn.access")

    @classmethod
    def configure(cls, log_level: str, app_env: str = "dev") -> None:
        """Attach a stdout handler to the service and HTTP server loggers.

        Development output names the emitting module; other environments use
        the compact format. Calling again only updates the level.
        """
        level = log_level.upper()
        cls._logger.setLevel(level)
        if cls._logger.handlers:
            return

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_ContextFormatter(cls.FORMATS.get(app_env, cls.FORMATS["production"])))
        cls._logger.addHandler(handler)
        cls._logger.propagate = False
        for name in cls.SERVER_LOGGERS:
            server_logger = logging.getLogger(name)
            server_logger.handlers = [handler]
            server_logger.propagate = False

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs, stacklevel=2)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs, stacklevel=2)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs, stacklevel=2)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs, stacklevel=2)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log at error level with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs, stacklevel=2)
