import logging
import sys

_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({})))


class _ContextFormatter(logging.Formatter):
    """Appends keyword context passed through ``extra`` as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and key not in ("message", "asctime")
        }
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{message} {pairs}"


def _extra(kwargs: dict[str, object]) -> dict[str, object]:
    """Prefix context keys that would overwrite a LogRecord attribute."""
    return {
        f"ctx_{key}" if key in _RESERVED_ATTRS or key in ("message", "asctime") else key: value
        for key, value in kwargs.items()
    }


class Log:
    """Centralized logging with structured format."""

    _logger: logging.Logger = logging.getLogger("docverify")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                _ContextFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=_extra(kwargs))

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=_extra(kwargs))

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=_extra(kwargs))

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=_extra(kwargs))

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error message with the active exception's traceback."""
        cls._logger.exception(message, extra=_extra(kwargs))
