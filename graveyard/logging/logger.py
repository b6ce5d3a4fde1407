import logging
import sys


class Log:
    """Centralized logging for the ingestion service.

    Keyword fields passed to any level method are appended to the message as
    ``key=value`` pairs so they survive the plain-text stdout format.
    """

    _logger: logging.Logger = logging.getLogger("graveyard")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Attach a single stdout handler and set the level."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._logger.info(cls._render(message, fields))

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._logger.warning(cls._render(message, fields))

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._logger.error(cls._render(message, fields))

    @classmethod
    def exception(cls, message: str, **fields: object) -> None:
        """Log at error level with the active exception's traceback."""
        cls._logger.exception(cls._render(message, fields))

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._logger.debug(cls._render(message, fields))

    @staticmethod
    def _render(message: str, fields: dict[str, object]) -> str:
        if not fields:
            return message
        suffix = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
        return f"{message} [{suffix}]"
