import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path


class NoticesFileHandler(TimedRotatingFileHandler):
    """Daily rotated ``notices.log`` kept under the configured log directory."""

    def __init__(self, log_dir: str, **kwargs) -> None:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        kwargs.setdefault("when", "midnight")
        kwargs.setdefault("backupCount", 7)
        kwargs.setdefault("encoding", "utf-8")
        super().__init__(path / "notices.log", **kwargs)


def build_logging_config(log_dir: str | None = None, level: str = "INFO") -> dict:
    """Return the ``LOGGING`` dictConfig used by :mod:`config.settings`."""

    level = (level or "INFO").upper()
    if level not in logging.getLevelNamesMapping():
        level = "INFO"

    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    }
    if log_dir:
        handlers["file"] = {
            "()": NoticesFileHandler,
            "log_dir": log_dir,
            "formatter": "standard",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": handlers,
        "root": {"handlers": list(handlers), "level": "WARNING"},
        "loggers": {
            "apps.notices": {"level": level},
        },
    }
