# journal_helper/utilities/config_logging.py
from __future__ import annotations

import logging.config
from copy import deepcopy
from pathlib import Path

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": "logs/journal_helper.log",
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
        },
        "journal_helper": {"level": "DEBUG", "propagate": True},
    },
}


def configure_logging(log_dir: Path | str | None = "logs") -> dict:
    """
    Apply ``LOGGING`` via ``logging.config.dictConfig``.

    The rotating file handler writes into ``log_dir``, which is created if it
    does not exist. Pass ``None`` to log to the console only.

    Returns the dictionary that was applied.
    """
    config = deepcopy(LOGGING)
    if log_dir is None:
        del config["handlers"]["file"]
        config["loggers"][""]["handlers"] = ["console"]
    else:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        config["handlers"]["file"]["filename"] = str(log_path / "journal_helper.log")
    logging.config.dictConfig(config)
    return config
