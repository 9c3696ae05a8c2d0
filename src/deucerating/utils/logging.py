# utils/logging.py
import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

NAME = "deucerating"

def setup_logging(
    log_dir: str,
    console: bool = True,
    level: str = "INFO",
    console_level: Optional[str] = None,
    format_string: str = "{asctime} {levelname:<7} {name} - {message}",
) -> Tuple[logging.Logger, logging.Logger]:
    """
    Setup logging with a file handler and an optional stderr console handler.

    Args:
        log_dir: Directory for log files
        console: Whether to enable console logging
        level: Level of the package logger
        console_level: Separate level for console (defaults to level)
        format_string: ``str.format`` style record format for the file
    """
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = str(Path(log_dir) / f"{NAME}_{ts}.log")

    # file handler gets everything the package logger lets through
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": format_string, "style": "{"},
            "console": {"format": "{levelname:<7} {message}", "style": "{"},
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "formatter": "plain",
                "filename": log_path,
                "encoding": "utf-8",
                "mode": "w",
                "level": "DEBUG",
            }
        },
        "loggers": {
            NAME: {
                "level": level,
                "handlers": ["file"],
                "propagate": False,
            },
        },
        "root": {"handlers": []},
    }
    if console:
        config["handlers"]["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "console",
            "stream": "ext://sys.stderr",
            "level": (console_level or level).upper(),
        }
        config["loggers"][NAME]["handlers"].append("console")

    logging.config.dictConfig(config)
    logging.captureWarnings(True)

    logger = logging.getLogger(NAME)

    # Summary lines always reach the file, whatever the package level
    summary_logger = logging.getLogger(f"{NAME}.summary")
    summary_logger.setLevel(logging.INFO)
    summary_logger.propagate = False
    for handler in list(summary_logger.handlers):
        summary_logger.removeHandler(handler)
        handler.close()
    fh_summary = logging.FileHandler(log_path, encoding="utf-8", mode="a")
    fh_summary.setLevel(logging.INFO)
    fh_summary.setFormatter(logging.Formatter("{asctime} SUMMARY - {message}", style="{"))
    summary_logger.addHandler(fh_summary)

    logger.debug("Logging initialised. File: %s", log_path)
    return logger, summary_logger
