import logging
import sys
from pathlib import Path

from config import LOG_DIR, LOG_LEVEL

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _build_file_handler(module_basename: str, level: int, log_dir: Path) -> logging.Handler:
    """
    Return a FileHandler that writes to `<log_dir>/<caller>.log`.

    If invoked as a script (module_basename == "__main__"), we grab
    the script's filename from sys.argv[0].
    """
    if module_basename == "__main__":
        name = Path(sys.argv[0]).stem or "main"
    else:
        # strip any leading underscores so "_foo" -> "foo"
        name = module_basename.lstrip("_")

    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / f"{name}.log", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    return handler


def _build_console_handler(level: int) -> logging.Handler:
    """Return a :class:`logging.StreamHandler` that prints to stderr.

    stdout is reserved for the tree itself.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    return handler


def setup_logging(name: str, *, level: int = None, log_dir=None, console: bool = True) -> logging.Logger:
    """Configure (once) and return a logger for *name*.

    *level* defaults to WDT_LOG_LEVEL and *log_dir* to WDT_LOG_DIR; without
    a log dir only the console handler is attached.

    Usage::
        from utilities.logging import setup_logging
        logger = setup_logging(__name__)
    """
    logger = logging.getLogger(name)

    # Only configure once
    if getattr(logger, "_is_configured", False):
        return logger

    if level is None:
        level = LOG_LEVEL
    if log_dir is None:
        log_dir = LOG_DIR

    logger.setLevel(level)

    if log_dir:
        module_basename = name.split(".")[-1]  # e.g., "utilities.tree" -> "tree"
        logger.addHandler(_build_file_handler(module_basename, level, Path(log_dir)))

    if console:
        logger.addHandler(_build_console_handler(level))

    logger.propagate = False
    logger._is_configured = True  # type: ignore[attr-defined]
    return logger
