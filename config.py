import logging
import os
import sys

from dotenv import load_dotenv

from control import color_mode, color_modes, default_depth, hide_dotfiles

load_dotenv()

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"expected one of {sorted(_TRUE | _FALSE)}, got {value!r}")


def _parse_depth(value: str) -> int:
    depth = int(value)
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    return depth


def _parse_color(value: str) -> str:
    lowered = value.strip().lower()
    if lowered not in color_modes:
        raise ValueError(f"expected one of {', '.join(color_modes)}, got {value!r}")
    return lowered


def _parse_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {value!r}")
    return level


def read_settings(environ=None) -> dict:
    """Read the WDT_* variables from *environ* (default: os.environ).

    Every variable is optional. Raises ValueError naming all the invalid
    ones at once.
    """
    if environ is None:
        environ = os.environ

    parsers = {
        "WDT_DEPTH": ("depth", _parse_depth, default_depth),
        "WDT_SHOW_HIDDEN": ("show_hidden", _parse_bool, not hide_dotfiles),
        "WDT_COLOR": ("color", _parse_color, color_mode),
        "WDT_LOG_LEVEL": ("log_level", _parse_level, logging.WARNING),
    }

    settings = {"log_dir": environ.get("WDT_LOG_DIR") or None}
    invalid = []
    for var, (key, parse, default) in parsers.items():
        raw = environ.get(var)
        if raw is None or raw == "":
            settings[key] = default
            continue
        try:
            settings[key] = parse(raw)
        except ValueError as e:
            invalid.append(f"{var} ({e})")

    if invalid:
        raise ValueError(f"Invalid environment variables: {'; '.join(invalid)}")
    return settings


try:
    _settings = read_settings()
except ValueError as e:
    print(f"[error]: {e}", file=sys.stderr)
    sys.exit(1)

DEPTH = _settings["depth"]
SHOW_HIDDEN = _settings["show_hidden"]
COLOR = _settings["color"]
LOG_LEVEL = _settings["log_level"]
LOG_DIR = _settings["log_dir"]
