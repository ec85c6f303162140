"""
Runtime settings for ttplot, read from the environment.
Loads .env from the project root so TTPLOT_* variables can live next to the code.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import matplotlib
from dotenv import load_dotenv

# visualization/config.py -> parent.parent = project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

DEFAULT_BACKEND = "Agg"  # headless; figures are saved, not shown
DEFAULT_DPI = 150
DEFAULT_FIGSIZE = (10.0, 8.0)
DEFAULT_LOG_LEVEL = "WARNING"

LOGGER_NAMES = ("timetables", "visualization")


@dataclass(frozen=True)
class Settings:
    backend: str = DEFAULT_BACKEND
    dpi: int = DEFAULT_DPI
    figsize: tuple[float, float] = DEFAULT_FIGSIZE
    log_level: str = DEFAULT_LOG_LEVEL


_settings: Settings | None = None


def _parse_figsize(raw: str) -> tuple[float, float]:
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"TTPLOT_FIGSIZE must be 'width,height', got {raw!r}")
    try:
        width, height = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"TTPLOT_FIGSIZE must be 'width,height', got {raw!r}") from None
    if width <= 0 or height <= 0:
        raise ValueError(f"TTPLOT_FIGSIZE must be positive, got {raw!r}")
    return (width, height)


def _parse_dpi(raw: str) -> int:
    try:
        dpi = int(raw)
    except ValueError:
        raise ValueError(f"TTPLOT_DPI must be an integer, got {raw!r}") from None
    if dpi <= 0:
        raise ValueError(f"TTPLOT_DPI must be positive, got {raw!r}")
    return dpi


def load_settings(environ: dict | None = None) -> Settings:
    """Build Settings from TTPLOT_BACKEND, TTPLOT_DPI, TTPLOT_FIGSIZE and TTPLOT_LOG_LEVEL."""
    env = os.environ if environ is None else environ
    backend = (env.get("TTPLOT_BACKEND") or "").strip() or DEFAULT_BACKEND
    dpi = _parse_dpi(env["TTPLOT_DPI"]) if env.get("TTPLOT_DPI") else DEFAULT_DPI
    figsize = _parse_figsize(env["TTPLOT_FIGSIZE"]) if env.get("TTPLOT_FIGSIZE") else DEFAULT_FIGSIZE
    log_level = (env.get("TTPLOT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"TTPLOT_LOG_LEVEL must be a logging level name, got {log_level!r}")
    return Settings(backend=backend, dpi=dpi, figsize=figsize, log_level=log_level)


def get_settings() -> Settings:
    """Return settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reload_settings() -> Settings:
    """Forget cached settings and read the environment again (e.g. for tests)."""
    global _settings
    _settings = None
    return get_settings()


def configure(settings: Settings | None = None) -> Settings:
    """Select the matplotlib backend and set package log levels."""
    settings = settings or get_settings()
    matplotlib.use(settings.backend)
    for name in LOGGER_NAMES:
        logging.getLogger(name).setLevel(settings.log_level)
    return settings
