"""Session configuration: render mode selection and shared constants."""

from __future__ import annotations

import logging
import os

from rich.console import Console

from .colors import red, yellow
from .render import RenderMode

logger = logging.getLogger(__name__)

# Environment override for the render mode ("plain" or "ansi").
RENDER_MODE_ENV = "BYLINE_RENDER_MODE"

# Report tags and their colors
ERROR_TAG = "error: "
ERROR_COLOR = red
WARNING_TAG = "warning: "
WARNING_COLOR = yellow

# Menu layout
DEFAULT_INDENT = "  "
DEFAULT_ITEM_SUFFIX = ") "


def _read_mode_env(var_name: str) -> RenderMode | None:
    """Read a render mode from the environment, ignoring unknown values."""
    value = os.getenv(var_name)
    if value is None:
        return None

    try:
        return RenderMode(value.strip().lower())
    except ValueError:
        logger.debug("Ignoring unknown %s value %r", var_name, value)
        return None


def _supports_ansi(console: Console) -> bool:
    """Detect whether the console can display escape sequences.

    Checks terminal capabilities (is_terminal, is_dumb_terminal) and whether
    colors were disabled, e.g. through ``NO_COLOR``.
    """
    if not console.is_terminal:
        return False  # piped or redirected

    if console.is_dumb_terminal:
        return False

    if console.no_color or console.color_system is None:
        return False

    return True


def resolve_render_mode(console: Console, override: RenderMode | None = None) -> RenderMode:
    """Pick the render mode for a session.

    Args:
        console: Console the session writes to
        override: Mode requested explicitly by the host application

    Returns:
        The explicit override if given, else the ``BYLINE_RENDER_MODE``
        environment value, else ANSI when the console supports it and PLAIN
        otherwise.
    """
    if override is not None:
        return override

    from_env = _read_mode_env(RENDER_MODE_ENV)
    if from_env is not None:
        logger.debug("Render mode %s taken from %s", from_env.value, RENDER_MODE_ENV)
        return from_env

    mode = RenderMode.ANSI if _supports_ansi(console) else RenderMode.PLAIN
    logger.debug("Render mode %s detected from console", mode.value)
    return mode


__all__ = [
    "DEFAULT_INDENT",
    "DEFAULT_ITEM_SUFFIX",
    "ERROR_COLOR",
    "ERROR_TAG",
    "RENDER_MODE_ENV",
    "WARNING_COLOR",
    "WARNING_TAG",
    "resolve_render_mode",
]
