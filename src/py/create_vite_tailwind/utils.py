"""Utility helpers for create-vite-tailwind."""

import logging
from importlib.util import find_spec
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from create_vite_tailwind.config import LoggingConfig

__all__ = ("configure_logging", "console", "get_package_path", "logger")

console = Console()
logger = logging.getLogger("create_vite_tailwind")

_LOG_LEVELS = {
    "quiet": logging.WARNING,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed create-vite-tailwind package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("create_vite_tailwind")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    return Path(__file__).resolve().parent.joinpath(*parts)


def configure_logging(config: "LoggingConfig | None" = None) -> None:
    """Route the package logger through the shared rich console.

    Calling this more than once replaces the previously installed handler.

    Args:
        config: Logging configuration. Defaults to a fresh :class:`LoggingConfig`.
    """
    config = config or LoggingConfig()
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(_LOG_LEVELS[config.level])
    logger.propagate = False
