"""Logging compartido.

Por qué un módulo propio:
- Los loggers se piden por nombre de módulo y se cachean.
- La salida pasa por Rich para convivir con las tablas de la CLI.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

_LOGGER_CACHE: dict[str, logging.Logger] = {}
_HANDLER_NAME = "media-feed-rich"


def get_logger(name: str) -> logging.Logger:
    """Devuelve (y cachea) el logger `name`."""

    logger = _LOGGER_CACHE.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        _LOGGER_CACHE[name] = logger
    return logger


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Instala un único `RichHandler` en el logger raíz.

    Llamarlo varias veces solo ajusta el nivel.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = RichHandler(rich_tracebacks=False, show_path=False)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
