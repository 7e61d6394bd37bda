"""
Sistema de logging estructurado.

Varios registros comparten el logger de su módulo, así que el nivel se fija
solo en el logger y los handlers quedan en NOTSET: el último
``setup_logger`` decide qué se emite.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

_FORMATTER = logging.Formatter(
    fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


def setup_logger(
    name: str,
    level: int = logging.WARNING,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configura (o reconfigura) un logger compartido.

    La primera llamada añade el handler de consola; las siguientes solo
    cambian el nivel y añaden el archivo de log si aún no estaba.

    Args:
        name: Nombre del logger
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR)
        log_file: Ruta opcional al archivo de log

    Returns:
        Logger configurado
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(_is_console_handler(h) for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(_FORMATTER)
        logger.addHandler(console_handler)

    if log_file and not _has_file_handler(logger, log_file):
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(_FORMATTER)
        logger.addHandler(file_handler)

    return logger


def _is_console_handler(handler: logging.Handler) -> bool:
    return type(handler) is logging.StreamHandler


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )
