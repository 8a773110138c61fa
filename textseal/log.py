# --------------------------------------------------------------
# File: log.py
# Description: Configuración del logging compartido por los módulos de textseal.
# --------------------------------------------------------------
"""Creación de loggers con un único handler de consola."""

import logging
import sys
from typing import Optional

from textseal.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Devuelve el logger `name` listo para usar.

    Args:
        name (str): Nombre del logger, normalmente `__name__`.
        level (Optional[str]): Nivel de log; por defecto `TEXTSEAL_LOG_LEVEL`.

    Returns:
        logging.Logger: Logger con handler de consola y formato común.

    """

    logger = logging.getLogger(name)
    # Evita handlers duplicados al recargar módulos.
    if logger.handlers:
        return logger

    resolved = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(resolved)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger
