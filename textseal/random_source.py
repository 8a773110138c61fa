# --------------------------------------------------------------
# File: random_source.py
# Description: Fuente de aleatoriedad inyectable para IV y salts.
# --------------------------------------------------------------
"""Interfaz de aleatoriedad criptográfica y su implementación por defecto."""

import os
from typing import Protocol


class RandomSource(Protocol):
    """Proveedor de bytes aleatorios criptográficamente seguros."""

    def random_bytes(self, size: int) -> bytes:
        """Devuelve `size` bytes aleatorios."""


class OsRandomSource:
    """Aleatoriedad del sistema operativo mediante `os.urandom`."""

    def random_bytes(self, size: int) -> bytes:
        return os.urandom(size)


DEFAULT_RANDOM_SOURCE = OsRandomSource()
