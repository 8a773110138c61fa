# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas: fuente aleatoria determinista y credenciales.
# --------------------------------------------------------------

import random

import pytest

from textseal.crypto_kdf import derive_key
from textseal.models import CipherMode, KeyUsage


class SeededRandomSource:
    """Fuente aleatoria reproducible para pruebas; nunca usar en producción."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)
        self.calls = 0

    def random_bytes(self, size: int) -> bytes:
        self.calls += 1
        return self._rng.randbytes(size)


@pytest.fixture
def seeded_source_factory():
    """Fábrica de fuentes aleatorias con la semilla indicada.

    Returns:
        Callable[[int], SeededRandomSource]: Constructor de fuentes deterministas.
    """
    return SeededRandomSource


@pytest.fixture
def credentials():
    """Contraseña y salt fijas usadas en varias pruebas.

    Returns:
        Tuple[str, str]: Contraseña y salt.
    """
    return "secret", "abcd1234"


@pytest.fixture
def key_pair(credentials):
    """Construye claves de cifrado y descifrado para un modo dado.

    Args:
        credentials (Tuple[str, str]): Contraseña y salt de la fixture homónima.

    Returns:
        Callable[[CipherMode], Tuple[DerivedKey, DerivedKey]]: Fábrica de claves.
    """
    password, salt = credentials

    def _make(mode: CipherMode):
        return (
            derive_key(password, salt, mode, KeyUsage.ENCRYPT),
            derive_key(password, salt, mode, KeyUsage.DECRYPT),
        )

    return _make
