# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves AES-256 a partir de contraseña y salt.
# --------------------------------------------------------------
"""Funciones de derivación de claves ligadas a un único modo y uso."""

from __future__ import annotations

from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from textseal.errors import InvalidInputError, KeyDerivationError, UnsupportedAlgorithmError
from textseal.log import setup_logger
from textseal.models import CipherMode, DeriveMode, KeyUsage

logger = setup_logger(__name__)

# Parámetros fijos para que los textos cifrados sigan siendo descifrables.
PBKDF2_ITERATIONS = 100_000
PBKDF2_HASH = hashes.SHA256
KEY_LENGTH = 32


class DerivedKey:
    """Material de clave de 256 bits ligado a un modo y a un uso.

    El material no se expone como atributo público. Usado como gestor de
    contexto, el buffer interno se sobrescribe con ceros al salir del bloque.
    Las copias `bytes` que entrega `material_for` son inmutables y no se
    borran: permanecen en memoria hasta que las libera el recolector.

    Attributes:
        cipher_mode (CipherMode): Modo AES para el que se derivó la clave.
        usage (KeyUsage): Única operación permitida (cifrar o descifrar).

    """

    __slots__ = ("cipher_mode", "usage", "_material", "_wiped")

    def __init__(self, material: bytes, cipher_mode: CipherMode, usage: KeyUsage) -> None:
        if len(material) != KEY_LENGTH:
            raise KeyDerivationError("La clave derivada debe tener 256 bits.")
        self.cipher_mode = cipher_mode
        self.usage = usage
        self._material = bytearray(material)
        self._wiped = False

    def material_for(self, cipher_mode: CipherMode, usage: KeyUsage) -> bytes:
        """Entrega el material solo si coincide con el modo y el uso ligados."""

        if cipher_mode is not self.cipher_mode or usage is not self.usage:
            raise InvalidInputError(
                f"Clave derivada para {self.cipher_mode.value}/{self.usage.value}, "
                f"solicitada para {cipher_mode.value}/{usage.value}."
            )
        if self._wiped:
            raise KeyDerivationError("La clave derivada ya fue liberada.")
        return bytes(self._material)

    def wipe(self) -> None:
        """Sobrescribe el material de clave con ceros."""

        for index in range(len(self._material)):
            self._material[index] = 0
        self._wiped = True

    def __enter__(self) -> "DerivedKey":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.wipe()

    def __repr__(self) -> str:
        return f"DerivedKey(cipher_mode={self.cipher_mode.value}, usage={self.usage.value})"


def derive_key(
    password: str,
    salt: str,
    cipher_mode: CipherMode,
    usage: KeyUsage,
    *,
    derive_mode: DeriveMode = DeriveMode.PBKDF2,
    iterations: int = PBKDF2_ITERATIONS,
    hash_algorithm: Optional[hashes.HashAlgorithm] = None,
) -> DerivedKey:
    """Deriva una clave AES-256 con PBKDF2-HMAC.

    Args:
        password (str): Contraseña del usuario, codificada en UTF-8.
        salt (str): Salt en texto, codificada en UTF-8.
        cipher_mode (CipherMode): Modo AES al que se liga la clave.
        usage (KeyUsage): Operación única que podrá realizar la clave.
        derive_mode (DeriveMode): Función de derivación; solo PBKDF2 está disponible.
        iterations (int): Iteraciones de PBKDF2.
        hash_algorithm (Optional[hashes.HashAlgorithm]): Hash de PBKDF2, SHA-256 por defecto.

    Returns:
        DerivedKey: Clave de 32 bytes ligada a `cipher_mode` y `usage`.

    Raises:
        KeyDerivationError: Si la contraseña o la salt están vacías o PBKDF2 falla.
        UnsupportedAlgorithmError: Si `derive_mode` no tiene implementación.

    """

    cipher_mode = CipherMode.parse(cipher_mode)
    derive_mode = DeriveMode.parse(derive_mode)
    if derive_mode is not DeriveMode.PBKDF2:
        raise UnsupportedAlgorithmError(
            f"La función de derivación {derive_mode.value} no está disponible."
        )
    if not password:
        raise KeyDerivationError("La contraseña no puede estar vacía.")
    if not salt:
        raise KeyDerivationError("La salt no puede estar vacía.")

    algorithm = hash_algorithm if hash_algorithm is not None else PBKDF2_HASH()
    try:
        kdf = PBKDF2HMAC(
            algorithm=algorithm,
            length=KEY_LENGTH,
            salt=salt.encode("utf-8"),
            iterations=iterations,
        )
        material = kdf.derive(password.encode("utf-8"))
    except (TypeError, ValueError, OverflowError, UnsupportedAlgorithm) as exc:
        raise KeyDerivationError("No se pudo derivar la clave con los parámetros indicados.") from exc

    logger.debug(
        "PBKDF2-%s iterations=%d -> %d-bit key (%s, %s)",
        algorithm.name.upper(),
        iterations,
        KEY_LENGTH * 8,
        cipher_mode.value,
        usage.value,
    )
    return DerivedKey(material, cipher_mode, usage)
