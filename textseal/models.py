# --------------------------------------------------------------
# File: models.py
# Description: Enumeraciones y modelos de datos del sobre criptográfico.
# --------------------------------------------------------------
"""Modos de cifrado, modos de derivación y modelos Pydantic de resultado."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel

from textseal.errors import ErrorKind, UnsupportedAlgorithmError


class CipherMode(str, Enum):
    """Modos AES admitidos, todos con clave de 256 bits."""

    AES_CBC = "AES-CBC"
    AES_CTR = "AES-CTR"
    AES_GCM = "AES-GCM"

    @classmethod
    def parse(cls, value: Union["CipherMode", str]) -> "CipherMode":
        """Convierte un valor de la interfaz en `CipherMode`.

        Args:
            value (Union[CipherMode, str]): Enum o su valor textual.

        Returns:
            CipherMode: Modo reconocido.

        Raises:
            UnsupportedAlgorithmError: Si el valor no corresponde a ningún modo.

        """

        try:
            return cls(value)
        except ValueError as exc:
            raise UnsupportedAlgorithmError(f"Algoritmo de cifrado no soportado: {value}") from exc


class DeriveMode(str, Enum):
    """Funciones de derivación seleccionables.

    `ARGON2` está reservado: aparece en la interfaz pero no tiene implementación.
    """

    PBKDF2 = "PBKDF2"
    ARGON2 = "Argon2"

    @classmethod
    def parse(cls, value: Union["DeriveMode", str]) -> "DeriveMode":
        """Convierte un valor de la interfaz en `DeriveMode`."""

        try:
            return cls(value)
        except ValueError as exc:
            raise UnsupportedAlgorithmError(f"Función de derivación no soportada: {value}") from exc


class KeyUsage(str, Enum):
    """Capacidad única a la que queda ligada una clave derivada."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class EncryptResult(BaseModel):
    """Resultado de cifrar un texto.

    Attributes:
        encoded_text (str): Sobre `IV || ciphertext` codificado en Base58.
        salt_used (str): Salt aplicada; el usuario debe guardarla para descifrar.

    """

    encoded_text: str
    salt_used: str


class OperationResult(BaseModel):
    """Resultado explícito de una operación para la capa de interfaz.

    Attributes:
        ok (bool): Indica si la operación terminó correctamente.
        value (Optional[str]): Texto cifrado o descifrado cuando `ok` es cierto.
        salt (Optional[str]): Salt utilizada en el cifrado.
        error_kind (Optional[ErrorKind]): Clase de error cuando `ok` es falso.
        message (str): Mensaje para mostrar al usuario.

    """

    ok: bool
    value: Optional[str] = None
    salt: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""
