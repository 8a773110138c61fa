# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores del sobre criptográfico de textseal.
# --------------------------------------------------------------
"""Excepciones con tipo explícito para cada fallo de cifrado o descifrado."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Clases de error que la interfaz puede mostrar al usuario."""

    INVALID_INPUT = "invalid_input"
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    KEY_DERIVATION = "key_derivation"
    AUTHENTICATION = "authentication"
    DECRYPTION = "decryption"
    DECODE = "decode"


class TextSealError(Exception):
    """Error base; toda subclase declara su `kind`.

    Attributes:
        kind (ErrorKind): Clase de error asociada a la excepción.

    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(TextSealError):
    """Falta un campo obligatorio o llega vacío."""

    kind = ErrorKind.INVALID_INPUT


class UnsupportedAlgorithmError(TextSealError):
    """Modo de cifrado o de derivación no reconocido."""

    kind = ErrorKind.UNSUPPORTED_ALGORITHM


class KeyDerivationError(TextSealError):
    """La derivación PBKDF2 rechazó los parámetros."""

    kind = ErrorKind.KEY_DERIVATION


class AuthenticationError(TextSealError):
    """La etiqueta AES-GCM no coincide (clave errónea o datos alterados)."""

    kind = ErrorKind.AUTHENTICATION


class DecryptionError(TextSealError):
    """Fallo de la primitiva de descifrado fuera de la autenticación GCM."""

    kind = ErrorKind.DECRYPTION


class DecodeError(TextSealError):
    """Texto Base58 mal formado o sobre demasiado corto."""

    kind = ErrorKind.DECODE


__all__ = [
    "AuthenticationError",
    "DecodeError",
    "DecryptionError",
    "ErrorKind",
    "InvalidInputError",
    "KeyDerivationError",
    "TextSealError",
    "UnsupportedAlgorithmError",
]
