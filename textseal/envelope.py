# --------------------------------------------------------------
# File: envelope.py
# Description: Empaquetado del IV y el texto cifrado en un único bloque binario.
# --------------------------------------------------------------
"""Formato de sobre `IV || ciphertext` con IV de ancho fijo."""

from typing import Tuple

from textseal.crypto_sym import IV_LENGTH
from textseal.errors import DecodeError, InvalidInputError


def pack(iv: bytes, ciphertext: bytes) -> bytes:
    """Concatena el IV de 16 bytes y el texto cifrado."""

    if len(iv) != IV_LENGTH:
        raise InvalidInputError(f"El IV debe tener {IV_LENGTH} bytes.")
    return iv + ciphertext


def unpack(data: bytes) -> Tuple[bytes, bytes]:
    """Separa un sobre en IV y texto cifrado.

    Args:
        data (bytes): Sobre `IV || ciphertext`.

    Returns:
        Tuple[bytes, bytes]: Los primeros 16 bytes como IV y el resto.

    Raises:
        DecodeError: Si el sobre tiene menos de 16 bytes.

    """

    if len(data) < IV_LENGTH:
        raise DecodeError(
            f"El texto cifrado es demasiado corto: {len(data)} bytes, mínimo {IV_LENGTH}."
        )
    return data[:IV_LENGTH], data[IV_LENGTH:]
