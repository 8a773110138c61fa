# --------------------------------------------------------------
# File: base58.py
# Description: Codificación Base58 (alfabeto Bitcoin) del sobre cifrado.
# --------------------------------------------------------------
"""Conversión reversible entre bytes y texto Base58 copiable por el usuario."""

from textseal.errors import DecodeError

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: position for position, char in enumerate(ALPHABET)}
_BASE = len(ALPHABET)


def b58encode(data: bytes) -> str:
    """Codifica bytes en Base58 conservando los ceros iniciales.

    Cada byte cero inicial se representa con un `1`; el resto se trata como
    un entero big-endian.

    Args:
        data (bytes): Secuencia arbitraria, puede estar vacía.

    Returns:
        str: Texto Base58.

    """

    stripped = data.lstrip(b"\x00")
    leading = len(data) - len(stripped)

    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, _BASE)
        digits.append(ALPHABET[remainder])

    return ALPHABET[0] * leading + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decodifica texto Base58 a los bytes originales.

    Args:
        text (str): Texto Base58.

    Returns:
        bytes: Secuencia original.

    Raises:
        DecodeError: Si aparece un carácter fuera del alfabeto.

    """

    number = 0
    for char in text:
        try:
            number = number * _BASE + _INDEX[char]
        except KeyError as exc:
            raise DecodeError(f"Carácter no válido en el texto cifrado: {char!r}") from exc

    stripped = text.lstrip(ALPHABET[0])
    leading = len(text) - len(stripped)
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\x00" * leading + body
