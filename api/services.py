# --------------------------------------------------------------
# File: services.py
# Description: Servicios de cifrado y descifrado de texto para la interfaz.
# --------------------------------------------------------------
"""Orquestación de derivación, cifrado, sobre y codificación Base58."""

import uuid
from typing import Optional, Union

from textseal import crypto_sym, envelope
from textseal.base58 import b58decode, b58encode
from textseal.crypto_kdf import derive_key
from textseal.errors import DecryptionError, InvalidInputError, TextSealError
from textseal.log import setup_logger
from textseal.models import (
    CipherMode,
    DeriveMode,
    EncryptResult,
    KeyUsage,
    OperationResult,
)
from textseal.random_source import RandomSource

logger = setup_logger(__name__)

ModeArg = Union[CipherMode, str]
DeriveArg = Union[DeriveMode, str]


def generate_salt() -> str:
    """Genera una salt aleatoria de 128 bits en formato UUID4.

    Returns:
        str: Salt que el usuario debe conservar para descifrar.
    """

    return str(uuid.uuid4())


def encrypt_text(
    text: str,
    password: str,
    salt: Optional[str] = None,
    cipher_mode: ModeArg = CipherMode.AES_GCM,
    derive_mode: DeriveArg = DeriveMode.PBKDF2,
    *,
    random_source: Optional[RandomSource] = None,
) -> EncryptResult:
    """Cifra un texto y lo devuelve como sobre codificado en Base58.

    Args:
        text (str): Texto en claro introducido por el usuario.
        password (str): Contraseña a partir de la que se deriva la clave.
        salt (Optional[str]): Salt elegida por el usuario; si falta o está en
            blanco se genera una aleatoria.
        cipher_mode (ModeArg): Modo AES o su nombre (`AES-CBC`, `AES-CTR`, `AES-GCM`).
        derive_mode (DeriveArg): Función de derivación o su nombre.
        random_source (Optional[RandomSource]): Fuente del IV, inyectable en pruebas.

    Returns:
        EncryptResult: Texto Base58 y salt utilizada.

    """

    if not text:
        raise InvalidInputError("El texto a cifrar es obligatorio.")
    if not password:
        raise InvalidInputError("La contraseña es obligatoria.")

    mode = CipherMode.parse(cipher_mode)
    kdf_mode = DeriveMode.parse(derive_mode)
    salt_used = salt if salt and salt.strip() else generate_salt()

    try:
        plaintext = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidInputError("El texto contiene caracteres que no se pueden codificar en UTF-8.") from exc

    with derive_key(password, salt_used, mode, KeyUsage.ENCRYPT, derive_mode=kdf_mode) as key:
        iv, ciphertext = crypto_sym.encrypt(key, plaintext, mode, random_source=random_source)

    packed = envelope.pack(iv, ciphertext)
    logger.info("Encrypted %s/%s envelope=%d bytes", mode.value, kdf_mode.value, len(packed))
    encoded = b58encode(packed)
    return EncryptResult(encoded_text=encoded, salt_used=salt_used)


def decrypt_text(
    encoded_text: str,
    password: str,
    salt: str,
    cipher_mode: ModeArg = CipherMode.AES_GCM,
    derive_mode: DeriveArg = DeriveMode.PBKDF2,
) -> str:
    """Descifra un sobre Base58 generado por :func:`encrypt_text`.

    En AES-CBC y AES-CTR una contraseña o salt incorrectas devuelven texto
    basura; los bytes que no sean UTF-8 válido se sustituyen por U+FFFD.

    Args:
        encoded_text (str): Sobre codificado en Base58.
        password (str): Contraseña usada al cifrar.
        salt (str): Salt devuelta al cifrar.
        cipher_mode (ModeArg): Modo AES usado al cifrar.
        derive_mode (DeriveArg): Función de derivación usada al cifrar.

    Returns:
        str: Texto en claro.

    """

    if not encoded_text or not encoded_text.strip():
        raise InvalidInputError("El texto cifrado es obligatorio.")
    if not password:
        raise InvalidInputError("La contraseña es obligatoria.")
    if not salt:
        raise InvalidInputError("La salt es obligatoria para descifrar.")

    mode = CipherMode.parse(cipher_mode)
    kdf_mode = DeriveMode.parse(derive_mode)

    iv, ciphertext = envelope.unpack(b58decode(encoded_text.strip()))
    # encrypt_text nunca produce un sobre sin ciphertext.
    if not ciphertext:
        raise DecryptionError("El texto cifrado no contiene datos tras el IV.")
    with derive_key(password, salt, mode, KeyUsage.DECRYPT, derive_mode=kdf_mode) as key:
        plaintext = crypto_sym.decrypt(key, iv, ciphertext, mode)

    logger.info("Decrypted %s/%s ct=%d bytes", mode.value, kdf_mode.value, len(ciphertext))
    return plaintext.decode("utf-8", errors="replace")


def process_encrypt(
    text: str,
    password: str,
    salt: Optional[str] = None,
    cipher_mode: ModeArg = CipherMode.AES_GCM,
    derive_mode: DeriveArg = DeriveMode.PBKDF2,
    *,
    random_source: Optional[RandomSource] = None,
) -> OperationResult:
    """Variante de :func:`encrypt_text` que devuelve un resultado en lugar de lanzar.

    Returns:
        OperationResult: `ok` con el texto cifrado y la salt, o el tipo de error
        y su mensaje.
    """

    try:
        result = encrypt_text(
            text, password, salt, cipher_mode, derive_mode, random_source=random_source
        )
    except TextSealError as exc:
        logger.warning("Encrypt failed: %s", exc.kind.value)
        return OperationResult(ok=False, error_kind=exc.kind, message=exc.message)
    return OperationResult(
        ok=True,
        value=result.encoded_text,
        salt=result.salt_used,
        message="Texto cifrado. Guarda la salt para poder descifrarlo.",
    )


def process_decrypt(
    encoded_text: str,
    password: str,
    salt: str,
    cipher_mode: ModeArg = CipherMode.AES_GCM,
    derive_mode: DeriveArg = DeriveMode.PBKDF2,
) -> OperationResult:
    """Variante de :func:`decrypt_text` que devuelve un resultado en lugar de lanzar."""

    try:
        plaintext = decrypt_text(encoded_text, password, salt, cipher_mode, derive_mode)
    except TextSealError as exc:
        logger.warning("Decrypt failed: %s", exc.kind.value)
        return OperationResult(ok=False, error_kind=exc.kind, message=exc.message)
    return OperationResult(ok=True, value=plaintext, salt=salt, message="Texto descifrado.")
