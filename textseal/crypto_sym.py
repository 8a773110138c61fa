# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-256 (CBC, CTR y GCM) para cifrar y descifrar texto.
# --------------------------------------------------------------
"""Motor de cifrado simétrico con IV aleatorio de 128 bits por operación."""

from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from textseal.crypto_kdf import DerivedKey
from textseal.errors import (
    AuthenticationError,
    DecryptionError,
    InvalidInputError,
    UnsupportedAlgorithmError,
)
from textseal.log import setup_logger
from textseal.models import CipherMode, KeyUsage
from textseal.random_source import DEFAULT_RANDOM_SOURCE, RandomSource

logger = setup_logger(__name__)

# El mismo IV de 16 bytes se usa en los tres modos, también como nonce GCM.
IV_LENGTH = 16
GCM_TAG_LENGTH = 16
BLOCK_SIZE_BITS = algorithms.AES.block_size


def _check_mode(mode: CipherMode) -> CipherMode:
    if not isinstance(mode, CipherMode):
        raise UnsupportedAlgorithmError(f"Algoritmo de cifrado no soportado: {mode}")
    return mode


def encrypt(
    key: DerivedKey,
    plaintext: bytes,
    mode: CipherMode,
    *,
    random_source: Optional[RandomSource] = None,
) -> Tuple[bytes, bytes]:
    """Cifra `plaintext` con un IV nuevo obtenido de la fuente aleatoria.

    Args:
        key (DerivedKey): Clave derivada para `mode` con uso de cifrado.
        plaintext (bytes): Datos en claro; pueden estar vacíos.
        mode (CipherMode): Modo AES a aplicar.
        random_source (Optional[RandomSource]): Fuente del IV; `os.urandom` por defecto.

    Returns:
        Tuple[bytes, bytes]: IV de 16 bytes y ciphertext. En GCM el ciphertext
        incluye al final la etiqueta de 128 bits.

    """

    mode = _check_mode(mode)
    material = key.material_for(mode, KeyUsage.ENCRYPT)
    iv = (random_source or DEFAULT_RANDOM_SOURCE).random_bytes(IV_LENGTH)
    if len(iv) != IV_LENGTH:
        raise InvalidInputError("La fuente aleatoria no devolvió un IV de 16 bytes.")

    if mode is CipherMode.AES_CBC:
        padder = padding.PKCS7(BLOCK_SIZE_BITS).padder()
        padded = padder.update(plaintext) + padder.finalize()
        encryptor = Cipher(algorithms.AES(material), modes.CBC(iv)).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
    elif mode is CipherMode.AES_CTR:
        encryptor = Cipher(algorithms.AES(material), modes.CTR(iv)).encryptor()
        ciphertext = encryptor.update(plaintext) + encryptor.finalize()
    elif mode is CipherMode.AES_GCM:
        ciphertext = AESGCM(material).encrypt(iv, plaintext, None)
    else:
        raise UnsupportedAlgorithmError(f"Algoritmo de cifrado no soportado: {mode.value}")

    logger.debug("%s encrypt pt=%d bytes ct=%d bytes", mode.value, len(plaintext), len(ciphertext))
    return iv, ciphertext


def decrypt(key: DerivedKey, iv: bytes, ciphertext: bytes, mode: CipherMode) -> bytes:
    """Descifra `ciphertext` con el IV recibido.

    CBC y CTR no autentican: una clave errónea o datos alterados producen
    bytes basura sin error. En CBC, si el relleno PKCS#7 no es válido se
    devuelven los bloques descifrados tal cual.

    Args:
        key (DerivedKey): Clave derivada para `mode` con uso de descifrado.
        iv (bytes): Vector de inicialización de 16 bytes.
        ciphertext (bytes): Datos cifrados (con etiqueta final en GCM).
        mode (CipherMode): Modo AES a aplicar.

    Returns:
        bytes: Datos en claro.

    Raises:
        AuthenticationError: Si la etiqueta GCM no es válida.
        DecryptionError: Si el IV o el ciphertext están mal formados.

    """

    mode = _check_mode(mode)
    material = key.material_for(mode, KeyUsage.DECRYPT)
    if len(iv) != IV_LENGTH:
        raise DecryptionError(f"El IV debe tener {IV_LENGTH} bytes, recibidos {len(iv)}.")

    try:
        if mode is CipherMode.AES_CBC:
            return _decrypt_cbc(material, iv, ciphertext)
        if mode is CipherMode.AES_CTR:
            decryptor = Cipher(algorithms.AES(material), modes.CTR(iv)).decryptor()
            return decryptor.update(ciphertext) + decryptor.finalize()
        if mode is CipherMode.AES_GCM:
            if len(ciphertext) < GCM_TAG_LENGTH:
                raise DecryptionError("El texto cifrado es demasiado corto para contener la etiqueta GCM.")
            return AESGCM(material).decrypt(iv, ciphertext, None)
    except InvalidTag as exc:
        logger.warning("%s authentication failed", mode.value)
        raise AuthenticationError(
            "La verificación de integridad ha fallado: contraseña, salt o texto cifrado incorrectos."
        ) from exc
    except ValueError as exc:
        raise DecryptionError("No se pudo descifrar el texto.") from exc

    raise UnsupportedAlgorithmError(f"Algoritmo de cifrado no soportado: {mode.value}")


def _decrypt_cbc(material: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Descifra AES-CBC y retira el relleno PKCS#7 cuando es válido."""

    block_bytes = BLOCK_SIZE_BITS // 8
    if not ciphertext or len(ciphertext) % block_bytes:
        raise DecryptionError("El texto cifrado CBC debe ser un múltiplo no vacío de 16 bytes.")

    decryptor = Cipher(algorithms.AES(material), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()

    unpadder = padding.PKCS7(BLOCK_SIZE_BITS).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError:
        # Relleno inválido: clave errónea o datos alterados.
        logger.debug("AES-CBC padding invalid, returning raw blocks")
        return padded
