# --------------------------------------------------------------
# File: test_crypto_kdf.py
# Description: Pruebas de la derivación PBKDF2 y del ciclo de vida de la clave.
# --------------------------------------------------------------

import pytest
from cryptography.hazmat.primitives import hashes

from textseal.crypto_kdf import PBKDF2_ITERATIONS, derive_key
from textseal.errors import (
    InvalidInputError,
    KeyDerivationError,
    UnsupportedAlgorithmError,
)
from textseal.models import CipherMode, DeriveMode, KeyUsage


def test_pbkdf2_sha256_known_vectors():
    """Contrasta la derivación con vectores publicados de PBKDF2-HMAC-SHA256.

    Returns:
        None: Las aserciones comparan el material derivado.
    """
    expected = {
        1: "120fb6cffcf8b32c43e7225256c4f837a86548c92ccc35480805987cb70be17b",
        4096: "c5e478d59288c841aa530db6845c4c8d962893a001ce4e11a4963873aa98134a",
    }
    for iterations, hex_key in expected.items():
        key = derive_key(
            "password", "salt", CipherMode.AES_GCM, KeyUsage.ENCRYPT, iterations=iterations
        )
        assert key.material_for(CipherMode.AES_GCM, KeyUsage.ENCRYPT).hex() == hex_key


def test_derivation_is_deterministic(credentials):
    """Mismas entradas producen la misma clave; otra salt produce otra.

    Returns:
        None: Las aserciones comparan los materiales.
    """
    password, salt = credentials
    a = derive_key(password, salt, CipherMode.AES_CBC, KeyUsage.ENCRYPT)
    b = derive_key(password, salt, CipherMode.AES_CBC, KeyUsage.ENCRYPT)
    c = derive_key(password, salt + "x", CipherMode.AES_CBC, KeyUsage.ENCRYPT)
    ma = a.material_for(CipherMode.AES_CBC, KeyUsage.ENCRYPT)
    assert ma == b.material_for(CipherMode.AES_CBC, KeyUsage.ENCRYPT)
    assert ma != c.material_for(CipherMode.AES_CBC, KeyUsage.ENCRYPT)
    assert len(ma) == 32
    assert PBKDF2_ITERATIONS == 100_000


def test_key_is_bound_to_usage_and_mode(credentials):
    """Una clave de cifrado no sirve para descifrar ni para otro modo.

    Returns:
        None: Se esperan excepciones de entrada inválida.
    """
    password, salt = credentials
    key = derive_key(password, salt, CipherMode.AES_GCM, KeyUsage.ENCRYPT)
    with pytest.raises(InvalidInputError):
        key.material_for(CipherMode.AES_GCM, KeyUsage.DECRYPT)
    with pytest.raises(InvalidInputError):
        key.material_for(CipherMode.AES_CTR, KeyUsage.ENCRYPT)


def test_key_is_wiped_after_context(credentials):
    """El material se borra al salir del bloque `with`.

    Returns:
        None: Se espera KeyDerivationError al reutilizar la clave.
    """
    password, salt = credentials
    with derive_key(password, salt, CipherMode.AES_CTR, KeyUsage.DECRYPT) as key:
        assert key.material_for(CipherMode.AES_CTR, KeyUsage.DECRYPT)
    with pytest.raises(KeyDerivationError):
        key.material_for(CipherMode.AES_CTR, KeyUsage.DECRYPT)


def test_repr_hides_material(credentials):
    """La representación textual no muestra bytes de la clave.

    Returns:
        None: Las aserciones revisan el texto de `repr`.
    """
    password, salt = credentials
    key = derive_key(password, salt, CipherMode.AES_GCM, KeyUsage.ENCRYPT)
    material = key.material_for(CipherMode.AES_GCM, KeyUsage.ENCRYPT)
    text = repr(key)
    assert "AES-GCM" in text and "encrypt" in text
    assert material.hex() not in text


@pytest.mark.parametrize("password, salt", [("", "salt"), ("pw", "")])
def test_empty_inputs_rejected(password, salt):
    """Contraseña o salt vacías producen KeyDerivationError.

    Returns:
        None: Se espera la excepción.
    """
    with pytest.raises(KeyDerivationError):
        derive_key(password, salt, CipherMode.AES_GCM, KeyUsage.ENCRYPT)


def test_argon2_is_reserved():
    """Argon2 figura como opción pero no tiene implementación.

    Returns:
        None: Se espera UnsupportedAlgorithmError.
    """
    with pytest.raises(UnsupportedAlgorithmError):
        derive_key("pw", "salt", CipherMode.AES_GCM, KeyUsage.ENCRYPT, derive_mode=DeriveMode.ARGON2)


def test_custom_hash_changes_key():
    """El hash de PBKDF2 es intercambiable y afecta al resultado.

    Returns:
        None: Las aserciones comparan ambos materiales.
    """
    sha256 = derive_key("pw", "salt", CipherMode.AES_GCM, KeyUsage.ENCRYPT, iterations=10)
    sha512 = derive_key(
        "pw", "salt", CipherMode.AES_GCM, KeyUsage.ENCRYPT, iterations=10, hash_algorithm=hashes.SHA512()
    )
    assert sha256.material_for(CipherMode.AES_GCM, KeyUsage.ENCRYPT) != sha512.material_for(
        CipherMode.AES_GCM, KeyUsage.ENCRYPT
    )


def test_cipher_mode_accepts_string_value():
    """El modo de cifrado puede llegar como texto y se convierte al enum.

    Returns:
        None: Las aserciones revisan el modo ligado a la clave.
    """
    key = derive_key("pw", "salt", "AES-GCM", KeyUsage.ENCRYPT, iterations=10)
    assert key.cipher_mode is CipherMode.AES_GCM
    assert len(key.material_for(CipherMode.AES_GCM, KeyUsage.ENCRYPT)) == 32
    with pytest.raises(UnsupportedAlgorithmError):
        derive_key("pw", "salt", "AES-ECB", KeyUsage.ENCRYPT, iterations=10)


def test_material_copy_is_independent_of_wipe(credentials):
    """La copia entregada no cambia al borrar el buffer interno de la clave.

    Returns:
        None: Las aserciones comparan la copia antes y después de `wipe`.
    """
    password, salt = credentials
    key = derive_key(password, salt, CipherMode.AES_CBC, KeyUsage.ENCRYPT, iterations=10)
    copy = key.material_for(CipherMode.AES_CBC, KeyUsage.ENCRYPT)
    assert isinstance(copy, bytes)
    key.wipe()
    assert any(copy)
    with pytest.raises(KeyDerivationError):
        key.material_for(CipherMode.AES_CBC, KeyUsage.ENCRYPT)
