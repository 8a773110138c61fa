# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del sobre criptográfico de textseal.
# --------------------------------------------------------------
"""Inicializa el paquete `textseal` y documenta sus módulos principales."""

__all__ = [
    "base58",
    "config",
    "crypto_kdf",
    "crypto_sym",
    "envelope",
    "errors",
    "log",
    "models",
    "random_source",
]
