# --------------------------------------------------------------
# File: Home.py
# Description: Página Streamlit para cifrar y descifrar texto con contraseña.
# --------------------------------------------------------------

import streamlit as st

from api.services import process_decrypt, process_encrypt
from textseal.config import DEFAULT_CIPHER, DEFAULT_DERIVE
from textseal.models import CipherMode, DeriveMode

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="TextSeal", page_icon="🔐", layout="centered")

st.title("🔐 TextSeal")
st.write("Cifra y descifra texto con AES-256 y una clave derivada de tu contraseña.")

cipher_values = [mode.value for mode in CipherMode]
derive_values = [mode.value for mode in DeriveMode]


def _index(values, default: str) -> int:
    """Posición de `default` en `values`, o la primera si no está."""
    return values.index(default) if default in values else 0


tab_enc, tab_dec = st.tabs(["Cifrar", "Descifrar"])

# Sección de cifrado.
with tab_enc:
    derive_e = st.selectbox(
        "Función de derivación",
        derive_values,
        index=_index(derive_values, DEFAULT_DERIVE),
        key="enc_derive",
        help="Argon2 está reservado y todavía no se puede usar.",
    )
    cipher_e = st.selectbox(
        "Algoritmo de cifrado", cipher_values, index=_index(cipher_values, DEFAULT_CIPHER), key="enc_cipher"
    )
    random_salt = st.checkbox("Usar salt aleatoria (más seguro)", value=True, key="enc_random_salt")
    salt_e = st.text_input("Salt", type="password", disabled=random_salt, key="enc_salt")
    password_e = st.text_input("Contraseña", type="password", key="enc_pass")
    text_e = st.text_area("Texto a cifrar", height=120, key="enc_text")

    if st.button("Cifrar", disabled=not (text_e and password_e), key="btn_encrypt"):
        res = process_encrypt(
            text_e,
            password_e.strip(),
            None if random_salt else salt_e.strip(),
            cipher_e,
            derive_e,
        )
        if res.ok:
            st.success(res.message)
            st.code(res.value, language=None)
            if random_salt:
                # SECURITY: La salt generada solo se muestra aquí; sin ella no hay descifrado.
                st.warning("Importante: guarda esta salt, la necesitarás para descifrar.")
                st.code(res.salt, language=None)
        else:
            st.error(f"Error: {res.message}")

# Sección de descifrado.
with tab_dec:
    derive_d = st.selectbox(
        "Función de derivación", derive_values, index=_index(derive_values, DEFAULT_DERIVE), key="dec_derive"
    )
    cipher_d = st.selectbox(
        "Algoritmo de cifrado", cipher_values, index=_index(cipher_values, DEFAULT_CIPHER), key="dec_cipher"
    )
    salt_d = st.text_input("Salt", type="password", key="dec_salt")
    password_d = st.text_input("Contraseña", type="password", key="dec_pass")
    text_d = st.text_area("Texto cifrado", height=120, key="dec_text")

    if st.button("Descifrar", disabled=not (text_d and password_d), key="btn_decrypt"):
        res = process_decrypt(text_d.strip(), password_d.strip(), salt_d.strip(), cipher_d, derive_d)
        if res.ok:
            st.success(res.message)
            st.text_area("Texto descifrado", value=res.value, height=120, disabled=True, key="dec_out")
        else:
            st.error(f"Error: {res.message}")
