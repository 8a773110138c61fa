"""Capa de servicios consumida por la interfaz Streamlit."""
