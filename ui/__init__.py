"""Streamlit order form."""
