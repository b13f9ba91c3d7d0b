"""
Utilitários de cache para os relatórios.

A chave do cache é o conteúdo dos argumentos: qualquer mudança nas
coleções de entrada gera um novo cálculo. O cache é opcional e fica
fora das funções de agregação.
"""

import streamlit as st

from rental_reports.config import CACHE_MAX_ENTRIES, CACHE_TTL


def cached(ttl: int = CACHE_TTL, max_entries: int = CACHE_MAX_ENTRIES):
    """Decorador em torno de st.cache_data (funciona também fora do Streamlit)."""
    return st.cache_data(ttl=ttl, max_entries=max_entries, show_spinner=False)


def clear_all_caches():
    """Descarta todos os relatórios em cache."""
    st.cache_data.clear()
