"""
Configuração centralizada dos relatórios.
Carrega variáveis de ambiente (.env local) ou st.secrets (Streamlit Cloud).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Carrega .env a partir da raiz do projeto (apenas local)
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")


def _get_secret(key: str, default: str = None) -> str | None:
    """Busca config em st.secrets (Cloud) ou os.environ (.env local)."""
    try:
        import streamlit as st
        if hasattr(st, "secrets") and key in st.secrets:
            return st.secrets[key]
    except Exception:
        pass
    return os.getenv(key, default)


def _get_int(key: str, default: int) -> int:
    """Lê um inteiro da config; valor inválido cai no padrão."""
    raw = _get_secret(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        return int(raw)
    except (ValueError, TypeError):
        return default


# ─── Relatórios ───

SERIES_MONTHS = _get_int("RENTAL_REPORTS_SERIES_MONTHS", 6)
DEFAULT_PERIOD_FILTER = _get_secret("RENTAL_REPORTS_DEFAULT_FILTER", "this_month")
CURRENCY_SYMBOL = _get_secret("RENTAL_REPORTS_CURRENCY_SYMBOL", "₫")

# ─── Cache ───

CACHE_TTL = _get_int("RENTAL_REPORTS_CACHE_TTL", 300)  # 5 minutos
CACHE_MAX_ENTRIES = _get_int("RENTAL_REPORTS_CACHE_MAX_ENTRIES", 32)

# ─── Logging ───

LOG_LEVEL = _get_secret("LOG_LEVEL", "INFO")
