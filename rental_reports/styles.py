"""
Tabelas de exibição das categorias de despesa.

Rótulo, ícone e cores por ExpenseCategory. As tabelas cobrem todas as
categorias; a busca é direta, sem valor padrão.
"""

from rental_reports.models.ledger_models import ExpenseCategory

# ─── Rótulos ───

CATEGORY_LABELS = {
    ExpenseCategory.ELECTRIC_SHARED: "Điện chung",
    ExpenseCategory.INTERNET_SHARED: "Internet chung",
    ExpenseCategory.TRASH_SHARED: "Rác chung",
    ExpenseCategory.REPAIR: "Sửa chữa",
    ExpenseCategory.OTHER: "Khác",
}

# ─── Ícones ───

CATEGORY_ICONS = {
    ExpenseCategory.ELECTRIC_SHARED: "⚡",
    ExpenseCategory.INTERNET_SHARED: "🌐",
    ExpenseCategory.TRASH_SHARED: "🗑️",
    ExpenseCategory.REPAIR: "🔧",
    ExpenseCategory.OTHER: "📝",
}

# ─── Cores (fundo, texto) ───

CATEGORY_COLORS = {
    ExpenseCategory.ELECTRIC_SHARED: {"bg": "#fefce8", "text": "#a16207"},
    ExpenseCategory.INTERNET_SHARED: {"bg": "#faf5ff", "text": "#7e22ce"},
    ExpenseCategory.TRASH_SHARED: {"bg": "#f0fdf4", "text": "#15803d"},
    ExpenseCategory.REPAIR: {"bg": "#fff7ed", "text": "#c2410c"},
    ExpenseCategory.OTHER: {"bg": "#f8fafc", "text": "#334155"},
}

# Paleta dos segmentos do gráfico de pizza (cíclica)
CHART_COLORS = [
    "#3b82f6",  # blue
    "#10b981",  # green
    "#f59e0b",  # amber
    "#ef4444",  # red
    "#8b5cf6",  # purple
]


def category_label(category: ExpenseCategory) -> str:
    return CATEGORY_LABELS[category]


def category_icon(category: ExpenseCategory) -> str:
    return CATEGORY_ICONS[category]


def category_colors(category: ExpenseCategory) -> dict:
    return CATEGORY_COLORS[category]


def chart_color(index: int) -> str:
    """Cor do i-ésimo segmento do gráfico."""
    return CHART_COLORS[index % len(CHART_COLORS)]
