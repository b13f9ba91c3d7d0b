"""
Serviço de Lucro.

Lucro líquido em regime de caixa: receita recebida − despesas.
"""


def net_profit(collected: float, expense_total: float) -> float:
    """
    Calcula o lucro líquido.

    Usa a receita recebida (collected), nunca o total faturado.
    Resultado negativo é prejuízo e não é truncado em zero.
    """
    return collected - expense_total


def is_loss(profit: float) -> bool:
    return profit < 0
