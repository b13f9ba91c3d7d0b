"""
Serviço de Deduplicação.

O armazenamento pode devolver linhas repetidas (mesmo id) em certas
condições de sincronização. Toda agregação roda sobre dados deduplicados.
"""

import logging
from typing import Iterable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def dedupe(rows: Iterable[T]) -> tuple[T, ...]:
    """
    Mantém a primeira ocorrência de cada id, preservando a ordem original.

    Idempotente: dedupe(dedupe(xs)) == dedupe(xs).
    """
    seen = set()
    unique = []
    dropped = 0

    for row in rows:
        if row.id in seen:
            dropped += 1
            continue
        seen.add(row.id)
        unique.append(row)

    if dropped:
        logger.warning("%d linha(s) duplicada(s) descartada(s)", dropped)

    return tuple(unique)


def find_duplicate_ids(rows: Iterable[T]) -> dict:
    """Ids que aparecem mais de uma vez → número de ocorrências (ordem da primeira aparição)."""
    counts: dict = {}
    for row in rows:
        counts[row.id] = counts.get(row.id, 0) + 1
    return {row_id: n for row_id, n in counts.items() if n > 1}
