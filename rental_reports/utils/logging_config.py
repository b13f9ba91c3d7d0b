"""
Configuração de logging dos relatórios.

Nível controlado pela variável LOG_LEVEL (padrão: INFO).
Use LOG_LEVEL=DEBUG para ver o detalhe de cada agregação.
"""

import logging
import sys

from rental_reports.config import LOG_LEVEL

PACKAGE_LOGGER = "rental_reports"
HANDLER_NAME = "rental_reports.stdout"

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Nomes aceitos em LOG_LEVEL
LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(name: str = None) -> int:
    """Converte o nome do nível (ou LOG_LEVEL da config) para a constante do logging."""
    level_str = (name or LOG_LEVEL or "INFO").upper()
    return LOG_LEVEL_MAP.get(level_str, logging.INFO)


def setup_logging(level: str = None) -> logging.Logger:
    """
    Configura o logger do pacote com saída em stdout.

    Pode ser chamado mais de uma vez: o handler anterior é substituído,
    nunca empilhado.
    """
    log_level = get_log_level(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)

    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(log_level)
    stdout_handler.setFormatter(formatter)
    stdout_handler.set_name(HANDLER_NAME)
    logger.addHandler(stdout_handler)

    return logger
