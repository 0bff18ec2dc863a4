"""Configuración del logger 'calculator'."""

import logging

LOGGER_NAME = "calculator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(level="INFO"):
    """
    Configura el logger de la aplicación una sola vez.

    Args:
        level (str | int): Nivel de log ("DEBUG", "INFO", ... o constante de logging)

    Returns:
        logging.Logger: Logger 'calculator'
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger  # ya configurado

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
