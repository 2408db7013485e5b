"""
Configuración de logging
Prepara el logger raíz para ambos programas.
"""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """Mandar los logs de todos los módulos a stdout con hora, módulo y nivel"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Evitar handlers duplicados si se llama dos veces
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
        )
    )
    logger.addHandler(handler)
