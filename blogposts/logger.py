import logging
import sys

from blogposts.config import LOG_FILE, LOG_LEVEL


def setup_logger(name="PostLoader", level=LOG_LEVEL, log_file=LOG_FILE):
    # Configurar el logger
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Evitar handlers duplicados si se llama más de una vez
    if logger.handlers:
        return logger

    # Formato del log
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # Salida a consola
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # Salida a archivo (solo si se pide con LOG_FILE)
    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger

# Inicializar logger global
logger = setup_logger()
