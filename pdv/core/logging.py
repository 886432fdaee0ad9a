# pdv/core/logging.py
import logging

from pdv.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configurar_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


logger = get_logger("pdv")
