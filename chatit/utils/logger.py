"""Simple logger utility."""
import logging

from ..app.config import Config

logger = logging.getLogger("chatit")
if not logger.handlers:
    h = logging.StreamHandler()
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    h.setFormatter(fmt)
    logger.addHandler(h)
    logger.setLevel(Config.LOG_LEVEL)

def get_logger():
    return logger
