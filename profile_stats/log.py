import logging
import os

LOG_LEVEL = os.environ.get("PROFILE_STATS_LOG_LEVEL", "INFO").upper()


def get_logger(name=None):
    logger = logging.getLogger(name or "profile_stats")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(levelname)s - %(name)s: %(message)s'
        ))
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)
        logger.propagate = False
    return logger
