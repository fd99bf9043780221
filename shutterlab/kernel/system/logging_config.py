import logging
import sys
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Configures the 'shutterlab' logger tree to write to stdout.

    Without an explicit level the one from APP_CONFIG (SHUTTERLAB_LOG_LEVEL)
    is used. Safe to call on every Streamlit rerun: handlers are attached once,
    later calls only adjust the level.
    """
    if level is None:
        from shutterlab.kernel.system.config import APP_CONFIG

        level = APP_CONFIG.log_level

    logger = logging.getLogger("shutterlab")
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Sub-logger under the 'shutterlab' namespace."""
    if name:
        return logging.getLogger(f"shutterlab.{name}")
    return logging.getLogger("shutterlab")
