import logging
from typing import Optional, Union

from ext_helpers_lib.core.constants import LOG_LEVEL


def prepare_logger(logger_name: str, level: Optional[Union[int, str]] = None):
    logger = logging.getLogger(logger_name)
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level or LOG_LEVEL)
    return logger
