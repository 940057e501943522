import logging
import os

LOGGER_NAME = "irf_kinetics"


def setup_logging(log_file=None, level=logging.INFO):
    """
    Configure the package logger: console output at ``level`` and, when
    ``log_file`` is given, a DEBUG-level file log next to it.
    """
    log_format = '%(asctime)s - %(levelname)s - %(message)s'

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
