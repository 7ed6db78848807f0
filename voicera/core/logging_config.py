"""
Logging Configuration

Console logging setup shared by the app entry point.
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = 'INFO'):
    """
    Setup root logging with a single console handler.

    Args:
        level: Logging level name
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Clear any existing handlers so repeated launches don't double-log
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    # Gradio and TensorFlow are chatty at INFO
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('tensorflow').setLevel(logging.ERROR)

    logging.info("Logging initialized")
