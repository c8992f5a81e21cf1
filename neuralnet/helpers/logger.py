# helpers/logger.py
import os
import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level=None) -> int:
    """
    Set up logging for scripts and notebooks that drive the layers.

    The library itself only emits debug messages through module loggers and
    never configures handlers on import. `level` may be a name ("DEBUG") or a
    logging constant; when omitted, the LOG_LEVEL environment variable is used.
    Unknown names fall back to INFO. Returns the level that was applied.
    """
    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO')
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('neuralnet').setLevel(level)
    return level
