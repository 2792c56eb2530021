import logging
import os
from importlib import metadata

from ._constants import COMPONENT_NAME, DISTRIBUTION_NAME, LOG_STDOUT_ENV_VAR, LOG_LEVEL_ENV_VAR


try:
    version = metadata.version(DISTRIBUTION_NAME)
except metadata.PackageNotFoundError:
    version = '0.0.0'

_propagate = False
if os.environ.get(LOG_STDOUT_ENV_VAR):
    _propagate = True


def _level_from_env(default=logging.DEBUG):
    level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not level:
        return default
    if level.isdigit():
        return int(level)
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else default


class _LoggerFactory:
    @staticmethod
    def get_logger(name, verbosity=None):
        logger = logging.getLogger(__name__).getChild(name)
        logger.propagate = _propagate
        logger.setLevel(verbosity if verbosity is not None else _level_from_env())
        if not _LoggerFactory._found_handler(logger, logging.NullHandler):
            logger.addHandler(logging.NullHandler())

        return logger

    @staticmethod
    def trace(logger, message, custom_dimensions=None):
        payload = dict(pid=os.getpid(), source=COMPONENT_NAME, version=version)
        if custom_dimensions is not None:
            payload.update(custom_dimensions)
        logger.debug('Message: {}\nPayload: {}'.format(message, payload))

    @staticmethod
    def _found_handler(logger, handler_type):
        for log_handler in logger.handlers:
            if isinstance(log_handler, handler_type):
                return True

        return False
