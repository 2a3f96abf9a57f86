import logging
import sys

from decorator import decorator

from fn_util.cfg import Config
from fn_util.strings.prints import colored

log = logging.getLogger(__name__)


# ----------------------------------------------------------------------------------------------------------------------
#                                                        logging Formats
# ----------------------------------------------------------------------------------------------------------------------
class LogColorer(logging.Formatter):
    # Color messages depending on their levels. The record itself is left untouched for other handlers
    _LEVEL_COLORS = {
        logging.WARNING: 'yellow',
        logging.ERROR: 'red',
        logging.CRITICAL: 'red',
    }

    def format(self, record):
        return colored(super().format(record), self._LEVEL_COLORS.get(record.levelno))


# ----------------------------------------------------------------------------------------------------------------------
#                                                       logging Manips
# ----------------------------------------------------------------------------------------------------------------------
def set_logging_to_stdout(level=None, logger_name='fn_util'):
    """
    Attach a colored STDOUT handler to the given logger. Calling it again only updates the level.
    Returns the logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(Config.log.LEVEL if level is None else level)
    for hdlr in logger.handlers:
        if getattr(hdlr, '_fn_util_stdout', False):
            return logger

    hdlr = logging.StreamHandler(sys.stdout)
    hdlr.setFormatter(LogColorer(Config.log.FORMAT))
    hdlr._fn_util_stdout = True
    logger.addHandler(hdlr)
    return logger


# ----------------------------------------------------------------------------------------------------------------------
#                                                        Decorators
# ----------------------------------------------------------------------------------------------------------------------
@decorator
def loggable(fn, *args, **kwargs):
    """
    Usage:
        @loggable
        def add(a, b):
            return a + b
    Logs the call and its return value at DEBUG, and any exception at ERROR before re-raising it.
    The decorated function keeps the signature of fn.
    """
    log.debug('PRECALL:  %s called with %s %s', fn.__name__, args, kwargs)
    try:
        return_value = fn(*args, **kwargs)
    except Exception:
        log.exception('%s raised', fn.__name__)
        raise
    log.debug('POSTCALL: %s returned %r', fn.__name__, return_value)
    return return_value
