import os
import sys

from fn_util.design_patterns.singleton import Singleton


def _env_flag(name, default):
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in ('1', 'true', 'yes', 'on')


# ----------------------------------------------------------------------------------------------------------------------
#                                                      STRINGS
# ----------------------------------------------------------------------------------------------------------------------
class PaddingConfig(Singleton):
    TOTAL_LENGTH = 50  # Default field width for strings.prints.padding
    CHAR = ' '  # Default fill character. Must be a single character


class JsonConfig(Singleton):
    INDENT = 2  # Indentation used by strings.dumps
    ENSURE_ASCII = False  # False keeps non-ASCII characters readable instead of \uXXXX escapes


# ----------------------------------------------------------------------------------------------------------------------
#                                                      LOGGING
# ----------------------------------------------------------------------------------------------------------------------
class LogConfig(Singleton):
    FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'
    LEVEL = os.getenv('FN_UTIL_LOG_LEVEL', 'WARNING').upper()  # Level used by strings.logs.set_logging_to_stdout


# ----------------------------------------------------------------------------------------------------------------------
#
# ----------------------------------------------------------------------------------------------------------------------
class _Config(Singleton):
    padding: Singleton = PaddingConfig()
    json: Singleton = JsonConfig()
    log: Singleton = LogConfig()
    # Install better_exceptions as the excepthook on import. Defaults to on for interactive terminals only
    PRETTY_TRACEBACKS = _env_flag('FN_UTIL_PRETTY_TRACEBACKS', sys.stderr is not None and sys.stderr.isatty())


Config = _Config()
