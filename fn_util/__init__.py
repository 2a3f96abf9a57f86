"""
fn_util - small function decoration utilities.

Memoization (fn_util.cache) is the core. The rest are helpers it is usually composed with: pipe and object
reflection (fn_util.func), string padding/casing and JSON pretty printing (fn_util.strings), a value-comparable
exception base (fn_util.exceptions) and configuration/deconstruction patterns (fn_util.design_patterns).
"""
import logging

from fn_util.cfg import Config
from fn_util.cache import memoize, memoize_concurrent, MemoizedFunction, ConcurrentMemoizedFunction
from fn_util.exceptions import CustomException, InvalidArgumentError, InvalidKeyError, install_pretty_tracebacks
from fn_util.func import pipe, reflect

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())

if Config.PRETTY_TRACEBACKS:
    install_pretty_tracebacks()
