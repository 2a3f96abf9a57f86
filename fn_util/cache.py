"""
Argument-keyed result caches for functions of a single hashable argument.

memoize            - at most one call to fn per key, even under concurrent first access. Concurrent callers racing on
                     an uncached key wait for the in-flight computation and share its result (or its exception).
memoize_concurrent - never corrupts its cache under concurrent access, but fn may run more than once for a key when
                     callers race on first access. The first stored value wins and every caller returns it.

Each wrapper owns its cache. Entries are written once and never evicted, so memory grows with the number of
distinct keys seen - do not wrap functions over unbounded key spaces. See functools.lru_cache for a bounded cache.
"""
import functools
import logging
import threading
from concurrent.futures import Future
from types import MappingProxyType

from fn_util.exceptions import InvalidArgumentError, InvalidKeyError

log = logging.getLogger(__name__)


# ----------------------------------------------------------------------------------------------------------------------
#                                                        Keys
# ----------------------------------------------------------------------------------------------------------------------
def _check_key(key):
    if key is None:
        raise InvalidKeyError(key, 'None cannot be used as a key')
    try:
        hash(key)
    except TypeError as e:
        raise InvalidKeyError(key, f'unhashable type {type(key).__name__!r}') from e


# ----------------------------------------------------------------------------------------------------------------------
#                                                        Base
# ----------------------------------------------------------------------------------------------------------------------
class _BaseMemoizedFunction:
    def __init__(self, fn):
        if not callable(fn):
            raise InvalidArgumentError(f'{fn!r} is not callable', source='fn_util.cache')
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._name = getattr(fn, '__qualname__', repr(fn))
        self._cache = {}
        self._lock = threading.Lock()

    @property
    def cache(self):
        """A read-only live view of the cached {key : value} pairs"""
        return MappingProxyType(self._cache)

    def __len__(self):
        return len(self._cache)

    def __contains__(self, key):
        try:
            return key in self._cache
        except TypeError:  # Unhashable keys are never cached
            return False

    def __repr__(self):
        return f'<{self.__class__.__name__} {self._name} [{len(self)} cached]>'


# ----------------------------------------------------------------------------------------------------------------------
#                                                     Exclusive
# ----------------------------------------------------------------------------------------------------------------------
class _Flight:
    # An in-flight computation: the future the waiters block on and the thread computing it
    __slots__ = ('future', 'owner')

    def __init__(self):
        self.future = Future()
        self.owner = threading.get_ident()


class MemoizedFunction(_BaseMemoizedFunction):
    """
    Single-flight memoizer: fn runs at most once per distinct key over the lifetime of the wrapper.
    The lock guards the cache and the in-flight map only; it is never held while fn runs, so different keys
    compute in parallel and fn may recurse into the wrapper with other keys.
    A failed computation is not cached: the exception reaches the caller that ran fn and every caller waiting on
    it, and the next call with that key runs fn again.
    """

    def __init__(self, fn):
        super().__init__(fn)
        self._in_flight = {}

    def __call__(self, key):
        _check_key(key)
        try:
            return self._cache[key]
        except KeyError:
            pass

        with self._lock:
            if key in self._cache:
                return self._cache[key]
            flight = self._in_flight.get(key)
            leader = flight is None
            if leader:
                flight = self._in_flight[key] = _Flight()

        if leader:
            return self._compute(key, flight)
        if flight.owner == threading.get_ident():
            raise RecursionError(f'{self._name} called itself with the key {key!r} it is computing')
        return flight.future.result()

    def _compute(self, key, flight):
        log.debug('%s: cache miss on %r', self._name, key)
        try:
            value = self._fn(key)
        except BaseException as e:
            log.debug('%s: computation failed on %r: %r', self._name, key, e)
            with self._lock:
                del self._in_flight[key]
            flight.future.set_exception(e)
            raise

        with self._lock:
            self._cache[key] = value
            del self._in_flight[key]
        flight.future.set_result(value)
        return value


# ----------------------------------------------------------------------------------------------------------------------
#                                                       Racy
# ----------------------------------------------------------------------------------------------------------------------
class ConcurrentMemoizedFunction(_BaseMemoizedFunction):
    """
    Thread safe memoizer without single-flight: on a miss fn runs outside the lock, and the result is stored with
    an atomic get-or-insert. If another caller stored a value for the key first, the fresh value is dropped and the
    stored one returned, so all callers agree on one value from the first store on.
    fn may therefore run more than once per key - use MemoizedFunction when exactly-once matters.
    """

    def __call__(self, key):
        _check_key(key)
        try:
            return self._cache[key]
        except KeyError:
            pass

        log.debug('%s: cache miss on %r', self._name, key)
        try:
            value = self._fn(key)
        except Exception as e:
            log.debug('%s: computation failed on %r: %r', self._name, key, e)
            raise

        with self._lock:
            return self._cache.setdefault(key, value)


# ----------------------------------------------------------------------------------------------------------------------
#                                                    Constructors
# ----------------------------------------------------------------------------------------------------------------------
def memoize(fn):
    """
    Wrap fn: K -> V with a cache that calls fn at most once per key, concurrent callers included.
    May be used as a decorator:
        @memoize
        def square(n):
            return n * n
    """
    return MemoizedFunction(fn)


def memoize_concurrent(fn):
    """
    Wrap fn: K -> V with a thread safe cache that may call fn more than once per key under first-access races.
    """
    return ConcurrentMemoizedFunction(fn)
