import inspect
from functools import reduce
from types import FunctionType

from fn_util.exceptions import InvalidArgumentError


# ----------------------------------------------------------------------------------------------------------------------
#                                                       Func Tools
# ----------------------------------------------------------------------------------------------------------------------
def is_function(obj):
    # Does not include callable like objects
    return isinstance(obj, (staticmethod, classmethod, FunctionType))


def pipe(obj, *funcs):
    """
    Feeds obj through funcs, left to right, and returns the last result:
        pipe(3, str)                    -> '3'
        pipe(' Ab ', str.strip, len)    -> 2
        pipe(obj)                       -> obj
    """
    return reduce(lambda acc, f: f(acc), funcs, obj)


# ----------------------------------------------------------------------------------------------------------------------
#                                                     Object Query
# ----------------------------------------------------------------------------------------------------------------------
def _slot_names(cls):
    names = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(slots)
    return names


def reflect(obj):
    """
    Project an object onto a dict holding the names and values of its public instance attributes, along with the
    values of its public properties. Methods and names starting with an underscore are left out.

    Parameters
    ----------
    obj : object
        the object to reflect. Must not be None

    Returns
    -------
    dict
        {attribute name : value}

    Raises
    ------
    InvalidArgumentError
        if obj is None
    """
    if obj is None:
        raise InvalidArgumentError('Cannot reflect None', source='fn_util.func.reflect')

    d = {}
    for name in _slot_names(type(obj)):
        if not name.startswith('_') and hasattr(obj, name):
            d[name] = getattr(obj, name)
    for name, value in getattr(obj, '__dict__', {}).items():
        if not name.startswith('_'):
            d[name] = value
    for name, prop in inspect.getmembers(type(obj), lambda m: isinstance(m, property)):
        if not name.startswith('_'):
            d[name] = prop.__get__(obj)
    return d
