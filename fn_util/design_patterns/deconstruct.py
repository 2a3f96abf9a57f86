from typing import Protocol, TypeVar, runtime_checkable

from fn_util.exceptions import InvalidArgumentError

T = TypeVar('T', covariant=True)


# ----------------------------------------------------------------------------------------------------------------------
#                                                      Protocols
# ----------------------------------------------------------------------------------------------------------------------
@runtime_checkable
class Deconstructable(Protocol[T]):
    """An object that can hand out its value form"""

    def deconstruct(self) -> T:
        ...


@runtime_checkable
class Deconstructs(Protocol):
    """An object that tears itself down in place"""

    def deconstruct(self) -> None:
        ...


# ----------------------------------------------------------------------------------------------------------------------
#
# ----------------------------------------------------------------------------------------------------------------------
def deconstruct(obj):
    """
    Dispatch to obj.deconstruct(). Returns the value form for a Deconstructable, None for a Deconstructs
    """
    if not isinstance(obj, Deconstructable):
        raise InvalidArgumentError(f'{type(obj).__name__} has no deconstruct() method',
                                   source='fn_util.design_patterns.deconstruct')
    return obj.deconstruct()
