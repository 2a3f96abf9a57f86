import better_exceptions



# ----------------------------------------------------------------------------------------------------------------------
#                                                   Base Exception
# ----------------------------------------------------------------------------------------------------------------------
class CustomException(Exception):
    """
    Template for the package exceptions. Carries an optional help link, the name of the object/application that
    raised it and a free-form data dict. Two instances are equal when they hold the same values, not only when
    they are the same object:
        CustomException('boom', source='io') == CustomException('boom', source='io')  # True
    """

    def __init__(self, message=None, help_link=None, source=None, data=None):
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.help_link = help_link
        self.source = source
        self.data = dict(data) if data else {}

    @property
    def message(self):
        return str(self.args[0]) if self.args else ''

    def __eq__(self, other):
        if not isinstance(other, CustomException):
            return NotImplemented
        return (type(self) is type(other)
                and self.args == other.args
                and self.data == other.data
                and self.help_link == other.help_link
                and self.source == other.source
                and self.__cause__ == other.__cause__)

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        # data and cause are left out - equal objects still hash equal
        return hash((type(self), self.message, self.help_link, self.source))

    def __repr__(self):
        return f'{self.__class__.__name__}({self.message!r}, help_link={self.help_link!r}, source={self.source!r})'


# ----------------------------------------------------------------------------------------------------------------------
#                                                   Usage Errors
# ----------------------------------------------------------------------------------------------------------------------
class InvalidArgumentError(CustomException, ValueError):
    pass


class InvalidKeyError(InvalidArgumentError):
    """Raised synchronously by the memoizers for a None or unhashable key. Never cached."""

    def __init__(self, key, reason):
        super().__init__(f'Invalid memoization key {key!r}: {reason}', source='fn_util.cache')
        self.key = key


# ----------------------------------------------------------------------------------------------------------------------
#                                                   Tracebacks
# ----------------------------------------------------------------------------------------------------------------------
def install_pretty_tracebacks():
    better_exceptions.hook()