import pytest

from fn_util.design_patterns import Deconstructable, Deconstructs, deconstruct
from fn_util.exceptions import InvalidArgumentError


class _Money:
    def __init__(self, amount, currency):
        self.amount = amount
        self.currency = currency

    def deconstruct(self):
        return self.amount, self.currency


class _Connection:
    def __init__(self):
        self.open = True

    def deconstruct(self):
        self.open = False


def test_value_form():
    m = _Money(3, 'EUR')
    assert isinstance(m, Deconstructable)
    assert deconstruct(m) == (3, 'EUR')


def test_in_place_teardown():
    c = _Connection()
    assert isinstance(c, Deconstructs)
    assert deconstruct(c) is None
    assert not c.open


def test_not_deconstructable():
    with pytest.raises(InvalidArgumentError):
        deconstruct(object())
