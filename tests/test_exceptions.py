import pytest

from fn_util.exceptions import CustomException, InvalidArgumentError, InvalidKeyError


class _OtherError(CustomException):
    pass


def test_value_equality():
    a = CustomException('boom', help_link='http://help', source='io', data={'k': 1})
    b = CustomException('boom', help_link='http://help', source='io', data={'k': 1})
    assert a == b
    assert not (a != b)
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


@pytest.mark.parametrize('other', [
    CustomException('other'),
    CustomException('boom', source='net'),
    CustomException('boom', help_link='http://x'),
    CustomException('boom', data={'k': 2}),
    _OtherError('boom'),
])
def test_inequality(other):
    assert CustomException('boom') != other


def test_cause_takes_part_in_equality():
    a, b = CustomException('boom'), CustomException('boom')
    a.__cause__ = CustomException('root')
    assert a != b
    b.__cause__ = CustomException('root')
    assert a == b


def test_compare_with_foreign_types():
    assert CustomException('boom') != Exception('boom')
    assert CustomException('boom') != 'boom'


def test_message_and_repr():
    e = CustomException('boom', source='io')
    assert e.message == 'boom'
    assert str(e) == 'boom'
    assert CustomException().message == ''
    assert repr(e) == "CustomException('boom', help_link=None, source='io')"


def test_hierarchy():
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(InvalidKeyError, InvalidArgumentError)
    e = InvalidKeyError(None, 'None cannot be used as a key')
    assert e.key is None
    assert 'None cannot be used as a key' in str(e)
    with pytest.raises(CustomException):
        raise e
