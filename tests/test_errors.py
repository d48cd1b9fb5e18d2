import pytest

from trmsubs.errors import SubsError


def test_message_is_preserved():
    err = SubsError("singular matrix")
    assert str(err) == "singular matrix"


def test_can_be_caught_as_exception():
    err = SubsError("null matrix")
    assert isinstance(err, Exception)
    assert err.args == ("null matrix",)
    with pytest.raises(SubsError, match="null matrix"):
        raise err


def test_is_distinct_from_value_error():
    err = SubsError("matrix not square")
    assert not isinstance(err, ValueError)
    assert str(err) == "matrix not square"
    with pytest.raises(SubsError, match="matrix not square"):
        try:
            raise err
        except ValueError:
            pass