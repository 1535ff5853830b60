from hypothesis import (
    given,
    strategies as st,
)
import pytest

from integer_sqrt.constants import (
    NEGATIVE_SQUARE_ROOT_MESSAGE,
)
from integer_sqrt.exceptions import (
    IntegerSqrtError,
    NegativeSquareRoot,
)
from integer_sqrt.integers import (
    INT8,
    INT64,
    UINT64,
)
from integer_sqrt.isqrt import (
    checked_integer_sqrt,
    integer_sqrt,
)


@pytest.mark.parametrize(
    "value,expected",
    (
        (0, 0),
        (1, 1),
        (3, 1),
        (4, 2),
        (27, 5),
        (65535, 255),
        (65536, 256),
        (18446744073709551615, 4294967295),
    ),
)
def test_integer_sqrt_success(value, expected):
    assert integer_sqrt(value, UINT64) == expected


@given(st.integers(min_value=0, max_value=2**63 - 1))
def test_integer_sqrt_matches_checked_form(value):
    assert integer_sqrt(value, INT64) == checked_integer_sqrt(value, INT64)


def test_integer_sqrt_of_zero(int_type):
    assert integer_sqrt(0, int_type) == 0


def test_integer_sqrt_negative_raises(signed_int_type):
    with pytest.raises(NegativeSquareRoot, match=NEGATIVE_SQUARE_ROOT_MESSAGE):
        integer_sqrt(-1, signed_int_type)


def test_integer_sqrt_negative_error_is_library_error():
    with pytest.raises(IntegerSqrtError) as excinfo:
        integer_sqrt(INT8.min_value, INT8)

    assert str(excinfo.value) == "cannot calculate square root of negative number"
