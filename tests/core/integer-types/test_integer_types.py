from eth_utils import (
    ValidationError,
)
import pytest

from integer_sqrt import constants
from integer_sqrt.exceptions import (
    UnknownIntegerType,
)
from integer_sqrt.integers import (
    ALL_INTEGER_TYPES,
    INT8,
    INT128,
    ISIZE,
    UINT8,
    UINT64,
    UINT128,
    USIZE,
    FixedWidthInteger,
    get_integer_type,
)


@pytest.mark.parametrize(
    "int_type,min_value,max_value",
    (
        (UINT8, 0, constants.UINT_8_MAX),
        (UINT128, 0, constants.UINT_128_MAX),
        (INT8, constants.INT_8_MIN, constants.INT_8_MAX),
        (INT128, constants.INT_128_MIN, constants.INT_128_MAX),
    ),
    ids=["u8", "u128", "i8", "i128"],
)
def test_integer_type_bounds(int_type, min_value, max_value):
    assert int_type.min_value == min_value
    assert int_type.max_value == max_value
    assert int_type.contains(min_value)
    assert int_type.contains(max_value)
    assert not int_type.contains(min_value - 1)
    assert not int_type.contains(max_value + 1)


def test_integer_type_ceiling(int_type):
    assert int_type.ceiling == 2**int_type.bits
    assert int_type.max_value - int_type.min_value + 1 == int_type.ceiling


def test_supported_widths_are_all_registered():
    widths = {
        int_type.bits
        for int_type in ALL_INTEGER_TYPES
        if int_type.name not in ("usize", "isize")
    }
    assert widths == set(constants.SUPPORTED_WIDTHS)


def test_pointer_sized_types():
    assert USIZE.bits == constants.POINTER_SIZE_BITS
    assert ISIZE.bits == constants.POINTER_SIZE_BITS
    assert not USIZE.is_signed
    assert ISIZE.is_signed


def test_equality_uses_width_and_signedness():
    assert FixedWidthInteger("word", 64, is_signed=False) == UINT64
    assert hash(FixedWidthInteger("word", 64, is_signed=False)) == hash(UINT64)
    assert UINT8 != INT8
    assert UINT8 != 8


def test_get_integer_type(int_type):
    assert get_integer_type(int_type.name) is int_type


def test_get_unknown_integer_type():
    with pytest.raises(UnknownIntegerType) as excinfo:
        get_integer_type("u256")

    assert excinfo.value.type_name == "u256"
    assert isinstance(excinfo.value, KeyError)


@pytest.mark.parametrize("bits", (0, -8, 7, "8", 8.0, None, True))
def test_invalid_bit_width(bits):
    with pytest.raises(ValidationError):
        FixedWidthInteger("bad", bits, is_signed=False)


def test_integer_type_repr():
    assert repr(UINT8) == "<FixedWidthInteger u8>"


def test_integer_type_str():
    assert str(UINT8) == "u8"
    assert str(ISIZE) == "isize"
