from typing import (
    Any,
    Dict,
    Optional,
    Tuple,
)

from cached_property import (
    cached_property,
)

from integer_sqrt._utils.numeric import (
    checked_mul,
    wrapping_shl,
    wrapping_shr,
)
from integer_sqrt.abc import (
    IntegerTypeAPI,
)
from integer_sqrt.constants import (
    POINTER_SIZE_BITS,
)
from integer_sqrt.exceptions import (
    UnknownIntegerType,
)
from integer_sqrt.validation import (
    validate_gt,
    validate_multiple_of,
)


class FixedWidthInteger(IntegerTypeAPI):
    """
    A two's complement integer of ``bits`` width.

    Two types compare equal when they share a width and signedness, so the
    pointer-sized types are interchangeable with the matching explicit width.
    """

    def __init__(self, name: str, bits: int, is_signed: bool) -> None:
        validate_gt(bits, 0, title="Bit width")
        validate_multiple_of(bits, 2, title="Bit width")

        self.name = name
        self.bits = bits
        self.is_signed = is_signed

    @cached_property
    def min_value(self) -> int:
        if self.is_signed:
            return -(2 ** (self.bits - 1))
        else:
            return 0

    @cached_property
    def max_value(self) -> int:
        if self.is_signed:
            return 2 ** (self.bits - 1) - 1
        else:
            return 2**self.bits - 1

    @cached_property
    def ceiling(self) -> int:
        return 2**self.bits

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def checked_mul(self, left: int, right: int) -> Optional[int]:
        return checked_mul(left, right, self.bits, self.is_signed)

    def wrapping_shr(self, value: int, shift: int) -> int:
        return wrapping_shr(value, shift, self.bits)

    def wrapping_shl(self, value: int, shift: int) -> int:
        return wrapping_shl(value, shift, self.bits, self.is_signed)

    def _key(self) -> Tuple[int, bool]:
        return self.bits, self.is_signed

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FixedWidthInteger):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

    def __str__(self) -> str:
        return self.name


UINT8 = FixedWidthInteger("u8", 8, is_signed=False)
UINT16 = FixedWidthInteger("u16", 16, is_signed=False)
UINT32 = FixedWidthInteger("u32", 32, is_signed=False)
UINT64 = FixedWidthInteger("u64", 64, is_signed=False)
UINT128 = FixedWidthInteger("u128", 128, is_signed=False)
USIZE = FixedWidthInteger("usize", POINTER_SIZE_BITS, is_signed=False)

INT8 = FixedWidthInteger("i8", 8, is_signed=True)
INT16 = FixedWidthInteger("i16", 16, is_signed=True)
INT32 = FixedWidthInteger("i32", 32, is_signed=True)
INT64 = FixedWidthInteger("i64", 64, is_signed=True)
INT128 = FixedWidthInteger("i128", 128, is_signed=True)
ISIZE = FixedWidthInteger("isize", POINTER_SIZE_BITS, is_signed=True)


ALL_INTEGER_TYPES = (
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINT128,
    USIZE,
    INT8,
    INT16,
    INT32,
    INT64,
    INT128,
    ISIZE,
)

SIGNED_INTEGER_TYPES = tuple(
    int_type for int_type in ALL_INTEGER_TYPES if int_type.is_signed
)
UNSIGNED_INTEGER_TYPES = tuple(
    int_type for int_type in ALL_INTEGER_TYPES if not int_type.is_signed
)

_INTEGER_TYPES_BY_NAME: Dict[str, FixedWidthInteger] = {
    int_type.name: int_type for int_type in ALL_INTEGER_TYPES
}


def get_integer_type(name: str) -> FixedWidthInteger:
    try:
        return _INTEGER_TYPES_BY_NAME[name]
    except KeyError:
        raise UnknownIntegerType(name)
