from importlib.metadata import (
    version as __version,
)

from integer_sqrt.integers import (
    ALL_INTEGER_TYPES,
    INT8,
    INT16,
    INT32,
    INT64,
    INT128,
    ISIZE,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINT128,
    USIZE,
    FixedWidthInteger,
    get_integer_type,
)
from integer_sqrt.isqrt import (
    checked_integer_sqrt,
    checked_integer_sqrt_i8,
    checked_integer_sqrt_i16,
    checked_integer_sqrt_i32,
    checked_integer_sqrt_i64,
    checked_integer_sqrt_i128,
    checked_integer_sqrt_isize,
    checked_integer_sqrt_u8,
    checked_integer_sqrt_u16,
    checked_integer_sqrt_u32,
    checked_integer_sqrt_u64,
    checked_integer_sqrt_u128,
    checked_integer_sqrt_usize,
    integer_sqrt,
    integer_sqrt_i8,
    integer_sqrt_i16,
    integer_sqrt_i32,
    integer_sqrt_i64,
    integer_sqrt_i128,
    integer_sqrt_isize,
    integer_sqrt_u8,
    integer_sqrt_u16,
    integer_sqrt_u32,
    integer_sqrt_u64,
    integer_sqrt_u128,
    integer_sqrt_usize,
)


__version__ = __version("integer-sqrt")
