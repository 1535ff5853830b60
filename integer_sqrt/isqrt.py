import functools
from typing import (
    Optional,
)

from eth_utils import (
    get_extended_debug_logger,
)

from integer_sqrt.abc import (
    IntegerTypeAPI,
)
from integer_sqrt.constants import (
    NEGATIVE_SQUARE_ROOT_MESSAGE,
)
from integer_sqrt.exceptions import (
    NegativeSquareRoot,
)
from integer_sqrt.integers import (
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
)
from integer_sqrt.validation import (
    validate_integer_type_value,
    validate_is_integer_type,
)


logger = get_extended_debug_logger("integer_sqrt.isqrt")


def checked_integer_sqrt(value: int, int_type: IntegerTypeAPI) -> Optional[int]:
    """
    Return the integer square root of ``value``, the largest ``r`` such that
    ``r * r <= value``, or ``None`` if ``value`` is negative.

    The root is built one bit at a time from the most significant pair of bits
    of ``value`` down, using only shifts and overflow checked multiplication
    at the width of ``int_type``.  No floating point or wider intermediate is
    involved, so the result is exact up to ``int_type.max_value``.

    See https://en.wikipedia.org/wiki/Integer_square_root
    """
    validate_is_integer_type(int_type)
    validate_integer_type_value(value, int_type)

    # Never true for unsigned types, validation has already rejected negatives
    if value < 0:
        return None

    # Find the greatest shift.  A shift equal to the width wraps to a shift of
    # zero, which shows up as ``value_shifted == value``.
    shift = 2
    value_shifted = int_type.wrapping_shr(value, shift)
    while value_shifted != 0 and value_shifted != value:
        shift += 2
        value_shifted = int_type.wrapping_shr(value, shift)
    shift -= 2

    # Find the digits of the result
    result = 0
    while True:
        result = int_type.wrapping_shl(result, 1)
        candidate_result = result + 1
        candidate_square = int_type.checked_mul(candidate_result, candidate_result)
        if candidate_square is not None:
            if candidate_square <= int_type.wrapping_shr(value, shift):
                result = candidate_result

        if logger.show_debug2:
            logger.debug2(
                "ISQRT %s(%s): shift=%d candidate=%d square=%s result=%d",
                int_type.name,
                value,
                shift,
                candidate_result,
                candidate_square,
                result,
            )

        if shift == 0:
            break
        shift = max(shift - 2, 0)

    return result


def integer_sqrt(value: int, int_type: IntegerTypeAPI) -> int:
    """
    Return the integer square root of ``value``.

    Raise :class:`~integer_sqrt.exceptions.NegativeSquareRoot` if ``value`` is
    negative.  Intended for call sites that already know the input is
    non-negative; use :func:`checked_integer_sqrt` otherwise.
    """
    result = checked_integer_sqrt(value, int_type)
    if result is None:
        logger.debug("Rejected negative %s input: %s", int_type.name, value)
        raise NegativeSquareRoot(NEGATIVE_SQUARE_ROOT_MESSAGE)
    return result


checked_integer_sqrt_u8 = functools.partial(checked_integer_sqrt, int_type=UINT8)
checked_integer_sqrt_u16 = functools.partial(checked_integer_sqrt, int_type=UINT16)
checked_integer_sqrt_u32 = functools.partial(checked_integer_sqrt, int_type=UINT32)
checked_integer_sqrt_u64 = functools.partial(checked_integer_sqrt, int_type=UINT64)
checked_integer_sqrt_u128 = functools.partial(checked_integer_sqrt, int_type=UINT128)
checked_integer_sqrt_usize = functools.partial(checked_integer_sqrt, int_type=USIZE)
checked_integer_sqrt_i8 = functools.partial(checked_integer_sqrt, int_type=INT8)
checked_integer_sqrt_i16 = functools.partial(checked_integer_sqrt, int_type=INT16)
checked_integer_sqrt_i32 = functools.partial(checked_integer_sqrt, int_type=INT32)
checked_integer_sqrt_i64 = functools.partial(checked_integer_sqrt, int_type=INT64)
checked_integer_sqrt_i128 = functools.partial(checked_integer_sqrt, int_type=INT128)
checked_integer_sqrt_isize = functools.partial(checked_integer_sqrt, int_type=ISIZE)

integer_sqrt_u8 = functools.partial(integer_sqrt, int_type=UINT8)
integer_sqrt_u16 = functools.partial(integer_sqrt, int_type=UINT16)
integer_sqrt_u32 = functools.partial(integer_sqrt, int_type=UINT32)
integer_sqrt_u64 = functools.partial(integer_sqrt, int_type=UINT64)
integer_sqrt_u128 = functools.partial(integer_sqrt, int_type=UINT128)
integer_sqrt_usize = functools.partial(integer_sqrt, int_type=USIZE)
integer_sqrt_i8 = functools.partial(integer_sqrt, int_type=INT8)
integer_sqrt_i16 = functools.partial(integer_sqrt, int_type=INT16)
integer_sqrt_i32 = functools.partial(integer_sqrt, int_type=INT32)
integer_sqrt_i64 = functools.partial(integer_sqrt, int_type=INT64)
integer_sqrt_i128 = functools.partial(integer_sqrt, int_type=INT128)
integer_sqrt_isize = functools.partial(integer_sqrt, int_type=ISIZE)
