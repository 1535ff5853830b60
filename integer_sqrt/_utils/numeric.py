from typing import (
    Optional,
)


def unsigned_to_signed(value: int, bits: int) -> int:
    if value < 2 ** (bits - 1):
        return value
    else:
        return value - 2**bits


def truncate(value: int, bits: int, is_signed: bool) -> int:
    """
    Keep the low ``bits`` bits of ``value`` and read them back as an integer
    of the given signedness.
    """
    unsigned_value = value & (2**bits - 1)
    if is_signed:
        return unsigned_to_signed(unsigned_value, bits)
    else:
        return unsigned_value


def wrapping_shr(value: int, shift: int, bits: int) -> int:
    """
    Right shift ``value`` by ``shift`` modulo ``bits``.

    Shifting by exactly ``bits`` is therefore a no-op rather than a shift to
    zero.  Python's ``>>`` is arithmetic on negative numbers, which is the
    signed behaviour; non-negative values shift logically.
    """
    return value >> (shift % bits)


def wrapping_shl(value: int, shift: int, bits: int, is_signed: bool) -> int:
    """
    Left shift ``value`` by ``shift`` modulo ``bits``, discarding the bits
    shifted out of the top of the word.
    """
    return truncate(value << (shift % bits), bits, is_signed)


def checked_mul(left: int, right: int, bits: int, is_signed: bool) -> Optional[int]:
    """
    Multiply ``left`` and ``right``, returning ``None`` if the product does not
    fit in a ``bits`` wide integer of the given signedness.
    """
    product = left * right
    if is_signed:
        lower, upper = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
    else:
        lower, upper = 0, 2**bits - 1

    if lower <= product <= upper:
        return product
    else:
        return None
