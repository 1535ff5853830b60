import sys

#
# Integer widths
#
SUPPORTED_WIDTHS = (8, 16, 32, 64, 128)

# Width of the platform's native pointer-sized integers
POINTER_SIZE_BITS = sys.maxsize.bit_length() + 1


#
# Unsigned bounds
#
UINT_8_CEILING = 2**8
UINT_8_MAX = 2**8 - 1
UINT_16_CEILING = 2**16
UINT_16_MAX = 2**16 - 1
UINT_32_CEILING = 2**32
UINT_32_MAX = 2**32 - 1
UINT_64_CEILING = 2**64
UINT_64_MAX = 2**64 - 1
UINT_128_CEILING = 2**128
UINT_128_MAX = 2**128 - 1


#
# Signed bounds
#
INT_8_MIN = -(2**7)
INT_8_MAX = 2**7 - 1
INT_16_MIN = -(2**15)
INT_16_MAX = 2**15 - 1
INT_32_MIN = -(2**31)
INT_32_MAX = 2**31 - 1
INT_64_MIN = -(2**63)
INT_64_MAX = 2**63 - 1
INT_128_MIN = -(2**127)
INT_128_MAX = 2**127 - 1


#
# Messages
#
NEGATIVE_SQUARE_ROOT_MESSAGE = "cannot calculate square root of negative number"
