import math
from typing import (
    Optional,
)

from integer_sqrt.constants import (
    UINT_64_MAX,
)
from integer_sqrt.integers import (
    UINT64,
)
from integer_sqrt.isqrt import (
    checked_integer_sqrt_u64,
)

from .base_benchmark import (
    BaseBenchmark,
    BenchmarkCase,
)


def isqrt_via_float(value: int) -> int:
    """
    Integer square root of a ``u64`` through a double precision square root.
    The double can land one either side of the true root for large inputs, so
    the candidate is moved down or up by one until its square brackets
    ``value``.
    """
    candidate = int(math.sqrt(float(value)))

    square = UINT64.checked_mul(candidate, candidate)
    if square is None or square > value:
        return candidate - 1

    next_square = UINT64.checked_mul(candidate + 1, candidate + 1)
    if next_square is not None and next_square <= value:
        return candidate + 1
    return candidate


U64_CASES = (
    BenchmarkCase("small", 63, 7),
    BenchmarkCase("med", 10**10, 10**5),
    BenchmarkCase("large", UINT_64_MAX, 2**32 - 1),
)


class CheckedIntegerSqrtBenchmark(BaseBenchmark):
    name = "isqrt"

    def __init__(self, iterations: int = 20000) -> None:
        super().__init__(U64_CASES, iterations)

    def call(self, value: int) -> Optional[int]:
        return checked_integer_sqrt_u64(value)


class FloatSqrtBenchmark(BaseBenchmark):
    name = "isqrt_f64"

    def __init__(self, iterations: int = 20000) -> None:
        super().__init__(U64_CASES, iterations)

    def call(self, value: int) -> int:
        return isqrt_via_float(value)
