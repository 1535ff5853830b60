import math

from hypothesis import (
    given,
    strategies as st,
)
import pytest

from integer_sqrt.constants import (
    UINT_64_MAX,
)
from scripts.benchmark.checks import (
    CheckedIntegerSqrtBenchmark,
    FloatSqrtBenchmark,
)
from scripts.benchmark.checks.base_benchmark import (
    BaseBenchmark,
    BenchmarkCase,
)
from scripts.benchmark.checks.isqrt import (
    isqrt_via_float,
)


@pytest.mark.parametrize(
    "value,expected",
    (
        (0, 0),
        (63, 7),
        (10**10, 10**5),
        # the double rounds these below the true square
        ((2**32 - 1) ** 2, 2**32 - 1),
        ((2**32 - 2) ** 2, 2**32 - 2),
        # and these above it
        ((2**32 - 1) ** 2 - 1, 2**32 - 2),
        (UINT_64_MAX, 2**32 - 1),
    ),
)
def test_isqrt_via_float_is_exact(value, expected):
    assert isqrt_via_float(value) == expected


@given(st.integers(min_value=0, max_value=UINT_64_MAX))
def test_isqrt_via_float_matches_math(value):
    assert isqrt_via_float(value) == math.isqrt(value)


@given(st.integers(min_value=2**26, max_value=2**32 - 1))
def test_isqrt_via_float_of_large_perfect_squares(root):
    assert isqrt_via_float(root * root) == root
    assert isqrt_via_float(root * root - 1) == root - 1


@pytest.mark.parametrize(
    "benchmark_class",
    (CheckedIntegerSqrtBenchmark, FloatSqrtBenchmark),
)
def test_isqrt_benchmarks_run(benchmark_class):
    stat = benchmark_class(iterations=50).run()

    assert stat.counter == 3
    assert stat.total_calls == 150


class WrongAnswerBenchmark(BaseBenchmark):
    name = "wrong"

    def call(self, value):
        return value + 1


def test_benchmark_checks_the_answer():
    benchmark = WrongAnswerBenchmark([BenchmarkCase("one", 1, 1)], iterations=2)

    with pytest.raises(AssertionError, match="wrong of 1 gave 2, expected 1"):
        benchmark.run()
