from .isqrt import (  # noqa: F401
    CheckedIntegerSqrtBenchmark,
    FloatSqrtBenchmark,
)
