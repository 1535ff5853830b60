import time
from typing import (
    Any,
    Callable,
    NamedTuple,
)


class TimedResult(NamedTuple):
    duration: float
    iterations: int
    wrapped_value: Any


def time_calls(fn: Callable[[], Any], iterations: int) -> TimedResult:
    """
    Call ``fn`` ``iterations`` times and report the total wall clock duration
    along with the value returned by the last call.
    """
    return_value = None
    start = time.perf_counter()
    for _ in range(iterations):
        return_value = fn()
    duration = time.perf_counter() - start
    return TimedResult(
        duration=duration,
        iterations=iterations,
        wrapped_value=return_value,
    )
