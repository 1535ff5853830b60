from abc import (
    ABC,
    abstractmethod,
)
import logging
from typing import (
    Any,
    NamedTuple,
    Sequence,
)

from scripts.benchmark._utils.meters import (
    time_calls,
)
from scripts.benchmark._utils.reporting import (
    DefaultStat,
    print_default_benchmark_result_header,
    print_default_benchmark_stat_line,
    print_default_benchmark_total_line,
)
from scripts.benchmark._utils.shellart import (
    bold,
)


class BenchmarkCase(NamedTuple):
    caption: str
    value: Any
    expected: Any


class BaseBenchmark(ABC):
    """
    Times ``call`` over every case, ``iterations`` calls per case, checking the
    answer of each case before its timing is reported.
    """

    def __init__(self, cases: Sequence[BenchmarkCase], iterations: int) -> None:
        self.cases = cases
        self.iterations = iterations

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError("Must be implemented by subclasses")

    @abstractmethod
    def call(self, value: Any) -> Any:
        raise NotImplementedError("Must be implemented by subclasses")

    def run(self) -> DefaultStat:
        logging.info(bold(
            f"Starting benchmark: {self.name} ({self.iterations} calls per case)\n",
            "yellow",
        ))
        print_default_benchmark_result_header()

        total_stat = DefaultStat()
        for case in self.cases:
            result = time_calls(lambda: self.call(case.value), self.iterations)
            if result.wrapped_value != case.expected:
                raise AssertionError(
                    f"{self.name} of {case.value} gave {result.wrapped_value}, "
                    f"expected {case.expected}"
                )

            stat = DefaultStat(
                caption=f"{self.name}_{case.caption}",
                total_calls=result.iterations,
                total_seconds=result.duration,
            )
            print_default_benchmark_stat_line(stat)
            total_stat = total_stat.cumulate(stat)

        print_default_benchmark_total_line(total_stat)
        return total_stat
