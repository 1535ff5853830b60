import logging
from typing import (
    NamedTuple,
)

from scripts.benchmark._utils.shellart import (
    bold,
)


class DefaultStat(NamedTuple):
    counter: int = 0
    caption: str = ""
    total_calls: int = 0
    total_seconds: float = 0

    @property
    def calls_per_second(self) -> float:
        return self.total_calls / self.total_seconds

    @property
    def nanoseconds_per_call(self) -> float:
        return self.total_seconds * 1e9 / self.total_calls

    @property
    def avg_total_calls(self) -> float:
        return self.total_calls / self.counter

    @property
    def avg_total_seconds(self) -> float:
        return self.total_seconds / self.counter

    def cumulate(
        self, stat: "DefaultStat", increment_by_counter: bool = False
    ) -> "DefaultStat":
        increment_step = 1 if not increment_by_counter else stat.counter
        return DefaultStat(
            counter=self.counter + increment_step,
            total_calls=self.total_calls + stat.total_calls,
            total_seconds=self.total_seconds + stat.total_seconds,
        )


REPORT_TABLE_LENGTH = 92
SINGLE_UNDERLINE = "-" * REPORT_TABLE_LENGTH
DOUBLE_UNDERLINE = "=" * REPORT_TABLE_LENGTH
HASH_UNDERLINE = "#" * REPORT_TABLE_LENGTH


def print_default_benchmark_result_header() -> None:
    logging.info(SINGLE_UNDERLINE)
    logging.info(
        bold(
            f"|{'Benchmark':^22}|{'total seconds':^16}|{'total calls':^16}"
            f"|{'calls / second':^16}|{'ns / call':^16}|"
        )
    )
    logging.info(SINGLE_UNDERLINE)


def print_default_benchmark_stat_line(stat: DefaultStat) -> None:
    logging.info(
        f"|{stat.caption:^22}"
        f"|{stat.total_seconds:^16.3f}"
        f"|{stat.total_calls:^16,}"
        f"|{stat.calls_per_second:^16,.0f}"
        f"|{stat.nanoseconds_per_call:^16,.1f}|"
    )


def print_default_benchmark_total_line(stat: DefaultStat) -> None:
    logging.info(SINGLE_UNDERLINE)
    logging.info(
        bold(
            f'|{"Total":^22}'
            f"|{stat.total_seconds:^16.3f}"
            f"|{stat.total_calls:^16,}"
            f'|{"-":^16}'  # calls_per_second
            f'|{"-":^16}|'  # ns per call
        )
    )
    logging.info(
        bold(
            f'|{"Avg":^22}'
            f"|{stat.avg_total_seconds:^16.3f}"
            f"|{stat.avg_total_calls:^16,.0f}"
            f"|{stat.calls_per_second:^16,.0f}"
            f"|{stat.nanoseconds_per_call:^16,.1f}|"
        )
    )
    logging.info(DOUBLE_UNDERLINE + "\n")


def print_final_benchmark_total_line(stat: DefaultStat) -> None:
    logging.info(HASH_UNDERLINE + "\n")
    print_default_benchmark_total_line(stat)
