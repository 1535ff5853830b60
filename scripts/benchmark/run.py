#!/usr/bin/env python

import logging
import sys

from checks import (
    CheckedIntegerSqrtBenchmark,
    FloatSqrtBenchmark,
)

from integer_sqrt._utils.version import (
    construct_runtime_identifier,
)
from scripts.benchmark._utils.reporting import (
    DefaultStat,
    print_final_benchmark_total_line,
)
from scripts.benchmark._utils.shellart import (
    bold,
)

HEADER = (
    "\n"
    "██ ███████  ██████  ██████  ████████\n"
    "██ ██      ██    ██ ██   ██    ██   \n"
    "██ ███████ ██    ██ ██████     ██   \n"
    "██      ██ ██ ▄▄ ██ ██   ██    ██   \n"
    "██ ███████  ██████  ██   ██    ██   \n"
    "               ▀▀                   \n"
)


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    logging.info(bold(HEADER, "green"))
    logging.info(construct_runtime_identifier() + "\n")

    iterations = 20000
    if "--quick" in sys.argv:
        iterations = 1000

    total_stat = DefaultStat()

    benchmarks = [
        CheckedIntegerSqrtBenchmark(iterations),
        FloatSqrtBenchmark(iterations),
    ]

    for benchmark in benchmarks:
        total_stat = total_stat.cumulate(benchmark.run(), increment_by_counter=True)

    print_final_benchmark_total_line(total_stat)


if __name__ == "__main__":
    run()
