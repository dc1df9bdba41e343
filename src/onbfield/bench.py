"""Timing harness for the GF(2^233) field operations.

Runs addition, squaring, trace, multiplication, inversion and a^N on two
operands and reports each result with its wall-clock time.

Usage:
    onbfield-bench [-a BITS] [-b BITS] [--exponent BITS] [--repeat N]

Configuration (CLI flags take precedence):
    ONBFIELD_LOG_LEVEL     logging level name (default INFO)
    ONBFIELD_BENCH_REPEAT  timed runs per operation, best is kept (default 1)
"""

import argparse
import logging
import os
import sys
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from .element import FieldElement
from .errors import ONBFieldError
from .exponent import inverse, power

DEFAULT_A = (
    "10111100000011111110110111100101101100100111011101101000001011110001001110001110110001011"
    "10110011010000100111010110101101110010000011001101011111001000000101010010111110101010000"
    "0010011001001001110100110011101111100101011110010111010"
)
DEFAULT_B = (
    "10010100100111000111100100011001111101000111000010110011001110000101100000111110101110000"
    "10000000110111011000111000110010100011101101011011100110111011100100000010110010111001100"
    "0001011010010101110111100111001010001000001111010001010"
)
DEFAULT_EXPONENT = (
    "00101001011111011010001010001101011000100101011011001110100011100111010111101101011000010"
    "11100010011001111001110010000100101110110111011010111111100101001000110101101010001001011"
    "0001011001101100111111111011111100010010100011101000111"
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logger(name: str = "onbfield", level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s', datefmt='%H:%M:%S')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


@dataclass
class BenchmarkResult:
    """Outcome of one timed operation.

    Attributes:
        operation: Human-readable operation label.
        value:     The operation's result (element or trace bit).
        seconds:   Best wall-clock time over all runs.
    """

    operation: str
    value: Union[FieldElement, bool]
    seconds: float

    @property
    def microseconds(self) -> int:
        return int(round(self.seconds * 1e6))


def _timed(fn: Callable, repeat: int) -> Tuple[object, float]:
    best = None
    value = None
    for _ in range(repeat):
        start = time.perf_counter()
        value = fn()
        elapsed = time.perf_counter() - start
        if best is None or elapsed < best:
            best = elapsed
    return value, best


def run_benchmark(
    a: FieldElement,
    b: FieldElement,
    exponent: str,
    repeat: int = 1,
) -> List[BenchmarkResult]:
    """Time every field operation on *a*, *b* and *exponent*.

    Args:
        a:        First operand (also the base for inversion and a^N).
        b:        Second operand.
        exponent: MSB-first bit string N.
        repeat:   Runs per operation; the fastest is reported.

    Returns:
        One :class:`BenchmarkResult` per operation, in execution order.
    """
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}")

    operations = [
        ("Addition", lambda: a + b),
        ("a^2", a.square),
        ("Trace of a", a.trace),
        ("Multiplication", lambda: a * b),
        ("Inverse of a", lambda: inverse(a)),
        ("a^N", lambda: power(a, exponent)),
    ]
    results = []
    for label, fn in operations:
        value, seconds = _timed(fn, repeat)
        results.append(BenchmarkResult(label, value, seconds))
    return results


def _format_value(value: Union[FieldElement, bool]) -> str:
    if isinstance(value, bool):
        return str(int(value))
    return value.to_bitstring()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="onbfield-bench",
        description="Time GF(2^233) optimal normal basis arithmetic.",
    )
    parser.add_argument('-a', default=DEFAULT_A, help='first operand as a big-endian bit string')
    parser.add_argument('-b', default=DEFAULT_B, help='second operand as a big-endian bit string')
    parser.add_argument('--exponent', default=DEFAULT_EXPONENT, help='exponent N, MSB first')
    parser.add_argument('--repeat', type=int, default=os.getenv("ONBFIELD_BENCH_REPEAT", "1"),
                        help='timed runs per operation, best is kept')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        default=os.getenv("ONBFIELD_LOG_LEVEL", "INFO"))
    args = parser.parse_args(argv)
    # argparse does not check choices against defaults taken from the environment.
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid ONBFIELD_LOG_LEVEL: {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")

    logger = setup_logger(level=args.log_level)

    try:
        a = FieldElement.from_bitstring(args.a)
        b = FieldElement.from_bitstring(args.b)
        results = run_benchmark(a, b, args.exponent, repeat=args.repeat)
    except (ONBFieldError, ValueError) as e:
        logger.error(f"Invalid input: {e}")
        return 2

    for result in results:
        logger.info(f"{result.operation}: {_format_value(result.value)}")
        logger.info(f"Time: {result.microseconds} microseconds")
    return 0


if __name__ == '__main__':
    sys.exit(main())
