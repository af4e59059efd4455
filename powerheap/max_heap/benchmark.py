import time
from typing import Any, Iterable, NamedTuple, Optional

import numpy as np

from powerheap.errors import EmptyHeapError
from powerheap.max_heap.power_heap import PowerHeap

DEFAULT_EXPONENTS = (0, 1, 2, 4, 8, 16)
MAX_RANDOM_VALUE = 1_000_000


class BenchmarkResult(NamedTuple):
    exponent: int
    branching_factor: int
    size: int
    correct: bool
    elapsed_ms: float
    final_size: int
    empty_pop_raised: bool


def drain(heap: PowerHeap) -> list[Any]:
    """
    Pop every element of a heap.

    Parameters
    ----------
    heap : PowerHeap
        The heap to empty. It is left with no elements.

    Returns
    -------
    list[Any]
        The elements in the order they were popped.
    """
    popped = []
    while not heap.is_empty():
        popped.append(heap.pop_max())
    return popped


def is_non_increasing(values: Iterable[Any]) -> bool:
    """
    Check that no value is larger than the one before it.

    Parameters
    ----------
    values : Iterable[Any]
        Values supporting ``<``, typically the output of :func:`drain`.

    Returns
    -------
    bool
        True when the sequence never increases. Equal neighbours are allowed.
    """
    previous = None
    for value in values:
        if previous is not None and previous < value:
            return False
        previous = value
    return True


def run_exponent(
    exponent: int,
    n: int,
    rng: np.random.Generator
) -> BenchmarkResult:
    """
    Fill a heap with random integers, drain it and check the pop order.

    Only the drain is timed.

    Parameters
    ----------
    exponent : int
        Branching factor exponent of the heap under test.
    n : int
        Number of values to insert.
    rng : np.random.Generator
        Source of the random values. Duplicates are expected.

    Returns
    -------
    BenchmarkResult
        Timing and correctness figures for this exponent.
    """
    heap = PowerHeap(exponent)
    for value in rng.integers(0, MAX_RANDOM_VALUE, size=n).tolist():
        heap.insert(value)

    start = time.perf_counter()
    popped = drain(heap)
    elapsed_ms = (time.perf_counter() - start) * 1000

    try:
        heap.pop_max()
    except EmptyHeapError:
        empty_pop_raised = True
    else:
        empty_pop_raised = False

    return BenchmarkResult(
        exponent=exponent,
        branching_factor=heap.branching_factor,
        size=n,
        correct=len(popped) == n and is_non_increasing(popped),
        elapsed_ms=elapsed_ms,
        final_size=len(heap),
        empty_pop_raised=empty_pop_raised,
    )


def run_benchmark(
    exponents: Iterable[int] = DEFAULT_EXPONENTS,
    n: int = 5000,
    seed: Optional[int] = 42
) -> list[BenchmarkResult]:
    """
    Run :func:`run_exponent` for several branching factors.

    Parameters
    ----------
    exponents : Iterable[int]
        Exponents to test, by default 0, 1, 2, 4, 8 and 16.
    n : int
        Number of values inserted per heap, by default 5000.
    seed : int, optional
        Seed shared by all runs, by default 42.

    Returns
    -------
    list[BenchmarkResult]
        One result per exponent, in the given order.
    """
    rng = np.random.default_rng(seed)
    return [run_exponent(exponent, n, rng) for exponent in exponents]
