from powerheap.errors import (
    EmptyHeapError,
    InvalidConfigurationError,
    MissingValueError,
    PowerHeapError,
)
from powerheap.max_heap.power_heap import PowerHeap
from powerheap.max_heap.benchmark import run_benchmark
