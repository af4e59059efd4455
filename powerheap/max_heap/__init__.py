from powerheap.max_heap.power_heap import (
    DEFAULT_CAPACITY,
    MAX_EXPONENT,
    PowerHeap,
)
