"""
Pairing heap benchmarks.

Measures average time and estimated memory of the heap operations over
exponentially growing random inputs and writes the results to a CSV file.

Usage:
    python -m pairheap.cli bench --path pairing_heap_performance.csv
"""

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .datastructures import PairingHeap, Node

# Defaults used by the CLI
DEFAULT_BASE_INPUT = 100
DEFAULT_DOUBLINGS = 12
DEFAULT_ITERATIONS = 5
DEFAULT_OUTPUT_CSV = "pairing_heap_performance.csv"

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def random_elements(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Draw *size* heap elements in [0, 1_000_000]; pass a seeded *rng* for repeatable runs."""
    draw = (rng or random).randint
    return [draw(0, 1000000) for _ in range(size)]


def measure_operation_time(operation: Callable[[List[int]], PairingHeap[int]], input_size: int,
                           iterations: int = DEFAULT_ITERATIONS,
                           rng: Optional[random.Random] = None) -> Tuple[float, float]:
    """Time *operation* on fresh random inputs; returns (mean ms, stdev ms), stdev 0.0 for one run."""
    samples_ms = []
    for data in (random_elements(input_size, rng) for _ in range(iterations)):
        began = time.perf_counter()
        operation(data)
        samples_ms.append((time.perf_counter() - began) * 1000)

    spread = statistics.stdev(samples_ms) if len(samples_ms) > 1 else 0.0
    return statistics.mean(samples_ms), spread


def measure_space(heap: PairingHeap[int]) -> int:
    """Estimate the bytes held by *heap*: every node, its children list, and its element."""
    total = sys.getsizeof(heap)
    stack = [heap]
    while stack:
        node = stack.pop()
        if isinstance(node, Node):
            total += sys.getsizeof(node.elem) + sys.getsizeof(node.children)
            for child in node.children:
                total += sys.getsizeof(child)
                stack.append(child)
    return total


def measure_space_efficiency(operation: Callable[[List[int]], PairingHeap[int]], input_size: int,
                             iterations: int = 3, rng: Optional[random.Random] = None) -> float:
    """Return average memory used by the heap an operation leaves behind (bytes)."""
    sizes = [measure_space(operation(random_elements(input_size, rng))) for _ in range(iterations)]
    return statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def op_insert(data: List[int]) -> PairingHeap[int]:
    heap: PairingHeap[int] = PairingHeap.new()
    for item in data:
        heap = heap.insert(item)
    return heap


def op_pop(data: List[int]) -> PairingHeap[int]:
    heap = PairingHeap.from_iterable(data)
    while True:
        popped = heap.pop_min()
        if popped is None:
            return heap
        _, heap = popped


def op_peek(data: List[int]) -> PairingHeap[int]:
    heap = PairingHeap.from_iterable(data)
    for _ in range(min(3, len(data))):
        _ = heap.peek_min()
    return heap


def op_merge(data: List[int]) -> PairingHeap[int]:
    # Merge two halves built independently
    half = len(data) // 2
    left = PairingHeap.from_iterable(data[:half])
    right = PairingHeap.from_iterable(data[half:])
    return left.merge(right)


OPERATIONS: Dict[str, Callable[[List[int]], PairingHeap[int]]] = {
    "insert": op_insert,
    "pop": op_pop,
    "peek": op_peek,
    "merge": op_merge,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = DEFAULT_BASE_INPUT, doublings: int = DEFAULT_DOUBLINGS,
                   iterations: int = DEFAULT_ITERATIONS,
                   operations: Optional[Sequence[str]] = None, seed: Optional[int] = None) -> List[List[str]]:
    """Run exponential performance tests for the pairing heap operations.

    Input sizes are ``base_input * 2**i`` for ``i`` in ``range(doublings)``.
    A *seed* makes the generated inputs (and so the space column) repeatable.
    Returns the data rows written after the header.
    """
    if base_input <= 0 or doublings <= 0 or iterations <= 0:
        raise ValueError("base_input, doublings and iterations must be positive")

    names = list(operations) if operations else list(OPERATIONS)
    unknown = [n for n in names if n not in OPERATIONS]
    if unknown:
        raise ValueError(f"unknown operation(s): {', '.join(unknown)}")

    input_sizes = [base_input * (2 ** i) for i in range(doublings)]
    rows: List[List[str]] = []
    rng = random.Random(seed)

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name in names:
            op_func = OPERATIONS[op_name]
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations, rng)
                avg_space = measure_space_efficiency(op_func, size, min(3, iterations), rng)
                row = [str(size), op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                logging.info(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                             f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    logging.info(f"Benchmark completed. Results saved to {output_file}")
    return rows
