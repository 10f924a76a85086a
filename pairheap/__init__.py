"""Pairing heap priority queue with a small benchmarking CLI."""

from .datastructures import PairingHeap, Empty, Node, heapsort

__version__ = "0.1.0"

__all__ = [
    "PairingHeap",
    "Empty",
    "Node",
    "heapsort",
]
