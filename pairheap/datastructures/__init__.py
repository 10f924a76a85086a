from .pairing_heap import PairingHeap, Empty, Node, heapsort

__all__ = [
    "PairingHeap",
    "Empty",
    "Node",
    "heapsort",
]
