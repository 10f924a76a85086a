from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class PairingHeap(ABC, Generic[T]):
    """A pairing min-heap: either ``Empty`` or a ``Node`` with child heaps.

    Every operation that combines heaps (``merge``, ``insert``, ``pop_min``)
    takes ownership of its operands and returns a new heap value. The old
    handles must not be used afterwards: the winning root's children list is
    extended in place, and ``pop_min`` detaches the popped root's children.

    Elements only need ``<`` (and ``<=`` for heap ordering). When two roots
    are incomparable (neither ``a < b`` nor ``b < a``, e.g. NaN) the
    right-hand operand wins, exactly as it does on ties.
    """

    __slots__ = ()

    # -----------------------------
    # Construction
    # -----------------------------
    @staticmethod
    def new() -> PairingHeap[T]:
        return Empty()

    @staticmethod
    def default() -> PairingHeap[T]:
        return Empty()

    @staticmethod
    def singleton(elem: T) -> PairingHeap[T]:
        return Node(elem)

    @staticmethod
    def from_iterable(it: Iterable[T] = ()) -> PairingHeap[T]:
        """Build a heap by inserting each item of *it* in order, starting from Empty.

        Every item that is not smaller than the current root becomes a new
        last child of that root; a smaller item becomes the new root with the
        old root as its only child.
        """
        heap: PairingHeap[T] = Empty()
        for item in it:
            heap = heap.insert(item)
        return heap

    # -----------------------------
    # Queries
    # -----------------------------
    def is_empty(self) -> bool:
        return isinstance(self, Empty)

    @abstractmethod
    def peek_min(self) -> Optional[T]:
        """Return the smallest element without consuming the heap, or None if empty."""

    # -----------------------------
    # Consuming operations
    # -----------------------------
    def merge(self, other: PairingHeap[T]) -> PairingHeap[T]:
        """Merge two heaps in O(1); both operands are consumed.

        Empty is the identity. Otherwise the root that compares strictly
        smaller wins and the other heap is appended as its last child; on
        ties (or incomparable roots) *other* wins.
        """
        if not isinstance(other, PairingHeap):
            raise TypeError(f"can only merge PairingHeap instances, not {type(other).__name__}")
        if isinstance(self, Empty):
            return other
        if isinstance(other, Empty):
            return self
        return _link(self, other)  # type: ignore[arg-type]

    def insert(self, elem: T) -> PairingHeap[T]:
        """Insert *elem* by merging with a singleton heap (O(1))."""
        return self.merge(Node(elem))

    @abstractmethod
    def pop_min(self) -> Optional[Tuple[T, PairingHeap[T]]]:
        """Remove the root and return ``(elem, rest)``, or None if the heap is empty."""

    def drain(self) -> Iterator[T]:
        """Consume the heap, yielding its elements in non-decreasing order."""
        heap = self
        while True:
            popped = heap.pop_min()
            if popped is None:
                return
            elem, heap = popped
            yield elem

    # -----------------------------
    # Container protocol
    # -----------------------------
    def __iter__(self) -> Iterator[T]:
        # Pre-order over the tree (heap order, not sorted order)
        stack: List[PairingHeap[T]] = [self]
        while stack:
            heap = stack.pop()
            if isinstance(heap, Node):
                yield heap.elem
                stack.extend(reversed(heap.children))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def to_list(self) -> List[T]:
        return list(self)

    # -----------------------------
    # Equality (structural) and ordering (by root)
    # -----------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PairingHeap):
            return NotImplemented
        pending: List[Tuple[PairingHeap[T], PairingHeap[T]]] = [(self, other)]
        while pending:
            a, b = pending.pop()
            if isinstance(a, Empty) or isinstance(b, Empty):
                if not (isinstance(a, Empty) and isinstance(b, Empty)):
                    return False
                continue
            assert isinstance(a, Node) and isinstance(b, Node)
            if not a.elem == b.elem or len(a.children) != len(b.children):
                return False
            pending.extend(zip(a.children, b.children))
        return True

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PairingHeap):
            return NotImplemented
        if isinstance(self, Node) and isinstance(other, Node):
            return self.elem < other.elem
        return isinstance(self, Empty) and isinstance(other, Node)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PairingHeap):
            return NotImplemented
        if isinstance(self, Node) and isinstance(other, Node):
            return self.elem <= other.elem
        return isinstance(self, Empty)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PairingHeap):
            return NotImplemented
        return other.__lt__(self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PairingHeap):
            return NotImplemented
        return other.__le__(self)


class Empty(PairingHeap[T]):
    """The heap with no elements."""

    __slots__ = ()

    def peek_min(self) -> Optional[T]:
        return None

    def pop_min(self) -> Optional[Tuple[T, PairingHeap[T]]]:
        return None

    def __repr__(self) -> str:
        return "Empty()"


class Node(PairingHeap[T]):
    """A root element plus its sub-heaps, in insertion/merge order.

    ``children`` holds only non-empty heaps, each rooted at an element that
    is not smaller than ``elem``.
    """

    __slots__ = ("elem", "children")

    def __init__(self, elem: T, children: Optional[List[PairingHeap[T]]] = None) -> None:
        self.elem = elem
        self.children: List[PairingHeap[T]] = children if children is not None else []

    def peek_min(self) -> Optional[T]:
        return self.elem

    def pop_min(self) -> Optional[Tuple[T, PairingHeap[T]]]:
        """Two-pass pairing: merge siblings pairwise left to right, then fold from the right.

        The fold always merges the most recent pair result with the one before
        it (last.merge(previous)), which fixes the resulting tree shape.
        """
        children, self.children = self.children, []

        pairs: List[PairingHeap[T]] = []
        it = iter(children)
        for first in it:
            second = next(it, None)
            pairs.append(first if second is None else first.merge(second))

        while len(pairs) > 1:
            last = pairs.pop()
            previous = pairs.pop()
            pairs.append(last.merge(previous))

        return self.elem, (pairs.pop() if pairs else Empty())

    def __repr__(self) -> str:
        # Explicit stack of pending heaps and literal fragments; chains can be deep
        parts: List[str] = []
        stack: List[object] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, Node) and item.children:
                parts.append(f"Node({item.elem!r}, [")
                stack.append("])")
                for i, child in enumerate(reversed(item.children)):
                    if i:
                        stack.append(", ")
                    stack.append(child)
            elif isinstance(item, Node):
                parts.append(f"Node({item.elem!r})")
            else:
                parts.append(repr(item))
        return "".join(parts)


def _link(left: Node[T], right: Node[T]) -> Node[T]:
    """Make the strictly smaller root the parent; *right* wins ties and incomparable roots."""
    if left.elem < right.elem:
        left.children.append(right)
        return left
    right.children.append(left)
    return right


def heapsort(it: Iterable[T]) -> List[T]:
    """Return the items of *it* in non-decreasing order using a pairing heap."""
    return list(PairingHeap.from_iterable(it).drain())
