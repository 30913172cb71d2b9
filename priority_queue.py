# priority_queue.py
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar, Union

from utils import swap

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised when removing from or peeking into an empty priority queue."""


class PriorityQueueElement(Generic[T]):
    """Pairs a payload with its numeric priority."""

    __slots__ = ("data", "priority")

    def __init__(self, data: T, priority: float):
        self.data = data
        self.priority = priority

    def __repr__(self) -> str:
        return f"PriorityQueueElement({self.data!r}, {self.priority!r})"

    def __eq__(self, other):
        return (
            isinstance(other, PriorityQueueElement)
            and self.data == other.data
            and self.priority == other.priority
        )

    __hash__ = None


class PriorityQueue(Generic[T]):
    """
    A priority queue implemented as a 0-indexed binary min-heap.

    Elements with equal priority come out in no particular order.
    """

    def __init__(
        self,
        elements: Optional[
            Iterable[Union[PriorityQueueElement[T], Tuple[T, float]]]
        ] = None,
    ):
        self._heap: List[PriorityQueueElement[T]] = []
        if elements is not None:
            for element in elements:
                if not isinstance(element, PriorityQueueElement):
                    data, priority = element
                    element = PriorityQueueElement(data, priority)
                self._heap.append(element)
            self._build_heap()

    def insert(self, item: T, priority: float) -> None:
        """Inserts the item with the given priority."""
        self._heap.append(PriorityQueueElement(item, priority))
        self._sift_up(len(self._heap) - 1)

    def remove_min(self) -> T:
        """Removes and returns the item with the smallest priority."""
        if not self._heap:
            raise EmptyQueueError("remove_min called on an empty priority queue")
        swap(self._heap, 0, len(self._heap) - 1)
        element = self._heap.pop()
        if self._heap:
            self._sift_down(0)
        return element.data

    def peek_min(self) -> T:
        """Returns the item with the smallest priority without removing it."""
        if not self._heap:
            raise EmptyQueueError("peek_min called on an empty priority queue")
        return self._heap[0].data

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)})"

    def _build_heap(self):
        """Bottom-up heap construction, O(n)."""
        for index in range((len(self._heap) - 2) // 2, -1, -1):
            self._sift_down(index)

    def _sift_up(self, index: int):
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].priority < heap[parent].priority:
                swap(heap, index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int):
        heap = self._heap
        size = len(heap)
        # Only internal nodes have children
        while index <= (size - 2) // 2:
            left = 2 * index + 1
            right = left + 1
            smallest = left
            if right < size and heap[right].priority < heap[left].priority:
                smallest = right
            if heap[index].priority > heap[smallest].priority:
                swap(heap, index, smallest)
                index = smallest
            else:
                break
