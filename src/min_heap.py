import logging
from typing import Callable, Generic, Iterator, List, Optional, TypeVar, Union

T = TypeVar('T')

Comparator = Callable[[T, T], Union[int, bool]]

logger = logging.getLogger(__name__)


class EmptyHeapError(IndexError):
    """Raised when reading or removing the minimum of an empty heap."""


class MinHeap(Generic[T]):
    """Array-backed binary min-heap with optional comparator.

    The complete binary tree is encoded by position: the root is at index 0,
    the children of ``i`` are at ``2i + 1`` and ``2i + 2`` and its parent is at
    ``(i - 1) // 2``. When ``compare`` is given it replaces the natural ``<``
    ordering of the elements for the whole lifetime of the heap. It may be
    three-way (negative, zero, positive) or boolean (``True`` when ``a`` sorts
    strictly before ``b``).
    """

    def __init__(self, compare: Optional[Comparator[T]] = None) -> None:
        self._data: List[T] = []
        self._compare = compare

    @property
    def comparator(self) -> Optional[Comparator[T]]:
        return self._compare

    def empty(self) -> bool:
        return len(self._data) == 0

    def size(self) -> int:
        return len(self._data)

    def peek_min(self) -> T:
        if not self._data:
            logger.debug("peek_min called on empty heap")
            raise EmptyHeapError("peek_min from empty heap")
        return self._data[0]

    def extract_min(self) -> T:
        """Remove and return the minimum element.

        The last element takes the root slot and is sifted down.
        """
        if not self._data:
            logger.debug("extract_min called on empty heap")
            raise EmptyHeapError("extract_min from empty heap")
        result = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return result

    def insert(self, element: T) -> None:
        self._data.append(element)
        self._sift_up(len(self._data) - 1)

    def copy(self) -> 'MinHeap[T]':
        clone: MinHeap[T] = MinHeap(self._compare)
        clone._data = self._data.copy()
        return clone

    def _cmp(self, a: T, b: T) -> int:
        if self._compare is not None:
            result = self._compare(a, b)
            # boolean: True means a < b, so ties need the reversed call
            if isinstance(result, bool):
                if result:
                    return -1
                return 1 if self._compare(b, a) else 0
            return result
        if a < b:
            return -1
        if b < a:
            return 1
        return 0

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index != 0:
            parent = (index - 1) // 2
            if self._cmp(data[index], data[parent]) < 0:
                data[index], data[parent] = data[parent], data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            smallest = index
            left = 2 * index + 1
            right = 2 * index + 2
            if left < size and self._cmp(data[left], data[index]) < 0:
                smallest = left
            # right competes with the current best, which may already be left
            if right < size and self._cmp(data[right], data[smallest]) < 0:
                smallest = right
            if smallest == index:
                break
            data[index], data[smallest] = data[smallest], data[index]
            index = smallest

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.empty()

    def __repr__(self) -> str:
        if self._compare is None:
            return f"MinHeap({self._data!r})"
        name = getattr(self._compare, "__name__", repr(self._compare))
        return f"MinHeap({self._data!r}, compare={name})"

    def __str__(self) -> str:
        if not self._data:
            return "MinHeap(size=0)"
        return f"MinHeap(size={len(self._data)}, min={self._data[0]!r})"

    def __iter__(self) -> Iterator[T]:
        # ascending order, drained from a copy so the heap is left untouched
        remaining = self.copy()
        while remaining:
            yield remaining.extract_min()
