"""A binary max-heap priority queue."""

from collections.abc import Iterable


class MaxPriorityQueue:
    """Priority queue that always pops its largest value first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, value: int) -> None:
        """Add ``value`` to the queue."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty priority queue")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def update(self, position: int, value: int) -> None:
        """Replace the value stored at heap ``position`` and restore order."""
        if not 0 <= position < len(self._items):
            raise IndexError("position out of range")
        old = self._items[position]
        self._items[position] = value
        if value > old:
            self._sift_up(position)
        else:
            self._sift_down(position)

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index] <= items[parent]:
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest