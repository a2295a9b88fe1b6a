"""Small ordered container: unique elements kept in ascending priority.

Queues built by the search hold at most a handful of candidate cells, so a
plain list with linear insertion is enough. The minimum always sits at
index 0.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Tuple, TypeVar

from pond.errors import ElementNotFoundError, EmptyCollectionError

T = TypeVar("T")


class UniquePriorityQueue(Generic[T]):
    def __init__(self):
        self._entries: List[Tuple[T, float]] = []

    def add(self, element: T, priority: float) -> None:
        """
        Insert element keeping ascending order.
        Equal elements are ignored (first priority wins). Among equal
        priorities the earlier insertion stays in front.
        """
        if self.contains(element):
            return

        index = len(self._entries)
        while index > 0 and self._entries[index - 1][1] > priority:
            index -= 1
        self._entries.insert(index, (element, float(priority)))

    def contains(self, element: T) -> bool:
        return self._index_of(element) is not None

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError()
        return self._entries[0][0]

    def remove_min(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError()
        element, _ = self._entries.pop(0)
        return element

    def update_priority(self, element: T, new_priority: float) -> None:
        index = self._index_of(element)
        if index is None:
            raise ElementNotFoundError()
        stored, _ = self._entries.pop(index)
        self.add(stored, new_priority)

    def priority_of(self, element: T) -> float:
        index = self._index_of(element)
        if index is None:
            raise ElementNotFoundError()
        return self._entries[index][1]

    def is_empty(self) -> bool:
        return not self._entries

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> List[Tuple[T, float]]:
        return list(self._entries)

    def __iter__(self) -> Iterator[T]:
        return (element for element, _ in self._entries)

    def _index_of(self, element: T):
        for i, (stored, _) in enumerate(self._entries):
            if stored == element:
                return i
        return None

    def __str__(self) -> str:
        if self.is_empty():
            return "The queue is empty"
        return ", ".join(f"{element} [{priority}]" for element, priority in self._entries)

    def __repr__(self) -> str:
        return f"UniquePriorityQueue({self._entries!r})"
