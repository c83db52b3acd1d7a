from __future__ import annotations
from typing import Any, Callable, Generic, List, Tuple, TypeVar
import heapq
import itertools

T = TypeVar("T")


class Frontier(Generic[T]):
    """
    Min-priority queue ordered by a caller-supplied key.
    Items with equal keys pop in insertion order.
    """
    def __init__(self, key: Callable[[T], Any]):
        self._key = key
        self._heap: List[Tuple[Any, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def pop(self) -> T:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
