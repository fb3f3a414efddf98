"""
Lazy, single-pass sequences.

FStream wraps an iterable and applies map/filter steps lazily as elements are
pulled. Like any iterator it can be consumed only once; obtain a fresh stream
to go over the elements again.
"""

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class FStream(Generic[T]):
    """A lazy, finite, non-restartable stream of elements."""

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iterator = iterator

    @classmethod
    def of(cls, elements: Iterable[T]) -> "FStream[T]":
        return cls(iter(elements))

    @classmethod
    def empty(cls) -> "FStream[T]":
        return cls(iter(()))

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return next(self._iterator)

    def map(self, mapper: Callable[[T], R]) -> "FStream[R]":
        return FStream(mapper(element) for element in self._iterator)

    def filter(self, predicate: Callable[[T], bool]) -> "FStream[T]":
        return FStream(element for element in self._iterator if predicate(element))

    def first(self) -> Optional[T]:
        """Pull the next element, or None if the stream is exhausted."""
        return next(self._iterator, None)

    def to_list(self) -> List[T]:
        return list(self._iterator)
