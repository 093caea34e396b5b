from __future__ import annotations

from typing import Generic, Iterable, Iterator, NamedTuple, TypeVar

T = TypeVar("T")


class PagedItem(NamedTuple, Generic[T]):
    page: int
    line: int
    item: T


class PagedIterator(Generic[T]):
    """Label each item of ``iterable`` with a 1-based (page, line) coordinate.

    Labels only; the wrapped values and termination are untouched. Counters
    only move forward, so the iterator is not restartable.
    """

    def __init__(self, iterable: Iterable[T], page_length: int) -> None:
        if page_length < 1:
            raise ValueError(f"page_length must be >= 1, got {page_length}")
        self._iter = iter(iterable)
        self.page_length = page_length
        self.page_number = 1
        self.line_number = 0

    def __iter__(self) -> Iterator[PagedItem[T]]:
        return self

    def __next__(self) -> PagedItem[T]:
        item = next(self._iter)
        self.line_number += 1
        if self.line_number > self.page_length:
            self.page_number += 1
            self.line_number = 1
        return PagedItem(self.page_number, self.line_number, item)
