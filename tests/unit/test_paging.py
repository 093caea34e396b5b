from __future__ import annotations

import itertools
import math

import pytest

from cube_tally.utils.lines import LineSource
from cube_tally.utils.paging import PagedItem, PagedIterator


@pytest.mark.parametrize("page_length,total", [(1, 4), (3, 7), (5, 5), (10, 3)])
def test_page_and_line_numbers_follow_page_length(page_length, total):
    items = list(PagedIterator(range(total), page_length))

    assert [item.item for item in items] == list(range(total))
    for i, item in enumerate(items, start=1):
        assert item.page == math.ceil(i / page_length)
        assert item.line == ((i - 1) % page_length) + 1


def test_items_unpack_as_triples():
    labelled = list(PagedIterator(["x", "y", "z"], 2))

    assert labelled == [(1, 1, "x"), (1, 2, "y"), (2, 1, "z")]
    assert labelled[2] == PagedItem(page=2, line=1, item="z")


def test_empty_source_yields_nothing():
    assert list(PagedIterator([], 3)) == []


def test_not_restartable_once_drained():
    paged = PagedIterator(["a", "b"], 5)

    assert len(list(paged)) == 2
    assert list(paged) == []


def test_wraps_infinite_iterator_lazily():
    paged = PagedIterator(LineSource(["a", "b"]).cycle(), 3)

    assert list(itertools.islice(paged, 5)) == [
        (1, 1, "a"),
        (1, 2, "b"),
        (1, 3, "a"),
        (2, 1, "b"),
        (2, 2, "a"),
    ]


@pytest.mark.parametrize("page_length", [0, -2])
def test_rejects_non_positive_page_length(page_length):
    with pytest.raises(ValueError, match="page_length must be >= 1"):
        PagedIterator(["a"], page_length)
