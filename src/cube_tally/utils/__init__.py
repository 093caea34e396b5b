from .lines import LineSource
from .optional import reduce_optional
from .paging import PagedItem, PagedIterator

__all__ = ["LineSource", "PagedItem", "PagedIterator", "reduce_optional"]
