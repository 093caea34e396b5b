from __future__ import annotations

import operator

from cube_tally.utils.optional import reduce_optional


def test_reduce_optional_combines_when_both_present():
    assert reduce_optional(3, 5, max) == 5
    assert reduce_optional(3, 5, operator.add) == 8
    assert reduce_optional("ab", "cd", operator.add) == "abcd"


def test_reduce_optional_keeps_the_present_side():
    assert reduce_optional(4, None, max) == 4
    assert reduce_optional(None, 4, max) == 4


def test_reduce_optional_of_two_absent_values_is_none():
    assert reduce_optional(None, None, max) is None


def test_reduce_optional_does_not_call_combine_for_single_value():
    def _fail(a, b):
        raise AssertionError("combine should not be called")

    assert reduce_optional(0, None, _fail) == 0
    assert reduce_optional(None, 0, _fail) == 0
