"""Tests for Functor, Monad and SafeValue."""

from __future__ import annotations

import pytest

from bindery.func import Functor, SafeValue


class TestSafeValue:
    def test_unit_wraps_verbatim(self):
        assert SafeValue.unit("Python is awesome").get() == "Python is awesome"

    def test_unit_wraps_none(self):
        wrapped = SafeValue.unit(None)
        assert wrapped.get() is None

    def test_bind_returns_function_result_without_rewrapping(self):
        inner = SafeValue("UPPER")
        result = SafeValue("upper").bind(lambda s: inner)
        assert result is inner

    def test_extract_transform_wrap_matches_bind(self):
        safeString = SafeValue("monads")
        byHand = SafeValue(safeString.get().upper())
        bound = safeString.bind(lambda s: SafeValue(s.upper()))
        assert byHand == bound

    def test_flat_map_is_bind(self):
        assert SafeValue(2).flatMap(lambda x: SafeValue(x * 10)) == SafeValue(20)

    def test_map_rewraps(self):
        assert SafeValue(3).map(lambda x: x + 1) == SafeValue(4)

    def test_immutable(self):
        wrapped = SafeValue(1)
        with pytest.raises(AttributeError):
            wrapped.__val__ = 2
        with pytest.raises(AttributeError):
            wrapped.other = 2
        with pytest.raises(AttributeError):
            del wrapped.__val__
        assert wrapped.get() == 1

    def test_equality_needs_same_class(self):
        assert SafeValue(1) == SafeValue(1)
        assert SafeValue(1) != SafeValue(2)
        assert SafeValue(1) != Functor(1)
        assert SafeValue(1) != 1

    def test_hashable(self):
        assert len({SafeValue("a"), SafeValue("a"), SafeValue("b")}) == 2

    def test_repr(self):
        assert repr(SafeValue("x")) == "SafeValue('x')"


def test_functor_map_keeps_class():
    mapped = Functor(2).map(lambda x: x * 3)
    assert type(mapped) is Functor
    assert mapped.extract() == 6
