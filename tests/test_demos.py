"""Tests for the example walk-throughs, and their golden console output."""

from __future__ import annotations

import asyncio
import os

import pytest

from bindery import demos
from bindery import test as goldentest
from bindery.demos import census, checkerboard, properties, store, wrapping
from bindery.option import Nothing, Some

BOARD = [(1, "a"), (1, "b"), (1, "c"), (2, "a"), (2, "b"), (2, "c"), (3, "a"), (3, "b"), (3, "c")]


class TestCensus:
    def test_lookup_with_missing_last_name_is_absent(self):
        assert census.lookupPerson("John", None) is Nothing

    def test_lookup_with_missing_first_name_is_absent(self):
        assert census.lookupPerson(None, "Doe") is Nothing

    def test_lookup_found(self):
        john = census.Person("John", "Doe")
        assert census.lookupPerson("John", "Doe") == Some(john)
        assert census.lookupPersonBound("John", "Doe") == Some(john)
        assert census.lookupPersonNaive("John", "Doe") == john

    def test_every_style_agrees_on_missing(self):
        assert census.lookupPersonBound("John", None) is Nothing
        assert census.lookupPersonNaive("John", None) is None

    def test_result_explains_what_is_missing(self):
        assert census.lookupPersonResult("John", None).err() == "missing last name"
        assert census.lookupPersonResult(None, None).err() == "missing first name"
        assert census.lookupPersonResult("John", "Doe").ok() == census.Person("John", "Doe")

    def test_person_requires_both_names(self):
        with pytest.raises(AssertionError):
            census.Person("John", None)


class TestStore:
    def test_all_styles_agree(self):
        expected = 99.99 * 1.19
        assert store.vatInclusivePrice(store.danielsUrl).get() == pytest.approx(expected)
        assert store.vatInclusivePriceFor(store.danielsUrl).get() == pytest.approx(expected)
        assert asyncio.run(store.vatInclusivePriceCallbacks(store.danielsUrl)) == pytest.approx(expected)

    def test_vat_rate_is_configurable(self):
        assert store.vatInclusivePrice(store.danielsUrl, vatRate=2.0).get() == pytest.approx(199.98)
        assert store.vatInclusivePriceFor(store.danielsUrl, vatRate=2.0).get() == pytest.approx(199.98)
        assert asyncio.run(store.vatInclusivePriceCallbacks(store.danielsUrl, vatRate=2.0)) == pytest.approx(199.98)

    def test_vat_rate_is_fixed_when_built(self):
        price = store.vatInclusivePrice(store.danielsUrl, vatRate=2.0)
        store.vatInclusivePrice(store.danielsUrl, vatRate=1.0).get()
        assert price.get() == pytest.approx(199.98)
        assert price.get() == pytest.approx(199.98)

    def test_run_with_settings(self, console):
        demos.runDemo("store", vatRate=1.0, attempts=1)
        assert "  comprehension: 99.99\n" in console.getvalue()

    def test_fetches(self):
        assert store.fetchUser(store.danielsUrl).get() == store.User("daniel")
        assert store.fetchLastOrder("daniel").get() == store.Product("123-456", 99.99)


def test_checkerboard_styles():
    assert checkerboard.checkerboardBound([1, 2, 3], ["a", "b", "c"]).toList() == BOARD
    assert checkerboard.checkerboardComprehension([1, 2, 3], ["a", "b", "c"]) == BOARD
    assert checkerboard.checkerboardFor([1, 2, 3], ["a", "b", "c"]).toList() == BOARD


def test_properties_helpers():
    from bindery.listm import ListM

    assert properties.twoConsecutive(3) == ListM([3, 4])
    assert ListM.unit(3).bind(properties.twoConsecutive) == ListM([3, 4])
    assert ListM([1, 2, 3]).bind(ListM.unit) == ListM([1, 2, 3])


def test_properties_prints_the_two_lists(console):
    properties.run()
    assert console.getvalue() == "[1, 2, 2, 4, 2, 4, 3, 6, 3, 6, 4, 8]\n" * 2


def test_wrapping(console):
    wrapping.run()
    assert "SafeValue('PYTHON IS AWESOME')" in console.getvalue()
    assert console.getvalue().endswith("Same result: True\n")


def test_registry_runs_in_order():
    assert list(demos.DEMOS) == ["wrapping", "census", "store", "checkerboard", "properties"]


@pytest.mark.parametrize("name", list(demos.DEMOS))
def test_golden_output(name):
    path = goldentest.goldenPath(name)
    assert os.path.exists(path), f"missing golden file {path}"
    with open(path, encoding="utf-8") as fh:
        golden = fh.read()
    assert goldentest.demoOutput(name) == golden


def test_golden_runner_filters(console):
    filters = goldentest.TestFilter(files=["check"])
    assert goldentest.testNames(filters) == ["checkerboard"]
    assert goldentest.run(filters)
    assert "All tests passed" in console.getvalue()


def test_golden_runner_reports_diffs(console):
    assert not goldentest.compare("a\nb\n", "a\nc\n", path="x.console.txt")
    output = console.getvalue()
    assert "FILE: x.console.txt" in output
    assert "-c" in output
    assert "+b" in output
