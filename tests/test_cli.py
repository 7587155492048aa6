"""Tests for the bindery command line."""

from __future__ import annotations

import pytest

from bindery import cli, constants, laws
from bindery.func import SafeValue

LISTS = "[1, 2, 2, 4, 2, 4, 3, 6, 3, 6, 4, 8]\n" * 2


@pytest.fixture
def runCli(monkeypatch, console):
    """Run main() with the given arguments; return what it printed."""

    def run(*args):
        monkeypatch.setattr("sys.argv", ["bindery", *args])
        # main() only touches the message state `console` swapped in.
        cli.main()
        return console.getvalue()

    return run


def test_no_arguments_prints_the_two_lists(runCli):
    assert runCli("--print", "plain") == LISTS


def test_demo_by_name(runCli):
    output = runCli("--print", "plain", "demo", "census")
    assert "Looking up 'John' None:" in output
    assert "  comprehension: Nothing" in output


def test_demo_all_adds_headings(runCli):
    output = runCli("--print", "plain", "demo", "--all")
    assert "== wrapping" in output
    assert "== properties" in output
    assert output.endswith(LISTS)


def test_demo_options_reach_the_store(runCli):
    output = runCli("--print", "plain", "demo", "store", "--vat-rate", "2.0", "--attempts", "1")
    assert "  callbacks: 199.98" in output
    assert "  bind/map: 199.98" in output
    assert "  comprehension: 199.98" in output


def test_demo_options_leave_defaults_alone(runCli):
    runCli("--print", "plain", "demo", "store", "--vat-rate", "1.0", "--attempts", "1")
    assert constants.vatRate == 1.19
    assert constants.fetchAttempts == 3


def test_unknown_demo_dies(runCli, console):
    with pytest.raises(SystemExit) as exc:
        runCli("--print", "plain", "demo", "nope")
    assert exc.value.code == 2
    assert "FATAL ERROR: Unknown demo 'nope'." in console.getvalue()


def test_bad_attempts_dies(runCli):
    with pytest.raises(SystemExit) as exc:
        runCli("--print", "plain", "demo", "store", "--attempts", "0")
    assert exc.value.code == 2


def test_laws(runCli):
    output = runCli("--print", "plain", "laws")
    assert "Option: left identity, right identity and associativity hold." in output
    assert "Every monad obeys the laws." in output


class DoubleWrapped(SafeValue):
    def bind(self, fn):
        return DoubleWrapped(fn(self.get()))


def brokenCases():
    return [
        laws.LawCase(
            name="DoubleWrapped",
            unit=DoubleWrapped.unit,
            values=[1],
            monads=[DoubleWrapped(1)],
            f=lambda x: DoubleWrapped(x + 1),
            g=DoubleWrapped,
        ),
    ]


def test_laws_broken_without_dying(runCli, monkeypatch):
    monkeypatch.setattr(laws, "standardCases", brokenCases)
    output = runCli("--print", "plain", "--die-on", "nothing", "laws")
    assert "FATAL ERROR: DoubleWrapped breaks left identity and right identity." in output
    assert "Every monad obeys the laws." not in output
    assert "Some monads break the laws." in output


def test_laws_broken_dies(runCli, monkeypatch):
    monkeypatch.setattr(laws, "standardCases", brokenCases)
    with pytest.raises(SystemExit) as exc:
        runCli("--print", "plain", "laws")
    assert exc.value.code == 2


def test_silent(runCli):
    assert runCli("-s", "demo") == ""


def test_test_subcommand(runCli):
    with pytest.raises(SystemExit) as exc:
        runCli("--print", "plain", "test", "--file", "properties")
    assert exc.value.code == 0
