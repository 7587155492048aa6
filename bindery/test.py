from __future__ import annotations

import dataclasses
import difflib
import io
import os

from alive_progress import alive_it

from . import config, demos, t
from . import messages as m

if t.TYPE_CHECKING:
    import argparse

TEST_DIR = os.path.abspath(os.path.join(config.scriptPath(), "..", "tests", "golden"))
GOLDEN_EXTENSION = ".console.txt"


@dataclasses.dataclass
class TestFilter:
    files: list[str] | None = None

    @staticmethod
    def fromOptions(options: argparse.Namespace) -> TestFilter:
        return TestFilter(files=options.files)


def testNames(filters: TestFilter) -> list[str]:
    # Every demo gets a golden file, whether or not one exists yet,
    # so a new demo shows up as a failure until it's rebased.
    names = []
    for name in demos.DEMOS:
        if filters.files and not any(fileSubstring in name for fileSubstring in filters.files):
            continue
        names.append(name)
    return sorted(names)


def goldenPath(name: str) -> str:
    return os.path.join(TEST_DIR, name + GOLDEN_EXTENSION)


def run(filters: TestFilter) -> bool:
    names = testNames(filters)
    if len(names) == 0:
        m.p("No tests were found")
        return True
    numPassed = 0
    total = 0
    fails = []
    nameProgress = alive_it(names, dual_line=True, length=20)
    for name in nameProgress:
        nameProgress.text(name)
        total += 1
        testConsole = demoOutput(name)
        try:
            with open(goldenPath(name), "r", encoding="utf-8") as golden:
                goldenConsole = golden.read()
        except FileNotFoundError:
            m.p(m.printColor(f"No golden file for '{name}'; run `bindery test --rebase`.", color="red"))
            fails.append(name)
            continue
        if compare(testConsole, goldenConsole, path=goldenPath(name)):
            numPassed += 1
        else:
            fails.append(name)
    if numPassed == total:
        m.p(m.printColor("✔ All tests passed.", color="green"))
        return True
    m.p(m.printColor(f"✘ {numPassed}/{total} tests passed.", color="red"))
    m.p(m.printColor("Failed Tests:", color="red"))
    for fail in fails:
        m.p("* " + fail)
    return False


def rebase(filters: TestFilter) -> bool:
    names = testNames(filters)
    if len(names) == 0:
        m.p("No tests were found.")
        return True
    os.makedirs(TEST_DIR, exist_ok=True)
    nameProgress = alive_it(names, dual_line=True, length=20)
    for name in nameProgress:
        nameProgress.text(name)
        with m.withMessageState(fh=goldenPath(name), printMode="plain", printOn="everything", silent=False) as _:
            demos.runDemo(name)
    return True


def demoOutput(name: str) -> str:
    consoleFh = io.StringIO()
    try:
        with m.withMessageState(fh=consoleFh, printMode="plain", printOn="everything", silent=False) as _:
            demos.runDemo(name)
    except Exception as e:
        print(f"Python threw an error when running '{name}':\n{e}")  # noqa: T201
        raise e
    return consoleFh.getvalue()


def compare(suspect: str, golden: str, path: str) -> bool:
    if suspect == golden:
        return True
    m.p(f"FILE: {path}")
    for line in difflib.unified_diff(golden.split("\n"), suspect.split("\n"), fromfile="golden", tofile="suspect"):
        if line[0] == "-":
            m.p(m.printColor(line, color="red"))
        elif line[0] == "+":
            m.p(m.printColor(line, color="green"))
        else:
            m.p(line)
    m.p("")
    return False
