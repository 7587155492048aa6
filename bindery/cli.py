from __future__ import annotations

import argparse
import os
import sys

from . import config, constants, demos, laws
from . import messages as m
from . import test as goldentest


def main() -> None:
    semver = config.semver()
    if semver is None:
        semver = "???"
        semverText = ""
    else:
        semverText = f"Bindery v{semver}: "

    argparser = argparse.ArgumentParser(description=f"{semverText}Walks through the monad pattern with small examples.")
    argparser.add_argument("--version", action="version", version=semver)
    argparser.add_argument(
        "-q",
        "--quiet",
        dest="quiet",
        action="count",
        default=0,
        help="Silences one level of message, least-important first.",
    )
    argparser.add_argument(
        "-s",
        "--silent",
        dest="silent",
        action="store_true",
        help="Shorthand for 'as many -q as you need to shut it up'",
    )
    argparser.add_argument(
        "-a",
        "--ascii-only",
        dest="asciiOnly",
        action="store_true",
        help="Force all messages to be ASCII-only.",
    )
    argparser.add_argument(
        "--print",
        dest="printMode",
        choices=m.PRINT_MODES,
        default=None,
        help="How messages are formatted. Options are 'plain' (just text), 'console' (text with console color codes), 'markup' (XML), and 'json' (JSON stream). Defaults to 'console'.",
    )
    argparser.add_argument(
        "--die-on",
        dest="errorLevel",
        choices=list(m.MESSAGE_LEVELS.keys()),
        help="Determines what sorts of errors stop processing. Default is 'fatal'.",
    )
    argparser.add_argument(
        "--die-when",
        dest="errorTiming",
        choices=m.DEATH_TIMING,
        default="late",
        help="When a disallowed error should stop processing. 'early' stops immediately; 'late' runs everything first and only stops at the end so you can see all the errors.",
    )

    subparsers = argparser.add_subparsers(title="Subcommands", dest="subparserName")

    demoParser = subparsers.add_parser("demo", help="Run one or more of the example walk-throughs.")
    demoParser.add_argument(
        "names",
        nargs="*",
        default=None,
        metavar="NAME",
        help=f"Demos to run, out of {config.englishFromList(demos.DEMOS, 'and')}. Defaults to 'properties'.",
    )
    demoParser.add_argument(
        "--all",
        dest="runAll",
        action="store_true",
        help="Run every demo, in order.",
    )
    demoParser.add_argument(
        "--vat-rate",
        dest="vatRate",
        type=float,
        default=None,
        help=f"Multiplier the store demo applies to prices. Defaults to {constants.vatRate}.",
    )
    demoParser.add_argument(
        "--attempts",
        dest="attempts",
        type=int,
        default=None,
        help=f"How many times the store demo tries each fetch. Defaults to {constants.fetchAttempts}.",
    )

    subparsers.add_parser("laws", help="Check the monad laws for every monad in the library.")

    testParser = subparsers.add_parser("test", help="Compare each demo's output against its golden file.")
    testParser.add_argument(
        "--rebase",
        default=False,
        action="store_true",
        help="Rewrite the golden files from the current output.",
    )
    testParser.add_argument(
        "--file",
        dest="files",
        default=None,
        nargs="+",
        help="Only run demos whose names contain any of these strings as substrings.",
    )

    options = argparser.parse_args()
    # Hack around argparse's lack of optional subparsers
    if options.subparserName is None:
        options = argparser.parse_args([*sys.argv[1:], "demo"])

    if options.silent:
        m.state.printOn = "nothing"
        m.state.silent = True
    else:
        m.state.printOn = m.MessagesState.categoryName(options.quiet)
    if options.errorLevel is not None:
        m.state.dieOn = options.errorLevel
    m.state.dieWhen = options.errorTiming
    m.state.asciiOnly = options.asciiOnly
    if options.printMode is None:
        if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
            m.state.printMode = "plain"
        else:
            m.state.printMode = "console"
    else:
        m.state.printMode = options.printMode

    if options.subparserName == "demo":
        handleDemo(options)
    elif options.subparserName == "laws":
        handleLaws()
    elif options.subparserName == "test":
        handleTest(options)


def handleDemo(options: argparse.Namespace) -> None:
    vatRate = constants.vatRate if options.vatRate is None else options.vatRate
    attempts = constants.fetchAttempts if options.attempts is None else options.attempts
    if attempts < 1:
        m.die(f"--attempts must be at least 1, got {attempts}.")
        m.retroactivelyCheckErrorLevel(timing="late")
        return

    if options.runAll:
        names = list(demos.DEMOS)
    elif options.names:
        names = options.names
    else:
        names = ["properties"]

    unknown = [name for name in names if name not in demos.DEMOS]
    if unknown:
        m.die(
            f"Unknown demo {config.englishFromList(repr(x) for x in unknown)}. Choose from {config.englishFromList(demos.DEMOS)}.",
        )
        m.retroactivelyCheckErrorLevel(timing="late")
        return
    for name in names:
        if len(names) > 1:
            m.say(m.printColor(f"== {name}", "light blue", "bold"))
        demos.runDemo(name, vatRate=vatRate, attempts=attempts)


def handleLaws() -> None:
    allHold = True
    for case in laws.standardCases():
        broken = laws.verify(case)
        if broken:
            allHold = False
            m.die(f"{case.name} breaks {config.englishFromList(broken, 'and')}.")
        else:
            m.say(f"{case.name}: left identity, right identity and associativity hold.")
    m.retroactivelyCheckErrorLevel(timing="late")
    if allHold:
        m.success("Every monad obeys the laws.")
    else:
        m.failure("Some monads break the laws.")


def handleTest(options: argparse.Namespace) -> None:
    filters = goldentest.TestFilter.fromOptions(options)
    if options.rebase:
        goldentest.rebase(filters)
    else:
        result = goldentest.run(filters)
        sys.exit(0 if result else 1)
