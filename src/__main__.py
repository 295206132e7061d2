#!/usr/bin/env python3
"""
tmpl - Directive-driven section substitution

Copies TEMPLATE to standard output. A template line whose first non-blank
character is the delimiter (default '#') is replaced by the section of
SOURCE that follows the boundary line of the same name, up to the next
boundary line. The reserved directive '#@CONTENT' inserts the whole source,
'#@HEADER' the lines before its first boundary.

Usage:
    tmpl [-s CHAR] [-h CHAR] TEMPLATE SOURCE

Examples:
    # Splice sections of notes.txt into report.tmpl
    tmpl report.tmpl notes.txt > report.txt

    # Use '%' as delimiter, with prefix matching as in older releases
    tmpl -s % --legacy-match page.tmpl parts.txt

    # Report directives that selected nothing
    tmpl -v page.tmpl parts.txt
"""

import sys
from contextlib import ExitStack
from pathlib import Path
from argparse import ArgumentParser, ArgumentTypeError, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .config import appsettings
from .lib import Substituter, LOG, state_connectToLogger
from .models import ProgramState, SubstConfig, MatchMode, pipeline


PROG = "tmpl"
USAGE = "[ -s char ][ -h char ] TEMPLATE FILE"


def char_parse(value: str) -> str:
    """argparse type for single-character options"""
    if len(value) != 1:
        raise ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def delimiter_parse(value: str) -> str:
    """argparse type for -s: one non-whitespace character"""
    value = char_parse(value)
    if value.isspace():
        raise ArgumentTypeError("delimiter must not be whitespace")
    return value


def stdout_prepare(encoding: str) -> None:
    """Make stdout write undecodable input bytes back unchanged"""
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding=encoding, errors="surrogateescape")


# Define CLI arguments
parser = ArgumentParser(
    prog=PROG,
    description="tmpl - splice named sections of SOURCE into TEMPLATE",
    formatter_class=ArgumentDefaultsHelpFormatter,
    add_help=False,
)

parser.add_argument("templateFile", metavar="TEMPLATE", type=str, help="Template file")

parser.add_argument("sourceFile", metavar="SOURCE", type=str, help="Source file holding the sections")

parser.add_argument(
    "-s",
    dest="delimiter",
    default=None,
    type=delimiter_parse,
    help="Directive and boundary delimiter (TMPL_DELIMITER applies when omitted)",
)

parser.add_argument(
    "-h",
    dest="special",
    default=None,
    type=char_parse,
    help="Reserved secondary marker (accepted, currently unused)",
)

parser.add_argument(
    "--legacy-match",
    dest="legacyMatch",
    action="store_true",
    default=appsettings.match_mode == MatchMode.LEGACY.value,
    help="Match section names on their common prefix instead of exactly",
)

parser.add_argument(
    "--indexed",
    action="store_true",
    default=appsettings.indexed,
    help="Index section boundaries once instead of rescanning per directive",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=0,
    help="Increase stderr logging (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

parser.add_argument("--help", action="help", help="Show this help message and exit")


def die(message: str) -> None:
    """Print an error and the usage line to stderr, then exit 1"""
    print(f"{PROG}: {message}", file=sys.stderr)
    print(f"{PROG}: {USAGE}", file=sys.stderr)
    sys.exit(1)


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Resolve paths and freeze the run configuration.

    Returns:
        ProgramState with added fields:
            - templatePath, sourcePath: Paths as given
            - config: Frozen SubstConfig
            - envOK: True if the configuration is valid

    Exits:
        1 if the configuration is rejected
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    state.templatePath = Path(state.templateFile)
    state.sourcePath = Path(state.sourceFile)

    try:
        state.config = SubstConfig.config_create(
            appsettings,
            delimiter=state.delimiter,
            special=state.special,
            match_mode=MatchMode.LEGACY if state.legacyMatch else MatchMode.STRICT,
        )
    except ValidationError as e:
        state.envOK = False
        die(f"invalid configuration: {e}")

    LOG(f"Template: {state.templatePath}", level=2)
    LOG(f"Source: {state.sourcePath}", level=2)
    LOG(f"Delimiter {state.config.delimiter!r}, match mode {state.config.match_mode.value}", level=2)

    state.envOK = True
    return state


def substitution_run(inputstate: ProgramState) -> ProgramState:
    """
    Open both files and write the substituted template to stdout.

    Both handles are owned by one ExitStack, so they are closed on every
    path, including a failed second open.

    Returns:
        ProgramState with added field:
            - substResult: SubstResult from the driver

    Exits:
        1 if either file cannot be opened, or memory runs out
    """
    state = inputstate.copy()

    if not state.envOK:
        die("environment check did not pass")

    with ExitStack() as stack:
        try:
            template = stack.enter_context(
                open(
                    state.templatePath, "r", encoding=state.encoding, errors="surrogateescape", newline=""
                )
            )
            source = stack.enter_context(
                open(
                    state.sourcePath, "r", encoding=state.encoding, errors="surrogateescape", newline=""
                )
            )
        except OSError as e:
            die(f"files couldn't be opened: {e}")

        LOG("Substituting...", level=1)
        stdout_prepare(state.encoding)
        substituter = Substituter(config=state.config, output=sys.stdout, indexed=state.indexed)
        try:
            state.substResult = substituter.run(template, source)
        except MemoryError:
            die("out of memory")
        finally:
            sys.stdout.flush()

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Summarize the run on stderr.

    Exits:
        1 if no substitution result is present
    """
    state: ProgramState = inputstate.copy()
    if not state.substResult or not state.substResult.status:
        die("substitution failed")

    result = state.substResult
    LOG(
        f"Done: {result.template_lines} template lines, {result.directives} directives, "
        f"{result.emitted_lines} section lines",
        level=1,
    )
    if result.unmatched:
        LOG(f"Unmatched: {', '.join(result.unmatched)}", level=1)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - substitute TEMPLATE against SOURCE to stdout.

    Orchestrates the pipeline:
        1. env_check: Resolve paths and build the frozen configuration
        2. substitution_run: Open files and run the substitution
        3. results_report: Summarize on stderr

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        0 on success; errors exit via SystemExit (1, or 2 for usage)
    """
    options: Namespace = parser.parse_args(argv)

    state: ProgramState = ProgramState.state_createFromNamespace(options)
    state.encoding = appsettings.encoding

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, substitution_run, results_report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
