#!/usr/bin/env python3
"""
Trailing Whitespace Special Judge

Accepts the contestant output when it equals the reference answer after
trailing whitespace is removed from the end of both.

Usage:
  trailing_whitespace.py <input> <output> <answer> [<result_file>] [-appes]

Reports the verdict three ways:
  stdout       - JSON with verdict, passed, score, message
  stderr       - testlib-style line ("ok AC", "wrong answer ...")
  result_file  - testlib XML result when -appes is given, plain line otherwise

Exit codes:
  0 - Accepted
  1 - Wrong Answer
  3 - Judge failure (bad usage, unreadable file)
"""

import argparse
import json
import sys
from typing import Dict, List, Optional, Any
from xml.sax.saxutils import escape, quoteattr

from judge.comparator import Comparator, Outcome, Verdict


EXIT_OK = 0
EXIT_WRONG_ANSWER = 1
EXIT_FAIL = 3

# verdict code -> (testlib outcome attribute, testlib report prefix, exit code)
TESTLIB_OUTCOMES = {
    Outcome.ACCEPTED.value: ('accepted', 'ok', EXIT_OK),
    Outcome.WRONG_ANSWER.value: ('wrong-answer', 'wrong answer', EXIT_WRONG_ANSWER),
    'IE': ('fail', 'FAIL', EXIT_FAIL),
}


class UsageError(Exception):
    """Raised when the checker is invoked with bad arguments"""


class CheckerArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage problems as judge failures"""

    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> CheckerArgumentParser:
    parser = CheckerArgumentParser(
        prog='trailing-whitespace-checker',
        description='Compare output with answer, ignoring trailing whitespace',
    )
    parser.add_argument('input', help='Test input file (unused)')
    parser.add_argument('output', help='Contestant output file')
    parser.add_argument('answer', help='Reference answer file')
    parser.add_argument('result_file', nargs='?', help='Where to write the testlib result')
    parser.add_argument('-appes', dest='appes', action='store_true',
                        help='Write the result file as testlib XML')
    return parser


def check_files(answer_path: str, output_path: str) -> Verdict:
    """Open both files and run the comparator over them"""
    # surrogateescape keeps distinct invalid bytes distinct; newline='\n'
    # hands line endings to the comparator untranslated
    with open(answer_path, 'r', encoding='utf-8', errors='surrogateescape', newline='\n') as ans, \
         open(output_path, 'r', encoding='utf-8', errors='surrogateescape', newline='\n') as ouf:
        return Comparator.compare(ans, ouf)


def verdict_payload(verdict: Verdict) -> Dict[str, Any]:
    return {
        "verdict": verdict.outcome.value,
        "passed": verdict.passed,
        "score": 1.0 if verdict.passed else 0.0,
        "message": verdict.message,
    }


def failure_payload(message: str) -> Dict[str, Any]:
    return {
        "verdict": "IE",
        "passed": False,
        "score": 0,
        "message": f"Judge error: {message}",
    }


def format_report_line(payload: Dict[str, Any]) -> str:
    _, prefix, _ = TESTLIB_OUTCOMES[payload["verdict"]]
    return f"{prefix} {payload['message']}"


def format_xml_result(payload: Dict[str, Any]) -> str:
    outcome, _, _ = TESTLIB_OUTCOMES[payload["verdict"]]
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f'<result outcome={quoteattr(outcome)}>{escape(payload["message"])}</result>\n'
    )


def write_result_file(path: str, payload: Dict[str, Any], appes: bool) -> None:
    content = format_xml_result(payload) if appes else format_report_line(payload) + '\n'
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def report(payload: Dict[str, Any], result_file: Optional[str], appes: bool) -> int:
    """Emit the verdict on every channel and return the exit code"""
    # Result file first, so a failed write turns into a failure everywhere
    if result_file:
        try:
            write_result_file(result_file, payload, appes)
        except OSError as e:
            payload = failure_payload(f"Cannot write result file {result_file}: {e}")

    print(json.dumps(payload))
    print(format_report_line(payload), file=sys.stderr)

    _, _, exit_code = TESTLIB_OUTCOMES[payload["verdict"]]
    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        print(json.dumps(failure_payload(str(e))))
        print(f"FAIL {e}", file=sys.stderr)
        return EXIT_FAIL

    try:
        payload = verdict_payload(check_files(args.answer, args.output))
    except OSError as e:
        payload = failure_payload(str(e))

    return report(payload, args.result_file, args.appes)


if __name__ == "__main__":
    sys.exit(main())
