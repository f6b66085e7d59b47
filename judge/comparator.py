"""
Trailing Whitespace Comparator

Decides whether a contestant's output matches the reference answer,
ignoring only whitespace at the very end of the text.

Verdicts:
  AC  - Accepted
  WA  - Wrong Answer
"""

import io
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


# Whitespace as C isspace() sees it in the "C" locale
TRAILING_WHITESPACE = ' \t\n\r\v\f'

ACCEPTED_MESSAGE = "AC"
WRONG_ANSWER_MESSAGE = "Output differs from answer"

# Any finite, read-once source of text lines: open text files,
# io.StringIO, lists or generators of str.
LineSource = Iterable[str]


class Outcome(Enum):
    """Checker outcome codes"""
    ACCEPTED = "AC"
    WRONG_ANSWER = "WA"


@dataclass(frozen=True)
class Verdict:
    """Checker decision for a single test case"""
    outcome: Outcome
    message: str

    @classmethod
    def accepted(cls) -> 'Verdict':
        return cls(Outcome.ACCEPTED, ACCEPTED_MESSAGE)

    @classmethod
    def wrong_answer(cls) -> 'Verdict':
        return cls(Outcome.WRONG_ANSWER, WRONG_ANSWER_MESSAGE)

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.ACCEPTED


class Comparator:
    """Output comparison tolerating trailing whitespace only"""

    @staticmethod
    def join_lines(lines: LineSource) -> str:
        """
        Join every line of a stream with a single newline.

        A line's own terminator (CRLF or LF) is dropped before joining,
        so no newline follows the last line. A lone CR stays content.
        The stream is consumed in full.
        """
        parts = []
        for line in lines:
            if line.endswith('\r\n'):
                line = line[:-2]
            elif line.endswith('\n'):
                line = line[:-1]
            parts.append(line)
        return '\n'.join(parts)

    @staticmethod
    def rtrim(text: str) -> str:
        """Remove whitespace from the end of text"""
        return text.rstrip(TRAILING_WHITESPACE)

    @staticmethod
    def normalize(lines: LineSource) -> str:
        """Normalize a stream for comparison"""
        return Comparator.rtrim(Comparator.join_lines(lines))

    @staticmethod
    def compare(answer: LineSource, output: LineSource) -> Verdict:
        """
        Compare contestant output against the reference answer.

        Both streams are drained before deciding; trailing whitespace is
        only known once the whole text has been read. Internal whitespace,
        case and line order are all significant.
        """
        expected = Comparator.normalize(answer)
        received = Comparator.normalize(output)

        if expected == received:
            return Verdict.accepted()
        return Verdict.wrong_answer()

    @staticmethod
    def compare_text(expected: str, actual: str) -> Verdict:
        """Compare two whole strings, splitting them into lines on LF only"""
        return Comparator.compare(
            _split_lines(expected),
            _split_lines(actual),
        )


def _split_lines(text: str) -> LineSource:
    # str.splitlines() would also break on a lone '\r' and other separators
    return io.StringIO(text, newline='\n')


def compare(answer: LineSource, output: LineSource) -> Verdict:
    """Module-level shortcut for Comparator.compare"""
    return Comparator.compare(answer, output)
