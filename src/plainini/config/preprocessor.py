"""
Line preprocessing for INI text.

Raw input is normalized into logical lines before parsing: blank lines and
comment lines are dropped, and continuation lines (RFC 822 style, starting
with whitespace) are folded into the preceding line.
"""

import re
from typing import Iterable, List, Union


NEWLINE_PATTERN = re.compile(r"[\r\n]+")
BLANK_LINE_PATTERN = re.compile(r"^\s*$")
# Comments are only recognized at the start of a line.
COMMENT_PATTERN = re.compile(r"^\s*[;#]")
CONTINUATION_PATTERN = re.compile(r"^\s+")


def split_lines(text: str) -> List[str]:
    """Split text on any run of carriage-return/line-feed characters."""
    return NEWLINE_PATTERN.split(text)


def remove_blank_lines(lines: Iterable[str]) -> List[str]:
    """
    Drop lines that are empty or contain only whitespace.

    Args:
        lines: Raw lines

    Returns:
        Lines with content
    """
    return [line for line in lines if not BLANK_LINE_PATTERN.match(line)]


def remove_comments(lines: Iterable[str]) -> List[str]:
    """
    Drop lines whose first non-whitespace character is ';' or '#'.

    Args:
        lines: Lines already stripped of blanks

    Returns:
        Lines that are not comments
    """
    return [line for line in lines if not COMMENT_PATTERN.match(line)]


def join_continuations(lines: Iterable[str]) -> List[str]:
    """
    Fold continuation lines into the logical line they continue.

    A continuation's leading whitespace is removed and the remainder is
    appended with no separator. A continuation before any other content
    accumulates on its own and is only emitted if non-empty.

    Args:
        lines: Lines already stripped of blanks and comments

    Returns:
        List of logical lines
    """
    result = []
    current = ''

    for line in lines:
        if CONTINUATION_PATTERN.match(line):
            current += CONTINUATION_PATTERN.sub('', line, count=1)
        else:
            if current:
                result.append(current)
            current = line

    if current:
        result.append(current)

    return result


def preprocess(source: Union[str, Iterable[str]]) -> List[str]:
    """
    Normalize raw INI input into logical lines.

    Args:
        source: Raw text, or an iterable of raw lines; each element is split
            on newlines the same way as raw text

    Returns:
        Logical lines, each a complete header or entry
    """
    if isinstance(source, str):
        lines = split_lines(source)
    else:
        lines = [line for chunk in source for line in split_lines(chunk)]
    return join_continuations(remove_comments(remove_blank_lines(lines)))
