# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.
"""Lexical scanning of SAPF source lines.

Columns are zero-based indices into the Python string (code points) in
every function of this module.
"""
from __future__ import annotations

import enum
import re
from typing import Collection, List, NamedTuple, Optional, Tuple

OPERATOR_CHARS = frozenset("+-*/=")
ASCII_DIGITS = frozenset("0123456789")

_WORD_RE = re.compile(r"\S+")


class TokenKind(enum.IntEnum):
    """Token kinds, valued by their index in the semantic tokens legend."""

    FUNCTION = 0
    OPERATOR = 1
    NUMBER = 2


class TokenSpan(NamedTuple):
    line: int
    start: int
    length: int
    kind: TokenKind


def split_lines(text: str) -> List[str]:
    """Split text on newlines, dropping a trailing empty line and `\\r` endings."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def get_line(text: str, line: int) -> Optional[str]:
    """Return line number `line` of `text`, or None when it does not exist."""
    if line < 0:
        return None
    lines = split_lines(text)
    if line >= len(lines):
        return None
    return lines[line]


def scan_line(text: str, keywords: Collection[str], line: int = 0) -> List[TokenSpan]:
    """Classify one line of source into highlightable spans.

    Operators and numeric runs always produce a span. Words produce a
    FUNCTION span only when they are known keywords. Everything else is
    skipped one character at a time.
    """
    spans: List[TokenSpan] = []
    col = 0
    end = len(text)

    while col < end:
        char = text[col]

        if char in OPERATOR_CHARS:
            spans.append(TokenSpan(line, col, 1, TokenKind.OPERATOR))
            col += 1

        elif char in ASCII_DIGITS:
            run_end = col + 1
            while run_end < end and (text[run_end] in ASCII_DIGITS or text[run_end] == "."):
                run_end += 1
            spans.append(TokenSpan(line, col, run_end - col, TokenKind.NUMBER))
            col = run_end

        elif char.isalpha():
            run_end = col + 1
            while run_end < end and (text[run_end].isalnum() or text[run_end] == "_"):
                run_end += 1
            if text[col:run_end] in keywords:
                spans.append(TokenSpan(line, col, run_end - col, TokenKind.FUNCTION))
            col = run_end

        else:
            col += 1

    return spans


def scan_document(text: str, keywords: Collection[str]) -> List[TokenSpan]:
    """Scan every line of a document in order."""
    spans: List[TokenSpan] = []
    for line_num, line_text in enumerate(split_lines(text)):
        spans.extend(scan_line(line_text, keywords, line_num))
    return spans


def word_span_at_position(text: str, line: int, column: int) -> Optional[Tuple[int, str]]:
    """Return `(start, word)` for the whitespace-delimited word containing `column`.

    Both ends of a word's range are inclusive, so a cursor just after a word
    still selects it. Operators and dots are not word boundaries here.
    """
    line_text = get_line(text, line)
    if line_text is None:
        return None

    for m in _WORD_RE.finditer(line_text):
        if m.start() <= column <= m.end():
            return m.start(), m.group(0)
    return None


def word_at_position(text: str, line: int, column: int) -> Optional[str]:
    span = word_span_at_position(text, line, column)
    return span[1] if span else None


def segment_at_column(word: str, offset: int, separator: str = ".") -> str:
    """Return the `separator`-delimited part of `word` that contains `offset`."""
    start = 0
    for part in word.split(separator):
        if offset <= start + len(part):
            return part
        start += len(part) + len(separator)
    return word.rsplit(separator, 1)[-1]
