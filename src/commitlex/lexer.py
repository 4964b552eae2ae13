# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

r"""Lexer for Conventional Commit messages.

Splits a raw commit message into typed tokens::

    type(scope)!: description

    body

    BREAKING CHANGE: footer

becomes::

    [CommitType('type'), Scope('scope'), BreakingMarker(),
     Description('description'), Body('body'),
     Footer('BREAKING CHANGE: footer')]

Scanning rules:

- **Type**: a maximal run of alphanumeric characters.  Leading
  whitespace is skipped.
- **Scope**: everything between ``(`` and the next ``)``.  May be empty.
- **Breaking marker**: a single ``!`` directly before the colon.
- **Description**: everything after ``:`` (minus leading whitespace)
  up to the first newline.
- **Body / footer**: the rest of the message.  The leftmost footer
  marker (``BREAKING CHANGE:``, ``Reviewed-by:``, ``Refs:`` by default)
  starts the footer; text before it is the body.

Usage::

    from commitlex.lexer import Lexer, tokenize

    tokens = tokenize('fix(parser)!: handle empty scope')
    assert tokens[1] == Scope('parser')

    # The lexer is single-use: one instance per message.
    lexer = Lexer('feat: add a new feature')
    tokens = lexer.tokenize()

Pure implementation: no I/O, no logging, no side effects.
"""

from __future__ import annotations

from collections.abc import Sequence

from commitlex._types import (
    Body,
    BreakingMarker,
    CommitType,
    Description,
    Footer,
    Scope,
    Token,
)
from commitlex.errors import ErrorKind, LexError

__all__ = [
    'DEFAULT_FOOTER_MARKERS',
    'Lexer',
    'tokenize',
]

# Footer markers, in tie-break order.
DEFAULT_FOOTER_MARKERS: tuple[str, ...] = (
    'BREAKING CHANGE:',
    'Reviewed-by:',
    'Refs:',
)


class Lexer:
    """Single-pass scanner over one commit message.

    The cursor only moves forward.  Call :meth:`tokenize` once; the
    ``scan_*`` methods are exposed for testing individual rules.
    """

    def __init__(self, text: str, *, footer_markers: Sequence[str] = DEFAULT_FOOTER_MARKERS) -> None:
        """Initialize with the commit message and the footer markers to split on."""
        self._text = text
        self._pos = 0
        self._footer_markers = tuple(footer_markers)
        self._used = False

    @property
    def position(self) -> int:
        """Current cursor offset into the input."""
        return self._pos

    @property
    def remaining(self) -> str:
        """The unconsumed part of the input."""
        return self._text[self._pos :]

    def _peek(self) -> str:
        """Peek at the current character without advancing."""
        if self._pos >= len(self._text):
            return ''
        return self._text[self._pos]

    def _advance(self) -> str:
        """Advance and return the current character."""
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def _error(self, kind: ErrorKind) -> LexError:
        return LexError(kind, self._text, self._pos)

    def skip_whitespace(self) -> None:
        """Advance past a run of whitespace characters."""
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def scan_type(self) -> CommitType:
        """Scan the commit type.

        Stops without consuming at ``(`` so the scope can follow.

        Raises:
            LexError: ``INVALID_TYPE`` if no alphanumeric characters
                precede a character other than ``(``.
        """
        self.skip_whitespace()
        start = self._pos
        while self._peek().isalnum():
            self._pos += 1
        commit_type = self._text[start : self._pos]
        if self._peek() == '(':
            return CommitType(commit_type)
        if not commit_type:
            raise self._error(ErrorKind.INVALID_TYPE)
        return CommitType(commit_type)

    def scan_scope(self) -> Scope:
        """Scan ``(scope)`` and return the text between the parentheses.

        Raises:
            LexError: ``EXPECTED_SCOPE_OPEN`` if the next character is not
                ``(``; ``UNCLOSED_SCOPE`` if the input ends before ``)``.
        """
        if self._peek() != '(':
            raise self._error(ErrorKind.EXPECTED_SCOPE_OPEN)
        self._advance()
        start = self._pos
        end = self._text.find(')', start)
        if end == -1:
            self._pos = len(self._text)
            raise self._error(ErrorKind.UNCLOSED_SCOPE)
        self._pos = end + 1
        return Scope(self._text[start:end])

    def scan_breaking_marker(self) -> BreakingMarker:
        """Consume a ``!`` breaking change marker.

        Raises:
            LexError: ``NO_BREAKING_MARKER`` if the next character is not ``!``.
        """
        if self._peek() != '!':
            raise self._error(ErrorKind.NO_BREAKING_MARKER)
        self._advance()
        return BreakingMarker()

    def scan_description(self) -> Description:
        """Scan the description up to the end of the line.

        The terminating newline is consumed but not included.

        Raises:
            LexError: ``MISSING_DESCRIPTION`` if nothing follows the colon.
        """
        self.skip_whitespace()
        start = self._pos
        end = self._text.find('\n', start)
        if end == -1:
            end = len(self._text)
            self._pos = end
        else:
            self._pos = end + 1
        description = self._text[start:end]
        if not description:
            raise LexError(ErrorKind.MISSING_DESCRIPTION, self._text, start)
        return Description(description)

    def scan_body_and_footer(self) -> tuple[Body | None, Footer | None]:
        """Split the rest of the input into an optional body and footer.

        Never fails; an absent body or footer is returned as ``None``.
        Consumes the remainder of the input.
        """
        self.skip_whitespace()
        remaining = self.remaining
        self._pos = len(self._text)
        if not remaining:
            return None, None

        split = _find_first_marker(remaining, self._footer_markers)
        if split == -1:
            return Body(remaining.strip()), None

        body_text = remaining[:split].strip()
        body = Body(body_text) if body_text else None
        return body, Footer(remaining[split:].strip())

    def tokenize(self) -> list[Token]:
        """Tokenize the whole message.

        Returns:
            Tokens in the order type, [scope], [breaking marker],
            description, [body], [footer].

        Raises:
            LexError: At the first structural violation.
            RuntimeError: If this lexer has already been used.
        """
        if self._used:
            raise RuntimeError('Lexer instances are single-use; create a new Lexer per message')
        self._used = True

        tokens: list[Token] = [self.scan_type()]
        if self._peek() == '(':
            tokens.append(self.scan_scope())
        if self._peek() == '!':
            tokens.append(self.scan_breaking_marker())
        if self._peek() != ':':
            raise self._error(ErrorKind.EXPECTED_COLON)
        self._advance()
        tokens.append(self.scan_description())

        body, footer = self.scan_body_and_footer()
        if body is not None:
            tokens.append(body)
        if footer is not None:
            tokens.append(footer)
        return tokens


def _find_first_marker(text: str, markers: Sequence[str]) -> int:
    """Return the offset of the leftmost marker in *text*, or -1.

    Markers found at the same offset resolve to the one listed first.
    """
    best = -1
    for marker in markers:
        idx = text.find(marker)
        if idx != -1 and (best == -1 or idx < best):
            best = idx
    return best


def tokenize(text: str, *, footer_markers: Sequence[str] = DEFAULT_FOOTER_MARKERS) -> list[Token]:
    """Tokenize a commit message with a fresh :class:`Lexer`.

    Args:
        text: The full commit message.
        footer_markers: Literal prefixes that start the footer block.

    Returns:
        The token list.

    Raises:
        LexError: If the message is not a well-formed Conventional Commit.
    """
    return Lexer(text, footer_markers=footer_markers).tokenize()
