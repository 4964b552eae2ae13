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

"""Error types raised by commitlex.

Every rejection of a commit message carries an :class:`ErrorKind` so
callers can branch on the kind of failure instead of matching message
text::

    try:
        commit = parse_commit(message)
    except CommitSyntaxError as exc:
        if exc.kind is ErrorKind.EXPECTED_COLON:
            ...

Hierarchy::

    CommitlexError
    ├── CommitSyntaxError (also a ValueError)
    │   ├── LexError      : raised while tokenizing
    │   └── ParseError    : raised while folding tokens into a record
    └── ConfigError       : malformed configuration
"""

from __future__ import annotations

import enum

__all__ = [
    'CommitSyntaxError',
    'CommitlexError',
    'ConfigError',
    'ErrorKind',
    'LexError',
    'ParseError',
]


class ErrorKind(str, enum.Enum):
    """Closed set of reasons a commit message can be rejected."""

    INVALID_TYPE = 'invalid_type'
    EXPECTED_SCOPE_OPEN = 'expected_scope_open'
    UNCLOSED_SCOPE = 'unclosed_scope'
    # Only produced by Lexer.scan_breaking_marker; tokenize() peeks first.
    NO_BREAKING_MARKER = 'no_breaking_marker'
    EXPECTED_COLON = 'expected_colon'
    MISSING_DESCRIPTION = 'missing_description'
    MISSING_COMMIT_TYPE = 'missing_commit_type'


# Default human-readable message for each kind.
_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_TYPE: 'Invalid commit type',
    ErrorKind.EXPECTED_SCOPE_OPEN: "Expected '(' for scope",
    ErrorKind.UNCLOSED_SCOPE: 'Unclosed scope',
    ErrorKind.NO_BREAKING_MARKER: 'No breaking change marker',
    ErrorKind.EXPECTED_COLON: "Expected ':' after commit type or scope",
    ErrorKind.MISSING_DESCRIPTION: 'Missing description',
    ErrorKind.MISSING_COMMIT_TYPE: 'Missing commit type',
}


class CommitlexError(Exception):
    """Base class for all errors raised by commitlex."""


class ConfigError(CommitlexError):
    """Raised when a configuration file or table is malformed."""


class CommitSyntaxError(CommitlexError, ValueError):
    """A commit message was rejected.

    Attributes:
        kind: Which rule the message violated.
        message: Human-readable description of the problem.
    """

    def __init__(self, kind: ErrorKind, message: str = '') -> None:
        """Initialize with an error kind and an optional message override."""
        self.kind = kind
        self.message = message or _MESSAGES[kind]
        super().__init__(self.message)


class LexError(CommitSyntaxError):
    """Raised by the lexer at the first structural violation.

    Attributes:
        kind: Which rule the message violated.
        message: Human-readable description of the problem.
        text: The full input being tokenized.
        position: Character offset of the cursor when the error was detected.
    """

    def __init__(self, kind: ErrorKind, text: str, position: int, message: str = '') -> None:
        """Initialize with error kind, input text and cursor position."""
        super().__init__(kind, message)
        self.text = text
        self.position = position

    def __str__(self) -> str:
        """Return the message followed by the first input line and a caret."""
        first_line = self.text.split('\n', 1)[0]
        if self.position > len(first_line):
            return f'{self.message} (at position {self.position})'
        marker = ' ' * self.position + '^'
        return f'{self.message} at position {self.position}\n  {first_line}\n  {marker}'


class ParseError(CommitSyntaxError):
    """Raised when a token sequence lacks a required field."""
