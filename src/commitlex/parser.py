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

"""Fold a token sequence into a :class:`ConventionalCommit`.

The parser does not check token order.  Each token overwrites the
field it names, so when a kind appears twice the last one wins.  Only
the presence of a type and a description is enforced, type first.

Pure implementation: no I/O, no logging, no side effects.
"""

from __future__ import annotations

from collections.abc import Iterable

from commitlex._types import (
    Body,
    BreakingMarker,
    CommitType,
    ConventionalCommit,
    Description,
    Footer,
    Scope,
    Token,
)
from commitlex.errors import ErrorKind, ParseError

__all__ = [
    'parse',
]


def parse(tokens: Iterable[Token]) -> ConventionalCommit:
    """Build a commit record from tokens.

    Args:
        tokens: Tokens as produced by :func:`commitlex.lexer.tokenize`.
            Consumed once.

    Returns:
        The parsed commit.

    Raises:
        ParseError: ``MISSING_COMMIT_TYPE`` or ``MISSING_DESCRIPTION``
            when the corresponding token is absent or empty.
        TypeError: If an element is not a token.
    """
    commit_type = ''
    scope: str | None = None
    breaking = False
    description = ''
    body: str | None = None
    footer: str | None = None

    for token in tokens:
        if isinstance(token, CommitType):
            commit_type = token.text
        elif isinstance(token, Scope):
            scope = token.text
        elif isinstance(token, BreakingMarker):
            breaking = True
        elif isinstance(token, Description):
            description = token.text
        elif isinstance(token, Body):
            body = token.text
        elif isinstance(token, Footer):
            footer = token.text
        else:
            raise TypeError(f'Not a commit token: {token!r}')

    if not commit_type:
        raise ParseError(ErrorKind.MISSING_COMMIT_TYPE)
    if not description:
        raise ParseError(ErrorKind.MISSING_DESCRIPTION)

    return ConventionalCommit(
        type=commit_type,
        scope=scope,
        breaking=breaking,
        description=description,
        body=body,
        footer=footer,
    )
