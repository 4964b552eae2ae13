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

r"""Conventional Commits lexer and parser.

Two stages, used in sequence:

1. :func:`tokenize` (or :class:`Lexer`) turns a raw commit message into
   tokens, raising :class:`LexError` at the first structural problem.
2. :func:`parse` folds the tokens into a :class:`ConventionalCommit`,
   raising :class:`ParseError` if the type or description is missing.

Usage::

    from commitlex import parse, parse_commit, tokenize

    tokens = tokenize('feat(parser): add ability to parse conventional commits')
    commit = parse(tokens)
    assert commit.scope == 'parser'

    # Both stages at once:
    commit = parse_commit('feat!: drop Python 3.9\n\nBREAKING CHANGE: 3.10+ only')
    assert commit.breaking is True
    assert commit.footer == 'BREAKING CHANGE: 3.10+ only'
"""

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
from commitlex.config import CommitlexConfig, find_config, load_config
from commitlex.errors import (
    CommitlexError,
    CommitSyntaxError,
    ConfigError,
    ErrorKind,
    LexError,
    ParseError,
)
from commitlex.lexer import DEFAULT_FOOTER_MARKERS, Lexer, tokenize
from commitlex.logging import get_logger
from commitlex.parser import parse

_log = get_logger('commitlex')


def parse_commit(message: str, *, config: CommitlexConfig | None = None) -> ConventionalCommit:
    """Tokenize and parse a commit message in one call.

    Args:
        message: The full commit message.
        config: Settings to use; defaults to :class:`CommitlexConfig()`.

    Returns:
        The parsed commit.

    Raises:
        LexError: If tokenizing fails.
        ParseError: If a required field is missing.
    """
    cfg = config or CommitlexConfig()
    try:
        commit = parse(tokenize(message, footer_markers=cfg.footer_markers))
    except CommitSyntaxError as exc:
        _log.debug('commit_rejected', kind=exc.kind.value, reason=exc.message)
        raise
    _log.debug('commit_parsed', type=commit.type, scope=commit.scope, breaking=commit.breaking)
    return commit


__all__ = [
    'Body',
    'BreakingMarker',
    'CommitSyntaxError',
    'CommitType',
    'CommitlexConfig',
    'CommitlexError',
    'ConfigError',
    'ConventionalCommit',
    'DEFAULT_FOOTER_MARKERS',
    'Description',
    'ErrorKind',
    'Footer',
    'LexError',
    'Lexer',
    'ParseError',
    'Scope',
    'Token',
    'find_config',
    'load_config',
    'parse',
    'parse_commit',
    'tokenize',
]
