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

"""Tests for folding tokens into a ConventionalCommit."""

from __future__ import annotations

import dataclasses

import pytest
from commitlex._types import (
    Body,
    BreakingMarker,
    CommitType,
    ConventionalCommit,
    Description,
    Footer,
    Scope,
)
from commitlex.errors import ErrorKind, ParseError
from commitlex.parser import parse


class TestParseDefaults:
    """Tests for optional field defaults."""

    def test_type_and_description_only(self) -> None:
        """All optional fields are absent."""
        commit = parse([CommitType('feat'), Description('add a new feature')])
        assert commit == ConventionalCommit(type='feat', description='add a new feature')
        assert commit.scope is None
        assert commit.breaking is False
        assert commit.body is None
        assert commit.footer is None

    def test_all_fields(self) -> None:
        """Every token kind lands in its field."""
        commit = parse([
            CommitType('fix'),
            Scope('parser'),
            BreakingMarker(),
            Description('d'),
            Body('b'),
            Footer('Refs: #1'),
        ])
        assert commit == ConventionalCommit(
            type='fix',
            scope='parser',
            breaking=True,
            description='d',
            body='b',
            footer='Refs: #1',
        )

    def test_empty_scope_is_kept(self) -> None:
        """An empty scope token gives ``''``, not ``None``."""
        commit = parse([CommitType('feat'), Scope(''), Description('d')])
        assert commit.scope == ''

    def test_accepts_any_iterable(self) -> None:
        """A generator works as input."""
        commit = parse(t for t in (CommitType('feat'), Description('d')))
        assert commit.type == 'feat'

    def test_record_is_immutable(self) -> None:
        """The record is frozen."""
        commit = parse([CommitType('feat'), Description('d')])
        with pytest.raises(dataclasses.FrozenInstanceError):
            commit.type = 'fix'  # type: ignore[misc]


class TestParseFold:
    """Tests for the order-independent, last-write-wins fold."""

    def test_order_independent(self) -> None:
        """Tokens in reverse order give the same record."""
        tokens = [CommitType('feat'), Scope('s'), BreakingMarker(), Description('d'), Body('b')]
        assert parse(reversed(tokens)) == parse(tokens)

    def test_duplicate_description_last_wins(self) -> None:
        """The second Description token is kept."""
        commit = parse([CommitType('feat'), Description('first'), Description('second')])
        assert commit.description == 'second'

    def test_duplicate_type_last_wins(self) -> None:
        """The second CommitType token is kept."""
        commit = parse([CommitType('feat'), CommitType('fix'), Description('d')])
        assert commit.type == 'fix'

    def test_duplicate_breaking_marker(self) -> None:
        """Repeated markers still mean breaking."""
        commit = parse([CommitType('feat'), BreakingMarker(), BreakingMarker(), Description('d')])
        assert commit.breaking is True


class TestParseErrors:
    """Tests for required-field validation."""

    def test_missing_type(self) -> None:
        """No CommitType token fails."""
        with pytest.raises(ParseError) as exc_info:
            parse([Description('d')])
        assert exc_info.value.kind is ErrorKind.MISSING_COMMIT_TYPE
        assert str(exc_info.value) == 'Missing commit type'

    def test_missing_description(self) -> None:
        """No Description token fails."""
        with pytest.raises(ParseError) as exc_info:
            parse([CommitType('feat'), Scope('s')])
        assert exc_info.value.kind is ErrorKind.MISSING_DESCRIPTION

    def test_type_checked_first(self) -> None:
        """With both missing, the type error is reported."""
        with pytest.raises(ParseError) as exc_info:
            parse([])
        assert exc_info.value.kind is ErrorKind.MISSING_COMMIT_TYPE

    def test_empty_type_counts_as_missing(self) -> None:
        """An empty CommitType payload is rejected."""
        with pytest.raises(ParseError) as exc_info:
            parse([CommitType(''), Description('d')])
        assert exc_info.value.kind is ErrorKind.MISSING_COMMIT_TYPE

    def test_empty_description_counts_as_missing(self) -> None:
        """An empty Description payload is rejected."""
        with pytest.raises(ParseError) as exc_info:
            parse([CommitType('feat'), Description('')])
        assert exc_info.value.kind is ErrorKind.MISSING_DESCRIPTION

    def test_non_token_rejected(self) -> None:
        """Arbitrary objects are not tokens."""
        with pytest.raises(TypeError, match='Not a commit token'):
            parse([CommitType('feat'), 'Description'])  # type: ignore[list-item]
