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

"""Pure types for commit message tokens and parsed commits.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass: no I/O, no logging, no side
effects.  It is safe to import from any module in the project.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    'Body',
    'BreakingMarker',
    'CommitType',
    'ConventionalCommit',
    'Description',
    'Footer',
    'Scope',
    'Token',
]


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CommitType:
    """The commit's category word, e.g. ``feat`` or ``fix``.

    Attributes:
        text: The type as written.  Case is preserved.
    """

    text: str


@dataclass(frozen=True)
class Scope:
    """The parenthesized qualifier after the type.

    Attributes:
        text: The text between ``(`` and ``)``.  May be empty.
    """

    text: str


@dataclass(frozen=True)
class BreakingMarker:
    """The ``!`` before the colon.  Presence alone marks a breaking change."""


@dataclass(frozen=True)
class Description:
    """The single-line summary following the colon."""

    text: str


@dataclass(frozen=True)
class Body:
    """Free-form explanatory text between the subject and the footer."""

    text: str


@dataclass(frozen=True)
class Footer:
    """Trailing metadata block, starting at the first footer marker."""

    text: str


# Union of all token types.
Token = CommitType | Scope | BreakingMarker | Description | Body | Footer


# ---------------------------------------------------------------------------
# Parsed commit
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConventionalCommit:
    """A commit message that passed both tokenizing and parsing.

    Only :func:`commitlex.parser.parse` builds these, and it never does
    so without a non-empty type and description.

    Attributes:
        type: The commit type (e.g. ``"feat"``).
        description: The subject line text after ``type(scope)!:``.
        scope: The scope, ``None`` if absent.  ``''`` for ``type(): ...``.
        breaking: ``True`` if ``!`` preceded the colon.
        body: The trimmed body, ``None`` if absent.
        footer: The trimmed footer block, ``None`` if absent.
    """

    type: str
    description: str
    scope: str | None = None
    breaking: bool = False
    body: str | None = None
    footer: str | None = None
