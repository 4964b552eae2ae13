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

"""Configuration loading for commitlex.

Settings are read with ``tomlkit`` from one of two places:

- ``commitlex.toml``: keys at the top level.
- ``pyproject.toml``: keys under ``[tool.commitlex]``.

Example ``commitlex.toml``::

    footer_markers = ["BREAKING CHANGE:", "Reviewed-by:", "Refs:", "Signed-off-by:"]

Supported keys:

- ``footer_markers``: literal prefixes that start the footer block.
  Order matters only when two markers begin at the same offset.

A missing file is not an error; the defaults apply.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from commitlex.errors import ConfigError
from commitlex.lexer import DEFAULT_FOOTER_MARKERS
from commitlex.logging import get_logger

__all__ = [
    'CONFIG_FILENAME',
    'CommitlexConfig',
    'find_config',
    'load_config',
]

log = get_logger('commitlex.config')

CONFIG_FILENAME = 'commitlex.toml'
PYPROJECT_FILENAME = 'pyproject.toml'

_ALLOWED_KEYS: frozenset[str] = frozenset({'footer_markers'})


@dataclass(frozen=True)
class CommitlexConfig:
    """Resolved commitlex settings.

    Attributes:
        footer_markers: Literal prefixes that start the footer block,
            in tie-break order.
    """

    footer_markers: tuple[str, ...] = DEFAULT_FOOTER_MARKERS


def _parse_footer_markers(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ConfigError(f'footer_markers must be a list of strings, got {type(value).__name__}')
    if not value:
        raise ConfigError('footer_markers must not be empty')
    markers: list[str] = []
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise ConfigError(f'footer_markers[{i}] must be a string, got {type(item).__name__}')
        if not item:
            raise ConfigError(f'footer_markers[{i}] must not be empty')
        markers.append(str(item))
    return tuple(markers)


def _parse_config(raw: dict[str, Any]) -> CommitlexConfig:
    """Validate a raw settings mapping and build a :class:`CommitlexConfig`.

    Raises:
        ConfigError: On unknown keys or mistyped values.
    """
    unknown = sorted(set(raw) - _ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f'Unknown key(s) in commitlex config: {", ".join(unknown)}')
    if 'footer_markers' in raw:
        return CommitlexConfig(footer_markers=_parse_footer_markers(raw['footer_markers']))
    return CommitlexConfig()


def load_config(path: Path) -> CommitlexConfig:
    """Load settings from a ``commitlex.toml`` or ``pyproject.toml`` file.

    Args:
        path: Path to the file.  For ``pyproject.toml`` only the
            ``[tool.commitlex]`` table is read.

    Returns:
        The resolved config; defaults if the file or table is absent.

    Raises:
        ConfigError: If the file is not valid TOML or has bad settings.
    """
    if not path.is_file():
        log.debug('config_not_found', path=str(path))
        return CommitlexConfig()

    try:
        doc = tomlkit.parse(path.read_text(encoding='utf-8'))
    except tomlkit.exceptions.ParseError as exc:
        raise ConfigError(f'{path}: invalid TOML: {exc}') from exc

    raw: dict[str, Any] = doc.unwrap()
    if path.name == PYPROJECT_FILENAME:
        tool = raw.get('tool', {})
        raw = tool.get('commitlex', {}) if isinstance(tool, dict) else {}
        if not isinstance(raw, dict):
            raise ConfigError(f'{path}: [tool.commitlex] must be a table')

    try:
        config = _parse_config(raw)
    except ConfigError as exc:
        raise ConfigError(f'{path}: {exc}') from exc
    log.debug('config_loaded', path=str(path), footer_markers=list(config.footer_markers))
    return config


def find_config(start: Path) -> CommitlexConfig:
    """Search *start* and its parents for configuration.

    In each directory ``commitlex.toml`` wins over a ``pyproject.toml``
    with a ``[tool.commitlex]`` table.  The first directory with either
    one ends the search.

    Returns:
        The resolved config, or defaults if nothing was found.
    """
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return load_config(candidate)
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return load_config(pyproject)
    return CommitlexConfig()


def _has_tool_table(pyproject: Path) -> bool:
    try:
        doc = tomlkit.parse(pyproject.read_text(encoding='utf-8'))
    except tomlkit.exceptions.ParseError:
        log.warning('pyproject_unreadable', path=str(pyproject))
        return False
    tool = doc.unwrap().get('tool', {})
    return isinstance(tool, dict) and 'commitlex' in tool
