# promptree — brace templates and prompt rendering
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Placeholder discovery and structural checks for brace templates.

This is a separate scan from :func:`promptree.template.builder.build_tree`:
callers use it to learn which variables a template needs and to reject
malformed templates before any values are substituted.
"""

from __future__ import annotations

from promptree.template.builder import TemplateFormatError

_INVALID = "The template string is not valid"


def _scan_placeholders(source: str) -> list[str]:
    names: list[str] = []
    start: int | None = None

    i = 0
    length = len(source)
    while i < length:
        pair = source[i:i + 2]
        if pair in ("{{", "}}"):
            if start is not None:
                raise TemplateFormatError(
                    f"{_INVALID}: escaped brace inside placeholder at position {i}"
                )
            i += 2
            continue

        ch = source[i]
        if ch == "{":
            if start is not None:
                raise TemplateFormatError(
                    f"{_INVALID}: nested '{{' at position {i}"
                )
            start = i
        elif ch == "}":
            if start is None:
                raise TemplateFormatError(
                    f"{_INVALID}: unmatched '}}' at position {i}"
                )
            name = source[start + 1:i].strip()
            if not name:
                raise TemplateFormatError(
                    f"{_INVALID}: empty placeholder at position {start}"
                )
            names.append(name)
            start = None
        i += 1

    if start is not None:
        raise TemplateFormatError(f"{_INVALID}: unclosed '{{' at position {start}")
    return names


def validate_template(source: str) -> None:
    """Raise :class:`TemplateFormatError` if *source* is malformed.

    Rejected: a ``{`` that is never closed, a ``}`` with no opener, a
    placeholder opened inside another one, an escaped ``{{``/``}}`` inside a
    placeholder, and an empty placeholder name.
    """
    _scan_placeholders(source)


def find_variables(source: str) -> set[str]:
    """Return the trimmed names of all ``{name}`` placeholders in *source*.

    Placeholders inside ``{{ ... }}`` escaped blocks are included; the
    escaped braces themselves are not.
    """
    return set(_scan_placeholders(source))
