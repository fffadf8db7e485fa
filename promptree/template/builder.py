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

"""Single-pass brace parser that builds a :class:`CompositeNode` tree.

Template syntax:

- ``{name}`` — variable reference.  The name is trimmed and looked up in the
  supplied mapping; the value is substituted via ``str()``.  Names missing
  from the mapping render as the name itself.
- ``{{`` / ``}}`` — escaped literal braces.  Text between them is kept
  verbatim, so JSON-like blocks can sit next to variable references::

      build_tree("{{ 'k': {v} }}", {"v": "val"}).render()  # "{ 'k': val }"

Variables are resolved while scanning, not at render time, so the returned
tree holds only final text.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from promptree.template.tree import CompositeNode, TemplateTree, TextNode

logger = logging.getLogger(__name__)


class TemplateFormatError(ValueError):
    """Raised when a template's single braces are not balanced."""


@dataclass
class _ScopeBuilder:
    """An open scope on the parse stack (the root or a ``{`` variable)."""

    opened_at: int
    children: list[TemplateTree] = field(default_factory=list)

    def add(self, node: TemplateTree) -> None:
        self.children.append(node)

    def add_text(self, text: str) -> None:
        if text:
            self.children.append(TextNode(text))

    def resolve(self, text: str) -> TextNode:
        # Fragments gathered inside a variable scope are superseded by its value.
        self.children.clear()
        return TextNode(text)

    def build(self) -> CompositeNode:
        return CompositeNode(children=tuple(self.children))


def _lookup(raw_name: str, variables: Mapping[str, Any]) -> str:
    name = raw_name.strip()
    if name in variables:
        return str(variables[name])
    logger.debug("No value for template variable %r, keeping its name", name)
    return name


def build_tree(
    source: str, variables: Mapping[str, Any] | None = None,
) -> CompositeNode:
    """Parse *source* and substitute *variables* into a template tree.

    Raises :class:`TemplateFormatError` for a ``}`` without an open
    variable, or a ``{`` still open at the end of the input.
    """
    if variables is None:
        variables = {}

    root = _ScopeBuilder(opened_at=0)
    stack: list[_ScopeBuilder] = [root]
    buffer: list[str] = []

    i = 0
    length = len(source)
    while i < length:
        ch = source[i]
        next_ch = source[i + 1] if i + 1 < length else ""

        if ch == "{" and next_ch == "{":
            stack[-1].add_text("".join(buffer))
            buffer = ["{"]
            i += 2
            continue

        if ch == "}" and next_ch == "}":
            buffer.append("}")
            stack[-1].add_text("".join(buffer))
            buffer = []
            i += 2
            continue

        if ch == "{":
            stack[-1].add_text("".join(buffer))
            buffer = []
            stack.append(_ScopeBuilder(opened_at=i))
        elif ch == "}":
            if len(stack) == 1:
                raise TemplateFormatError(
                    f"The template string is not valid: unmatched '}}' at position {i}"
                )
            scope = stack.pop()
            stack[-1].add(scope.resolve(_lookup("".join(buffer), variables)))
            buffer = []
        else:
            buffer.append(ch)
        i += 1

    if len(stack) > 1:
        raise TemplateFormatError(
            "The template string is not valid: unclosed '{' at position "
            f"{stack[-1].opened_at}"
        )

    root.add_text("".join(buffer))
    tree = root.build()
    logger.debug(
        "Built template tree: %d chars, %d fragments", length, len(tree.children),
    )
    return tree


def render_template(
    source: str, variables: Mapping[str, Any] | None = None,
) -> str:
    """Build and render *source* in one step."""
    return build_tree(source, variables).render()
