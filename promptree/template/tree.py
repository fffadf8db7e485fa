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

"""Immutable template tree produced by the brace parser.

A tree node is one of two variants:

- :class:`TextNode` — a resolved fragment carrying literal text (plain
  template text, an escaped-brace block, or a substituted variable value).
- :class:`CompositeNode` — an ordered sequence of child fragments.

Rendering a composite concatenates the rendered children in order; rendering
a leaf returns its text.  Nodes are frozen once built, so a tree can be
rendered any number of times, from any thread, with identical results.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class TextNode:
    """Leaf fragment holding final literal text."""

    text: str

    def render(self) -> str:
        return self.text

    def walk(self) -> Iterator[TemplateTree]:
        yield self

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CompositeNode:
    """Fragment made of ordered child fragments.

    Attributes:
        children: Child nodes in template order.
    """

    children: tuple[TemplateTree, ...] = ()

    def add_child(self, node: TemplateTree) -> CompositeNode:
        """Return a copy of this composite with *node* appended."""
        return CompositeNode(children=(*self.children, node))

    def render(self) -> str:
        return "".join(child.render() for child in self.children)

    def walk(self) -> Iterator[TemplateTree]:
        """Yield this node and all descendants, depth-first pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __len__(self) -> int:
        return len(self.children)

    def __str__(self) -> str:
        return self.render()


TemplateTree = TextNode | CompositeNode


def leaf(text: str) -> TextNode:
    return TextNode(text)


def composite(*children: TemplateTree) -> CompositeNode:
    return CompositeNode(children=tuple(children))
