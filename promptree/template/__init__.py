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

"""Brace templates parsed into immutable trees.

Usage::

    from promptree.template import build_tree, find_variables

    source = "Hello {name}, reply as {{\"answer\": ...}}"
    find_variables(source)                        # {"name"}
    tree = build_tree(source, {"name": "Nick"})
    tree.render()                                 # 'Hello Nick, reply as {"answer": ...}'
"""

from promptree.template.builder import TemplateFormatError, build_tree, render_template
from promptree.template.tree import CompositeNode, TemplateTree, TextNode, composite, leaf
from promptree.template.validation import find_variables, validate_template

__all__ = [
    "CompositeNode",
    "TemplateFormatError",
    "TemplateTree",
    "TextNode",
    "build_tree",
    "composite",
    "find_variables",
    "leaf",
    "render_template",
    "validate_template",
]
