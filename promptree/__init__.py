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

"""promptree — brace templates parsed into trees and rendered into prompts.

Usage::

    from promptree import PromptTemplate, build_tree

    build_tree("Hello {name}", {"name": "Nick"}).render()   # "Hello Nick"

    pt = PromptTemplate("Translate {text} into {language}.")
    prompt = pt.create({"text": "I love programming", "language": "French"})
"""

from promptree.prompt import (
    Message,
    MissingVariablesError,
    Prompt,
    PromptTemplate,
    SystemPromptTemplate,
)
from promptree.template import (
    CompositeNode,
    TemplateFormatError,
    TemplateTree,
    TextNode,
    build_tree,
    find_variables,
    render_template,
    validate_template,
)
from promptree.templates import TemplateEngine

__all__ = [
    "CompositeNode",
    "Message",
    "MissingVariablesError",
    "Prompt",
    "PromptTemplate",
    "SystemPromptTemplate",
    "TemplateEngine",
    "TemplateFormatError",
    "TemplateTree",
    "TextNode",
    "build_tree",
    "find_variables",
    "render_template",
    "validate_template",
]
