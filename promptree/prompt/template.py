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

"""Prompt templates: a brace template plus the variables to fill it.

Usage::

    from promptree.prompt import PromptTemplate

    pt = PromptTemplate("Hello '{firstName}' '{lastName}' from Unix")
    pt.add("lastName", "Park")
    pt.render({"firstName": "Nick"})   # "Hello 'Nick' 'Park' from Unix"
    prompt = pt.create({"firstName": "Nick"})

Unlike the bare tree builder, a prompt template refuses to render while any
placeholder is still without a value.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from promptree.prompt.messages import Message, Prompt, Role
from promptree.template import build_tree, find_variables

logger = logging.getLogger(__name__)


class MissingVariablesError(ValueError):
    """Raised when placeholders are left without values at render time."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(sorted(missing))
        super().__init__(
            "All template variables were not replaced. "
            f"Missing variable names are [{', '.join(self.missing)}]"
        )


class PromptTemplate:
    """A brace template with template-level variables.

    Args:
        template: Template text using ``{name}`` placeholders and
            ``{{``/``}}`` escapes.
        variables: Initial template-level variable values.

    Raises:
        TemplateFormatError: If *template* has unbalanced braces.
    """

    role: Role = "user"

    def __init__(
        self,
        template: str,
        variables: Mapping[str, Any] | None = None,
    ) -> None:
        self.template = template
        self._input_variables = frozenset(find_variables(template))
        self._variables: dict[str, Any] = dict(variables or {})

    @property
    def input_variables(self) -> frozenset[str]:
        """Names of all placeholders in the template."""
        return self._input_variables

    @property
    def variables(self) -> dict[str, Any]:
        return dict(self._variables)

    def add(self, name: str, value: Any) -> None:
        """Set a template-level variable, used by every later render."""
        self._variables[name] = value

    def render(self, model: Mapping[str, Any] | None = None) -> str:
        """Render the template; *model* values override template-level ones.

        Raises:
            MissingVariablesError: If a placeholder has no value.
        """
        values = {**self._variables, **(model or {})}
        missing = self._input_variables - values.keys()
        if missing:
            raise MissingVariablesError(missing)

        rendered = build_tree(self.template, values).render()
        logger.debug(
            "Rendered %s with %d variables (%d chars)",
            type(self).__name__, len(self._input_variables), len(rendered),
        )
        return rendered

    def create_message(self, model: Mapping[str, Any] | None = None) -> Message:
        return Message(role=self.role, content=self.render(model))

    def create(self, model: Mapping[str, Any] | None = None) -> Prompt:
        """Render into a single-message :class:`Prompt`."""
        return Prompt(instructions=[self.create_message(model)])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.template!r})"


class SystemPromptTemplate(PromptTemplate):
    """Prompt template whose messages carry the ``system`` role."""

    role: Role = "system"
