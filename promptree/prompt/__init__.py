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

"""Prompt templates and the messages they produce."""

from promptree.prompt.messages import Message, Prompt, Role
from promptree.prompt.template import (
    MissingVariablesError,
    PromptTemplate,
    SystemPromptTemplate,
)

__all__ = [
    "Message",
    "MissingVariablesError",
    "Prompt",
    "PromptTemplate",
    "Role",
    "SystemPromptTemplate",
]
