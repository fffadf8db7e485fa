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

"""Prompt-file loader with directory fallback.

Resolution order when rendering ``engine.render("scoring.txt", ...)``:

1. ``<user_dir>/scoring.txt`` — user's customised version
2. ``<default_dir>/scoring.txt`` — package-shipped default

This lets users override any prompt without touching installed code.
Files use brace-template syntax and are rendered by
:class:`~promptree.prompt.PromptTemplate`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, Environment, TemplateNotFound
from jinja2.loaders import split_template_path

from promptree.prompt import PromptTemplate

logger = logging.getLogger(__name__)

PROMPT_SUFFIXES = (".txt", ".prompt")


class _FallbackLoader(BaseLoader):
    """Jinja2 loader that checks user dir first, then default dir."""

    def __init__(
        self,
        user_dir: Path | None = None,
        default_dir: Path | None = None,
    ) -> None:
        self.user_dir = user_dir
        self.default_dir = default_dir

    def get_source(
        self, environment: Environment, template: str,
    ) -> tuple[str, str, Callable[[], bool]]:
        pieces = split_template_path(template)
        for directory in (self.user_dir, self.default_dir):
            if directory is None:
                continue
            path = directory.joinpath(*pieces)
            if path.is_file():
                source = path.read_text(encoding="utf-8")
                mtime = path.stat().st_mtime
                return source, str(path), lambda: path.stat().st_mtime == mtime
        raise TemplateNotFound(template)


class TemplateEngine:
    """Load prompt files from disk and render them.

    Args:
        user_dir: User override directory (checked first).
        default_dir: Package default directory (fallback).
    """

    def __init__(
        self,
        user_dir: Path | str | None = None,
        default_dir: Path | str | None = None,
    ) -> None:
        self.user_dir = Path(user_dir).expanduser() if user_dir else None
        self.default_dir = Path(default_dir).expanduser() if default_dir else None
        # Hosts the loader only; sources are re-read on every call.
        self._env = Environment(
            loader=_FallbackLoader(self.user_dir, self.default_dir),
        )

    def get_template(self, template_name: str) -> PromptTemplate:
        """Load a prompt file as a :class:`PromptTemplate`.

        Raises ``jinja2.TemplateNotFound`` if the file does not exist in
        either directory, and ``TemplateFormatError`` if its braces are
        unbalanced.
        """
        source, filename, _ = self._env.loader.get_source(self._env, template_name)
        logger.debug("Loaded prompt template %s from %s", template_name, filename)
        return PromptTemplate(source)

    def render(self, template_name: str, **variables: Any) -> str:
        """Render a prompt file with the given variables."""
        return self.get_template(template_name).render(variables)

    def has_template(self, template_name: str) -> bool:
        """Check whether a prompt file exists in either directory."""
        try:
            self._env.loader.get_source(self._env, template_name)
            return True
        except TemplateNotFound:
            return False

    def install_defaults(self) -> None:
        """Copy all default prompt files to the user directory.

        Skips files that already exist in the user directory.
        """
        if self.user_dir is None or self.default_dir is None:
            return
        if not self.default_dir.is_dir():
            return

        self.user_dir.mkdir(parents=True, exist_ok=True)
        for src in self.default_dir.iterdir():
            if src.is_file() and src.suffix in PROMPT_SUFFIXES:
                dest = self.user_dir / src.name
                if not dest.exists():
                    dest.write_text(src.read_text(encoding="utf-8"), encoding="utf-8")
                    logger.info("Installed default prompt: %s", dest)
