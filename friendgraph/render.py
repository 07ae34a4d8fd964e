"""HTML template rendering for the web pages."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import DictLoader, Environment


class TemplateRenderer:
    """Renders the ``*.html`` templates found in one directory, by file name."""

    def __init__(self, directory: str | Path) -> None:
        folder = Path(directory)
        paths = sorted(path for path in folder.glob("*.html") if path.is_file())
        if not paths:
            raise FileNotFoundError(f"no templates match {folder / '*.html'}")
        sources = {path.name: path.read_text(encoding="utf-8") for path in paths}
        self._environment = Environment(loader=DictLoader(sources), autoescape=True)
        # Compile every template now so that syntax errors surface at start-up.
        for name in sources:
            self._environment.get_template(name)

    @property
    def template_names(self) -> list[str]:
        """The names of the loaded templates, sorted."""
        return self._environment.list_templates()

    def render(self, name: str, data: Mapping[str, Any]) -> str:
        """Render the template called ``name`` with ``data`` as its context."""
        return self._environment.get_template(name).render(dict(data))