"""Jinja2 template rendering and template content stores.

Template bodies are looked up by id through a ``TemplateSource``.  A source
returns ``None`` for an id it does not hold; it never raises for a missing
template, only for one it cannot decode.  The ``TemplateRenderer``
compiles and renders a body against a context dict and wraps every Jinja
failure in a ``RenderError`` naming the template id.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Mapping, Protocol

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class RenderError(Exception):
    """Raised when a template cannot be turned into output."""

    def __init__(self, message: str, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(message)


class TemplateParseError(RenderError):
    """The template body is not valid UTF-8 or not valid Jinja2."""


class TemplateRenderError(RenderError):
    """The template parsed but failed while rendering."""


# ---------------------------------------------------------------------------
# Template sources
# ---------------------------------------------------------------------------


class TemplateSource(Protocol):
    """Read-only store of template bodies keyed by template id."""

    def get(self, template_id: str) -> str | None: ...


class FileSystemTemplateSource:
    """Templates stored as files under a root directory.

    The template id is the path relative to the root, e.g.
    ``"standard/Makefile.j2"``.  Ids that escape the root are treated as
    missing.
    """

    def __init__(self, root: str | Path | None = None) -> None:
        if root is None:
            root = _DEFAULT_TEMPLATE_DIR
        self.root = Path(root)

    def get(self, template_id: str) -> str | None:
        root = self.root.resolve()
        path = (root / template_id).resolve()
        if root not in path.parents or not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise TemplateParseError(
                f"failed to parse template {template_id}: not valid UTF-8 ({exc.reason})",
                template_id,
            ) from exc

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template ids under *prefix*."""
        search_dir = self.root / prefix if prefix else self.root
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.root).as_posix()
            for p in search_dir.rglob("*.j2")
        )


class DictTemplateSource:
    """In-memory template store, handy for tests and embedding."""

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self._templates = dict(templates or {})

    def get(self, template_id: str) -> str | None:
        return self._templates.get(template_id)

    def list_templates(self, prefix: str = "") -> list[str]:
        return sorted(t for t in self._templates if t.startswith(prefix))


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 template bodies for project scaffolding.

    Undefined names raise instead of rendering as empty strings, so a template
    that references a field the configuration does not have fails loudly.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["slugify"] = _slugify_filter
        self.env.filters["snake_case"] = _snake_case_filter

    def render_string(
        self,
        template_string: str,
        context: dict[str, Any],
        template_id: str = "<string>",
    ) -> str:
        """Compile *template_string* and render it with *context*.

        Raises:
            TemplateParseError: If the body is not valid Jinja2.
            TemplateRenderError: If rendering raises for any reason.
        """
        try:
            template = self.env.from_string(template_string)
        except TemplateSyntaxError as exc:
            raise TemplateParseError(
                f"failed to parse template {template_id}: {exc}", template_id
            ) from exc

        try:
            return template.render(**context)
        except Exception as exc:
            raise TemplateRenderError(
                f"failed to execute template {template_id}: {exc}", template_id
            ) from exc


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _slugify_filter(value: str) -> str:
    """Convert a string to a URL/filename-safe slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower().strip())
    return slug.strip("-")


def _snake_case_filter(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()
