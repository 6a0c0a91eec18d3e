"""Manifest resolution shared by the preview and generate flows."""

from __future__ import annotations

from .layouts import layout_entries
from .models import ManifestEntry, ProjectConfig

GO_MOD = "go.mod"
GO_SUM = "go.sum"

# Always appended after the rendered templates, in this order.
BOOKKEEPING_FILES: tuple[str, ...] = (GO_MOD, GO_SUM)


def resolve_manifest(structure: str, config: ProjectConfig) -> list[ManifestEntry]:
    """Return the applicable entries for *structure*, in declaration order.

    Entries without a predicate always apply.  The ``{project_name}``
    placeholder in output paths is substituted verbatim.
    """
    return [
        ManifestEntry(path=entry.output_path(config), template=entry.template)
        for entry in layout_entries(structure)
        if entry.applies_to(config)
    ]


def preview_files(structure: str, config: ProjectConfig) -> list[str]:
    """List every file a generate call would write, bookkeeping files included."""
    paths = [entry.path for entry in resolve_manifest(structure, config)]
    paths.extend(BOOKKEEPING_FILES)
    return paths
