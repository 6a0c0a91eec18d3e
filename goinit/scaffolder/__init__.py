"""go-initializer scaffolder -- generates Go service source trees.

This package turns a ``ProjectConfig`` into an ordered manifest of files,
renders each file's Jinja2 template, resolves the pinned ``go.mod``
requirements and packages everything as a zip archive.

Quick usage::

    from goinit.scaffolder import ProjectConfig, ProjectGenerator

    config = ProjectConfig(
        project_name="myapi",
        module="github.com/acme/myapi",
        structure="hexagonal",
        use_docker=True,
    )
    generator = ProjectGenerator(config)
    print(generator.file_list())
    archive = generator.build_archive()
"""

from goinit.scaffolder.dependencies import render_go_mod, resolve_dependencies
from goinit.scaffolder.generator import ProjectGenerator
from goinit.scaffolder.layouts import known_structures, layout_entries
from goinit.scaffolder.manifest import preview_files, resolve_manifest
from goinit.scaffolder.models import (
    FileEntry,
    Logger,
    ManifestEntry,
    ProjectConfig,
    ProjectType,
    RenderedFile,
    Router,
    Structure,
)
from goinit.scaffolder.templates import (
    DictTemplateSource,
    FileSystemTemplateSource,
    RenderError,
    TemplateParseError,
    TemplateRenderError,
    TemplateRenderer,
)

__all__ = [
    "DictTemplateSource",
    "FileEntry",
    "FileSystemTemplateSource",
    "Logger",
    "ManifestEntry",
    "ProjectConfig",
    "ProjectGenerator",
    "ProjectType",
    "RenderError",
    "RenderedFile",
    "Router",
    "Structure",
    "TemplateParseError",
    "TemplateRenderError",
    "TemplateRenderer",
    "known_structures",
    "layout_entries",
    "preview_files",
    "render_go_mod",
    "resolve_dependencies",
    "resolve_manifest",
]
