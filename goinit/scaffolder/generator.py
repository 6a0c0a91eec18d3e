"""Main scaffolding orchestrator.

Takes a ``ProjectConfig``, resolves its manifest, renders every template it
names and packages the result (plus ``go.mod`` and an empty ``go.sum``) into
a zip archive rooted at a folder named after the project.  The same rendered
files can also be written straight to disk.
"""

from __future__ import annotations

import asyncio
import io
import posixpath
import zipfile
from pathlib import Path

from goinit.utils import console

from .dependencies import render_go_mod, resolve_dependencies
from .manifest import GO_MOD, GO_SUM, preview_files, resolve_manifest
from .models import ProjectConfig, RenderedFile
from .templates import FileSystemTemplateSource, TemplateRenderer, TemplateSource


class ProjectGenerator:
    """Renders a Go project for one ``ProjectConfig``.

    Args:
        config: The (immutable) project configuration.
        source: Template content store.  Defaults to the packaged templates.
        structure: Structure variant to lay out.  Defaults to
            ``config.structure``; unknown values fall back to ``standard``.
    """

    def __init__(
        self,
        config: ProjectConfig,
        source: TemplateSource | None = None,
        structure: str | None = None,
    ) -> None:
        self.config = config
        self.source = source if source is not None else FileSystemTemplateSource()
        self.structure = structure if structure is not None else config.structure
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def file_list(self) -> list[str]:
        """Paths the archive will contain, relative to the project root."""
        return preview_files(self.structure, self.config)

    def dependencies(self) -> dict[str, str]:
        return resolve_dependencies(self.config)

    def render_files(self) -> list[RenderedFile]:
        """Render every manifest entry, in manifest order.

        Entries whose template is absent from the source are skipped; a
        variant may declare optional files it has no content for yet.

        Raises:
            TemplateParseError: A template body is not valid Jinja2.
            TemplateRenderError: A template failed while rendering.
        """
        context = self._build_context()
        rendered: list[RenderedFile] = []

        for entry in resolve_manifest(self.structure, self.config):
            body = self.source.get(entry.template)
            if body is None:
                console.print(
                    f"[dim]Skipping {entry.path}: template {entry.template} not found[/dim]"
                )
                continue
            content = self.renderer.render_string(body, context, template_id=entry.template)
            rendered.append(RenderedFile(path=entry.path, content=content))

        rendered.append(RenderedFile(path=GO_MOD, content=self._render_go_mod()))
        rendered.append(RenderedFile(path=GO_SUM, content=""))
        return rendered

    def build_archive(self) -> bytes:
        """Render the project and return it as zip bytes.

        Rendering completes before the archive is opened, so a failure never
        yields a partial archive.
        """
        files = self.render_files()

        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for f in files:
                zf.writestr(self._archive_path(f.path), f.content)
        return buf.getvalue()

    async def write_archive(self, output_path: str | Path) -> Path:
        """Build the archive and write it to *output_path*."""
        data = self.build_archive()
        out = Path(output_path)
        await asyncio.to_thread(_write_bytes, out, data)
        return out

    async def generate(self, output_dir: str | Path) -> Path:
        """Write the rendered project tree under ``output_dir/<project_name>``.

        Returns:
            Path to the generated project root.
        """
        files = self.render_files()
        project_root = Path(output_dir) / self.config.project_name

        await asyncio.gather(*[
            asyncio.to_thread(_write_file, project_root / f.path, f.content)
            for f in files
        ])
        return project_root

    # -- Internal ----------------------------------------------------------

    def _build_context(self) -> dict:
        """Expose every configuration field to the templates by name."""
        context = self.config.model_dump()
        context["dependencies"] = list(self.config.dependencies)
        return context

    def _render_go_mod(self) -> str:
        return render_go_mod(self.config, self.dependencies())

    def _archive_path(self, path: str) -> str:
        # The project name is used as-is; sanitising it is the caller's job.
        return posixpath.join(self.config.project_name, path)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
