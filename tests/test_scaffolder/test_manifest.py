"""Tests for manifest resolution and preview."""

from __future__ import annotations

import pytest

from goinit.scaffolder.layouts import STANDARD_LAYOUT
from goinit.scaffolder.manifest import (
    BOOKKEEPING_FILES,
    preview_files,
    resolve_manifest,
)
from goinit.scaffolder.models import FileEntry, ManifestEntry


pytestmark = pytest.mark.unit


class TestResolveManifest:
    def test_declaration_order_preserved(self, full_config):
        manifest = resolve_manifest("standard", full_config)
        declared = [e.template for e in STANDARD_LAYOUT if e.applies_to(full_config)]
        assert [m.template for m in manifest] == declared

    def test_returns_manifest_entries(self, base_config):
        manifest = resolve_manifest("standard", base_config)
        assert manifest[0] == ManifestEntry(
            path="cmd/myapi/main.go", template="standard/cmd_main.go.j2"
        )

    def test_project_name_substituted(self, make_config):
        config = make_config(project_name="billing")
        paths = [m.path for m in resolve_manifest("feature", config)]
        assert paths[0] == "cmd/billing/main.go"
        assert not any("{project_name}" in p for p in paths)

    def test_project_name_substituted_verbatim(self, make_config):
        config = make_config(project_name="../weird name")
        paths = [m.path for m in resolve_manifest("standard", config)]
        assert paths[0] == "cmd/../weird name/main.go"

    def test_unknown_structure_matches_standard(self, full_config):
        assert resolve_manifest("microkernel", full_config) == resolve_manifest(
            "standard", full_config
        )

    def test_structure_argument_wins_over_config(self, make_config):
        config = make_config(structure="hexagonal")
        paths = [m.path for m in resolve_manifest("flat", config)]
        assert paths[0] == "main.go"

    def test_pure_function(self, full_config):
        assert resolve_manifest("hexagonal", full_config) == resolve_manifest(
            "hexagonal", full_config
        )


class TestPreviewFiles:
    def test_bookkeeping_files_appended_last(self, base_config):
        files = preview_files("standard", base_config)
        assert tuple(files[-2:]) == BOOKKEEPING_FILES == ("go.mod", "go.sum")

    def test_preview_matches_manifest(self, full_config):
        manifest = resolve_manifest("hexagonal", full_config)
        files = preview_files("hexagonal", full_config)
        assert files == [m.path for m in manifest] + ["go.mod", "go.sum"]

    def test_predicate_absent_means_included(self):
        entry = FileEntry("x.j2", "x.txt")
        assert entry.when is None
