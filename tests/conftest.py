"""Shared pytest fixtures for the go-initializer test suite.

Provides reusable fixtures for:
- Baseline project configurations and a config factory
- In-memory template sources with trivial bodies for every template id
- Helpers for opening generated archives
- Sample boundary-layer request payloads
"""

from __future__ import annotations

import io
import json
import zipfile
from pathlib import Path
from typing import Any, Callable

import pytest

from goinit.scaffolder.layouts import (
    FEATURE_LAYOUT,
    FLAT_LAYOUT,
    HEXAGONAL_LAYOUT,
    STANDARD_LAYOUT,
)
from goinit.scaffolder.models import ProjectConfig
from goinit.scaffolder.templates import DictTemplateSource


_IDENTITY: dict[str, Any] = {
    "project_name": "myapi",
    "module": "github.com/acme/myapi",
    "description": "A test API.",
    "go_version": "1.22.0",
}


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., ProjectConfig]:
    """Factory building a ``ProjectConfig`` with sensible identity defaults."""

    def _make(**overrides: Any) -> ProjectConfig:
        return ProjectConfig(**{**_IDENTITY, **overrides})

    return _make


@pytest.fixture
def base_config() -> ProjectConfig:
    """A minimal standard-layout REST API with every toggle off."""
    return ProjectConfig(**_IDENTITY)


@pytest.fixture
def full_config() -> ProjectConfig:
    """A standard-layout REST API with every toggle on."""
    return ProjectConfig(
        **_IDENTITY,
        logger="zerolog",
        use_docker=True,
        use_github=True,
        use_config=True,
        use_logger=True,
        use_database=True,
        use_redis=True,
        use_jwt=True,
        use_air=True,
    )


# ---------------------------------------------------------------------------
# Template sources
# ---------------------------------------------------------------------------

@pytest.fixture
def stub_templates() -> dict[str, str]:
    """A one-line body for every template id any layout names."""
    templates: dict[str, str] = {}
    for entry in (*STANDARD_LAYOUT, *FLAT_LAYOUT, *FEATURE_LAYOUT, *HEXAGONAL_LAYOUT):
        templates[entry.template] = entry.template + " for {{ project_name }}\n"
    return templates


@pytest.fixture
def stub_source(stub_templates: dict[str, str]) -> DictTemplateSource:
    return DictTemplateSource(stub_templates)


# ---------------------------------------------------------------------------
# Archives
# ---------------------------------------------------------------------------

@pytest.fixture
def read_archive() -> Callable[[bytes], dict[str, str]]:
    """Return a helper mapping archive entry names to decoded contents, in order."""

    def _read(data: bytes) -> dict[str, str]:
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            return {name: zf.read(name).decode("utf-8") for name in zf.namelist()}

    return _read


# ---------------------------------------------------------------------------
# Boundary-layer requests
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_request() -> dict[str, Any]:
    """A request body as posted by the web UI."""
    return {
        "project_name": "orders",
        "module": "github.com/acme/orders",
        "description": "Order service",
        "structure": "hexagonal",
        "logger": "zap",
        "use_docker": True,
        "use_database": True,
        "dependencies": [
            {
                "name": "PostgreSQL Driver (pgx)",
                "category": "Database",
                "desc": "PostgreSQL driver and toolkit",
                "pkg": "github.com/jackc/pgx/v5",
            },
            {
                "name": "Testify",
                "category": "Testing",
                "desc": "Assertions and mocks",
                "pkg": "",
            },
        ],
    }


@pytest.fixture
def request_file(tmp_path: Path, sample_request: dict[str, Any]) -> Path:
    """The sample request written to a JSON file."""
    path = tmp_path / "request.json"
    path.write_text(json.dumps(sample_request), encoding="utf-8")
    return path
