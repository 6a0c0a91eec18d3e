"""Pydantic v2 models and plain value types for the go-initializer scaffolder.

``ProjectConfig`` is the immutable description of one generation request.
Selector fields (structure, router, ...) are plain strings: the enumerations
below name the values the layouts and dependency tables know about, but an
unknown value is never rejected here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Structure(str, Enum):
    """Architectural layout of the generated project."""
    STANDARD = "standard"
    FLAT = "flat"
    FEATURE = "feature"
    HEXAGONAL = "hexagonal"


class ProjectType(str, Enum):
    """Kind of Go program being generated."""
    REST_API = "rest-api"
    CLI = "cli"
    GRPC = "grpc"
    LIBRARY = "library"


class Router(str, Enum):
    """HTTP router choice. ``stdlib`` means ``net/http`` only."""
    CHI = "chi"
    GIN = "gin"
    ECHO = "echo"
    FIBER = "fiber"
    STDLIB = "stdlib"


class Logger(str, Enum):
    """Logging library choice. ``slog`` and ``stdlib`` add no dependency."""
    ZEROLOG = "zerolog"
    ZAP = "zap"
    SLOG = "slog"
    LOGRUS = "logrus"
    STDLIB = "stdlib"


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """Immutable configuration for a single generation request.

    Every field is exposed by name to the templates, so renaming a field is a
    breaking change for template content.
    """

    model_config = ConfigDict(frozen=True)

    # Identity
    project_name: str = Field(..., description="Project name, also the archive root folder")
    module: str = Field(..., description="Go module path, e.g. 'github.com/acme/myapi'")
    description: str = Field(default="", description="Free-text project description")
    go_version: str = Field(default="1.26.0", description="Go toolchain version for go.mod")

    # Selectors
    structure: str = Field(default=Structure.STANDARD.value)
    project_type: str = Field(default=ProjectType.REST_API.value)
    router: str = Field(default=Router.CHI.value)
    logger: str = Field(default="")

    # Feature toggles
    use_docker: bool = Field(default=False, description="Dockerfile and docker-compose")
    use_github: bool = Field(default=False, description="GitHub Actions CI workflow")
    use_config: bool = Field(default=False, description="Environment config loader")
    use_logger: bool = Field(default=False, description="Structured logger package")
    use_database: bool = Field(default=False, description="SQL database driver and wiring")
    use_redis: bool = Field(default=False, description="Redis cache client")
    use_jwt: bool = Field(default=False, description="JWT token handling")
    use_air: bool = Field(default=False, description="Air hot-reload config")

    # Free-form library selections, in caller order
    dependencies: tuple[str, ...] = Field(default=())


# ---------------------------------------------------------------------------
# Layout / manifest value types
# ---------------------------------------------------------------------------

PROJECT_NAME_PLACEHOLDER = "{project_name}"

Predicate = Callable[[ProjectConfig], bool]


@dataclass(frozen=True)
class FileEntry:
    """One template-to-output binding inside a structure variant."""

    template: str
    output: str
    when: Optional[Predicate] = None

    def applies_to(self, config: ProjectConfig) -> bool:
        return self.when is None or bool(self.when(config))

    def output_path(self, config: ProjectConfig) -> str:
        return self.output.replace(PROJECT_NAME_PLACEHOLDER, config.project_name)


@dataclass(frozen=True)
class ManifestEntry:
    """A resolved file: final output path plus the template that renders it."""

    path: str
    template: str


@dataclass(frozen=True)
class RenderedFile:
    """A rendered output file, relative to the project root."""

    path: str
    content: str

    @property
    def size(self) -> int:
        return len(self.content.encode("utf-8"))
