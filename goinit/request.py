"""Boundary-layer request model.

``GenerateRequest`` mirrors the JSON body accepted by the generate and
preview endpoints.  It validates the required identity fields and fills in
defaults before handing an immutable ``ProjectConfig`` to the scaffolder.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from goinit.config import Config
from goinit.scaffolder.models import ProjectConfig


class Dependency(BaseModel):
    """A library picked in the UI."""
    name: str = Field(default="")
    category: str = Field(default="")
    desc: str = Field(default="")
    pkg: str = Field(default="", description="Go import path, e.g. 'github.com/jackc/pgx/v5'")


class GenerateRequest(BaseModel):
    """Raw generate/preview request."""

    project_name: str = Field(default="", validate_default=True)
    module: str = Field(default="", validate_default=True)
    description: str = Field(default="")
    go_version: str = Field(default="")

    structure: str = Field(default="")
    project_type: str = Field(default="")
    router: str = Field(default="")
    logger: str = Field(default="")

    use_docker: bool = False
    use_github: bool = False
    use_config: bool = False
    use_logger: bool = False
    use_database: bool = False
    use_redis: bool = False
    use_jwt: bool = False
    use_air: bool = False

    dependencies: list[Dependency] = Field(default_factory=list)

    @field_validator("project_name")
    @classmethod
    def _require_project_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Project name is required")
        # The name becomes a directory under the output root.
        if "/" in value or "\\" in value or value.strip() in (".", ".."):
            raise ValueError("Project name must not contain path separators or be '.' or '..'")
        return value

    @field_validator("module")
    @classmethod
    def _require_module(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Module path is required")
        return value

    def to_project_config(self, defaults: Config | None = None) -> ProjectConfig:
        """Apply defaults and build the scaffolder configuration.

        Each dependency contributes its import path when it has one and its
        display name otherwise.
        """
        defaults = defaults or Config()
        return ProjectConfig(
            project_name=self.project_name,
            module=self.module,
            description=self.description,
            go_version=self.go_version or defaults.default_go_version,
            structure=self.structure or defaults.default_structure,
            project_type=self.project_type or defaults.default_project_type,
            router=self.router or defaults.default_router,
            logger=self.logger,
            use_docker=self.use_docker,
            use_github=self.use_github,
            use_config=self.use_config,
            use_logger=self.use_logger,
            use_database=self.use_database,
            use_redis=self.use_redis,
            use_jwt=self.use_jwt,
            use_air=self.use_air,
            dependencies=tuple(d.pkg or d.name for d in self.dependencies if d.pkg or d.name),
        )
