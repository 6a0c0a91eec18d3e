"""go-initializer configuration.

Service-level settings: where templates live, where output goes, and the
defaults the boundary layer substitutes for unset request fields.  Pydantic v2
models so settings validate at construction time and round-trip through JSON
or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global go-initializer configuration."""

    template_dir: Optional[Path] = Field(
        default=None, description="Template root; None means the packaged templates"
    )
    output_dir: Path = Field(default=Path("./output"))

    # Defaults applied to requests that leave these fields empty.
    default_go_version: str = Field(default="1.26.0")
    default_structure: str = Field(default="standard")
    default_project_type: str = Field(default="rest-api")
    default_router: str = Field(default="chi")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GOINIT_TEMPLATE_DIR, GOINIT_OUTPUT_DIR, GOINIT_GO_VERSION,
            GOINIT_STRUCTURE, GOINIT_PROJECT_TYPE, GOINIT_ROUTER.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GOINIT_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["GOINIT_TEMPLATE_DIR"])
        if os.environ.get("GOINIT_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["GOINIT_OUTPUT_DIR"])
        if os.environ.get("GOINIT_GO_VERSION"):
            kwargs["default_go_version"] = os.environ["GOINIT_GO_VERSION"]
        if os.environ.get("GOINIT_STRUCTURE"):
            kwargs["default_structure"] = os.environ["GOINIT_STRUCTURE"]
        if os.environ.get("GOINIT_PROJECT_TYPE"):
            kwargs["default_project_type"] = os.environ["GOINIT_PROJECT_TYPE"]
        if os.environ.get("GOINIT_ROUTER"):
            kwargs["default_router"] = os.environ["GOINIT_ROUTER"]
        return cls(**kwargs)
