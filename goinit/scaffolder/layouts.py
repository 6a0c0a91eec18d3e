"""Layout registry: which templates each structure variant renders, and where.

Each variant is an ordered tuple of ``FileEntry`` values built once at import
time.  Cross-cutting files (ignore file, env template, Makefile, container
recipes, CI workflow, hot-reload config) are shared by pointing several
variants at the same ``standard/...`` template id.
"""

from __future__ import annotations

from .models import FileEntry, ProjectConfig, ProjectType, Router, Structure


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def _is_rest_api(c: ProjectConfig) -> bool:
    return c.project_type == ProjectType.REST_API.value


def _is_cli(c: ProjectConfig) -> bool:
    return c.project_type == ProjectType.CLI.value


def _uses_config(c: ProjectConfig) -> bool:
    return c.use_config


def _uses_logger(c: ProjectConfig) -> bool:
    return c.use_logger


def _uses_chi_logger(c: ProjectConfig) -> bool:
    return c.use_logger and c.router == Router.CHI.value


def _uses_docker(c: ProjectConfig) -> bool:
    return c.use_docker


def _uses_github(c: ProjectConfig) -> bool:
    return c.use_github


def _uses_database(c: ProjectConfig) -> bool:
    return c.use_database


def _uses_redis(c: ProjectConfig) -> bool:
    return c.use_redis


def _uses_jwt(c: ProjectConfig) -> bool:
    return c.use_jwt


def _uses_air(c: ProjectConfig) -> bool:
    return c.use_air


# ---------------------------------------------------------------------------
# Shared entries
# ---------------------------------------------------------------------------

_GITIGNORE = FileEntry("standard/gitignore.j2", ".gitignore")
_ENV_EXAMPLE = FileEntry("standard/env.example.j2", ".env.example")
_MAKEFILE = FileEntry("standard/Makefile.j2", "Makefile")
_DOCKERFILE = FileEntry("standard/Dockerfile.j2", "Dockerfile", _uses_docker)
_COMPOSE = FileEntry("standard/docker-compose.yaml.j2", "docker-compose.yaml", _uses_docker)
_CI = FileEntry("standard/github_ci.yaml.j2", ".github/workflows/ci.yml", _uses_github)
_AIR = FileEntry("standard/air.toml.j2", ".air.toml", _uses_air)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

STANDARD_LAYOUT: tuple[FileEntry, ...] = (
    # Application
    FileEntry("standard/cmd_main.go.j2", "cmd/{project_name}/main.go"),
    FileEntry("standard/internal_handler.go.j2", "internal/handler/handler.go", _is_rest_api),
    FileEntry("standard/internal_cli.go.j2", "internal/cli/root.go", _is_cli),
    FileEntry("standard/internal_config.go.j2", "internal/config/config.go", _uses_config),
    FileEntry("standard/internal_middleware.go.j2", "internal/middleware/logger.go", _uses_chi_logger),
    FileEntry("standard/internal_database.go.j2", "internal/database/database.go", _uses_database),
    FileEntry("standard/internal_cache.go.j2", "internal/cache/redis.go", _uses_redis),
    FileEntry("standard/internal_auth.go.j2", "internal/auth/jwt.go", _uses_jwt),
    FileEntry("standard/pkg_logger.go.j2", "pkg/logger/logger.go", _uses_logger),
    # Project files
    FileEntry("standard/README.md.j2", "README.md"),
    _MAKEFILE,
    _GITIGNORE,
    _ENV_EXAMPLE,
    _AIR,
    _DOCKERFILE,
    _COMPOSE,
    _CI,
)

FLAT_LAYOUT: tuple[FileEntry, ...] = (
    FileEntry("flat/main.go.j2", "main.go"),
    FileEntry("flat/README.md.j2", "README.md"),
    _MAKEFILE,
    _GITIGNORE,
    _ENV_EXAMPLE,
    _DOCKERFILE,
    _COMPOSE,
    _CI,
)

FEATURE_LAYOUT: tuple[FileEntry, ...] = (
    FileEntry("feature/cmd_main.go.j2", "cmd/{project_name}/main.go"),
    # User feature slice
    FileEntry("feature/user_handler.go.j2", "internal/user/handler.go"),
    FileEntry("feature/user_service.go.j2", "internal/user/service.go"),
    FileEntry("feature/user_repository.go.j2", "internal/user/repository.go"),
    FileEntry("feature/user_model.go.j2", "internal/user/model.go"),
    # Shared packages
    FileEntry("standard/internal_config.go.j2", "pkg/config/config.go"),
    FileEntry("standard/pkg_logger.go.j2", "pkg/logger/logger.go", _uses_logger),
    # Project files
    FileEntry("standard/README.md.j2", "README.md"),
    _MAKEFILE,
    _GITIGNORE,
    _ENV_EXAMPLE,
    _AIR,
    _DOCKERFILE,
    _COMPOSE,
    _CI,
)

HEXAGONAL_LAYOUT: tuple[FileEntry, ...] = (
    FileEntry("hexagonal/cmd_main.go.j2", "cmd/{project_name}/main.go"),
    # Core
    FileEntry("hexagonal/domain_user.go.j2", "internal/core/domain/user.go"),
    FileEntry("hexagonal/port_repository.go.j2", "internal/core/port/repository.go"),
    FileEntry("hexagonal/service_user.go.j2", "internal/core/service/user.go"),
    # Adapters
    FileEntry(
        "hexagonal/adapter_http_handler.go.j2",
        "internal/adapters/http/handler/user.go",
        _is_rest_api,
    ),
    FileEntry("hexagonal/adapter_repository.go.j2", "internal/adapters/repository/user.go"),
    FileEntry(
        "hexagonal/adapter_postgres.go.j2",
        "internal/adapters/repository/postgres.go",
        _uses_database,
    ),
    # Infrastructure
    FileEntry("hexagonal/infra_config.go.j2", "internal/infrastructure/config/config.go"),
    FileEntry("hexagonal/infra_logger.go.j2", "internal/infrastructure/logger/logger.go", _uses_logger),
    # Project files
    FileEntry("hexagonal/README.md.j2", "README.md"),
    _MAKEFILE,
    _GITIGNORE,
    _ENV_EXAMPLE,
    _AIR,
    _DOCKERFILE,
    _COMPOSE,
    _CI,
)

_LAYOUTS: dict[str, tuple[FileEntry, ...]] = {
    Structure.STANDARD.value: STANDARD_LAYOUT,
    Structure.FLAT.value: FLAT_LAYOUT,
    Structure.FEATURE.value: FEATURE_LAYOUT,
    Structure.HEXAGONAL.value: HEXAGONAL_LAYOUT,
}


def layout_entries(structure: str) -> tuple[FileEntry, ...]:
    """Return the ordered file entries for *structure*.

    Unknown structures get the standard layout; callers pass unvalidated
    input straight through and rely on this.
    """
    return _LAYOUTS.get(structure, STANDARD_LAYOUT)


def known_structures() -> list[str]:
    """Return the names of all registered structure variants."""
    return list(_LAYOUTS)
