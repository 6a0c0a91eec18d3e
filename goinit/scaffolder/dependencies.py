"""Go module dependency resolution and ``go.mod`` rendering.

Versions come from static pinned tables; nothing here talks to a module
proxy.  Resolution applies a fixed sequence of rules to a fresh dict, and a
later rule overwrites an earlier rule's pin for the same module path.  Web
frameworks share one slot: a framework picked in the free-form selections
replaces the pin contributed by the router choice.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from .models import ProjectConfig, Structure


# ---------------------------------------------------------------------------
# Pinned versions
# ---------------------------------------------------------------------------

CHI = ("github.com/go-chi/chi/v5", "v5.0.11")
GIN = ("github.com/gin-gonic/gin", "v1.9.1")
ECHO = ("github.com/labstack/echo/v4", "v4.11.4")
FIBER = ("github.com/gofiber/fiber/v2", "v2.52.0")
ZEROLOG = ("github.com/rs/zerolog", "v1.32.0")
ZAP = ("go.uber.org/zap", "v1.26.0")
LOGRUS = ("github.com/sirupsen/logrus", "v1.9.3")
PGX = ("github.com/jackc/pgx/v5", "v5.5.1")
MYSQL = ("github.com/go-sql-driver/mysql", "v1.7.1")
SQLITE = ("github.com/mattn/go-sqlite3", "v1.14.19")
UUID = ("github.com/google/uuid", "v1.5.0")
GO_REDIS = ("github.com/redis/go-redis/v9", "v9.4.0")
JWT = ("github.com/golang-jwt/jwt/v5", "v5.2.0")

ROUTER_PACKAGES: Mapping[str, tuple[str, str]] = MappingProxyType({
    "chi": CHI,
    "gin": GIN,
    "echo": ECHO,
    "fiber": FIBER,
})

ROUTER_MODULES: frozenset[str] = frozenset(path for path, _ in ROUTER_PACKAGES.values())

LOGGER_PACKAGES: Mapping[str, tuple[str, str]] = MappingProxyType({
    "zerolog": ZEROLOG,
    "zap": ZAP,
    "logrus": LOGRUS,
})

# Substring hints searched (lower-cased) in the caller's dependency names.
# Generated database code imports pgx, so every hint resolves to it.
DATABASE_DRIVER_HINTS: tuple[tuple[str, tuple[str, str]], ...] = (
    ("postgres", PGX),
    ("pgx", PGX),
)
DEFAULT_DATABASE_DRIVER = PGX

# Display name -> (module path, version)
DEPENDENCY_TABLE: Mapping[str, tuple[str, str]] = MappingProxyType({
    # Web frameworks
    "Chi Router": CHI,
    "Gin Web Framework": GIN,
    "Echo": ECHO,
    "Fiber": FIBER,
    "Gorilla Mux": ("github.com/gorilla/mux", "v1.8.1"),
    "Templ": ("github.com/a-h/templ", "v0.2.543"),
    "Pongo2": ("github.com/flosch/pongo2/v6", "v6.0.0"),
    # SQL
    "PostgreSQL Driver (pgx)": PGX,
    "MySQL Driver": MYSQL,
    "GORM": ("gorm.io/gorm", "v1.25.5"),
    "sqlx": ("github.com/jmoiron/sqlx", "v1.3.5"),
    "SQLite Driver": SQLITE,
    # NoSQL / KV
    "Redis Client (go-redis)": GO_REDIS,
    "MongoDB Driver": ("go.mongodb.org/mongo-driver", "v1.13.1"),
    "BadgerDB": ("github.com/dgraph-io/badger/v4", "v4.2.0"),
    # Logging
    "Zerolog": ZEROLOG,
    "Zap": ZAP,
    "Logrus": LOGRUS,
    # Observability
    "Prometheus Client": ("github.com/prometheus/client_golang", "v1.18.0"),
    "OpenTelemetry": ("go.opentelemetry.io/otel", "v1.22.0"),
    "Jaeger Client": ("github.com/jaegertracing/jaeger-client-go", "v2.30.0+incompatible"),
    # Messaging
    "RabbitMQ Client": ("github.com/rabbitmq/amqp091-go", "v1.9.0"),
    "Kafka Client (Sarama)": ("github.com/IBM/sarama", "v1.42.2"),
    "NATS": ("github.com/nats-io/nats.go", "v1.31.0"),
    "Gorilla WebSocket": ("github.com/gorilla/websocket", "v1.5.1"),
    # Auth
    "JWT-Go": JWT,
    # Testing
    "Testify": ("github.com/stretchr/testify", "v1.8.4"),
    "GoMock": ("go.uber.org/mock", "v0.4.0"),
    "Ginkgo": ("github.com/onsi/ginkgo/v2", "v2.15.0"),
})

# Module path -> version, so callers may also pass import paths directly.
_PINS_BY_PATH: Mapping[str, str] = MappingProxyType(dict(DEPENDENCY_TABLE.values()))


# ---------------------------------------------------------------------------
# Rules (applied in declaration order)
# ---------------------------------------------------------------------------

def _router_rule(config: ProjectConfig, deps: dict[str, str]) -> None:
    pin = ROUTER_PACKAGES.get(config.router)
    if pin:
        deps[pin[0]] = pin[1]


def _logger_rule(config: ProjectConfig, deps: dict[str, str]) -> None:
    pin = LOGGER_PACKAGES.get(config.logger)
    if pin:
        deps[pin[0]] = pin[1]


def _database_rule(config: ProjectConfig, deps: dict[str, str]) -> None:
    if not config.use_database:
        return
    path, version = find_database_driver(config.dependencies)
    deps[path] = version


def _structure_rule(config: ProjectConfig, deps: dict[str, str]) -> None:
    # Generated hexagonal repositories use uuid for entity ids.
    if config.structure == Structure.HEXAGONAL.value:
        deps[UUID[0]] = UUID[1]


def _cache_rule(config: ProjectConfig, deps: dict[str, str]) -> None:
    if config.use_redis:
        deps[GO_REDIS[0]] = GO_REDIS[1]


def _jwt_rule(config: ProjectConfig, deps: dict[str, str]) -> None:
    if config.use_jwt:
        deps[JWT[0]] = JWT[1]


def _selection_rule(config: ProjectConfig, deps: dict[str, str]) -> None:
    router_pin = ROUTER_PACKAGES.get(config.router)
    for name in config.dependencies:
        pin = lookup_dependency(name)
        if not pin:
            continue
        if router_pin and pin[0] in ROUTER_MODULES and pin[0] != router_pin[0]:
            # An explicitly selected framework takes the router's slot.
            deps.pop(router_pin[0], None)
        deps[pin[0]] = pin[1]


RESOLUTION_RULES: tuple[Callable[[ProjectConfig, dict[str, str]], None], ...] = (
    _router_rule,
    _logger_rule,
    _database_rule,
    _structure_rule,
    _cache_rule,
    _jwt_rule,
    _selection_rule,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def find_database_driver(names: tuple[str, ...] | list[str]) -> tuple[str, str]:
    """Return the driver pin hinted at by *names*, or the default driver.

    Names are scanned in order and the first one containing a known hint
    (case-insensitive) decides the driver.
    """
    for name in names:
        lowered = name.lower()
        for hint, pin in DATABASE_DRIVER_HINTS:
            if hint in lowered:
                return pin
    return DEFAULT_DATABASE_DRIVER


def lookup_dependency(name: str) -> tuple[str, str] | None:
    """Map a display name or a known module path to its pin.

    Returns ``None`` for anything unrecognised.
    """
    pin = DEPENDENCY_TABLE.get(name)
    if pin is not None:
        return pin
    version = _PINS_BY_PATH.get(name)
    if version is not None:
        return (name, version)
    return None


def resolve_dependencies(config: ProjectConfig) -> dict[str, str]:
    """Resolve *config* into a ``{module path: version}`` mapping."""
    deps: dict[str, str] = {}
    for rule in RESOLUTION_RULES:
        rule(config, deps)
    return deps


def render_go_mod(config: ProjectConfig, deps: Mapping[str, str]) -> str:
    """Render the ``go.mod`` body with a key-sorted ``require`` block."""
    lines = [f"module {config.module}", "", f"go {config.go_version}"]
    if deps:
        lines.append("")
        lines.append("require (")
        for path in sorted(deps):
            lines.append(f"\t{path} {deps[path]}")
        lines.append(")")
    return "\n".join(lines) + "\n"
