import logging

import structlog

from .config import Settings, settings as default_settings
from .infrastructure.security import PasswordHasher
from .infrastructure.seed import seed_store
from .infrastructure.store import EntityStore
from .interfaces.app import ConsoleApp
from .interfaces.context import AppContext
from .interfaces.facade import DataAccessFacade
from .interfaces.notifications import NotificationChannel


def configure_logging(level: str = "INFO") -> None:
    # Настройка структурированного логирования
    log_level = getattr(logging, level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def build_context(settings: Settings | None = None) -> AppContext:
    settings = settings or default_settings
    hasher = PasswordHasher(settings.PASSWORD_HASH_ROUNDS)
    store = EntityStore(latency_ms=settings.STORE_LATENCY_MS)
    if settings.SEED_DEMO_DATA:
        seed_store(store, hasher)
    return AppContext(
        settings=settings,
        facade=DataAccessFacade(store, hasher),
        notifications=NotificationChannel(ttl=settings.NOTIFICATION_TTL_SECONDS),
    )


def create_app(settings: Settings | None = None, configure: bool = True) -> ConsoleApp:
    settings = settings or default_settings
    if configure:
        configure_logging(settings.LOG_LEVEL)
    structlog.get_logger(__name__).info(
        "starting_school_console",
        latency_ms=settings.STORE_LATENCY_MS,
        seeded=settings.SEED_DEMO_DATA,
    )
    return ConsoleApp(build_context(settings))
