import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

DEFAULT_TRUSTED_ORIGINS = (
    "http://localhost:9000",
    "http://localhost:9002",
    "http://localhost:3000",
)

APP_ENVIRONMENTS = ("development", "qa", "production")
STORE_BACKENDS = ("postgres", "memory")


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = os.getenv("DATABASE_URL", "")
    store_backend: str = os.getenv("STORE_BACKEND", "postgres").lower()
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "30"))
    db_pool_idle_seconds: int = int(os.getenv("DB_POOL_IDLE_SECONDS", "900"))  # 15 minutes
    db_pool_timeout_seconds: float = float(os.getenv("DB_POOL_TIMEOUT_SECONDS", "30"))
    store_timeout_seconds: float = float(os.getenv("STORE_TIMEOUT_SECONDS", "5"))

    # Cache
    list_cache_capacity: int = int(os.getenv("LIST_CACHE_CAPACITY", "128"))

    # Sessions
    session_ttl_days: int = int(os.getenv("SESSION_TTL_DAYS", "7"))

    # CORS
    cors_trusted_origins: tuple[str, ...] = field(
        default_factory=lambda: _split_csv(
            os.getenv("CORS_TRUSTED_ORIGINS", ",".join(DEFAULT_TRUSTED_ORIGINS))
        )
    )

    # API
    app_env: str = os.getenv("APP_ENV", "development").lower()
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("PORT", "8080"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"
    log_level: str | None = os.getenv("LOG_LEVEL")

    @property
    def is_development(self) -> bool:
        """Check if the service runs in the development environment."""
        return self.app_env == "development"

    @property
    def effective_log_level(self) -> str:
        """Log level name, defaulting to DEBUG in development and INFO elsewhere."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.is_development else "INFO"

    @property
    def sqlalchemy_url(self) -> str:
        """Database URL rewritten to use the psycopg driver.

        Raises:
            ValueError: If DATABASE_URL is not set
        """
        if not self.database_url:
            raise ValueError("DATABASE_URL is required when STORE_BACKEND is 'postgres'")
        for prefix in ("postgres://", "postgresql://"):
            if self.database_url.startswith(prefix):
                return "postgresql+psycopg://" + self.database_url[len(prefix) :]
        return self.database_url

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"STORE_BACKEND must be one of {list(STORE_BACKENDS)}, got {self.store_backend!r}"
            )

        if self.app_env not in APP_ENVIRONMENTS:
            raise ValueError(
                f"APP_ENV must be one of {list(APP_ENVIRONMENTS)}, got {self.app_env!r}"
            )

        for name in ("db_pool_size", "list_cache_capacity", "session_ttl_days", "api_port"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name.upper()} must be a positive integer")

        if self.store_timeout_seconds <= 0 or self.db_pool_timeout_seconds <= 0:
            raise ValueError("STORE_TIMEOUT_SECONDS and DB_POOL_TIMEOUT_SECONDS must be positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
