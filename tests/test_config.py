"""
Tests for settings validation.
"""

import pytest

from shopping_api.config import DEFAULT_TRUSTED_ORIGINS, Settings


def test_defaults_from_test_environment():
    settings = Settings()
    assert settings.store_backend == "memory"
    assert settings.list_cache_capacity == 128
    assert settings.session_ttl_days == 7
    assert settings.cors_trusted_origins == DEFAULT_TRUSTED_ORIGINS


@pytest.mark.parametrize(
    "url",
    [
        "postgres://app:secret@db:5432/shopping",
        "postgresql://app:secret@db:5432/shopping",
    ],
)
def test_sqlalchemy_url_uses_psycopg(url):
    settings = Settings(database_url=url)
    assert settings.sqlalchemy_url == "postgresql+psycopg://app:secret@db:5432/shopping"


def test_sqlalchemy_url_requires_database_url():
    with pytest.raises(ValueError, match="DATABASE_URL"):
        Settings(database_url="").sqlalchemy_url


@pytest.mark.parametrize(
    "overrides",
    [
        {"store_backend": "mongo"},
        {"app_env": "staging"},
        {"list_cache_capacity": 0},
        {"db_pool_size": -1},
        {"store_timeout_seconds": 0},
    ],
)
def test_invalid_settings(overrides):
    with pytest.raises(ValueError):
        Settings(**overrides)


def test_log_level_defaults_by_environment():
    assert Settings(app_env="production", log_level=None).effective_log_level == "INFO"
    assert Settings(app_env="development", log_level=None).effective_log_level == "DEBUG"
    assert Settings(log_level="warning").effective_log_level == "WARNING"
