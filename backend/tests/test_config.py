"""Settings — environment parsing and database URL normalisation."""

from devregistry.config import Settings


def test_postgres_url_converted_to_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host:5432/db")
    assert Settings().database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_async_urls_left_untouched(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    assert Settings().database_url == "sqlite+aiosqlite:///:memory:"


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_CREATE_SCHEMA", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_create_schema is False
    assert settings.log_format == "json"
    assert settings.database_pool_size == 20
