"""Settings tests."""
from framework.config import Settings


def test_database_url_is_built_from_parts():
    settings = Settings(
        _env_file=None,
        DB_URL=None,
        DB_USER="app",
        DB_PASSWORD="p@ss:word",
        DB_HOST="db",
        DB_PORT=3307,
        DB_NAME="staff",
    )

    assert settings.DATABASE_URL == "mysql+aiomysql://app:p%40ss%3Aword@db:3307/staff"


def test_database_url_override():
    settings = Settings(_env_file=None, DB_URL="sqlite+aiosqlite:///./employees.db")

    assert settings.DATABASE_URL == "sqlite+aiosqlite:///./employees.db"


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://hr.example.com"]')

    assert Settings(_env_file=None).CORS_ORIGINS == ["https://hr.example.com"]
