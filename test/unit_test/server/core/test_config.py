"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds the environment variables listed
in the .env.example file, including nested groups, and its defaults.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ultrashots.server.core.config import AssetsConfig, CORSConfig, DatabaseConfig, SessionConfig, Settings


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parent.parent.parent.parent.parent / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_env_example_binds(self, env_example_path: Path):
        """Test that every group of the example file is read."""
        settings = Settings(_env_file=str(env_example_path))

        assert settings.app_env == "local"
        assert settings.server_host == "127.0.0.1"
        assert settings.database.url == "sqlite+aiosqlite:///./ultrashots.db"
        assert settings.session.secret_key == "base64:local-development-secret"
        assert settings.seed.admin_email == "admin@ultrashots.test"
        assert settings.assets.base_url == "/build"

    def test_server_port_binding(self, env_example_vars: dict[str, str], monkeypatch):
        """Test SERVER_PORT binding."""
        monkeypatch.setenv("SERVER_PORT", env_example_vars["SERVER_PORT"])

        settings = Settings(_env_file=None)
        assert settings.server_port == int(env_example_vars["SERVER_PORT"])

    def test_nested_delimiter_binding(self, monkeypatch):
        """Test that double underscores reach nested groups."""
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://app:secret@db/ultrashots")
        monkeypatch.setenv("SESSION__LIFETIME_MINUTES", "30")
        monkeypatch.setenv("SEED__ADMIN_PASSWORD", "hunter2")

        settings = Settings(_env_file=None)
        assert settings.database.url == "postgresql+asyncpg://app:secret@db/ultrashots"
        assert settings.session.lifetime_minutes == 30
        assert settings.seed.admin_password == "hunter2"

    def test_list_binding(self, monkeypatch):
        """Test JSON lists for list fields."""
        monkeypatch.setenv("CSRF_EXEMPT", '["/webhooks"]')
        monkeypatch.setenv("CORS__ORIGINS", '["https://ultrashots.example"]')

        settings = Settings(_env_file=None)
        assert settings.csrf_exempt == ["/webhooks"]
        assert settings.cors.origins == ["https://ultrashots.example"]

    def test_unknown_variables_are_ignored(self, monkeypatch):
        monkeypatch.setenv("SOMETHING_ELSE", "value")

        Settings(_env_file=None)


class TestSettingsDefaults:
    """Test defaults of the configuration models."""

    def test_routing_defaults(self, monkeypatch):
        for name in ("LOGIN_PATH", "HOME_PATH", "APP_NAME"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)
        assert settings.login_path == "/login"
        assert settings.home_path == "/dashboard"
        assert settings.app_name == "Ultrashots"
        assert settings.csrf_exempt == []

    def test_group_defaults(self):
        assert DatabaseConfig().url.startswith("sqlite+aiosqlite://")
        assert SessionConfig().same_site == "lax"
        assert CORSConfig().origins == ["*"]
        assert AssetsConfig().entry == "resources/js/app.ts"
        assert AssetsConfig().version is None

    def test_invalid_values_are_rejected(self):
        with pytest.raises(ValidationError):
            SessionConfig(lifetime_minutes=0)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")
