"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

Nested groups use double underscore (__) as the delimiter, for example
``DATABASE__URL`` maps to ``settings.database.url`` and
``SESSION__SECRET_KEY`` maps to ``settings.session.secret_key``.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./ultrashots.db",
        description="Async database connection URL (sqlite+aiosqlite or postgresql+asyncpg)",
    )
    echo: bool = Field(default=False, description="Echo SQL statements to the log")


class SessionConfig(BaseModel):
    """Cookie session configuration."""

    secret_key: str = Field(
        default="change-me-in-production",
        description="Secret used to sign the session cookie",
    )
    cookie_name: str = Field(default="ultrashots_session", description="Session cookie name")
    lifetime_minutes: int = Field(default=120, ge=1, description="Session lifetime in minutes")
    same_site: Literal["lax", "strict", "none"] = Field(default="lax", description="SameSite cookie attribute")
    https_only: bool = Field(default=False, description="Only send the session cookie over HTTPS")


class CORSConfig(BaseModel):
    """CORS configuration for the api group."""

    origins: List[str] = Field(default=["*"], description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(default=True, description="Allow credentials in CORS requests")
    allow_methods: List[str] = Field(default=["*"], description="Allowed HTTP methods (use * for all)")
    allow_headers: List[str] = Field(default=["*"], description="Allowed HTTP headers (use * for all)")


class SeedConfig(BaseModel):
    """Credentials used by the database seeders."""

    admin_email: str = Field(default="admin@ultrashots.test", description="Super admin e-mail address")
    admin_password: str = Field(default="password", description="Super admin password")
    default_password: str = Field(default="password", description="Password for all other seeded users")


class AssetsConfig(BaseModel):
    """Front-end bundle configuration."""

    manifest_path: str = Field(
        default="public/build/manifest.json",
        description="Path of the Vite manifest produced by the front-end build",
    )
    base_url: str = Field(default="/build", description="Public URL prefix of built assets")
    entry: str = Field(default="resources/js/app.ts", description="Front-end entry point in the manifest")
    version: Optional[str] = Field(
        default=None,
        description="Explicit asset version; defaults to the MD5 of the manifest",
    )


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # =====================================================================
    # Application
    # =====================================================================
    app_name: str = Field(default="Ultrashots", description="Application name shared with every page")
    app_env: str = Field(default="production", description="Deployment environment name")

    server_host: str = Field(default="0.0.0.0", description="Server host address to bind to")
    server_port: int = Field(default=8000, description="Server port number")

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: Literal["simple", "detailed", "json"] = Field(default="detailed", description="Log line format")
    log_to_file: bool = Field(default=False, description="Also write logs to a file")
    log_file_dir: str = Field(default="logs", description="Directory of the log file")

    # =====================================================================
    # Routing
    # =====================================================================
    login_path: str = Field(default="/login", description="Where guests are redirected")
    home_path: str = Field(default="/dashboard", description="Where users land after login")
    csrf_exempt: List[str] = Field(
        default_factory=list,
        description="Path prefixes that skip CSRF validation",
    )

    # =====================================================================
    # Grouped Configurations
    # =====================================================================
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    cors: CORSConfig = Field(default_factory=CORSConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)


settings = Settings()
