"""Application settings loaded from the environment (and .env when present)."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the Airtable MCP server."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # CORS - comma-separated list of allowed origins
    cors_allowed_origins: str = "http://localhost:3000,http://localhost:5678"

    # Upstream Airtable API
    airtable_api_url: str = "https://api.airtable.com/v0"
    upstream_timeout: float | None = None  # None = wait for the upstream indefinitely

    # Fallback credentials used when request headers are absent
    airtable_api_key: str | None = None
    airtable_base_id: str | None = None

    # MCP
    protocol_version: str = "2025-06-18"
    server_name: str = "Airtable MCP HTTP Server"

    max_json_payload_size: int = 10 * 1024 * 1024

    # Error tracking
    sentry_dsn: str | None = None

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list (splits the comma-separated env value)."""
        if self.cors_allowed_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


settings = Settings()
