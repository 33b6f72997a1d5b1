"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The datastore connection is optional: when it is not
configured the server still starts and task operations fail at the store
layer.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    The datastore "connection string" is one of FIREBASE_SERVICE_ACCOUNT_KEY
    (full JSON string), FIREBASE_SERVICE_ACCOUNT_PATH (JSON file) or
    FIRESTORE_EMULATOR_HOST (host:port of a local emulator).
    """

    # App
    app_name: str = "todai"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Firestore
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None
    firestore_emulator_host: str | None = None
    firestore_project_id: str = "todai-local"
    firestore_timeout_seconds: float = 30.0

    # CORS
    allowed_origins: str = "http://localhost:5173"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Console client
    api_base_url: str = "http://localhost:5000/api"
    client_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Reject values that cannot work at all (port range, empty API URL)."""
        if not 0 < self.port < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got: {self.port}")
        if not self.api_base_url.strip():
            raise ValueError("API_BASE_URL must not be empty")
        return self

    @property
    def datastore_configured(self) -> bool:
        """True when any Firestore connection setting is present."""
        has_key = bool(
            self.firebase_service_account_key
            and self.firebase_service_account_key.get_secret_value()
        )
        return has_key or bool(self.firebase_service_account_path) or bool(
            self.firestore_emulator_host
        )

    @property
    def origins(self) -> list[str]:
        """ALLOWED_ORIGINS split on commas, blanks dropped."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
