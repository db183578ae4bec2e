import os
import re
from functools import lru_cache
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env early so env vars are available for YAML interpolation
load_dotenv(Path.cwd() / ".env")

# Pattern to match $VAR_NAME environment variable references
ENV_VAR_PATTERN = re.compile(r"\$([A-Z_][A-Z0-9_]*)")

CONFIG_FILE_ENV = "FOLIO_CONFIG"


def interpolate_env_vars(value):
    """Recursively replace $VAR_NAME with os.environ values."""
    if isinstance(value, str):

        def replace(match):
            var = match.group(1)
            val = os.environ.get(var)
            if val is None:
                raise ValueError(f"Environment variable ${var} not set")
            return val

        return ENV_VAR_PATTERN.sub(replace, value)
    elif isinstance(value, dict):
        return {k: interpolate_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [interpolate_env_vars(item) for item in value]
    return value


def get_config_path() -> Path:
    """Return the app.yaml path, honouring the FOLIO_CONFIG override."""
    override = os.environ.get(CONFIG_FILE_ENV)
    if override:
        return Path(override)
    return Path.cwd() / "app.yaml"


def load_app_config(config_path: Path | None = None) -> dict:
    """Load and parse app.yaml with environment variable interpolation."""
    config_path = config_path or get_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"app.yaml not found at {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    return interpolate_env_vars(config)


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = "sqlite+aiosqlite:///./folio.db"
    pool_size: int = 5
    pool_overflow: int = 10
    pool_timeout: int = 30
    pool_pre_ping: bool = True
    echo: bool = False
    # Create tables on startup instead of running migrations (development and tests)
    create_all: bool = False


class SupabaseConfig(BaseModel):
    """Credentials for the Supabase auth API that validates bearer tokens."""

    url: str = ""
    service_key: str = ""
    timeout: float = 10.0

    @property
    def enabled(self) -> bool:
        return bool(self.url and self.service_key)


class S3Config(BaseModel):
    """S3-compatible bucket settings (Cloudflare R2 by default)."""

    bucket: str = "portfolio-assets"
    region: str = "auto"
    account_id: str = ""
    endpoint_url: str = ""
    access_key_id: str = ""
    secret_access_key: str = ""
    public_url: str = ""
    prefix: str = ""

    def resolved_endpoint_url(self) -> str:
        """Explicit endpoint, else the R2 endpoint derived from the account ID."""
        if self.endpoint_url:
            return self.endpoint_url
        if self.account_id:
            return f"https://{self.account_id}.r2.cloudflarestorage.com"
        return ""

    @property
    def configured(self) -> bool:
        return bool(self.resolved_endpoint_url() and self.access_key_id and self.secret_access_key)


DEFAULT_ALLOWED_TYPES = [
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    "application/pdf",
]


class StorageConfig(BaseModel):
    """Upload storage configuration."""

    backend: str = "local"
    local_path: str = "./uploads"
    local_url_prefix: str = "/uploads"
    s3: S3Config = S3Config()
    max_upload_size: int = 10 * 1024 * 1024
    max_files_per_request: int = 10
    allowed_types: list[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_TYPES))


class EmailConfig(BaseModel):
    """Resend email configuration for admin notifications."""

    resend_api_key: str = ""
    admin_email: str = ""
    from_address: str = "Portfolio <noreply@yourdomain.com>"
    api_url: str = "https://api.resend.com/emails"
    timeout: float = 10.0

    @property
    def enabled(self) -> bool:
        return bool(self.resend_api_key and self.admin_email)


class CorsConfig(BaseModel):
    """Origins allowed to call the API from a browser."""

    origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:3001"]
    )


class RateLimitConfig(BaseModel):
    """Per-IP request rate limits."""

    enabled: bool = True
    requests_per_minute: int = 100
    paths: dict[str, int] = {}


class SecurityHeadersConfig(BaseModel):
    """Security response headers added to every response."""

    enabled: bool = True
    content_security_policy: str | None = "default-src 'self'; frame-ancestors 'self'"
    strict_transport_security: str | None = "max-age=15552000; includeSubDomains"
    x_content_type_options: str | None = "nosniff"
    x_frame_options: str | None = "SAMEORIGIN"
    referrer_policy: str | None = "no-referrer"
    cross_origin_resource_policy: str | None = "cross-origin"

    def build_headers(self, debug: bool = False) -> list[tuple[bytes, bytes]]:
        """Pre-encode the configured headers. HSTS is skipped in debug mode."""
        pairs = [
            ("strict-transport-security", None if debug else self.strict_transport_security),
            ("x-content-type-options", self.x_content_type_options),
            ("x-frame-options", self.x_frame_options),
            ("referrer-policy", self.referrer_policy),
            ("cross-origin-resource-policy", self.cross_origin_resource_policy),
        ]
        return [(name.encode(), value.encode()) for name, value in pairs if value]


class LogfireConfig(BaseModel):
    """Pydantic Logfire observability configuration."""

    enabled: bool = False
    service_name: str = "folio"
    environment: str | None = None
    sample_rate: float = 1.0
    console: bool = False


class KeepAliveConfig(BaseModel):
    """Periodic database ping so idle hosted databases are not paused."""

    enabled: bool = True
    interval_seconds: int = 5 * 24 * 60 * 60


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Application
    debug: bool = False
    api_prefix: str = "/api"

    db: DatabaseConfig = DatabaseConfig()
    supabase: SupabaseConfig = SupabaseConfig()
    storage: StorageConfig = StorageConfig()
    email: EmailConfig = EmailConfig()
    cors: CorsConfig = CorsConfig()
    rate_limit: RateLimitConfig = RateLimitConfig()
    security_headers: SecurityHeadersConfig = SecurityHeadersConfig()
    logfire: LogfireConfig = LogfireConfig()
    keepalive: KeepAliveConfig = KeepAliveConfig()


_SECTION_MODELS: dict[str, type[BaseModel]] = {
    "db": DatabaseConfig,
    "supabase": SupabaseConfig,
    "storage": StorageConfig,
    "email": EmailConfig,
    "cors": CorsConfig,
    "rate_limit": RateLimitConfig,
    "security_headers": SecurityHeadersConfig,
    "logfire": LogfireConfig,
    "keepalive": KeepAliveConfig,
}


def build_settings(app_config: dict | None = None) -> Settings:
    """Create settings from the environment, overlaid with app.yaml sections."""
    base_settings = Settings()
    if not app_config:
        return base_settings

    updates: dict = {}
    if "debug" in app_config:
        updates["debug"] = bool(app_config["debug"])
    if "api_prefix" in app_config:
        updates["api_prefix"] = app_config["api_prefix"]

    for section, model in _SECTION_MODELS.items():
        if section in app_config:
            updates[section] = model(**(app_config[section] or {}))

    if updates:
        return base_settings.model_copy(update=updates)

    return base_settings


@lru_cache
def get_settings() -> Settings:
    """Load settings from .env and app.yaml."""
    try:
        app_config = load_app_config()
    except FileNotFoundError:
        app_config = None

    return build_settings(app_config)
