"""Settings for the planner backend, read from the environment."""

import os
import tempfile
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, computed_field


class IflytekConfig(BaseModel, frozen=True):
    """iFlytek streaming dictation (IAT) configuration."""

    app_id: str
    api_key: str
    api_secret: str
    host: str = "iat-api.xfyun.cn"
    path: str = "/v2/iat"
    language: str = "zh_cn"
    domain: str = "iat"
    accent: str = "mandarin"
    vad_eos: int | None = None
    frame_size: int = 1280
    frame_interval_seconds: float = 0.04
    timeout_seconds: float = 60.0
    placeholder: str = "(no speech detected)"

    @property
    def has_credentials(self) -> bool:
        """True when app id, key and secret are all set."""
        return bool(self.app_id and self.api_key and self.api_secret)

    def business_params(self) -> dict:
        """Returns the ``business`` block of the first frame."""
        params = {
            "language": self.language,
            "domain": self.domain,
            "accent": self.accent,
            "dwa": "wpgs",
        }
        if self.vad_eos is not None:
            params["vad_eos"] = self.vad_eos
        return params


class LLMConfig(BaseModel, frozen=True):
    """OpenAI-compatible chat completion endpoint (DeepSeek by default)."""

    api_key: str
    base_url: str = "https://api.deepseek.com"
    model_name: str = "deepseek-chat"


class PostgresConfig(BaseModel, frozen=True):
    """PostgreSQL connection configuration."""

    host: str
    port: int
    user: str
    password: str
    database: str

    @computed_field
    @property
    def url(self) -> str:
        """SQLAlchemy URL for the psycopg driver."""
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class RedisConfig(BaseModel, frozen=True):
    """Redis cache configuration. An empty host disables caching."""

    host: str = ""
    port: int = 6379
    cache_ttl_seconds: int = 86400

    @property
    def enabled(self) -> bool:
        return bool(self.host)


class ServerConfig(BaseModel, frozen=True):
    """HTTP server and scratch storage settings."""

    temp_dir: Path
    cors_origins: list[str] = ["*"]


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    iflytek: IflytekConfig
    llm: LLMConfig
    postgres: PostgresConfig
    redis: RedisConfig
    server: ServerConfig


def _optional_int(value: str | None) -> int | None:
    return int(value) if value else None


def load_config() -> AppConfig:
    """Loads configuration from environment variables (and ``.env`` if present)."""
    load_dotenv(override=False)

    default_temp_dir = Path(tempfile.gettempdir()) / "travel-planner"
    cors_origins = os.getenv("CORS_ORIGINS", "*")

    return AppConfig(
        iflytek=IflytekConfig(
            app_id=os.getenv("IFLYTEK_APPID", ""),
            api_key=os.getenv("IFLYTEK_API_KEY", ""),
            api_secret=os.getenv("IFLYTEK_API_SECRET", ""),
            host=os.getenv("IFLYTEK_HOST", "iat-api.xfyun.cn"),
            path=os.getenv("IFLYTEK_PATH", "/v2/iat"),
            language=os.getenv("IFLYTEK_LANGUAGE", "zh_cn"),
            domain=os.getenv("IFLYTEK_DOMAIN", "iat"),
            accent=os.getenv("IFLYTEK_ACCENT", "mandarin"),
            vad_eos=_optional_int(os.getenv("IFLYTEK_VAD_EOS")),
            timeout_seconds=float(os.getenv("TRANSCRIPTION_TIMEOUT_SECONDS", "60")),
            placeholder=os.getenv("TRANSCRIPTION_PLACEHOLDER", "(no speech detected)"),
        ),
        llm=LLMConfig(
            api_key=os.getenv("DEEPSEEK_API_KEY", ""),
            base_url=os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com"),
            model_name=os.getenv("DEEPSEEK_MODEL", "deepseek-chat"),
        ),
        postgres=PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=int(os.getenv("POSTGRES_PORT", "5432")),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "travel_planner"),
        ),
        redis=RedisConfig(
            host=os.getenv("REDIS_HOST", ""),
            port=int(os.getenv("REDIS_PORT", "6379")),
            cache_ttl_seconds=int(os.getenv("REDIS_CACHE_TTL_SECONDS", "86400")),
        ),
        server=ServerConfig(
            temp_dir=Path(os.getenv("TEMP_DIR", str(default_temp_dir))),
            cors_origins=[o.strip() for o in cors_origins.split(",") if o.strip()],
        ),
    )
