from pathlib import Path

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Built once at startup and passed explicitly to the components that need it.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_allow_origins: list[str] = ["*"]

    upload_dir: Path = Path("uploads")
    temp_dir: Path = Path("temp")
    max_upload_size_bytes: int = 10 * 1024 * 1024

    render_engine: str = "pymupdf"
    render_dpi: int = 150
    poppler_path: str | None = None

    ai_provider: str = "gemini"
    ai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("ai_api_key", "google_api_key"),
    )
    ai_model_name: str = "gemini-2.0-flash"
    ai_base_url: str | None = None
    ai_timeout_seconds: int = 60
    ai_temperature: float = 0.4

    @model_validator(mode="after")
    def _require_api_key(self) -> "Settings":
        if self.ai_provider.lower() != "example" and not self.ai_api_key.strip():
            raise ValueError(
                "ai_api_key (AI_API_KEY or GOOGLE_API_KEY) is required "
                f"for ai_provider={self.ai_provider}"
            )
        return self
