from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = ",".join(
    [
        "https://lavender-parrot-848521.hostingersite.com",
        "https://gkedgemedia.com",
        "http://localhost:3000",
    ]
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3001, validation_alias="PORT")
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "NODE_ENV"),
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # CORS for the marketing site (comma-separated list, or '*' for all)
    cors_allow_origins: str = Field(
        default=DEFAULT_CORS_ORIGINS, validation_alias="CORS_ALLOW_ORIGINS"
    )

    # Gemini
    gemini_api_key: str = Field(default="", validation_alias="GEMINI_API_KEY")
    gemini_model: str = Field(
        default="gemini-3-flash-preview", validation_alias="GEMINI_MODEL"
    )
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        validation_alias="GEMINI_BASE_URL",
    )
    ai_timeout_seconds: float = Field(default=30.0, validation_alias="AI_TIMEOUT")

    # Email Settings
    smtp_host: str = Field(default="smtp.gmail.com", validation_alias="SMTP_HOST")
    smtp_port: int = Field(default=587, validation_alias="SMTP_PORT")
    smtp_user: str = Field(default="", validation_alias="SMTP_USER")
    smtp_pass: str = Field(default="", validation_alias="SMTP_PASS")
    smtp_timeout_seconds: float = Field(default=30.0, validation_alias="SMTP_TIMEOUT")

    contact_recipient: str = Field(
        default="info@gkedgemedia.com", validation_alias="CONTACT_RECIPIENT"
    )
    mail_from_name: str = Field(
        default="GK Edge Website", validation_alias="MAIL_FROM_NAME"
    )

    @property
    def ai_enabled(self) -> bool:
        return bool(self.gemini_api_key.strip())

    @property
    def smtp_configured(self) -> bool:
        return bool(self.smtp_user.strip() and self.smtp_pass.strip())

    @property
    def smtp_secure(self) -> bool:
        # Implicit TLS only on the SMTPS port; everything else negotiates STARTTLS.
        return self.smtp_port == 465

    @property
    def docs_enabled(self) -> bool:
        return self.environment.lower() == "development"

    def cors_origins(self) -> list[str]:
        raw = (self.cors_allow_origins or "").strip()
        if not raw:
            return []
        if raw == "*":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
