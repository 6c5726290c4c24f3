"""Process-wide settings.

Read once from the environment (and an optional ``.env`` file) by the
composition root, then handed to adapters as explicit values.  Business
logic never reads the environment itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from order_intake.domain.exceptions import ConfigurationError


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Order store
    store_backend: Literal["json", "supabase"] = Field(
        default="json",
        description="Where orders are persisted.",
    )
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding orders.json for the json backend.",
    )
    supabase_url: str | None = Field(default=None, description="Supabase project URL.")
    supabase_service_role_key: str | None = Field(
        default=None,
        description="Service role key used for inserts.",
    )

    # Notifier
    notifier_backend: Literal["log", "twilio"] = Field(
        default="log",
        description="How the administrator is alerted.",
    )
    twilio_account_sid: str | None = Field(default=None)
    twilio_auth_token: str | None = Field(default=None)
    whatsapp_from_number: str = Field(
        default="+14155238886",  # Twilio WhatsApp sandbox
        min_length=1,
    )
    admin_phone_number: str | None = Field(
        default=None,
        description="Fixed recipient of new-order alerts.",
    )

    # HTTP adapters
    http_timeout_seconds: float = Field(default=10.0, gt=0)
    http_retries: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Connection retries done by the transport, not the orchestrator.",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    def missing_settings(self) -> list[str]:
        """Names of settings the selected backends need but do not have."""
        missing: list[str] = []
        if self.store_backend == "supabase":
            if not self.supabase_url:
                missing.append("SUPABASE_URL")
            if not self.supabase_service_role_key:
                missing.append("SUPABASE_SERVICE_ROLE_KEY")
        if self.notifier_backend == "twilio":
            if not self.twilio_account_sid:
                missing.append("TWILIO_ACCOUNT_SID")
            if not self.twilio_auth_token:
                missing.append("TWILIO_AUTH_TOKEN")
        if not self.admin_phone_number:
            missing.append("ADMIN_PHONE_NUMBER")
        return missing

    def validate_backends(self) -> None:
        missing = self.missing_settings()
        if missing:
            raise ConfigurationError(f"Missing settings: {', '.join(missing)}")
