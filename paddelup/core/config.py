from __future__ import annotations

from dataclasses import dataclass

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    GRIST_BASE_URL: str = "https://docs.getgrist.com"
    GRIST_DOC_ID: str | None = None
    GRIST_TABLE_ID: str | None = None
    GRIST_API_KEY: SecretStr | None = None
    GRIST_TIMEOUT_SECONDS: float = 10.0

    BOOKING_API_URL: str = "http://127.0.0.1:8000/api/book"
    BOOKING_API_TIMEOUT_SECONDS: float = 15.0

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()


@dataclass(frozen=True)
class GristConfig:
    """Deployment configuration injected into the Grist record store."""

    base_url: str
    doc_id: str
    table_id: str
    api_key: SecretStr
    timeout_seconds: float = 10.0

    @property
    def records_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/api/docs/{self.doc_id}/tables/{self.table_id}/records"

    @classmethod
    def from_settings(cls, source: Settings) -> "GristConfig":
        missing = [
            name
            for name, value in (
                ("GRIST_DOC_ID", source.GRIST_DOC_ID),
                ("GRIST_TABLE_ID", source.GRIST_TABLE_ID),
                ("GRIST_API_KEY", source.GRIST_API_KEY),
            )
            if not value
        ]
        if missing:
            raise ValueError(f"Missing Grist configuration: {', '.join(missing)}")
        return cls(
            base_url=source.GRIST_BASE_URL,
            doc_id=source.GRIST_DOC_ID,
            table_id=source.GRIST_TABLE_ID,
            api_key=source.GRIST_API_KEY,
            timeout_seconds=source.GRIST_TIMEOUT_SECONDS,
        )
