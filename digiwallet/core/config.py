"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./digiwallet.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None
    create_tables: bool = True

    @field_validator("url", mode="before")
    @classmethod
    def convert_postgres_url(cls, value: str) -> str:
        # asyncpg needs the explicit driver in the scheme
        if isinstance(value, str) and value.startswith("postgresql://"):
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value


class CorsSettings(BaseModel):
    allow_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    allow_headers: list[str] = ["*"]
    allow_credentials: bool = True
    max_age: int = 3600


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class WalletSettings(BaseModel):
    default_currency: str = Field(default="INR", min_length=3, max_length=3)
    credit_reference_prefix: str = "CR"
    debit_reference_prefix: str = "DB"
    transaction_page_size: int = Field(default=100, ge=1, le=1000)


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "DigiWallet"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    cors: CorsSettings = CorsSettings()
    logging: LoggingSettings = LoggingSettings()
    wallet: WalletSettings = WalletSettings()

    static_dir: Path = Path("digiwallet/web/static")
    template_dir: Path = Path("digiwallet/web/templates")

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def default_currency(self) -> str:
        return self.wallet.default_currency


@lru_cache()
def get_settings() -> Settings:
    return Settings()
