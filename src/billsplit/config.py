from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    service_charge_percentage: Decimal = Field(Decimal("10"), alias="BILLSPLIT_SERVICE_CHARGE")
    currency_symbol: str = Field("$", alias="BILLSPLIT_CURRENCY_SYMBOL")
    log_level: str = Field("INFO", alias="BILLSPLIT_LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
