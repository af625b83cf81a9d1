from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定

    環境変数（接頭辞 SMARTBUS_）または .env から読み込む。
    例: SMARTBUS_TAX_RATE=0.075
    """

    model_config = SettingsConfigDict(
        env_prefix="SMARTBUS_",
        env_file=".env",
        extra="ignore",
    )

    tax_rate: Decimal = Field(default=Decimal("0.075"), ge=0)
    service_fee: Decimal = Field(default=Decimal("100"), ge=0)
    seat_tier_increment: Decimal = Field(default=Decimal("50"), ge=0)
    finalize_latency_seconds: float = Field(default=2.0, ge=0)
    premium_zones: frozenset[str] = frozenset({"victoria-island", "ikoyi", "lekki"})


@lru_cache
def get_settings() -> Settings:
    return Settings()
