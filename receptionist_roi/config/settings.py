from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from receptionist_roi.models.enums import Industry, PricingTier


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="ROI_", extra="ignore")

    booking_url: str = "https://api.leadconnectorhq.com/widget/booking/9rk5cHU2aY3skvtraBB7"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"

    # Session defaults
    default_industry: Industry = Industry.PLUMBING
    default_tier: PricingTier = PricingTier.PROFESSIONAL
    default_sales_call_percentage: float = Field(47, ge=0, le=100)
    default_human_hourly_wage: float = Field(18, ge=0)
    default_human_hours_per_week: float = Field(40, ge=0)
    default_human_overhead_percentage: float = Field(25, ge=0, le=200)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
