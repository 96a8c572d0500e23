from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración de la API, leída de variables FINANCE_*."""

    money_decimals: int = Field(default=2, ge=0, description="Decimales para intereses, montos y cuotas")
    rate_decimals: int = Field(default=6, ge=0, description="Decimales para tasas convertidas")
    log_level: str = Field(default="INFO", description="Nivel de logging")
    api_title: str = "Financial Calculations API"

    model_config = SettingsConfigDict(env_prefix="FINANCE_")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
