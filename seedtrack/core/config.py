from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Garden defaults (UK seasonal calendar)
    DEFAULT_LOCATION: str = "United Kingdom"
    DEFAULT_LAST_FROST_MONTH_DAY: str = "05-15"
    DEFAULT_FIRST_FROST_MONTH_DAY: str = "10-15"

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    ALLOWED_ORIGINS: str = "http://localhost:8081,http://localhost:19006"

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]


settings = Settings()
