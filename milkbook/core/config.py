# milkbook/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite:///db.sqlite"  # file in project root
    business_timezone: str = "Asia/Kolkata"
    rate_chart_path: str = "data/rate_chart.csv"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
