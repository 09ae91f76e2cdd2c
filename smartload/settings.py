from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    max_body_bytes: int = 1024 * 1024          # 1MB request body limit
    max_dp_orders: int = 22                    # AUTO switches to greedy above this
    pareto_max_solutions: int = 5

    # pickup-date compatibility; off = any dates may share a load
    strict_time_window: bool = False
    time_window_days: float = 1.0

    model_config = SettingsConfigDict(
        env_prefix="SMARTLOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
