from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import ConfigDict, field_validator

class Settings(BaseSettings):
    # Where this instance runs, e.g. "lhr". Unset when running locally.
    fly_region: str = ""
    # Fly region the primary database is closest to, e.g. "lhr"
    primary_region: str = ""

    # One connection string, or several separated by commas (primary first)
    database_url: Optional[str] = None
    database_ssl: bool = True

    # Connection Pool
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    # Application
    log_level: str = "INFO"

    model_config = ConfigDict(env_file=".env", frozen=True)

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        # logging only knows upper-case level names
        return value.strip().upper()

def get_settings() -> Settings:
    """Read settings from the environment (and .env)"""
    return Settings()
