"""Application configuration from environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All config comes from env vars or .env.backend file."""

    # Empty means no database; "auto" mode then serves from the in-memory store
    DATABASE_URL: str = ""
    STORE_MODE: str = "auto"  # "auto", "mock" or "database"
    DB_TIMEOUT_SECONDS: float = 10.0

    API_PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False  # include exception text in 500 responses

    class Config:
        env_file = ".env.backend"
        env_file_encoding = "utf-8"

    @property
    def use_mock_store(self) -> bool:
        if self.STORE_MODE == "mock":
            return True
        if self.STORE_MODE == "database":
            return False
        return not self.DATABASE_URL


settings = Settings()
