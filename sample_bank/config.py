from typing import List, Optional
from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sample_bank import __version__

class Settings(BaseSettings):
    PROJECT_NAME: str = "Sample Bank Server"
    VERSION: str = __version__

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8050

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3500",
    ]

    # Database
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "sample_bank"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = None  # full URL, wins over the POSTGRES_* parts
    SQL_ECHO: bool = True
    AUTO_CREATE_SCHEMA: bool = True

    LOG_LEVEL: str = "INFO"

    @computed_field
    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env")

settings = Settings()
