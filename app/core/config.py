# File: app/core/config.py

from functools import lru_cache
from typing import Annotated, List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Basic app info
    PROJECT_NAME: str = "Storefront API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS
    backend_cors_origins: Annotated[List[str], NoDecode] = []

    # Database. DATABASE_URL wins over the individual parts.
    database_url: Optional[str] = None
    db_driver: str = "postgresql+psycopg"
    db_host: str = "localhost"
    db_port: Optional[int] = None
    db_user: str = "storefront"
    db_password: str = "storefront"
    db_name: str = "storefront"

    # Security
    secret_key: str = "CHANGE_ME_IN_PRODUCTION"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24  # 24h
    bcrypt_rounds: int = 10

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @property
    def sqlalchemy_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        url = URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
