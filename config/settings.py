from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Platform
    PLATFORM_OWNER_ID: str = "owner"
    PLATFORM_FEE_PCT: int = Field(default=5, ge=0, le=100)
    RESTRICT_BET_CREATION_TO_OWNER: bool = False
    AMOUNT_DECIMALS: int = 18  # display only; all arithmetic is in integer units

    # JWT: no default, MUST be set in .env
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 30

    # App
    APP_NAME: str = "Pari Pool"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev


settings = Settings()
