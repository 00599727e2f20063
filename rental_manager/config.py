from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be configured via .env file or environment variables.
    """

    # Key-value substrate
    DATABASE_URL: str = "sqlite:///./rental_manager.db"

    # Application
    APP_NAME: str = "Rental Manager"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Password reset
    RESET_CODE_TTL_SECONDS: int = 3600

    # Monthly rent per room type
    SINGLE_ROOM_RENT: int = 8000
    DOUBLE_ROOM_RENT: int = 12000

    # Write the demo owner/tenant accounts on first start
    SEED_DEMO_USERS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


# Global settings instance
settings = Settings()
