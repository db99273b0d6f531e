from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "secureapp-password-checker"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    @field_validator('LOG_LEVEL')
    def normalize_log_level(cls, v):
        # logging only knows upper-case level names
        return v.strip().upper()

    class Config:
        env_file = ".env"

settings = Settings()
