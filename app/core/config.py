# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Конфигурация модели Pydantic V2
    model_config = SettingsConfigDict(
        env_file='.env', 
        env_file_encoding='utf-8', 
        extra='ignore'  # Игнорируем лишние переменные в .env
    )

    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Фронтенд академии, нужен для CORS
    WEB_APP_URL: str = "http://localhost:3000"

    LOG_LEVEL: str = "INFO"

settings = Settings()
