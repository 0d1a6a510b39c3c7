# textkit/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="TEXTKIT_",
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
