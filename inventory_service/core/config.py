"""Настройки конфигурации сервиса склада."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Загружает настройки из переменных окружения и файла .env.inventory.

    Атрибуты:
        model_config: Конфигурация для Pydantic моделей.
    """

    model_config = SettingsConfigDict(
        env_file=".env.inventory",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # База данных
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "inventory"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: str | None = None

    # Приложение
    APP_HOST: str = "0.0.0.0"  # noqa: S104
    APP_PORT: int = 8082
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Приводит уровень логирования к виду, который понимает logging."""
        return value.strip().upper()

    @property
    def database_url(self) -> str:
        """
        Собирает строку подключения к базе данных.

        Returns:
            DATABASE_URL, если задан, иначе строка подключения к PostgreSQL.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()
