"""Настройки конфигурации сервиса клиентов."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Загружает настройки из переменных окружения и файла .env.customer.

    Атрибуты:
        model_config: Конфигурация для Pydantic моделей.
    """

    model_config = SettingsConfigDict(
        env_file=".env.customer",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # База данных
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "customers"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    # Полная строка подключения, имеет приоритет над POSTGRES_*
    DATABASE_URL: str | None = None

    # Приложение
    APP_HOST: str = "0.0.0.0"  # noqa: S104
    APP_PORT: int = 8081
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
            Строка подключения для SQLAlchemy.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


class CustomerParams(BaseSettings):
    """
    Параметры из пространства имен customer.params.

    Заполняются из CUSTOMER_PARAMS_X и CUSTOMER_PARAMS_Y, но нигде не читаются.
    """

    model_config = SettingsConfigDict(
        env_prefix="CUSTOMER_PARAMS_",
        env_file=".env.customer",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    x: int = 0
    y: int = 0


settings = Settings()
customer_params = CustomerParams()
