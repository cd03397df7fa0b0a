# config.py
import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # ==================== Básico ==================== #
    APP_NAME: str = "Employers API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # ==================== Banco de Dados ==================== #
    # Arquivo SQLite local por padrão
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./JBApp.db")
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() == "true"

    # ==================== Servidor HTTP ==================== #
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "7000"))

    @property
    def base_url(self) -> str:
        host = "localhost" if self.HOST in ("0.0.0.0", "") else self.HOST
        return f"http://{host}:{self.PORT}"

    # ---------- Aliases em minúsculo ---------- #
    @property
    def app_name(self) -> str:
        return self.APP_NAME

    @property
    def app_version(self) -> str:
        return self.APP_VERSION

    # ---------- Aliases esperados pelo middleware ---------- #
    @property
    def is_development(self) -> bool:
        # considera dev se ENVIRONMENT=development OU DEBUG=True
        return self.ENVIRONMENT.lower() == "development" or self.DEBUG is True

    # ---------- Config Pydantic v2 ---------- #
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",                    # <- não quebra com variáveis extras
    )


# Instância global
settings = Settings()
