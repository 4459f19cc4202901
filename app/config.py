"""
Configuración del servicio usando pydantic-settings.
Se lee de variables de entorno con prefijo SIMULATION_ o de un archivo .env.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = Field(default="Simulation API", description="Título de la API")
    log_level: str = Field(default="INFO", description="Nivel mínimo de log")
    log_requests: bool = Field(default=True, description="Registrar cada request HTTP")

    model_config = {
        "env_prefix": "SIMULATION_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
