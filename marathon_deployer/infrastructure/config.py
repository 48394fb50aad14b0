"""
Configuración y validación centralizada de la aplicación.

Rol: Cargar variables de entorno, validar y proveer defaults.
Resuelve las opciones una sola vez en un valor inmutable.
Provee configuración tipada y validada para el motor de despliegue.

Depende de: variables de entorno, pydantic para validación.
"""

import getpass
import logging
import socket
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..shared.constants import DEFAULT_API_VERSION, DEFAULT_TASK_FILE, DEFAULT_TIMEOUT
from ..shared.infrastructure_exceptions import ConfigurationError
from ..shared.validation_utils import validate_api_version

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def default_user() -> str:
    """Usuario actual del sistema operativo."""
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        return "unknown"


class DeployOptions(BaseModel):
    """Opciones reconocidas para una invocación."""

    model_config = ConfigDict(frozen=True)

    api_version: int = Field(default=DEFAULT_API_VERSION, description="Versión de la API de Marathon")
    user: str = Field(default_factory=default_user, description="Usuario que despliega")
    task_file: str = Field(default=DEFAULT_TASK_FILE, description="Ruta del task file")
    image: str = Field(default="", description="Imagen a desplegar")
    image_from_file: str = Field(default="", description="Archivo con la imagen a desplegar")
    delete_image_file: bool = Field(default=False, description="Borrar el archivo de imagen tras leerlo")
    hostname: str = Field(default_factory=socket.gethostname, description="Host desde el que se despliega")

    @field_validator("api_version", mode="before")
    @classmethod
    def validate_api_version(cls, v):
        """Valida versión de la API."""
        return validate_api_version(v)

    @field_validator("user")
    @classmethod
    def validate_user(cls, v):
        """Usa el usuario del sistema si viene vacío."""
        return v or default_user()


class MarathonClientConfig(BaseModel):
    """Configuración del cliente HTTP de Marathon."""

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(default=DEFAULT_TIMEOUT, description="Timeout para requests")
    verify_ssl: bool = Field(default=True, description="Verificar certificados TLS")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v):
        """Valida timeout."""
        if v <= 0 or v > 3600:
            raise ValueError("timeout debe estar entre 0 y 3600 segundos")
        return v


class Config(BaseModel):
    """Configuración completa, resuelta una sola vez al inicio."""

    model_config = ConfigDict(frozen=True)

    options: DeployOptions = Field(default_factory=DeployOptions)
    client: MarathonClientConfig = Field(default_factory=MarathonClientConfig)
    log_level: str = Field(default="INFO", description="Nivel de logging")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Valida nivel de logging."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level debe ser uno de: {VALID_LOG_LEVELS}")
        return v.upper()


class Settings(BaseSettings):
    """Valores leídos desde variables de entorno MARATHON_* o .env."""

    model_config = SettingsConfigDict(
        env_prefix="MARATHON_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    api_version: int = DEFAULT_API_VERSION
    user: Optional[str] = None
    task_file: str = DEFAULT_TASK_FILE
    image: str = ""
    image_from_file: str = ""
    delete_image_file: bool = False
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    log_level: str = "INFO"


def load_config(**overrides: Any) -> Config:
    """
    Carga la configuración desde el entorno y aplica overrides.

    Los overrides con valor None se ignoran (flag no indicado).

    Raises:
        ConfigurationError: Si algún valor es inválido
    """
    try:
        values = Settings().model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})

        options = DeployOptions(
            api_version=values["api_version"],
            user=values["user"] or default_user(),
            task_file=values["task_file"],
            image=values["image"],
            image_from_file=values["image_from_file"],
            delete_image_file=values["delete_image_file"],
        )

        return Config(
            options=options,
            client=MarathonClientConfig(timeout=values["timeout"], verify_ssl=values["verify_ssl"]),
            log_level=values["log_level"],
        )

    except (ValidationError, ValueError) as e:
        logger.error(f"Error cargando configuración: {e}")
        raise ConfigurationError(f"Error en configuración: {e}") from e
