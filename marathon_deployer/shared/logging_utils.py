"""
Utilitarios de configuración y manejo de logging.

Rol: Configurar logging centralizado para toda la aplicación.
Define formato, handler y niveles de logging.
Provee funciones helper para registrar operaciones de despliegue.

Depende de: logging library, configuración de entorno.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging_config(level: Optional[str] = None) -> None:
    """
    Configura el logging básico para toda la aplicación.
    Debe llamarse una sola vez al inicio.

    Args:
        level: Nivel de logging (por defecto LOG_LEVEL o INFO)
    """
    log_level = getattr(logging, (level or os.getenv("LOG_LEVEL", "INFO")).upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True,
    )

    # Reducir verbosidad de librerías externas
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)


def format_infrastructure_log(component: str, operation: str, details: str) -> str:
    """
    Formatea mensaje de log para componentes de infraestructura.

    Args:
        component: Componente (Marathon, TaskFile, etc.)
        operation: Operación realizada
        details: Detalles adicionales

    Returns:
        Mensaje formateado
    """
    return f"{component} | {operation} | {details}"


def _format_context(kwargs) -> str:
    return " | ".join([f"{k}={v}" for k, v in kwargs.items()])


def log_operation_start(logger: logging.Logger, operation: str, **kwargs) -> None:
    """
    Registra inicio de operación con contexto.

    Args:
        logger: Logger a usar
        operation: Descripción de operación
        **kwargs: Contexto adicional
    """
    logger.info(f"INICIO | {operation} | {_format_context(kwargs)}")


def log_operation_success(logger: logging.Logger, operation: str, **kwargs) -> None:
    """
    Registra éxito de operación con contexto.

    Args:
        logger: Logger a usar
        operation: Descripción de operación
        **kwargs: Contexto adicional
    """
    logger.info(f"ÉXITO | {operation} | {_format_context(kwargs)}")


def log_operation_error(logger: logging.Logger, operation: str, error: Exception, **kwargs) -> None:
    """
    Registra error de operación con contexto.

    Args:
        logger: Logger a usar
        operation: Descripción de operación
        error: Excepción capturada
        **kwargs: Contexto adicional
    """
    logger.error(f"ERROR | {operation} | {type(error).__name__}: {str(error)} | {_format_context(kwargs)}")
