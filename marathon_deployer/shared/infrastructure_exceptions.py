"""
Excepciones específicas de infraestructura técnica.

Rol: Definir excepciones para errores técnicos externos.
NetworkError, ConfigurationError, TaskFileError.
Excepciones que representan fallas en dependencias externas.

Depende de: excepciones base de Python.
"""

import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


# Excepciones base de infraestructura
class InfrastructureError(Exception):
    """Error base de infraestructura técnica."""
    pass


class NetworkError(InfrastructureError):
    """Error de conectividad o red."""
    pass


class ConfigurationError(InfrastructureError):
    """Error de configuración del sistema."""
    pass


class TaskFileError(InfrastructureError):
    """Error leyendo o interpretando el task file."""
    pass


class ErrorHandler:
    """Manejador centralizado de errores."""

    @staticmethod
    def log_error(
        error: Exception,
        operation: str,
        context: Optional[Dict[str, Any]] = None,
        level: str = "error",
    ) -> None:
        """
        Registra error con contexto detallado.

        Args:
            error: Excepción capturada
            operation: Descripción de la operación
            context: Contexto adicional (opcional)
            level: Nivel de logging (error, warning, info)
        """
        log_func = getattr(logger, level)

        error_type = type(error).__name__
        error_msg = str(error)

        log_msg = f"Error en {operation}: {error_type} - {error_msg}"

        if context:
            log_msg += f" | Contexto: {context}"

        log_func(log_msg)
