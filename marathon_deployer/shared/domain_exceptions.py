"""
Excepciones específicas del dominio de despliegue.

Rol: Definir excepciones para errores de lógica de despliegue.
FatalDeploymentError, InvalidActionError.
Excepciones que abortan la invocación completa.

Depende de: excepciones base de Python.
"""

from typing import Optional


# Excepciones base del dominio
class DomainError(Exception):
    """Error base del dominio de despliegue."""
    pass


class FatalDeploymentError(DomainError):
    """
    Error fatal: aborta la invocación sin emitir más requests.

    Transporta el código HTTP (si aplica), el mensaje legible
    (el campo 'message' de Marathon cuando existe) y la acción intentada.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        action: Optional[str] = None,
        body=None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.action = action
        self.body = body

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        if self.action:
            parts.append(f"action={self.action}")
        return " | ".join(parts)


class InvalidActionError(DomainError):
    """Acción desconocida o mal formada."""
    pass
