"""
Construcción de la URL del recurso de aplicación.

Rol: Derivar {endpoint}/v{apiVersion}/apps/{id} desde el descriptor.
No normaliza barras: un id '/my/app' produce '.../apps//my/app'.
"""

from ..shared.constants import ERROR_MESSAGES
from ..shared.infrastructure_exceptions import ConfigurationError
from .entities import TaskDescriptor


def build_resource_url(descriptor: TaskDescriptor) -> str:
    """
    Construye la URL del recurso de la aplicación.

    Args:
        descriptor: Descriptor de la aplicación

    Returns:
        URL del recurso

    Raises:
        ConfigurationError: Si falta endpoint o id
    """
    if not descriptor.endpoint:
        raise ConfigurationError(ERROR_MESSAGES["missing_endpoint"])

    if not descriptor.id:
        raise ConfigurationError(ERROR_MESSAGES["missing_app_id"])

    return f"{descriptor.endpoint}/v{descriptor.api_version}/apps/{descriptor.id}"


def build_versions_url(resource_url: str) -> str:
    """URL con el listado de versiones de la aplicación."""
    return f"{resource_url}/versions"
