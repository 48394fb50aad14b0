"""
Constantes globales de la aplicación.

Rol: Definir constantes usadas en todo el despliegue.
DEFAULT_API_VERSION, HealthState, ActionType, mensajes de error.
Centraliza valores mágicos y configuraciones fijas.

Depende de: enums para estados.
"""

from enum import Enum

# Constantes de configuración
DEFAULT_API_VERSION = 2
DEFAULT_TASK_FILE = "marathon.json"
DEFAULT_TIMEOUT = 30.0

# Códigos HTTP aceptados como despliegue exitoso
DEPLOY_SUCCESS_CODES = (200, 201)

# Labels inyectados antes de desplegar
LABEL_DEPLOYED_BY = "deployedBy"
LABEL_DEPLOYED_FROM = "deployedFrom"

# Campos de la respuesta de Marathon
APP_FIELD = "app"
VERSIONS_FIELD = "versions"
MESSAGE_FIELD = "message"
DEPLOYMENT_ID_FIELD = "deploymentId"
VERSION_FIELD = "version"
INSTANCES_FIELD = "instances"


class ActionType(Enum):
    """Acciones que el operador puede solicitar."""
    DEPLOY = "deploy"
    STATUS = "status"
    SCALE = "scale"
    ROLLBACK = "rollback"


class HealthState(Enum):
    """Clasificación de salud de una aplicación."""
    DOWN = "down"
    PARTIALLY_UP = "partially_up"
    UP = "up"


# Mensajes de error estándar
ERROR_MESSAGES = {
    "deploy_failed": "Despliegue fallido",
    "status_unavailable": "No se pudieron obtener datos de Marathon",
    "scale_count_missing": "Debe indicar el número de instancias a escalar",
    "scale_failed": "No se pudo escalar",
    "versions_unavailable": "Error obteniendo versiones previas",
    "no_previous_version": "No hay versión previa a la cual volver",
    "missing_endpoint": "El task descriptor no define 'endpoint'",
    "missing_app_id": "El task descriptor no define 'id'",
}
