"""
marathon-deployer - Despliegue de aplicaciones en Marathon

Versión: 0.1.0
Arquitectura: Clean Architecture con DDD
Propósito: Desplegar, consultar, escalar y hacer rollback de aplicaciones
"""

__version__ = "0.1.0"
__author__ = "marathon-deployer Team"
__description__ = "Marathon deployment controller"

# Exportaciones principales del dominio
from .domain.entities import (
    ActionRequest,
    AppStatus,
    Deploy,
    DeployOutcome,
    OrchestratorResponse,
    Rollback,
    Scale,
    Status,
    TaskDescriptor,
    VersionList,
)
from .domain.action_selector import select_action
from .domain.endpoint_builder import build_resource_url
from .use_cases.execute_action import ExecuteAction

# Exportaciones de infraestructura
from .infrastructure.config import Config, DeployOptions, load_config
from .infrastructure.marathon_client import MarathonClient

__all__ = [
    # Versión y metadata
    "__version__",
    "__author__",
    "__description__",

    # Entidades de dominio
    "ActionRequest",
    "AppStatus",
    "Deploy",
    "DeployOutcome",
    "OrchestratorResponse",
    "Rollback",
    "Scale",
    "Status",
    "TaskDescriptor",
    "VersionList",

    # Servicios principales
    "select_action",
    "build_resource_url",
    "ExecuteAction",

    # Infraestructura
    "Config",
    "DeployOptions",
    "load_config",
    "MarathonClient",
]
