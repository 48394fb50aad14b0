"""
Caso de uso que coordina una invocación completa del motor de despliegue.

Rol: Construir la URL, despachar la ActionRequest una sola vez hacia el
caso de uso que corresponde y devolver un único DeployOutcome,
incluso en rutas fatales.

Depende de: OrchestratorClient, endpoint_builder, casos de uso por acción.
"""

import logging

from ..shared.domain_exceptions import FatalDeploymentError, InvalidActionError
from ..shared.logging_utils import log_operation_start, log_operation_error
from ..domain.contracts import OrchestratorClient
from ..domain.endpoint_builder import build_resource_url
from ..domain.entities import (
    ActionRequest,
    Deploy,
    DeployOutcome,
    Rollback,
    Scale,
    Status,
    TaskDescriptor,
)
from .application_status import GetApplicationStatus
from .deploy_application import DeployApplication
from .rollback_application import RollbackApplication
from .scale_application import ScaleApplication

logger = logging.getLogger(__name__)


class ExecuteAction:
    """Motor de decisión: una acción, un resultado."""

    def __init__(self, client: OrchestratorClient, user: str, hostname: str):
        """
        Inicializa el caso de uso.

        Args:
            client: Cliente HTTP de Marathon
            user: Usuario que despliega (label deployedBy)
            hostname: Host desde el que se despliega (label deployedFrom)
        """
        self.client = client
        self.user = user
        self.hostname = hostname

        self.deploy_application = DeployApplication(client)
        self.application_status = GetApplicationStatus(client)
        self.scale_application = ScaleApplication(client)
        self.rollback_application = RollbackApplication(client)

    def execute(self, descriptor: TaskDescriptor, action: ActionRequest) -> DeployOutcome:
        """
        Ejecuta una invocación.

        Los errores fatales se convierten en un DeployOutcome fallido
        con fatal=True; no se emiten más requests tras ellos.

        Args:
            descriptor: Descriptor de la aplicación
            action: Acción elegida por el operador

        Returns:
            Resultado de la invocación

        Raises:
            ConfigurationError: Si el descriptor no tiene endpoint o id
            InvalidActionError: Si la acción no es una ActionRequest
        """
        operation = "execute_action"
        resource_url = build_resource_url(descriptor)
        action_name = getattr(action, "action_type", None)
        log_operation_start(
            logger, operation,
            app_id=descriptor.id,
            action=action_name.value if action_name else action,
        )

        try:
            return self._dispatch(descriptor, action, resource_url)
        except FatalDeploymentError as e:
            log_operation_error(logger, operation, e, app_id=descriptor.id)
            return DeployOutcome(
                succeeded=False,
                action=action_name,
                message=e.message,
                status_code=e.status_code,
                fatal=True,
                body=e.body,
            )

    def _dispatch(self, descriptor: TaskDescriptor, action: ActionRequest, resource_url: str) -> DeployOutcome:
        match action:
            case Rollback():
                return self.rollback_application.execute(resource_url)
            case Status(target=target):
                return self.application_status.execute(resource_url, target)
            case Scale(count=count):
                return self.scale_application.execute(resource_url, count)
            case Deploy():
                body = descriptor.deployment_body(self.user, self.hostname)
                return self.deploy_application.execute(resource_url, body)
            case _:
                raise InvalidActionError(f"Acción desconocida: {action!r}")
