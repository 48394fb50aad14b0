"""
Caso de uso para volver a la versión anterior de una aplicación.

Rol: Leer el listado de versiones y reenviar la inmediatamente anterior.
Dos round-trips secuenciales; el segundo solo si el primero es válido.
El resultado del PUT final nunca es fatal: la invocación siempre termina.

Depende de: OrchestratorClient, response_interpreter.
"""

import json
import logging

from ..shared.constants import ERROR_MESSAGES, VERSION_FIELD, ActionType
from ..shared.domain_exceptions import FatalDeploymentError
from ..shared.infrastructure_exceptions import NetworkError
from ..shared.logging_utils import log_operation_start, log_operation_success, log_operation_error
from ..domain.contracts import OrchestratorClient
from ..domain.endpoint_builder import build_versions_url
from ..domain.entities import DeployOutcome
from ..domain.response_interpreter import interpret_rollback, select_rollback_version

logger = logging.getLogger(__name__)


class RollbackApplication:
    """Caso de uso para rollback de una aplicación."""

    def __init__(self, client: OrchestratorClient):
        self.client = client

    def execute(self, resource_url: str) -> DeployOutcome:
        """
        Ejecuta el rollback.

        Args:
            resource_url: URL del recurso de la aplicación

        Returns:
            Resultado del rollback

        Raises:
            FatalDeploymentError: Si no se pudo leer el listado de versiones
                o no existe versión previa
        """
        operation = "rollback_application"
        log_operation_start(logger, operation, url=resource_url)

        try:
            response = self.client.get_versions(resource_url)
        except NetworkError as e:
            log_operation_error(logger, operation, e, url=build_versions_url(resource_url))
            raise FatalDeploymentError(
                ERROR_MESSAGES["versions_unavailable"],
                action=ActionType.ROLLBACK.value,
            ) from e

        version = select_rollback_version(response)
        logger.info(f"Volviendo a la versión {version}")

        try:
            response = self.client.put_app(resource_url, {VERSION_FIELD: version})
        except NetworkError as e:
            log_operation_error(logger, operation, e, url=resource_url, version=version)
            return DeployOutcome(
                succeeded=False,
                action=ActionType.ROLLBACK,
                version=version,
                message=str(e),
            )

        logger.info(json.dumps(response.body, indent=4, default=str))

        outcome = interpret_rollback(response, version)
        if outcome.succeeded:
            log_operation_success(logger, operation, url=resource_url, version=version)
        else:
            logger.warning(f"Rollback a {version} respondió con código {response.status_code}")

        return outcome
