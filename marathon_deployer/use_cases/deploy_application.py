"""
Caso de uso para despliegue (creación o actualización) de aplicaciones.

Rol: Enviar la especificación completa a Marathon y clasificar el resultado.
Reporta deploymentId y version cuando Marathon los devuelve.
Cualquier falla es fatal.

Depende de: OrchestratorClient, response_interpreter.
"""

import json
import logging
from typing import Any, Dict

from ..shared.constants import ERROR_MESSAGES, MESSAGE_FIELD, ActionType
from ..shared.domain_exceptions import FatalDeploymentError
from ..shared.infrastructure_exceptions import NetworkError
from ..shared.logging_utils import log_operation_start, log_operation_success, log_operation_error
from ..domain.contracts import OrchestratorClient
from ..domain.entities import DeployOutcome
from ..domain.response_interpreter import interpret_deploy

logger = logging.getLogger(__name__)


class DeployApplication:
    """Caso de uso para desplegar una aplicación."""

    def __init__(self, client: OrchestratorClient):
        """
        Inicializa caso de uso.

        Args:
            client: Cliente HTTP de Marathon
        """
        self.client = client

    def execute(self, resource_url: str, body: Dict[str, Any]) -> DeployOutcome:
        """
        Ejecuta el despliegue.

        Args:
            resource_url: URL del recurso de la aplicación
            body: Especificación de la aplicación (sin 'endpoint')

        Returns:
            Resultado del despliegue

        Raises:
            FatalDeploymentError: Si Marathon rechaza el despliegue o no responde
        """
        operation = "deploy_application"
        log_operation_start(logger, operation, url=resource_url)
        logger.info(f"Desplegando en {resource_url}")

        try:
            response = self.client.put_app(resource_url, body)
        except NetworkError as e:
            log_operation_error(logger, operation, e, url=resource_url)
            raise FatalDeploymentError(
                f"{ERROR_MESSAGES['deploy_failed']}: {e}",
                action=ActionType.DEPLOY.value,
            ) from e

        try:
            outcome = interpret_deploy(response)
        except FatalDeploymentError:
            logger.error(f"Despliegue falló con código: {response.status_code}")
            if response.has_field(MESSAGE_FIELD):
                logger.error(response.get_field(MESSAGE_FIELD))
            raise

        logger.debug(json.dumps(response.body, indent=2, default=str))

        if outcome.deployment_id is not None or outcome.version is not None:
            logger.info("Despliegue exitoso")
            logger.info(f"ID: {outcome.deployment_id}")
            logger.info(f"Version: {outcome.version}")

        log_operation_success(logger, operation, url=resource_url, status_code=response.status_code)
        return outcome
