"""
Caso de uso para escalar una aplicación.

Rol: Validar el número de instancias y enviar {instances: N} a Marathon.
Un conteo inválido aborta antes de cualquier request.
Reporta código y cuerpo de la respuesta tal cual.

Depende de: OrchestratorClient, response_interpreter.
"""

import json
import logging
from typing import Any

from ..shared.constants import ERROR_MESSAGES, INSTANCES_FIELD, ActionType
from ..shared.domain_exceptions import FatalDeploymentError
from ..shared.infrastructure_exceptions import NetworkError
from ..shared.logging_utils import log_operation_start, log_operation_success, log_operation_error
from ..shared.validation_utils import parse_integer
from ..domain.contracts import OrchestratorClient
from ..domain.entities import DeployOutcome
from ..domain.response_interpreter import interpret_scale

logger = logging.getLogger(__name__)


class ScaleApplication:
    """Caso de uso para escalar una aplicación."""

    def __init__(self, client: OrchestratorClient):
        self.client = client

    def execute(self, resource_url: str, count: Any) -> DeployOutcome:
        """
        Ejecuta el escalado.

        Args:
            resource_url: URL del recurso de la aplicación
            count: Número de instancias deseado

        Returns:
            Resultado del escalado

        Raises:
            FatalDeploymentError: Si el conteo es inválido, hay error de red
                o Marathon responde con error
        """
        operation = "scale_application"

        instances = parse_integer(count)
        if instances is None:
            raise FatalDeploymentError(
                ERROR_MESSAGES["scale_count_missing"],
                action=ActionType.SCALE.value,
            )

        log_operation_start(logger, operation, url=resource_url, instances=instances)
        logger.info(f"Scale: {instances}")

        try:
            response = self.client.put_app(resource_url, {INSTANCES_FIELD: instances})
        except NetworkError as e:
            log_operation_error(logger, operation, e, url=resource_url)
            raise FatalDeploymentError(
                ERROR_MESSAGES["scale_failed"],
                action=ActionType.SCALE.value,
            ) from e

        logger.info(f"Código de respuesta: {response.status_code}")
        logger.info(json.dumps(response.body, indent=2, default=str))

        outcome = interpret_scale(response, instances)

        log_operation_success(logger, operation, url=resource_url, instances=instances)
        return outcome
