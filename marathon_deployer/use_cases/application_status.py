"""
Caso de uso para consultar el estado de una aplicación.

Rol: Obtener el estado desde Marathon y emitir el reporte de salud.
La clasificación de salud es informativa y nunca aborta.

Depende de: OrchestratorClient, response_interpreter.
"""

import json
import logging

from ..shared.constants import ERROR_MESSAGES, ActionType
from ..shared.domain_exceptions import FatalDeploymentError
from ..shared.infrastructure_exceptions import NetworkError
from ..shared.logging_utils import log_operation_start, log_operation_success, log_operation_error
from ..domain.contracts import OrchestratorClient
from ..domain.entities import DeployOutcome
from ..domain.response_interpreter import interpret_status

logger = logging.getLogger(__name__)


class GetApplicationStatus:
    """Caso de uso para reportar el estado de una aplicación."""

    def __init__(self, client: OrchestratorClient):
        self.client = client

    def execute(self, resource_url: str, target: str = "") -> DeployOutcome:
        """
        Ejecuta la consulta de estado.

        Args:
            resource_url: URL del recurso de la aplicación
            target: Nombre del target para el reporte

        Returns:
            Resultado con el reporte en 'details'

        Raises:
            FatalDeploymentError: Si no se pudo obtener el estado
        """
        operation = "application_status"
        log_operation_start(logger, operation, url=resource_url, target=target)

        try:
            response = self.client.get_app(resource_url)
        except NetworkError as e:
            log_operation_error(logger, operation, e, url=resource_url)
            raise FatalDeploymentError(
                ERROR_MESSAGES["status_unavailable"],
                action=ActionType.STATUS.value,
            ) from e

        logger.debug(f"Statuscode: {response.status_code}")
        logger.debug(json.dumps(response.body, indent=2, default=str))

        report = interpret_status(response, target)

        for level, line in report.report_lines():
            logger.log(level, line)

        log_operation_success(logger, operation, url=resource_url, health=report.health.value)

        return DeployOutcome(
            succeeded=True,
            action=ActionType.STATUS,
            status_code=response.status_code,
            body=response.body,
            details=report.to_details(),
        )
