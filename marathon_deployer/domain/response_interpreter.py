"""
Interpretación de respuestas de Marathon por acción.

Rol: Clasificar cada respuesta HTTP como éxito, advertencia o fatal.
Calcula los porcentajes derivados para el reporte de estado.
Funciones puras: no emiten requests ni escriben logs.

Depende de: entidades de dominio, helpers de validación.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from ..shared.constants import (
    APP_FIELD,
    DEPLOY_SUCCESS_CODES,
    DEPLOYMENT_ID_FIELD,
    ERROR_MESSAGES,
    MESSAGE_FIELD,
    VERSION_FIELD,
    ActionType,
    HealthState,
)
from ..shared.domain_exceptions import FatalDeploymentError
from ..shared.validation_utils import safe_percent
from .entities import AppStatus, DeployOutcome, OrchestratorResponse, VersionList

ReportLine = Tuple[int, str]


def classify_health(status: AppStatus) -> HealthState:
    """
    Clasifica la salud de la aplicación (solo informativo).

    Orden: sin tareas corriendo es DOWN; faltan instancias es
    PARTIALLY_UP; en otro caso UP.
    """
    if status.tasks_running == 0:
        return HealthState.DOWN

    if status.missing_instances > 0:
        return HealthState.PARTIALLY_UP

    return HealthState.UP


@dataclass
class StatusReport:
    """Reporte de estado calculado desde la respuesta de Marathon."""

    target: str
    status: AppStatus
    running_percent: int
    healthy_percent: int
    staged_percent: int
    health: HealthState

    @classmethod
    def from_status(cls, status: AppStatus, target: str = "") -> "StatusReport":
        return cls(
            target=target,
            status=status,
            running_percent=safe_percent(status.tasks_running, status.instances),
            healthy_percent=safe_percent(status.tasks_healthy, status.tasks_running),
            staged_percent=safe_percent(status.tasks_staged, status.instances),
            health=classify_health(status),
        )

    def warnings(self) -> List[str]:
        """Advertencias que no abortan la invocación."""
        warnings = []
        if self.status.tasks_unhealthy > 0:
            warnings.append(f"Unhealthy: {self.status.tasks_unhealthy}")
        if self.health == HealthState.PARTIALLY_UP:
            warnings.append(self._partially_up_message())
        return warnings

    def report_lines(self) -> List[ReportLine]:
        """Líneas del reporte con su nivel de logging, en orden."""
        s = self.status
        lines: List[ReportLine] = [
            (logging.INFO, f"Estado de la aplicación ({self.target})"),
            (logging.INFO, f"Running: {s.tasks_running} / {s.instances} ({self.running_percent}%)"),
            (logging.INFO, f"Healthy: {s.tasks_healthy} / {s.tasks_running} ({self.healthy_percent}%)"),
        ]

        if s.tasks_unhealthy > 0:
            lines.append((logging.WARNING, f"Unhealthy: {s.tasks_unhealthy}"))

        if s.tasks_staged > 0:
            lines.append((logging.INFO, f"Staged: {s.tasks_staged} ({self.staged_percent}%)"))

        if self.health == HealthState.DOWN:
            lines.append((logging.ERROR, "La aplicación está CAÍDA"))
        elif self.health == HealthState.PARTIALLY_UP:
            lines.append((logging.WARNING, self._partially_up_message()))
        else:
            lines.append((logging.INFO, "La aplicación está arriba y corriendo"))

        return lines

    def to_details(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "instances": self.status.instances,
            "tasks_running": self.status.tasks_running,
            "tasks_healthy": self.status.tasks_healthy,
            "tasks_unhealthy": self.status.tasks_unhealthy,
            "tasks_staged": self.status.tasks_staged,
            "running_percent": self.running_percent,
            "healthy_percent": self.healthy_percent,
            "staged_percent": self.staged_percent,
            "health": self.health.value,
            "warnings": self.warnings(),
        }

    def _partially_up_message(self) -> str:
        return (
            f"La aplicación está arriba, pero solo corren "
            f"{self.status.tasks_running} de {self.status.instances} instancias"
        )


def interpret_deploy(response: OrchestratorResponse) -> DeployOutcome:
    """
    Clasifica la respuesta del PUT de despliegue.

    Éxito solo con 200 o 201. Si el cuerpo trae deploymentId y version
    se reportan; si no, es un éxito silencioso (por ejemplo, sin cambios).

    Raises:
        FatalDeploymentError: Con el código y el 'message' de Marathon
    """
    if response.status_code not in DEPLOY_SUCCESS_CODES:
        message = response.get_field(MESSAGE_FIELD) or ERROR_MESSAGES["deploy_failed"]
        raise FatalDeploymentError(
            str(message),
            status_code=response.status_code,
            action=ActionType.DEPLOY.value,
            body=response.body,
        )

    outcome = DeployOutcome(
        succeeded=True,
        action=ActionType.DEPLOY,
        status_code=response.status_code,
        body=response.body,
    )

    if response.has_field(DEPLOYMENT_ID_FIELD) and response.has_field(VERSION_FIELD):
        outcome.deployment_id = response.get_field(DEPLOYMENT_ID_FIELD)
        outcome.version = response.get_field(VERSION_FIELD)

    return outcome


def interpret_status(response: OrchestratorResponse, target: str = "") -> StatusReport:
    """
    Construye el reporte de estado.

    Raises:
        FatalDeploymentError: Si el código no es 200 o falta el objeto 'app'
    """
    app = response.get_field(APP_FIELD)

    if response.status_code != 200 or not isinstance(app, dict):
        raise FatalDeploymentError(
            ERROR_MESSAGES["status_unavailable"],
            status_code=response.status_code,
            action=ActionType.STATUS.value,
            body=response.body,
        )

    return StatusReport.from_status(AppStatus.from_app(app), target)


def interpret_scale(response: OrchestratorResponse, count: int) -> DeployOutcome:
    """
    Clasifica la respuesta del PUT de escalado.

    Marathon valida el conteo; aquí solo se distingue 2xx de error.

    Raises:
        FatalDeploymentError: Si el código no es 2xx
    """
    if not response.is_success:
        message = response.get_field(MESSAGE_FIELD) or ERROR_MESSAGES["scale_failed"]
        raise FatalDeploymentError(
            str(message),
            status_code=response.status_code,
            action=ActionType.SCALE.value,
            body=response.body,
        )

    return DeployOutcome(
        succeeded=True,
        action=ActionType.SCALE,
        deployment_id=response.get_field(DEPLOYMENT_ID_FIELD),
        version=response.get_field(VERSION_FIELD),
        status_code=response.status_code,
        body=response.body,
        details={"instances": count},
    )


def select_rollback_version(response: OrchestratorResponse) -> str:
    """
    Elige la versión a la cual volver (índice 1 del listado).

    Raises:
        FatalDeploymentError: Si el listado falla o tiene menos de 2 versiones
    """
    if response.status_code != 200:
        raise FatalDeploymentError(
            ERROR_MESSAGES["versions_unavailable"],
            status_code=response.status_code,
            action=ActionType.ROLLBACK.value,
            body=response.body,
        )

    versions = VersionList.from_body(response.body)

    if not versions.has_previous():
        raise FatalDeploymentError(
            ERROR_MESSAGES["no_previous_version"],
            status_code=response.status_code,
            action=ActionType.ROLLBACK.value,
        )

    return versions.previous


def interpret_rollback(response: OrchestratorResponse, version: str) -> DeployOutcome:
    """
    Clasifica la respuesta del PUT de rollback.

    Nunca es fatal: la invocación termina con el resultado que haya.
    """
    return DeployOutcome(
        succeeded=response.is_success,
        action=ActionType.ROLLBACK,
        deployment_id=response.get_field(DEPLOYMENT_ID_FIELD),
        version=version,
        message=response.get_field(MESSAGE_FIELD),
        status_code=response.status_code,
        body=response.body,
    )
