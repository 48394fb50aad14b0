"""
Entidades de dominio del despliegue.

Rol: Definir las entidades con las que trabaja el motor de decisión.
Contiene TaskDescriptor, ActionRequest, AppStatus, VersionList y DeployOutcome.
Todas viven lo que dura una invocación; no hay estado persistido.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..shared.constants import (
    DEFAULT_API_VERSION,
    LABEL_DEPLOYED_BY,
    LABEL_DEPLOYED_FROM,
    ActionType,
)
from ..shared.validation_utils import coerce_count, parse_integer


@dataclass
class TaskDescriptor:
    """Entidad principal: descriptor de aplicación ya resuelto."""

    endpoint: str
    id: str
    api_version: int = DEFAULT_API_VERSION
    instances: Optional[int] = None
    labels: Dict[str, str] = field(default_factory=dict)
    image: str = ""
    raw_body: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(
        cls,
        data: Dict[str, Any],
        api_version: int = DEFAULT_API_VERSION,
        image: str = "",
    ) -> "TaskDescriptor":
        """
        Construye el descriptor desde el JSON del task file.

        Args:
            data: Especificación de la aplicación (incluye 'endpoint')
            api_version: Versión de la API de Marathon
            image: Imagen resuelta por el resolver externo

        Returns:
            TaskDescriptor con una copia del cuerpo original
        """
        labels = data.get("labels") or {}

        return cls(
            endpoint=data.get("endpoint") or "",
            id=data.get("id") or "",
            api_version=api_version,
            instances=parse_integer(data.get("instances")),
            labels=dict(labels),
            image=image,
            raw_body=copy.deepcopy(data),
        )

    def deployment_body(self, user: str, hostname: str) -> Dict[str, Any]:
        """
        Cuerpo a enviar en el PUT de despliegue.

        Quita 'endpoint' (metadata de ruteo) e inyecta los labels
        deployedBy y deployedFrom sin alterar el descriptor.
        """
        body = copy.deepcopy(self.raw_body)
        body.pop("endpoint", None)

        labels = dict(body.get("labels") or {})
        labels[LABEL_DEPLOYED_BY] = user
        labels[LABEL_DEPLOYED_FROM] = hostname
        body["labels"] = labels

        return body


# Acciones del operador: unión cerrada, elegida una vez por invocación
@dataclass(frozen=True)
class Deploy:
    """Crear o actualizar la aplicación."""

    action_type = ActionType.DEPLOY


@dataclass(frozen=True)
class Rollback:
    """Volver a la versión inmediatamente anterior."""

    action_type = ActionType.ROLLBACK


@dataclass(frozen=True)
class Status:
    """Consultar el estado de la aplicación."""

    target: str = ""

    action_type = ActionType.STATUS


@dataclass(frozen=True)
class Scale:
    """Escalar la aplicación a un número de instancias."""

    count: int

    action_type = ActionType.SCALE


ActionRequest = Union[Deploy, Rollback, Status, Scale]


@dataclass
class AppStatus:
    """Estado de una aplicación según Marathon."""

    instances: int = 0
    tasks_running: int = 0
    tasks_healthy: int = 0
    tasks_unhealthy: int = 0
    tasks_staged: int = 0

    @classmethod
    def from_app(cls, app: Dict[str, Any]) -> "AppStatus":
        """Construye el estado desde el objeto 'app' de la respuesta."""
        return cls(
            instances=coerce_count(app.get("instances")),
            tasks_running=coerce_count(app.get("tasksRunning")),
            tasks_healthy=coerce_count(app.get("tasksHealthy")),
            tasks_unhealthy=coerce_count(app.get("tasksUnhealthy")),
            tasks_staged=coerce_count(app.get("tasksStaged")),
        )

    @property
    def missing_instances(self) -> int:
        return self.instances - self.tasks_running


@dataclass
class VersionList:
    """Versiones de una aplicación, la más reciente primero."""

    versions: List[str] = field(default_factory=list)

    @classmethod
    def from_body(cls, body: Any) -> "VersionList":
        if not isinstance(body, dict):
            return cls()
        versions = body.get("versions")
        if not isinstance(versions, (list, tuple)):
            return cls()
        return cls(versions=[str(v) for v in versions])

    def has_previous(self) -> bool:
        return len(self.versions) >= 2

    @property
    def previous(self) -> Optional[str]:
        """Versión anterior a la actual (índice 1)."""
        return self.versions[1] if self.has_previous() else None


@dataclass
class OrchestratorResponse:
    """Respuesta HTTP de Marathon: código y cuerpo (JSON o texto)."""

    status_code: int
    body: Any = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def get_field(self, name: str) -> Any:
        """Obtiene un campo del cuerpo si es un objeto JSON."""
        if isinstance(self.body, dict):
            return self.body.get(name)
        return None

    def has_field(self, name: str) -> bool:
        return isinstance(self.body, dict) and name in self.body


@dataclass
class DeployOutcome:
    """Resultado único de una invocación."""

    succeeded: bool
    action: Optional[ActionType] = None
    deployment_id: Optional[str] = None
    version: Optional[str] = None
    message: Optional[str] = None
    status_code: Optional[int] = None
    fatal: bool = False
    body: Any = None
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Representación serializable del resultado."""
        result = {
            "succeeded": self.succeeded,
            "action": self.action.value if self.action else None,
            "fatal": self.fatal,
        }

        for key in ("deployment_id", "version", "message", "status_code"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value

        if self.details:
            result["details"] = self.details

        return result
