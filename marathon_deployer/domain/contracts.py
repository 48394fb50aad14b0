"""
Contratos/interfaces para dependencias externas del dominio.

Rol: Definir la interfaz que el motor de despliegue necesita de Marathon.
Permite que el dominio permanezca aislado del transporte HTTP.
Usa ABC para definir contratos que deben cumplir las implementaciones.

Implementado por: MarathonClient en infrastructure.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from .entities import OrchestratorResponse


class OrchestratorClient(ABC):
    """
    Contrato para el cliente HTTP del orquestador.

    Todo código HTTP se retorna como OrchestratorResponse;
    las fallas de transporte se elevan como NetworkError.
    """

    @abstractmethod
    def get_versions(self, resource_url: str) -> OrchestratorResponse:
        """GET {resource}/versions."""
        pass

    @abstractmethod
    def get_app(self, resource_url: str) -> OrchestratorResponse:
        """GET {resource} con Accept: application/json."""
        pass

    @abstractmethod
    def put_app(self, resource_url: str, body: Dict[str, Any]) -> OrchestratorResponse:
        """PUT {resource} con cuerpo JSON."""
        pass
