"""
Cliente HTTP para la API de Marathon.

Rol: Cliente técnico para interactuar con la API REST de Marathon.
Maneja requests HTTP, parseo de respuestas y errores de red.
Implementa el contrato OrchestratorClient del dominio.

Depende de: requests library, configuración del cliente.
"""

import logging
from typing import Any, Dict, Optional

import requests

from ..shared.constants import DEFAULT_TIMEOUT
from ..shared.infrastructure_exceptions import NetworkError
from ..shared.logging_utils import format_infrastructure_log
from ..domain.contracts import OrchestratorClient
from ..domain.endpoint_builder import build_versions_url
from ..domain.entities import OrchestratorResponse

logger = logging.getLogger(__name__)


class MarathonClient(OrchestratorClient):
    """Cliente HTTP para Marathon, sin reintentos."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, verify_ssl: bool = True,
                 session: Optional[requests.Session] = None):
        """
        Inicializa cliente de Marathon.

        Args:
            timeout: Timeout para requests
            verify_ssl: Verificar certificados TLS
            session: Sesión HTTP a reutilizar (opcional)
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl

        self.headers = {
            "Accept": "application/json",
            "User-Agent": "marathon-deployer/0.1.0",
        }

        self.session = session or requests.Session()

    def get_versions(self, resource_url: str) -> OrchestratorResponse:
        """Obtiene el listado de versiones de la aplicación."""
        return self._request("GET", build_versions_url(resource_url))

    def get_app(self, resource_url: str) -> OrchestratorResponse:
        """Obtiene el estado de la aplicación."""
        return self._request("GET", resource_url)

    def put_app(self, resource_url: str, body: Dict[str, Any]) -> OrchestratorResponse:
        """Envía una actualización de la aplicación."""
        return self._request("PUT", resource_url, body)

    def _request(self, method: str, url: str, body: Optional[Dict[str, Any]] = None) -> OrchestratorResponse:
        """
        Ejecuta un request y retorna código y cuerpo.

        Los códigos no 2xx no elevan excepción; el dominio los clasifica.

        Raises:
            NetworkError: Si hay timeout o error de conexión
        """
        logger.debug(format_infrastructure_log("Marathon", method, url))

        try:
            response = self.session.request(
                method,
                url,
                headers=self.headers,
                json=body,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.exceptions.Timeout as e:
            logger.error(format_infrastructure_log("Marathon", method, f"timeout en {url}: {e}"))
            raise NetworkError(f"Timeout en {method} {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(format_infrastructure_log("Marathon", method, f"error en {url}: {e}"))
            raise NetworkError(f"Error de red en {method} {url}: {e}") from e

        logger.debug(format_infrastructure_log("Marathon", method, f"{url} -> {response.status_code}"))
        return OrchestratorResponse(status_code=response.status_code, body=self._parse_body(response))

    @staticmethod
    def _parse_body(response: requests.Response) -> Any:
        """Cuerpo como JSON si es posible, si no como texto."""
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return response.text

    def close(self):
        """Cierra la sesión HTTP."""
        if self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
