"""Shared test fixtures."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from marathon_deployer.domain.contracts import OrchestratorClient
from marathon_deployer.domain.entities import OrchestratorResponse, TaskDescriptor
from marathon_deployer.infrastructure.config import DeployOptions
from marathon_deployer.shared.infrastructure_exceptions import NetworkError

ENDPOINT = "http://host:8080/marathon"


class FakeOrchestratorClient(OrchestratorClient):
    """In-memory client: queued responses per method, every call recorded."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str, Optional[Dict[str, Any]]]] = []
        self.responses: Dict[str, List[Any]] = {"get_versions": [], "get_app": [], "put_app": []}

    def queue(self, method: str, status_code: int = 200, body: Any = None) -> None:
        self.responses[method].append(OrchestratorResponse(status_code=status_code, body=body))

    def queue_error(self, method: str, message: str = "connection refused") -> None:
        self.responses[method].append(NetworkError(message))

    def _next(self, method: str) -> OrchestratorResponse:
        item = self.responses[method].pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def get_versions(self, resource_url: str) -> OrchestratorResponse:
        self.calls.append(("get_versions", resource_url, None))
        return self._next("get_versions")

    def get_app(self, resource_url: str) -> OrchestratorResponse:
        self.calls.append(("get_app", resource_url, None))
        return self._next("get_app")

    def put_app(self, resource_url: str, body: Dict[str, Any]) -> OrchestratorResponse:
        self.calls.append(("put_app", resource_url, body))
        return self._next("put_app")

    @property
    def writes(self) -> List[Tuple[str, str, Optional[Dict[str, Any]]]]:
        return [c for c in self.calls if c[0] == "put_app"]


@pytest.fixture
def client() -> FakeOrchestratorClient:
    return FakeOrchestratorClient()


@pytest.fixture
def options() -> DeployOptions:
    return DeployOptions(user="alice", hostname="build-01")


@pytest.fixture
def descriptor() -> TaskDescriptor:
    return TaskDescriptor.from_mapping(
        {
            "endpoint": ENDPOINT,
            "id": "/my/app",
            "instances": 2,
            "cpus": 0.5,
            "labels": {"team": "core"},
        },
    )
