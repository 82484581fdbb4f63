# File: tests/conftest.py
from __future__ import annotations

from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from podlogs.errors import LookupFailure
from podlogs.schemas import PodInfo

TEN_LINES = ["a", "b", "c", "d", "e", "f", "g", "h", "i", "j"]


class FakeK8sClient:
    """In-memory stand-in for K8sClient keyed by (namespace, pod, container)."""

    def __init__(self, pods: Dict[str, PodInfo] | None = None, logs: Dict[tuple, str] | None = None):
        self.pods = pods or {}
        self.logs = logs or {}
        self.log_calls: List[tuple] = []
        self.pod_calls: List[tuple] = []
        # raised by every lookup when set
        self.fail_with: LookupFailure | None = None

    def get_pod(self, pod_name: str, namespace: str | None = None) -> PodInfo:
        self.pod_calls.append((namespace, pod_name))
        if self.fail_with is not None:
            raise self.fail_with
        pod = self.pods.get(pod_name)
        if pod is None or pod.namespace != namespace:
            raise LookupFailure(f'pods "{pod_name}" not found', status_code=404)
        return pod

    def list_pods(self, namespace: str | None = None) -> List[PodInfo]:
        if self.fail_with is not None:
            raise self.fail_with
        return [p for p in self.pods.values() if p.namespace == namespace]

    def get_raw_pod_logs(self, pod_name: str, container: str | None = None, namespace: str | None = None) -> str:
        self.log_calls.append((namespace, pod_name, container))
        key = (namespace, pod_name, container)
        if key not in self.logs:
            raise LookupFailure(f'container "{container}" not found', status_code=400)
        return self.logs[key]


@pytest.fixture
def fake_client() -> FakeK8sClient:
    pod = PodInfo(
        name="web-1",
        namespace="default",
        phase="Running",
        containers=["app", "sidecar"],
        creation_timestamp="2016-03-01T10:00:00Z",
    )
    return FakeK8sClient(
        pods={"web-1": pod},
        logs={
            ("default", "web-1", "app"): "\n".join(TEN_LINES),
            ("default", "web-1", "sidecar"): "s1\ns2\n",
        },
    )


@pytest.fixture
def test_client(fake_client):
    """FastAPI client whose LogsService talks to the fake cluster."""
    from backend.main import app
    from backend.services.k8s_service import LogsService, get_logs_service

    service = LogsService()
    service._client = fake_client
    app.dependency_overrides[get_logs_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
