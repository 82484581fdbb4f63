from typing import List

from podlogs.config import settings
from podlogs.k8s_client import K8sClient
from podlogs.logs import get_pod_logs, first_container
from podlogs.schemas import LogQuery, Logs, PodInfo


class LogsService:
    """
    Thin wrapper around K8sClient and the log pager.
    Routes go through this so they never build K8sClient themselves.
    """

    def __init__(self, container_resolver=first_container):
        self.container_resolver = container_resolver
        self._client: K8sClient | None = None

    @property
    def client(self) -> K8sClient:
        # Lazy so a missing K8S_API_BASE_URL doesn't crash import
        if self._client is None:
            self._client = K8sClient()
        return self._client

    # ---- Logs ----
    def get_logs(self, query: LogQuery) -> Logs:
        return get_pod_logs(self.client, query, container_resolver=self.container_resolver)

    # ---- Pods ----
    def list_pods(self, namespace: str | None = None) -> List[PodInfo]:
        return self.client.list_pods(namespace or settings.k8s_namespace)


# Shared singleton instance
logs_service = LogsService()


def get_logs_service() -> LogsService:
    return logs_service
