"""Minimal Kubernetes HTTP client for reading pods and their logs."""

from __future__ import annotations

import logging
from typing import Dict, Any, List

import requests

from .config import settings
from .errors import LookupFailure
from .schemas import PodInfo

logger = logging.getLogger(__name__)


class K8sClient:
    def __init__(self, base_url: str | None = None, namespace: str | None = None):
        if not base_url:
            base_url = settings.k8s_api_base_url
        if not base_url:
            raise ValueError("K8S_API_BASE_URL is not set. Configure it in env.")

        self.base_url = base_url.rstrip("/")
        self.namespace = namespace or settings.k8s_namespace
        self.verify_ssl = settings.verify_ssl
        self.bearer_token = settings.k8s_bearer_token
        self.timeout = settings.k8s_timeout

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.bearer_token:
            headers["Authorization"] = f"Bearer {self.bearer_token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, str] | None = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            resp = requests.request(
                method=method,
                url=url,
                headers=self._headers(),
                params=params,
                verify=self.verify_ssl,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise LookupFailure(f"K8s API request to {path} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise LookupFailure(
                f"K8s API error {resp.status_code}: {_error_message(resp)}",
                status_code=resp.status_code,
            )
        return resp

    def _get_json(self, path: str) -> Dict[str, Any]:
        resp = self._request("GET", path)
        try:
            return resp.json()
        except requests.exceptions.JSONDecodeError as e:
            raise LookupFailure(f"K8s API returned invalid JSON for {path}") from e

    # ------------------------------------------------------------------ #
    # Pods                                                               #
    # ------------------------------------------------------------------ #

    def get_pod(self, pod_name: str, namespace: str | None = None) -> PodInfo:
        ns = namespace or self.namespace
        item = self._get_json(f"/api/v1/namespaces/{ns}/pods/{pod_name}")
        return _pod_from_item(item, ns)

    def list_pods(self, namespace: str | None = None) -> List[PodInfo]:
        ns = namespace or self.namespace
        data = self._get_json(f"/api/v1/namespaces/{ns}/pods")
        return [_pod_from_item(item, ns) for item in data.get("items", [])]

    # ------------------------------------------------------------------ #
    # Logs                                                               #
    # ------------------------------------------------------------------ #

    def get_raw_pod_logs(
        self,
        pod_name: str,
        container: str | None = None,
        namespace: str | None = None,
    ) -> str:
        """Return the full log of one container as text, with timestamps."""
        ns = namespace or self.namespace
        params = {"follow": "false", "previous": "false", "timestamps": "true"}
        if container:
            params["container"] = container

        path = f"/api/v1/namespaces/{ns}/pods/{pod_name}/log"
        resp = self._request("GET", path, params=params)
        logger.debug("Fetched %d bytes of logs from %s", len(resp.content), path)
        return resp.text


def _pod_from_item(item: Dict[str, Any], namespace: str) -> PodInfo:
    meta = item.get("metadata", {})
    spec = item.get("spec", {})
    status = item.get("status", {})
    return PodInfo(
        name=meta.get("name", "<unknown>"),
        namespace=meta.get("namespace", namespace),
        phase=status.get("phase", "Unknown"),
        containers=[c.get("name", "") for c in spec.get("containers", []) or []],
        creation_timestamp=meta.get("creationTimestamp"),
        node_name=spec.get("nodeName"),
    )


def _error_message(resp: requests.Response) -> str:
    # API server errors are Status objects with a human readable message
    try:
        raw = resp.json()
    except requests.exceptions.JSONDecodeError:
        return resp.text
    if isinstance(raw, dict) and raw.get("message"):
        return raw["message"]
    return str(raw)
