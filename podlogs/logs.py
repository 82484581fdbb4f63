from __future__ import annotations

import logging
from typing import Callable, Optional

from .errors import LookupFailure
from .k8s_client import K8sClient
from .schemas import LogQuery, Logs, PodInfo
from .window import check_page_size, construct_logs

ContainerResolver = Callable[[PodInfo], str]

logger = logging.getLogger(__name__)


def first_container(pod: PodInfo) -> str:
    """Default container policy: the first container declared in the pod spec."""
    if not pod.containers:
        raise LookupFailure(f"Pod '{pod.name}' declares no containers", status_code=404)
    return pod.containers[0]


def get_pod_logs(
    client: K8sClient,
    query: LogQuery,
    container_resolver: ContainerResolver = first_container,
    log: Optional[logging.Logger] = None,
) -> Logs:
    """Return one page of logs for the queried pod and container.

    When ``query.container`` is empty the container is picked by
    ``container_resolver``. Lookup errors from the client propagate as is.
    """
    log = log or logger
    check_page_size(query.count)

    log.info(
        "Getting logs from %s container from %s pod in %s namespace",
        query.container, query.pod_id, query.namespace,
    )

    pod = client.get_pod(query.pod_id, namespace=query.namespace)

    if not query.container:
        query = query.model_copy(update={"container": container_resolver(pod)})

    raw_logs = client.get_raw_pod_logs(
        query.pod_id, container=query.container, namespace=query.namespace
    )
    return construct_logs(pod.creation_timestamp, raw_logs, query)
