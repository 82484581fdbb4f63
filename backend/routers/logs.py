# backend/routers/logs.py

from fastapi import APIRouter, Depends, HTTPException, Query

from backend.services.k8s_service import LogsService, get_logs_service
from podlogs.config import settings
from podlogs.errors import InvalidPageSize, LookupFailure
from podlogs.schemas import LogQuery, Logs

router = APIRouter(prefix="/v1/logs", tags=["Logs"])


def _fetch(service: LogsService, query: LogQuery) -> Logs:
    try:
        return service.get_logs(query)
    except InvalidPageSize as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LookupFailure as e:
        status = e.status_code if e.status_code and e.status_code >= 400 else 502
        raise HTTPException(status_code=status, detail=e.message)


@router.get("/{namespace}/{pod_id}", response_model=Logs)
def get_default_container_logs(
    namespace: str,
    pod_id: str,
    start_index: int = Query(-1, description="First line index, negative for the last page"),
    count: int = Query(settings.logs_per_page, description="Lines per page"),
    service: LogsService = Depends(get_logs_service),
):
    """
    Return one page of logs for the first container of a pod.
    """
    query = LogQuery(namespace=namespace, pod_id=pod_id, start_index=start_index, count=count)
    return _fetch(service, query)


@router.get("/{namespace}/{pod_id}/{container}", response_model=Logs)
def get_container_logs(
    namespace: str,
    pod_id: str,
    container: str,
    start_index: int = Query(-1, description="First line index, negative for the last page"),
    count: int = Query(settings.logs_per_page, description="Lines per page"),
    service: LogsService = Depends(get_logs_service),
):
    query = LogQuery(
        namespace=namespace,
        pod_id=pod_id,
        container=container,
        start_index=start_index,
        count=count,
    )
    return _fetch(service, query)


@router.get("/{namespace}/{pod_id}/{container}/{start_index}/{count}", response_model=Logs)
def get_container_logs_page(
    namespace: str,
    pod_id: str,
    container: str,
    start_index: int,
    count: int,
    service: LogsService = Depends(get_logs_service),
):
    query = LogQuery(
        namespace=namespace,
        pod_id=pod_id,
        container=container,
        start_index=start_index,
        count=count,
    )
    return _fetch(service, query)
