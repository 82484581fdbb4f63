# backend/routers/pods.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from backend.services.k8s_service import LogsService, get_logs_service
from podlogs.errors import LookupFailure
from podlogs.schemas import PodInfo

router = APIRouter(prefix="/v1/pods", tags=["Pods"])


@router.get("/{namespace}", response_model=List[PodInfo])
def list_pods(namespace: str, service: LogsService = Depends(get_logs_service)):
    """
    List pods in a namespace with their declared containers.
    """
    try:
        return service.list_pods(namespace)
    except LookupFailure as e:
        status = e.status_code if e.status_code and e.status_code >= 400 else 502
        raise HTTPException(status_code=status, detail=e.message)
