from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class LogQuery(BaseModel):
    """Which part of which container's logs should be returned.

    ``start_index`` and ``count`` select the range from the log lines.
    An empty ``container`` means the pod's default container.
    """

    namespace: str
    pod_id: str
    container: str = ""
    start_index: int = -1
    count: int = 20


class Logs(BaseModel):
    """One page of a container's logs plus its position in the full log."""

    model_config = ConfigDict(populate_by_name=True)

    pod_id: str = Field(alias="PodID")
    # Pod creation time, passed through untouched.
    since_time: Optional[str] = Field(default=None, alias="sinceTime")
    logs: List[str] = Field(default_factory=list)
    container: str
    # Current total number of lines for this container.
    total: int = 0
    # Index of the first returned line.
    start_index: int = Field(default=0, alias="startIndex")


class PodInfo(BaseModel):
    name: str
    namespace: str
    phase: str = "Unknown"
    containers: List[str] = Field(default_factory=list)
    creation_timestamp: Optional[str] = None
    node_name: Optional[str] = None
