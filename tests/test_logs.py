from __future__ import annotations

import logging

import pytest

from podlogs.errors import InvalidPageSize, LookupFailure
from podlogs.logs import first_container, get_pod_logs
from podlogs.schemas import LogQuery, PodInfo


def test_default_container_is_first_declared(fake_client):
    query = LogQuery(namespace="default", pod_id="web-1", container="", start_index=0, count=3)
    result = get_pod_logs(fake_client, query)

    assert result.container == "app"
    assert result.logs == ["a", "b", "c"]
    assert result.total == 10
    assert result.since_time == "2016-03-01T10:00:00Z"
    assert fake_client.log_calls == [("default", "web-1", "app")]
    # caller's query is left alone
    assert query.container == ""


def test_explicit_container(fake_client):
    query = LogQuery(namespace="default", pod_id="web-1", container="sidecar", start_index=-1, count=2)
    result = get_pod_logs(fake_client, query)

    assert result.container == "sidecar"
    assert result.total == 3
    assert result.start_index == 2
    assert result.logs == [""]


def test_injected_container_resolver(fake_client):
    query = LogQuery(namespace="default", pod_id="web-1", start_index=0, count=5)
    result = get_pod_logs(fake_client, query, container_resolver=lambda pod: pod.containers[-1])
    assert result.container == "sidecar"
    assert result.logs == ["s1", "s2", ""]


def test_missing_pod_propagates(fake_client):
    query = LogQuery(namespace="default", pod_id="nope", start_index=0, count=5)
    with pytest.raises(LookupFailure) as exc:
        get_pod_logs(fake_client, query)
    assert exc.value.status_code == 404
    assert fake_client.log_calls == []


def test_log_fetch_failure_propagates(fake_client):
    query = LogQuery(namespace="default", pod_id="web-1", container="ghost", start_index=0, count=5)
    with pytest.raises(LookupFailure) as exc:
        get_pod_logs(fake_client, query)
    assert exc.value.status_code == 400


def test_first_container_requires_containers():
    pod = PodInfo(name="empty", namespace="default")
    with pytest.raises(LookupFailure):
        first_container(pod)


def test_logs_through_injected_logger(fake_client, caplog):
    log = logging.getLogger("test.podlogs")
    query = LogQuery(namespace="default", pod_id="web-1", container="app", start_index=0, count=1)
    with caplog.at_level(logging.INFO, logger="test.podlogs"):
        get_pod_logs(fake_client, query, log=log)
    assert "Getting logs from app container from web-1 pod in default namespace" in caplog.text


@pytest.mark.parametrize("count", [0, -3])
def test_bad_page_size_rejected_before_lookup(fake_client, count):
    query = LogQuery(namespace="default", pod_id="web-1", container="app", start_index=0, count=count)
    with pytest.raises(InvalidPageSize):
        get_pod_logs(fake_client, query)
    assert fake_client.pod_calls == []
    assert fake_client.log_calls == []
