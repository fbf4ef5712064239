import base64
import threading
import time

import pytest

from ipamctl.networking.models import ConnConfig, RemoteCluster, RemoteClusterSpec
from ipamctl.webhook import remotecluster
from ipamctl.webhook.handlers import AdmissionRequest, AdmissionResponse, Operation


def b64(value: bytes) -> str:
    return base64.b64encode(value).decode()


def rc_object(**conn_config):
    return {
        "apiVersion": "networking.alibaba.com/v1",
        "kind": "RemoteCluster",
        "metadata": {"name": "cluster-b"},
        "spec": {"connConfig": conn_config},
    }


def full_conn_config(endpoint="https://apiserver.cluster-b.example:6443"):
    return {
        "endpoint": endpoint,
        "caBundle": b64(b"ca"),
        "clientKey": b64(b"key"),
        "clientCert": b64(b"cert"),
    }


def make_request(operation, obj):
    return AdmissionRequest(
        uid="uid-1",
        kind=remotecluster.REMOTE_CLUSTER_GVK,
        operation=operation,
        object=obj,
    )


def make_rc(endpoint="https://apiserver.cluster-b.example:6443", ca=b"ca", key=b"key", cert=b"cert"):
    return RemoteCluster(spec=RemoteClusterSpec(conn_config=ConnConfig(
        endpoint=endpoint, ca_bundle=ca, client_key=key, client_cert=cert,
    )))


def test_valid_remote_cluster():
    response = remotecluster.validate(make_rc())
    assert response.allowed
    assert response.message == "validation pass"


@pytest.mark.parametrize("missing", [
    {"endpoint": ""},
    {"ca": None},
    {"key": None},
    {"cert": None},
    {"ca": b""},
    {"key": b""},
    {"cert": b""},
])
def test_empty_connection_config_denied(missing):
    response = remotecluster.validate(make_rc(**missing))
    assert not response.allowed
    assert response.message == "empty connection config, please check."


@pytest.mark.parametrize("endpoint", [
    "apiserver.example:6443",
    "ftp://apiserver.example:6443",
    "https://apiserver:6443",
    "https://apiserver.example",
    "https://apiserver.example:123456",
    "https://apiserver.example:6443/",
    "https://apiserver.example:6443\n",
    "https://bücher.example:6443",
    "https://api.example:٤٤٣",
])
def test_malformed_endpoint_denied(endpoint):
    response = remotecluster.validate(make_rc(endpoint=endpoint))
    assert not response.allowed
    assert response.message == "endpoint format: https://server:address, please check"


@pytest.mark.parametrize("endpoint", [
    "http://10.0.0.1:6443",
    "https://api-server.cluster_b.example.com:443",
])
def test_well_formed_endpoint_allowed(endpoint):
    assert remotecluster.validate(make_rc(endpoint=endpoint)).allowed


def test_create_and_update_decode_payload():
    for operation, handler in ((Operation.CREATE, remotecluster.create_validation),
                               (Operation.UPDATE, remotecluster.update_validation)):
        response = handler(make_request(operation, rc_object(**full_conn_config())))
        assert response.allowed

        response = handler(make_request(operation, rc_object(endpoint="https://a.b:1")))
        assert not response.allowed
        assert response.code == 403


def test_decode_failure_is_errored():
    bad = rc_object(**dict(full_conn_config(), caBundle="***not base64***"))
    response = remotecluster.create_validation(make_request(Operation.CREATE, bad))
    assert not response.allowed
    assert response.code == 400

    response = remotecluster.update_validation(make_request(Operation.UPDATE, None))
    assert response.code == 400


def test_delete_always_allowed():
    response = remotecluster.HANDLERS.delete(make_request(Operation.DELETE, None))
    assert response == AdmissionResponse.allow("validation pass")


def test_validations_never_overlap(monkeypatch):
    active = 0
    peak = 0
    counter_lock = threading.Lock()
    check = remotecluster.check_conn_config

    def slow_check(conn):
        nonlocal active, peak
        with counter_lock:
            active += 1
            peak = max(peak, active)
        time.sleep(0.01)
        with counter_lock:
            active -= 1
        return check(conn)

    monkeypatch.setattr(remotecluster, "check_conn_config", slow_check)

    results = []

    def worker():
        results.append(remotecluster.create_validation(
            make_request(Operation.CREATE, rc_object(**full_conn_config()))))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert peak == 1
    assert len(results) == 8
    assert all(r.allowed for r in results)


def test_lock_released_after_denial():
    remotecluster.validate(make_rc(endpoint=""))
    assert not remotecluster._rc_lock.locked()
