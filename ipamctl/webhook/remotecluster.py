"""
RemoteCluster admission checks.

All create/update validations run one at a time under a single
process-wide lock.
"""
import re
import threading

from ipamctl.networking.models import GROUP, VERSION, ConnConfig, RemoteCluster
from ipamctl.webhook.handlers import (
    AdmissionRequest,
    AdmissionResponse,
    GroupVersionKind,
    Handlers,
    allow_delete,
    decode,
)

REMOTE_CLUSTER_GVK = GroupVersionKind(GROUP, VERSION, 'RemoteCluster')

VALID_ENDPOINT = re.compile(r'^(https?://)[\w-]+(\.[\w-]+)+:\d{1,5}$', re.ASCII)

_rc_lock = threading.Lock()


def create_validation(request: AdmissionRequest) -> AdmissionResponse:
    try:
        rc = decode(request, RemoteCluster)
    except ValueError as e:
        return AdmissionResponse.error(400, e)
    return validate(rc)


def update_validation(request: AdmissionRequest) -> AdmissionResponse:
    try:
        new_rc = decode(request, RemoteCluster)
    except ValueError as e:
        return AdmissionResponse.error(400, e)
    return validate(new_rc)


def validate(rc: RemoteCluster) -> AdmissionResponse:
    """Check a RemoteCluster's connection config while holding the global lock."""
    with _rc_lock:
        return check_conn_config(rc.spec.conn_config)


def check_conn_config(conn: ConnConfig) -> AdmissionResponse:
    if not conn.endpoint or not conn.ca_bundle or not conn.client_key or not conn.client_cert:
        return AdmissionResponse.deny("empty connection config, please check.")

    # No trailing newline may follow the port
    if not VALID_ENDPOINT.fullmatch(conn.endpoint):
        return AdmissionResponse.deny("endpoint format: https://server:address, please check")

    return AdmissionResponse.allow("validation pass")


HANDLERS = Handlers(
    create=create_validation,
    update=update_validation,
    delete=allow_delete,
)
