"""Network admission checks: only built-in network types are accepted."""
from ipamctl.networking.models import GROUP, VERSION, Network
from ipamctl.networking.network_type import get_network_type
from ipamctl.webhook.handlers import (
    AdmissionRequest,
    AdmissionResponse,
    GroupVersionKind,
    Handlers,
    allow_delete,
    decode,
)

NETWORK_GVK = GroupVersionKind(GROUP, VERSION, 'Network')


def network_validation(request: AdmissionRequest) -> AdmissionResponse:
    try:
        network = decode(request, Network)
    except ValueError as e:
        return AdmissionResponse.error(400, e)

    network_type = get_network_type(network)
    if not network_type.is_builtin:
        return AdmissionResponse.deny(f"unknown network type {network_type}")

    return AdmissionResponse.allow("validation pass")


HANDLERS = Handlers(
    create=network_validation,
    update=network_validation,
    delete=allow_delete,
)
