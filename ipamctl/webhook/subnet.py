"""Subnet admission checks: the declared address range must be valid."""
from ipamctl.networking.models import GROUP, VERSION, Subnet
from ipamctl.networking.validation import AddressRangeError, validate_address_range
from ipamctl.webhook.handlers import (
    AdmissionRequest,
    AdmissionResponse,
    GroupVersionKind,
    Handlers,
    allow_delete,
    decode,
)

SUBNET_GVK = GroupVersionKind(GROUP, VERSION, 'Subnet')


def subnet_validation(request: AdmissionRequest) -> AdmissionResponse:
    try:
        subnet = decode(request, Subnet)
    except ValueError as e:
        return AdmissionResponse.error(400, e)

    try:
        validate_address_range(subnet.spec.range)
    except AddressRangeError as e:
        return AdmissionResponse.deny(str(e))

    return AdmissionResponse.allow("validation pass")


HANDLERS = Handlers(
    create=subnet_validation,
    update=subnet_validation,
    delete=allow_delete,
)
