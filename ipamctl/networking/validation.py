"""
Address range validation.

Checks run in a fixed order and stop at the first failure, so a range is
reported with exactly one reason even when several fields are wrong. The
messages are shown to users as the admission deny reason.
"""
from .addresses import IPVersion, in_network, ip_version_of, parse_cidr, parse_ip, unmap_ipv4
from .models import AddressRange


class AddressRangeError(ValueError):
    """Raised when an address range declaration is malformed."""


def validate_address_range(ar: AddressRange) -> None:
    """
    Validate an address range declaration.

    Args:
        ar: The range to check

    Raises:
        AddressRangeError: With the message of the first violated rule
    """
    version = IPVersion.parse(ar.version)
    if version is None:
        raise AddressRangeError(f"unsupported IP Version {ar.version}")

    start = end = gateway = None
    if ar.start:
        start = parse_ip(ar.start)
        if start is None:
            raise AddressRangeError(f"invalid range start {ar.start}")
    if ar.end:
        end = parse_ip(ar.end)
        if end is None:
            raise AddressRangeError(f"invalid range end {ar.end}")
    if ar.gateway:
        gateway = parse_ip(ar.gateway)
        if gateway is None:
            raise AddressRangeError(f"invalid range gateway {ar.gateway}")

        if ip_version_of(gateway) != version:
            raise AddressRangeError("address families of ip version and gateway mismatch")

    parsed = parse_cidr(ar.cidr)
    if parsed is None:
        raise AddressRangeError(f"invalid range CIDR {ar.cidr}")
    address, network = parsed
    if address != network.network_address:
        raise AddressRangeError(
            f"CIDR notation is not standard, should start from "
            f"{network.network_address} but from {address}"
        )

    if start is not None and not in_network(start, network):
        raise AddressRangeError(f"start {ar.start} is not in CIDR {ar.cidr}")
    if end is not None and not in_network(end, network):
        raise AddressRangeError(f"end {ar.end} is not in CIDR {ar.cidr}")
    if start is not None and end is not None:
        if network.version == 4:
            start, end = unmap_ipv4(start), unmap_ipv4(end)
        if start > end:
            raise AddressRangeError(
                f"subnet should have at least one available IP. start={ar.start}, end={ar.end}"
            )
    if gateway is not None and not in_network(gateway, network):
        raise AddressRangeError(f"gateway {ar.gateway} is not in CIDR {ar.cidr}")

    _validate_members(ar.reserved_ips, network, ar.cidr, 'reserved')
    _validate_members(ar.exclude_ips, network, ar.cidr, 'excluded')


def _validate_members(ips, network, cidr: str, label: str) -> None:
    for raw in ips:
        ip = parse_ip(raw)
        if ip is None:
            raise AddressRangeError(f"invalid {label} ip {raw}")
        if not in_network(ip, network):
            raise AddressRangeError(f"{label} ip {raw} is not in CIDR {cidr}")


def is_valid_address_range(ar: AddressRange) -> bool:
    """Return True when the range passes validation."""
    try:
        validate_address_range(ar)
    except AddressRangeError:
        return False
    return True
