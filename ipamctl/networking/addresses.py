"""
IP literal and CIDR parsing helpers.

Thin wrappers around :mod:`ipaddress` that keep the textual forms accepted
by the cluster API: a CIDR is always ``address/prefix-length``; a bare
address, a dotted netmask or a truncated address is rejected.
"""
from __future__ import annotations

import ipaddress
from enum import Enum
from typing import Optional, Tuple, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


class IPVersion(str, Enum):
    """Address families a range can be declared with."""
    IPV4 = '4'
    IPV6 = '6'

    @classmethod
    def parse(cls, value: str) -> Optional['IPVersion']:
        """Return the matching family, or None for an unrecognized value."""
        try:
            return cls(value)
        except ValueError:
            return None


def parse_ip(value: str) -> Optional[IPAddress]:
    """Parse an IP literal, returning None when it is not one."""
    # Scoped IPv6 literals (fe80::1%eth0) are not plain addresses
    if "%" in value:
        return None
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return None
    if getattr(address, "scope_id", None) is not None:
        return None
    return address


def parse_cidr(value: str) -> Optional[Tuple[IPAddress, IPNetwork]]:
    """
    Parse CIDR notation.

    Args:
        value: A string such as ``192.168.8.0/24`` or ``fd00::/64``

    Returns:
        A ``(address, network)`` pair where ``address`` is the literal as
        written before the slash and ``network`` is the prefix it belongs
        to (host bits cleared), or None if ``value`` is not a CIDR.
    """
    host, sep, prefix = value.partition('/')
    if not sep or not (prefix.isascii() and prefix.isdigit()):
        return None

    address = parse_ip(host)
    if address is None:
        return None

    try:
        network = ipaddress.ip_network(f"{address}/{int(prefix)}", strict=False)
    except ValueError:
        return None
    return address, network


def ip_version_of(address: IPAddress) -> IPVersion:
    """Return the family of a parsed address.

    IPv4-mapped IPv6 addresses (``::ffff:a.b.c.d``) count as IPv4.
    """
    return IPVersion.IPV4 if unmap_ipv4(address).version == 4 else IPVersion.IPV6


def in_network(address: IPAddress, network: IPNetwork) -> bool:
    if network.version == 4:
        address = unmap_ipv4(address)
    # Mixed families are never contained
    return address.version == network.version and address in network


def unmap_ipv4(address: IPAddress) -> IPAddress:
    """Return the embedded IPv4 address of an IPv4-mapped IPv6 address."""
    mapped = getattr(address, "ipv4_mapped", None)
    return address if mapped is None else mapped

