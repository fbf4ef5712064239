"""
Capacity accounting for address ranges.

Capacity is advisory: it never raises. A range whose CIDR cannot be parsed
has an unbounded capacity, and callers that need a plain integer get
``MAX_CAPACITY`` for it.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .addresses import parse_cidr, parse_ip, unmap_ipv4
from .models import AddressRange

# Largest signed 64-bit value, the ceiling for any reported capacity
MAX_CAPACITY = 2 ** 63 - 1


class ReservedIPPolicy(str, Enum):
    """Whether reserved addresses count against a range's capacity."""
    IGNORE = 'ignore'
    SUBTRACT = 'subtract'


@dataclass(frozen=True)
class Capacity:
    """Either a bounded address count or unbounded (count is None)."""
    count: Optional[int] = None

    @classmethod
    def unbounded(cls) -> 'Capacity':
        return cls(None)

    @classmethod
    def bounded(cls, count: int) -> 'Capacity':
        return cls(min(max(count, 0), MAX_CAPACITY))

    @property
    def is_unbounded(self) -> bool:
        return self.count is None

    def as_int(self) -> int:
        """Plain integer form; unbounded maps to MAX_CAPACITY."""
        return MAX_CAPACITY if self.count is None else self.count

    def __str__(self) -> str:
        return 'unbounded' if self.count is None else str(self.count)


def compute_capacity(ar: AddressRange,
                     reserved_policy: ReservedIPPolicy = ReservedIPPolicy.IGNORE) -> Capacity:
    """
    Count the addresses a range makes available.

    Args:
        ar: The range to measure. It does not need to have been validated.
        reserved_policy: Whether reserved addresses reduce the count

    Returns:
        The capacity of the range
    """
    parsed = parse_cidr(ar.cidr)
    if parsed is None:
        return Capacity.unbounded()
    _, network = parsed

    first = _explicit_bound(ar.start, network.version)
    if first is None:
        first = int(network.network_address) + 1

    last = _explicit_bound(ar.end, network.version)
    if last is None:
        last = int(network.broadcast_address)
        if network.version == 4:
            # IPv4 keeps the broadcast address back
            last -= 1

    total = last - first + 1
    if total <= 0:
        return Capacity.bounded(0)

    excluded = _in_span(ar.exclude_ips, network.version, first, last)
    total -= len(excluded)

    if reserved_policy == ReservedIPPolicy.SUBTRACT:
        reserved = _in_span(ar.reserved_ips, network.version, first, last)
        total -= len(reserved - excluded)

    return Capacity.bounded(total)


def calculate_capacity(ar: AddressRange,
                       reserved_policy: ReservedIPPolicy = ReservedIPPolicy.IGNORE) -> int:
    """Integer capacity of a range, saturating at MAX_CAPACITY."""
    return compute_capacity(ar, reserved_policy).as_int()


def _explicit_bound(value: str, version: int) -> Optional[int]:
    if not value:
        return None
    ip = _parse_for(value, version)
    return None if ip is None else int(ip)


def _in_span(ips, version: int, first: int, last: int) -> set:
    """Distinct addresses of the given family falling inside [first, last]."""
    found = set()
    for raw in ips:
        ip = _parse_for(raw, version)
        if ip is None or ip.version != version:
            continue
        if first <= int(ip) <= last:
            found.add(int(ip))
    return found


def _parse_for(value: str, version: int):
    ip = parse_ip(value)
    if ip is not None and version == 4:
        ip = unmap_ipv4(ip)
    return ip
