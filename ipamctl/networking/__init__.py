"""
Address range validation and capacity accounting.

Key pieces:
- Resource models for Subnet, Network and RemoteCluster objects
- Ordered, single-cause validation of address ranges
- Capacity calculation with IPv6-safe arithmetic
- Network type classification
"""

from .addresses import IPVersion, parse_cidr, parse_ip
from .capacity import (
    MAX_CAPACITY,
    Capacity,
    ReservedIPPolicy,
    calculate_capacity,
    compute_capacity,
)
from .models import (
    AddressRange,
    ConnConfig,
    Network,
    NetworkSpec,
    ObjectMeta,
    RemoteCluster,
    RemoteClusterSpec,
    Subnet,
    SubnetSpec,
)
from .network_type import NetworkType, get_network_type
from .validation import AddressRangeError, is_valid_address_range, validate_address_range

__all__ = [
    # Models
    'AddressRange',
    'ConnConfig',
    'Network',
    'NetworkSpec',
    'ObjectMeta',
    'RemoteCluster',
    'RemoteClusterSpec',
    'Subnet',
    'SubnetSpec',
    'IPVersion',
    'NetworkType',

    # Validation
    'AddressRangeError',
    'validate_address_range',
    'is_valid_address_range',

    # Capacity
    'MAX_CAPACITY',
    'Capacity',
    'ReservedIPPolicy',
    'compute_capacity',
    'calculate_capacity',

    # Helpers
    'get_network_type',
    'parse_ip',
    'parse_cidr',
]
