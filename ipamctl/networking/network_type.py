"""Network type classification."""
from typing import Optional

from .models import Network


class NetworkType(str):
    """
    Fabric mode of a network.

    ``UNDERLAY`` and ``OVERLAY`` are the built-in types. Any other value is
    kept verbatim so newer network types pass through unchanged.
    """

    @property
    def is_builtin(self) -> bool:
        return self in (NetworkType.UNDERLAY, NetworkType.OVERLAY)

    def __repr__(self) -> str:
        return f"NetworkType({str.__repr__(self)})"


NetworkType.UNDERLAY = NetworkType('Underlay')
NetworkType.OVERLAY = NetworkType('Overlay')


def get_network_type(network: Optional[Network]) -> NetworkType:
    """
    Classify a network.

    A missing network or an empty type is Underlay, the default for
    networks created before the type field existed.
    """
    if network is None or not network.spec.type:
        return NetworkType.UNDERLAY
    if network.spec.type == NetworkType.OVERLAY:
        return NetworkType.OVERLAY
    return NetworkType(network.spec.type)
