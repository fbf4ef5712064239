import pytest

from ipamctl.networking.models import Network, NetworkSpec
from ipamctl.networking.network_type import NetworkType, get_network_type


@pytest.mark.parametrize("network, expected", [
    (Network(spec=NetworkSpec(type="")), NetworkType.UNDERLAY),
    (None, NetworkType.UNDERLAY),
    (Network(spec=NetworkSpec(type="Overlay")), NetworkType.OVERLAY),
    (Network(spec=NetworkSpec(type="Underlay")), NetworkType.UNDERLAY),
    (Network(spec=NetworkSpec(type="others")), NetworkType("others")),
], ids=["empty", "nil", "overlay", "underlay", "others"])
def test_get_network_type(network, expected):
    assert get_network_type(network) == expected


def test_custom_type_passes_through_verbatim():
    network_type = get_network_type(Network(spec=NetworkSpec(type="overlay")))
    assert network_type == "overlay"
    assert network_type != NetworkType.OVERLAY
    assert not network_type.is_builtin


def test_builtin_types():
    assert NetworkType.UNDERLAY == "Underlay"
    assert NetworkType.OVERLAY.is_builtin
    assert get_network_type(Network.model_validate({"spec": {"type": None}})).is_builtin
