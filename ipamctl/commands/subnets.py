import logging
from typing import Optional

import typer
from pydantic import ValidationError

from ipamctl.config import Config
from ipamctl.networking.capacity import compute_capacity
from ipamctl.networking.models import Network, Subnet
from ipamctl.networking.network_type import get_network_type
from ipamctl.networking.validation import AddressRangeError, validate_address_range

logger = logging.getLogger(__name__)

app = typer.Typer()


@app.command("list")
def list_subnets(
    kubeconfig: Optional[str] = typer.Option(None, help="Path to kubeconfig (default: $KUBECONFIG)"),
):
    """List subnets of a live cluster with their validity and capacity."""
    from ipamctl.utils import kube

    try:
        source = kube.load_kubeconfig(kubeconfig or Config.KUBECONFIG)
    except (OSError, ValueError) as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)
    logger.debug(f"Using cluster credentials from {source}")

    networks = {}
    for item in kube.list_networks():
        try:
            network = Network.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Skipping undecodable network: {e}")
            continue
        networks[network.metadata.name] = network

    policy = Config.reserved_ip_policy()
    for item in kube.list_subnets():
        try:
            subnet = Subnet.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Skipping undecodable subnet: {e}")
            continue

        ar = subnet.spec.range
        network_type = get_network_type(networks.get(subnet.spec.network))
        try:
            validate_address_range(ar)
            state = "✅ valid"
        except AddressRangeError as e:
            state = f"❌ {e}"

        typer.echo(
            f"{subnet.metadata.name}\t{subnet.spec.network}\t{network_type}\t"
            f"{ar.cidr}\tcapacity={compute_capacity(ar, policy)}\t{state}"
        )
