from typing import Optional

import typer

from ipamctl.config import Config
from ipamctl.networking.capacity import ReservedIPPolicy, compute_capacity
from ipamctl.utils.manifest import address_range_from, load_manifest

app = typer.Typer()


@app.command("show")
def show_capacity(
    file: str = typer.Option(..., help="Subnet manifest or address range YAML"),
    subtract_reserved: Optional[bool] = typer.Option(
        None, "--subtract-reserved/--ignore-reserved",
        help="Count reserved IPs against capacity (default from IPAM_RESERVED_IPS_REDUCE_CAPACITY)"
    ),
):
    """Show how many addresses a range makes available."""
    try:
        ar = address_range_from(load_manifest(file))
    except (OSError, ValueError) as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)

    if subtract_reserved is None:
        policy = Config.reserved_ip_policy()
    elif subtract_reserved:
        policy = ReservedIPPolicy.SUBTRACT
    else:
        policy = ReservedIPPolicy.IGNORE

    capacity = compute_capacity(ar, policy)
    typer.echo(f"📦 Capacity of {ar.cidr or '<no cidr>'}: {capacity}")
