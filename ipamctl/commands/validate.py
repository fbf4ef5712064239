import typer
from pydantic import ValidationError

from ipamctl.networking.models import RemoteCluster
from ipamctl.networking.validation import AddressRangeError, validate_address_range
from ipamctl.utils.manifest import address_range_from, load_manifest
from ipamctl.webhook import remotecluster

app = typer.Typer()


@app.command("range")
def validate_range(file: str = typer.Option(..., help="Subnet manifest or address range YAML")):
    """Validate the address range of a subnet declaration."""
    try:
        ar = address_range_from(load_manifest(file))
    except (OSError, ValueError) as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)

    try:
        validate_address_range(ar)
    except AddressRangeError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)

    typer.echo(f"✅ Address range {ar.cidr} is valid.")


@app.command("remote-cluster")
def validate_remote_cluster(file: str = typer.Option(..., help="RemoteCluster manifest YAML")):
    """Check the connection config of a RemoteCluster manifest."""
    try:
        rc = RemoteCluster.model_validate(load_manifest(file))
    except ValidationError as e:
        typer.echo(f"❌ Failed to decode RemoteCluster: {e}")
        raise typer.Exit(code=1)
    except (OSError, ValueError) as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)

    response = remotecluster.validate(rc)
    if not response.allowed:
        typer.echo(f"❌ {response.message}")
        raise typer.Exit(code=1)

    typer.echo(f"✅ RemoteCluster {rc.metadata.name}: {response.message}")
