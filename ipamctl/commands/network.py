import typer
from pydantic import ValidationError

from ipamctl.networking.models import Network
from ipamctl.networking.network_type import get_network_type
from ipamctl.utils.manifest import load_manifest

app = typer.Typer()


@app.command("type")
def network_type(file: str = typer.Option(..., help="Network manifest YAML")):
    """Print the type a network is classified as."""
    try:
        network = Network.model_validate(load_manifest(file))
    except ValidationError as e:
        typer.echo(f"❌ Failed to decode Network: {e}")
        raise typer.Exit(code=1)
    except (OSError, ValueError) as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)

    typer.echo(f"🌐 {network.metadata.name or '<unnamed>'}: {get_network_type(network)}")
