import typer
from . import capacity, network, serve, subnets, validate

# Create the main app
app = typer.Typer()

# Add subcommands
app.add_typer(validate.app, name="validate")
app.add_typer(capacity.app, name="capacity")
app.add_typer(network.app, name="network")
app.add_typer(subnets.app, name="subnets")
app.add_typer(serve.app, name="serve")

# Export the app for use in cli.py
__all__ = ['app']
