import logging
from typing import Optional

import typer
import uvicorn

from ipamctl.config import Config

logger = logging.getLogger(__name__)

app = typer.Typer()


@app.command("webhook")
def serve_webhook(
    host: Optional[str] = typer.Option(None, help="Bind address (default: WEBHOOK_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default: WEBHOOK_PORT)"),
):
    """Run the validating admission webhook."""
    if host is not None:
        Config.WEBHOOK_HOST = host
    if port is not None:
        Config.WEBHOOK_PORT = port

    try:
        Config.validate()
    except ValueError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)

    logger.info(f"Starting admission webhook on {Config.WEBHOOK_HOST}:{Config.WEBHOOK_PORT}")
    uvicorn.run(
        "ipamctl.api.main:app",
        host=Config.WEBHOOK_HOST,
        port=Config.WEBHOOK_PORT,
        ssl_certfile=Config.WEBHOOK_CERT_FILE,
        ssl_keyfile=Config.WEBHOOK_KEY_FILE,
        log_level=Config.LOG_LEVEL.lower(),
    )
