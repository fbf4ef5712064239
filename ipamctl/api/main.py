from fastapi import FastAPI
from ipamctl.api.routes import admission, health
from ipamctl.logging import setup_logger
from ipamctl.webhook.handlers import build_registry

# Admission decisions are logged under the package logger
setup_logger("ipamctl")

app = FastAPI(title="ipamctl admission webhook")

# Handlers are fixed for the life of the process
app.state.registry = build_registry()

app.include_router(admission.router)
app.include_router(health.router)
