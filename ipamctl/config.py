"""Configuration management for the ipamctl application."""
import os
from typing import Optional

from dotenv import load_dotenv

from ipamctl.networking.capacity import ReservedIPPolicy

# Load environment variables from .env file if it exists
load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration with sensible defaults."""

    # Webhook server
    WEBHOOK_HOST: str = os.getenv("WEBHOOK_HOST", "0.0.0.0")
    WEBHOOK_PORT: int = int(os.getenv("WEBHOOK_PORT", "9898"))
    WEBHOOK_CERT_FILE: Optional[str] = os.getenv("WEBHOOK_CERT_FILE") or None
    WEBHOOK_KEY_FILE: Optional[str] = os.getenv("WEBHOOK_KEY_FILE") or None

    # Capacity accounting
    RESERVED_IPS_REDUCE_CAPACITY: bool = _env_bool("IPAM_RESERVED_IPS_REDUCE_CAPACITY")

    # Cluster access
    KUBECONFIG: Optional[str] = os.getenv("KUBECONFIG") or None

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def reserved_ip_policy(cls) -> ReservedIPPolicy:
        """Capacity policy for reserved addresses."""
        if cls.RESERVED_IPS_REDUCE_CAPACITY:
            return ReservedIPPolicy.SUBTRACT
        return ReservedIPPolicy.IGNORE

    @classmethod
    def validate(cls) -> None:
        """Validate webhook configuration."""
        if not 0 < cls.WEBHOOK_PORT < 65536:
            raise ValueError(f"Invalid WEBHOOK_PORT: {cls.WEBHOOK_PORT}")
        if bool(cls.WEBHOOK_CERT_FILE) != bool(cls.WEBHOOK_KEY_FILE):
            raise ValueError("WEBHOOK_CERT_FILE and WEBHOOK_KEY_FILE must be set together")

# Don't validate on import to allow for dynamic configuration
# Call Config.validate() explicitly when needed
