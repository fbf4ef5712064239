from pathlib import Path
from typing import Any, Dict

import yaml

from ipamctl.networking.models import AddressRange, Subnet


def load_manifest(path: str) -> Dict[str, Any]:
    """Load a single YAML document describing one resource."""
    resolved = Path(path).expanduser()
    if not resolved.exists():
        raise FileNotFoundError(f"Manifest not found: {resolved}")
    with open(resolved) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Manifest {resolved} is not a mapping")
    return data


def address_range_from(data: Dict[str, Any]) -> AddressRange:
    """
    Build an AddressRange from either a Subnet manifest or a bare range
    mapping (``cidr``, ``start``, ``end``...).
    """
    if data.get("kind") == "Subnet" or "spec" in data:
        return Subnet.model_validate(data).spec.range
    return AddressRange.model_validate(data)
