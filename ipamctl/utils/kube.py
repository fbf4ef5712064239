import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from ipamctl.networking.models import GROUP, VERSION


def load_kubeconfig(path: Optional[str] = None) -> str:
    """
    Load cluster credentials from the KUBECONFIG_CONTENT env var, a given
    kubeconfig path, or the in-cluster service account, in that order.
    Returns the source that was used.
    """
    # CI/CD secret-based loading
    if "KUBECONFIG_CONTENT" in os.environ:
        temp_path = "/tmp/ci-kubeconfig.yaml"
        with open(temp_path, "w") as f:
            f.write(os.environ["KUBECONFIG_CONTENT"])
        config.load_kube_config(config_file=temp_path)
        return temp_path

    # Local path loading
    if path:
        resolved = Path(os.path.expanduser(path)).resolve()
        if not resolved.exists():
            raise FileNotFoundError(f"Kubeconfig not found: {resolved}")
        config.load_kube_config(config_file=str(resolved))
        return str(resolved)

    # Running as a pod
    try:
        config.load_incluster_config()
    except ConfigException as e:
        raise ValueError(
            "No kubeconfig path provided, KUBECONFIG_CONTENT is not set and not running in a cluster."
        ) from e
    return "in-cluster"


def list_subnets() -> List[Dict[str, Any]]:
    """Return the raw Subnet objects of the current cluster."""
    api = client.CustomObjectsApi()
    result = api.list_cluster_custom_object(GROUP, VERSION, "subnets")
    return result.get("items", [])


def list_networks() -> List[Dict[str, Any]]:
    """Return the raw Network objects of the current cluster."""
    api = client.CustomObjectsApi()
    result = api.list_cluster_custom_object(GROUP, VERSION, "networks")
    return result.get("items", [])
