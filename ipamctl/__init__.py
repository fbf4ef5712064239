"""Address range validation, capacity accounting and admission checks for cluster IPAM."""

__version__ = "0.1.0"
