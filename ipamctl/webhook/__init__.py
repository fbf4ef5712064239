"""
Validating admission handlers.
"""
from .handlers import (
    AdmissionRequest,
    AdmissionResponse,
    GroupVersionKind,
    Handlers,
    Operation,
    build_registry,
    handle,
)

__all__ = [
    'AdmissionRequest',
    'AdmissionResponse',
    'GroupVersionKind',
    'Handlers',
    'Operation',
    'build_registry',
    'handle',
]
