"""
Admission handler registry and dispatch.

Each resource kind registers a create, update and delete handler. The
registry is built once at startup and never changed afterwards, so
lookups need no locking.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class GroupVersionKind(NamedTuple):
    group: str
    version: str
    kind: str

    def __str__(self) -> str:
        return f"{self.group}/{self.version}, Kind={self.kind}"


class Operation(str, Enum):
    CREATE = 'CREATE'
    UPDATE = 'UPDATE'
    DELETE = 'DELETE'
    CONNECT = 'CONNECT'


@dataclass(frozen=True)
class AdmissionRequest:
    """An admission request as handed over by the webhook transport."""
    uid: str
    kind: GroupVersionKind
    operation: Operation
    object: Optional[Dict[str, Any]] = None
    old_object: Optional[Dict[str, Any]] = None
    name: str = ''
    namespace: str = ''


@dataclass(frozen=True)
class AdmissionResponse:
    """Outcome of an admission check."""
    allowed: bool
    code: int = 200
    message: str = ''

    @classmethod
    def allow(cls, message: str) -> 'AdmissionResponse':
        return cls(allowed=True, code=200, message=message)

    @classmethod
    def deny(cls, message: str) -> 'AdmissionResponse':
        return cls(allowed=False, code=403, message=message)

    @classmethod
    def error(cls, code: int, error: Exception) -> 'AdmissionResponse':
        return cls(allowed=False, code=code, message=str(error))

    def to_review_response(self, uid: str) -> Dict[str, Any]:
        """Render as the ``response`` stanza of an AdmissionReview."""
        return {
            'uid': uid,
            'allowed': self.allowed,
            'status': {'code': self.code, 'message': self.message},
        }


HandlerFunc = Callable[[AdmissionRequest], AdmissionResponse]


class Handlers(NamedTuple):
    create: HandlerFunc
    update: HandlerFunc
    delete: HandlerFunc


Registry = Mapping[GroupVersionKind, Handlers]


def make_registry(entries: Iterable[Tuple[GroupVersionKind, Handlers]]) -> Registry:
    """Freeze handler entries into a read-only registry."""
    table: Dict[GroupVersionKind, Handlers] = {}
    for gvk, handlers in entries:
        if gvk in table:
            raise ValueError(f"duplicate admission handlers for {gvk}")
        table[gvk] = handlers
    return MappingProxyType(table)


def build_registry() -> Registry:
    """Registry with the handlers of every validated resource kind."""
    from ipamctl.webhook import network, remotecluster, subnet

    return make_registry([
        (remotecluster.REMOTE_CLUSTER_GVK, remotecluster.HANDLERS),
        (subnet.SUBNET_GVK, subnet.HANDLERS),
        (network.NETWORK_GVK, network.HANDLERS),
    ])


def handle(registry: Registry, request: AdmissionRequest) -> AdmissionResponse:
    """
    Dispatch a request to the handler registered for its kind.

    Kinds and operations without a handler are let through.
    """
    handlers = registry.get(request.kind)
    if handlers is None:
        return AdmissionResponse.allow("by pass")

    if request.operation == Operation.CREATE:
        response = handlers.create(request)
    elif request.operation == Operation.UPDATE:
        response = handlers.update(request)
    elif request.operation == Operation.DELETE:
        response = handlers.delete(request)
    else:
        return AdmissionResponse.allow("by pass")

    if response.allowed:
        logger.debug(f"{request.operation.value} {request.kind.kind} {request.name}: {response.message}")
    else:
        logger.info(f"Rejected {request.operation.value} {request.kind.kind} {request.name}: {response.message}")
    return response


def decode(request: AdmissionRequest, model: type) -> BaseModel:
    """
    Decode the request's object into a resource model.

    Raises:
        ValueError: If the object is missing or does not match the model
    """
    if request.object is None:
        raise ValueError(f"there is no content to decode in {request.kind.kind} request")
    try:
        return model.model_validate(request.object)
    except ValidationError as e:
        raise ValueError(f"failed to decode {request.kind.kind}: {e}") from e


def allow_delete(request: AdmissionRequest) -> AdmissionResponse:
    """Deletion needs no validation."""
    return AdmissionResponse.allow("validation pass")
