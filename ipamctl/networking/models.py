"""
Data models for the networking.alibaba.com/v1 custom resources.

The models mirror the JSON the cluster API stores (camelCase keys) and can
be populated either from that JSON or by Python field name.
"""
import base64
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .addresses import IPVersion

GROUP = 'networking.alibaba.com'
VERSION = 'v1'


class ResourceModel(BaseModel):
    """Base for resource models: immutable, tolerant of unknown keys."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra='ignore')


class ObjectMeta(ResourceModel):
    name: str = ''
    namespace: str = ''
    labels: Dict[str, str] = Field(default_factory=dict)


class AddressRange(ResourceModel):
    """A declared subnet range."""
    version: str = IPVersion.IPV4.value
    start: str = ''
    end: str = ''
    cidr: str = ''
    gateway: str = ''
    reserved_ips: List[str] = Field(default_factory=list, alias='reservedIPs')
    exclude_ips: List[str] = Field(default_factory=list, alias='excludeIPs')

    @field_validator('version', mode='before')
    @classmethod
    def version_as_text(cls, v: Any) -> Any:
        """Keep unknown versions as text so validation can report them."""
        if isinstance(v, Enum):
            return v.value
        if v is None:
            return ''
        return str(v)

    @field_validator('start', 'end', 'cidr', 'gateway', mode='before')
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return '' if v is None else v

    @field_validator('reserved_ips', 'exclude_ips', mode='before')
    @classmethod
    def none_as_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v


class SubnetSpec(ResourceModel):
    range: AddressRange
    network: str = ''
    net_id: Optional[int] = Field(default=None, alias='netID')


class Subnet(ResourceModel):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: SubnetSpec


class NetworkSpec(ResourceModel):
    type: str = ''
    net_id: Optional[int] = Field(default=None, alias='netID')
    node_selector: Dict[str, str] = Field(default_factory=dict, alias='nodeSelector')

    @field_validator('type', mode='before')
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return '' if v is None else v


class Network(ResourceModel):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: NetworkSpec = Field(default_factory=NetworkSpec)


class ConnConfig(ResourceModel):
    """
    Connection details for a remote cluster's API server.

    Certificate material is opaque. On the wire it is base64 text; raw
    bytes are accepted as-is.
    """
    endpoint: str = ''
    ca_bundle: Optional[bytes] = Field(default=None, alias='caBundle')
    client_key: Optional[bytes] = Field(default=None, alias='clientKey')
    client_cert: Optional[bytes] = Field(default=None, alias='clientCert')
    timeout: Optional[int] = None

    @field_validator('ca_bundle', 'client_key', 'client_cert', mode='before')
    @classmethod
    def decode_base64(cls, v: Any) -> Any:
        if isinstance(v, str):
            return base64.b64decode(v, validate=True)
        return v


class RemoteClusterSpec(ResourceModel):
    conn_config: ConnConfig = Field(default_factory=ConnConfig, alias='connConfig')


class RemoteCluster(ResourceModel):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: RemoteClusterSpec = Field(default_factory=RemoteClusterSpec)
