"""
osinfra/models/status.py

Pydantic models for the InfrastructureStatus recorded on the Infrastructure resource
after Terraform has run. Serialise with to_dict() / to_json() to get the camelCase
wire format.
"""

from __future__ import annotations

from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field

API_VERSION = "openstack.provider.extensions.gardener.cloud/v1alpha1"
STATUS_KIND = "InfrastructureStatus"

# Purpose of subnets and security groups used by worker nodes.
PURPOSE_NODES = "nodes"


class _StatusModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TypeMeta(_StatusModel):
    api_version: str = Field(default=API_VERSION, alias="apiVersion")
    kind: str = STATUS_KIND


class FloatingPoolStatus(_StatusModel):
    id: str = ""
    name: str = ""


class RouterStatus(_StatusModel):
    id: str = ""


class Subnet(_StatusModel):
    purpose: str
    id: str


class NetworkStatus(_StatusModel):
    id: str = ""
    floating_pool: FloatingPoolStatus = Field(
        default_factory=FloatingPoolStatus, alias="floatingPool"
    )
    router: RouterStatus = Field(default_factory=RouterStatus)
    subnets: List[Subnet] = Field(default_factory=list)


class SecurityGroup(_StatusModel):
    purpose: str
    id: str
    name: str


class NodeStatus(_StatusModel):
    key_name: str = Field(default="", alias="keyName")


class InfrastructureStatus(_StatusModel):
    """Status of the OpenStack infrastructure of a cluster.

    Attributes:
        type_meta: Fixed apiVersion/kind of this status.
        networks: Worker network, router, floating pool and subnets.
        security_groups: Security groups attached to worker nodes.
        node: Node-level data such as the SSH key pair name.
    """

    type_meta: TypeMeta = Field(default_factory=TypeMeta, alias="typeMeta")
    networks: NetworkStatus = Field(default_factory=NetworkStatus)
    security_groups: List[SecurityGroup] = Field(
        default_factory=list, alias="securityGroups"
    )
    node: NodeStatus = Field(default_factory=NodeStatus)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise with camelCase keys."""
        return self.model_dump(by_alias=True)

    def to_json(self, indent: int = 2) -> str:
        """Serialise to camelCase JSON."""
        return self.model_dump_json(by_alias=True, indent=indent)


__all__ = [
    "API_VERSION",
    "STATUS_KIND",
    "PURPOSE_NODES",
    "TypeMeta",
    "FloatingPoolStatus",
    "RouterStatus",
    "Subnet",
    "NetworkStatus",
    "SecurityGroup",
    "NodeStatus",
    "InfrastructureStatus",
]
