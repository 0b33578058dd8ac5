"""
osinfra/models/cluster.py

Defines the context a reconciliation runs in:
 - ClusterContext: namespace, region and SSH key of the Infrastructure being reconciled.
 - Cluster: the surrounding cluster, carrying the raw cloud profile provider config.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

RawConfig = Union[str, bytes, Dict[str, Any]]


class ClusterContext(BaseModel):
    """The Infrastructure resource being reconciled.

    Attributes:
        namespace: Namespace of the cluster, also used as the cluster name.
        region: Target OpenStack region.
        ssh_public_key: Public key installed on worker nodes.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    namespace: str
    region: str
    ssh_public_key: str = Field(default="", alias="sshPublicKey")

    @field_validator("ssh_public_key", mode="before")
    @classmethod
    def decode_ssh_public_key(cls, value: Any) -> Any:
        """Accept the key as raw bytes, the way it is stored in secrets."""
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value


class Cluster(BaseModel):
    """The cluster an Infrastructure belongs to.

    Attributes:
        name: Cluster name, informational only.
        cloud_profile_config: Raw provider config of the cloud profile (YAML/JSON text,
            bytes, or an already parsed mapping). None if the profile has none.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = ""
    cloud_profile_config: Optional[RawConfig] = Field(
        default=None, alias="cloudProfileConfig"
    )


__all__ = ["RawConfig", "ClusterContext", "Cluster"]
