"""
osinfra/models/openstack.py

Pydantic models for the OpenStack provider configs:
 - InfrastructureConfig: per-cluster network settings (router, workers CIDR, floating pool).
 - CloudProfileConfig: per-landscape keystone endpoints and DNS servers.
 - ControlPlaneConfig: load balancer / cloud-controller-manager settings.

Field names follow the camelCase wire format through aliases; both the alias and the
Python attribute name are accepted on input. Unknown keys such as 'apiVersion' and
'kind' are ignored so raw provider configs can be decoded as they are stored.
"""

from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class _ProviderConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Router(_ProviderConfigModel):
    """A pre-existing router the worker subnet should be attached to.

    Attributes:
        id: The OpenStack ID of the router.
    """

    id: str


class Networks(_ProviderConfigModel):
    """Network settings of an InfrastructureConfig.

    Attributes:
        router: Optional pre-existing router. If None, Terraform creates one.
        workers: CIDR of the worker subnet.
        worker: Deprecated spelling of 'workers', still honoured when 'workers' is empty.
    """

    router: Optional[Router] = None
    workers: str = ""
    worker: str = ""


class InfrastructureConfig(_ProviderConfigModel):
    """Provider-specific infrastructure configuration of a cluster.

    Attributes:
        networks: Router and CIDR settings.
        floating_pool_name: Name of the external network floating IPs are allocated from.
    """

    networks: Networks = Field(default_factory=Networks)
    floating_pool_name: str = Field(default="", alias="floatingPoolName")


class KeyStoneURL(_ProviderConfigModel):
    """A region-specific keystone endpoint."""

    region: str
    url: str


class CloudProfileConfig(_ProviderConfigModel):
    """Provider-specific configuration of a cloud profile.

    Attributes:
        keystone_urls: Region-specific keystone endpoints.
        keystone_url: Fallback keystone endpoint for regions without an entry.
        dns_servers: DNS servers handed to the worker subnet.
    """

    keystone_urls: List[KeyStoneURL] = Field(
        default_factory=list, alias="keyStoneURLs"
    )
    keystone_url: str = Field(default="", alias="keyStoneURL")
    dns_servers: List[str] = Field(default_factory=list, alias="dnsServers")


class CloudControllerManagerConfig(_ProviderConfigModel):
    feature_gates: Dict[str, bool] = Field(default_factory=dict, alias="featureGates")


class ControlPlaneConfig(_ProviderConfigModel):
    """Provider-specific control plane configuration of a cluster.

    Attributes:
        load_balancer_provider: Octavia provider used for services of type LoadBalancer.
        zone: Availability zone of the control plane.
        cloud_controller_manager: Optional settings for the cloud-controller-manager.
    """

    load_balancer_provider: str = Field(default="", alias="loadBalancerProvider")
    zone: str = ""
    cloud_controller_manager: Optional[CloudControllerManagerConfig] = Field(
        default=None, alias="cloudControllerManager"
    )


__all__ = [
    "Router",
    "Networks",
    "InfrastructureConfig",
    "KeyStoneURL",
    "CloudProfileConfig",
    "CloudControllerManagerConfig",
    "ControlPlaneConfig",
]
