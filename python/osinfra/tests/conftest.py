"""Shared fixtures for the osinfra tests."""

from __future__ import annotations

from typing import Dict

import pytest

from osinfra.models.cluster import Cluster, ClusterContext
from osinfra.models.credentials import Credentials
from osinfra.models.openstack import InfrastructureConfig

CLOUD_PROFILE_CONFIG = """\
apiVersion: openstack.provider.extensions.gardener.cloud/v1alpha1
kind: CloudProfileConfig
keyStoneURLs:
- region: eu
  url: https://eu.example
dnsServers:
- 8.8.8.8
- 8.8.4.4
"""

INFRASTRUCTURE_CONFIG = """\
apiVersion: openstack.provider.extensions.gardener.cloud/v1alpha1
kind: InfrastructureConfig
floatingPoolName: ext-net
networks:
  workers: 10.250.0.0/19
"""


@pytest.fixture
def context() -> ClusterContext:
    return ClusterContext(namespace="shoot-1", region="eu", ssh_public_key="ssh-rsa AAAA")


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        domain_name="domain", tenant_name="tenant", username="user", password="secret"
    )


@pytest.fixture
def infrastructure_config() -> InfrastructureConfig:
    return InfrastructureConfig.model_validate(
        {"floatingPoolName": "ext-net", "networks": {"workers": "10.250.0.0/19"}}
    )


@pytest.fixture
def cluster() -> Cluster:
    return Cluster(name="shoot-1", cloud_profile_config=CLOUD_PROFILE_CONFIG)


@pytest.fixture
def output_variables() -> Dict[str, str]:
    """Terraform outputs of a successful run, keyed by output name."""
    return {
        "key_name": "shoot-1-ssh-publickey",
        "router_id": "router-1",
        "network_id": "network-1",
        "subnet_id": "subnet-1",
        "floating_network_id": "net-123",
        "security_group_id": "sg-1",
        "security_group_name": "shoot-1-nodes",
    }
