"""
osinfra/infrastructure/values.py

Computes the values of the 'openstack-infra' Terraform chart from the infrastructure
config, the account credentials and the cluster context. The computation is pure:
the same inputs always produce equal values.
"""

from __future__ import annotations

import logging
from typing import Tuple

from osinfra.infrastructure.keystone import find_keystone_url
from osinfra.models.chart_values import (
    CreateValues,
    NetworksValues,
    OpenStackValues,
    OutputKeys,
    RouterValues,
    TerraformerChartValues,
)
from osinfra.models.cluster import Cluster, ClusterContext
from osinfra.models.credentials import Credentials
from osinfra.models.decode import cloud_profile_config_from_cluster
from osinfra.models.openstack import InfrastructureConfig, Networks
from osinfra.models.terraform import DEFAULT_ROUTER_ID

logger = logging.getLogger(__name__)


def resolve_router(config: InfrastructureConfig) -> Tuple[bool, str]:
    """Decide whether the chart creates a router, and which router ID it uses.

    Returns:
        (create_router, router_id): (False, <configured id>) if the config names a
        router, else (True, DEFAULT_ROUTER_ID).
    """
    router = config.networks.router
    if router is not None:
        return False, router.id
    return True, DEFAULT_ROUTER_ID


def resolve_workers_cidr(networks: Networks) -> str:
    """Return the workers CIDR, falling back to the deprecated 'worker' field.

    Deprecated: 'worker' is only read for configs written before 'workers' existed.
    Drop the fallback once no stored config uses it. If both are empty the empty
    string is returned; no default CIDR is applied.
    """
    if networks.workers:
        return networks.workers
    return networks.worker


def compute_terraformer_chart_values(
    context: ClusterContext,
    credentials: Credentials,
    config: InfrastructureConfig,
    cluster: Cluster,
) -> TerraformerChartValues:
    """Compute the values for the OpenStack Terraformer chart.

    Args:
        context: Namespace, region and SSH key of the Infrastructure.
        credentials: OpenStack account; only domain and tenant names are used.
        config: The decoded InfrastructureConfig.
        cluster: The cluster, carrying the raw cloud profile config.

    Returns:
        TerraformerChartValues: The validated chart values.

    Raises:
        ConfigDecodeError: If the cloud profile config is malformed.
        ConfigResolutionError: If no keystone URL exists for the region.
    """
    create_router, router_id = resolve_router(config)

    cloud_profile_config = cloud_profile_config_from_cluster(cluster)
    keystone_url = find_keystone_url(
        cloud_profile_config.keystone_urls,
        cloud_profile_config.keystone_url,
        context.region,
    )

    logger.debug(
        "Computed chart values for %s (create router: %s)",
        context.namespace,
        create_router,
    )
    return TerraformerChartValues(
        openstack=OpenStackValues(
            auth_url=keystone_url,
            domain_name=credentials.domain_name,
            tenant_name=credentials.tenant_name,
            region=context.region,
            floating_pool_name=config.floating_pool_name,
        ),
        create=CreateValues(router=create_router),
        dns_servers=list(cloud_profile_config.dns_servers),
        ssh_public_key=context.ssh_public_key,
        router=RouterValues(id=router_id),
        cluster_name=context.namespace,
        networks=NetworksValues(workers=resolve_workers_cidr(config.networks)),
        output_keys=OutputKeys.from_table(),
    )


__all__ = [
    "resolve_router",
    "resolve_workers_cidr",
    "compute_terraformer_chart_values",
]
