"""
osinfra/models/chart_values.py

Schema of the values handed to the 'openstack-infra' Terraform chart.

The chart is rendered from a plain nested dict; building it through these frozen,
extra="forbid" models means a missing or misspelled key fails when the values are
computed rather than when the chart is rendered. Use TerraformerChartValues.to_values()
to obtain the dict with the chart's camelCase keys.
"""

from __future__ import annotations

from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field

from osinfra.models.terraform import TERRAFORM_OUTPUT_KEYS


class _ChartValuesModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")


class OpenStackValues(_ChartValuesModel):
    auth_url: str = Field(alias="authURL")
    domain_name: str = Field(alias="domainName")
    tenant_name: str = Field(alias="tenantName")
    region: str
    floating_pool_name: str = Field(alias="floatingPoolName")


class CreateValues(_ChartValuesModel):
    router: bool


class RouterValues(_ChartValuesModel):
    id: str


class NetworksValues(_ChartValuesModel):
    workers: str


def output_key_alias(field: str) -> str:
    """Return the 'outputKeys' key of an output field, as listed in TERRAFORM_OUTPUT_KEYS."""
    for key in TERRAFORM_OUTPUT_KEYS:
        if key.field == field:
            return key.alias
    raise KeyError(f"{field} is not in TERRAFORM_OUTPUT_KEYS")


class OutputKeys(_ChartValuesModel):
    """Terraform output names the chart must declare, keyed by their role."""

    # Aliases come from the table, so a field missing there fails at import.
    model_config = ConfigDict(alias_generator=output_key_alias)

    ssh_key_name: str
    router_id: str
    network_id: str
    subnet_id: str
    floating_network_id: str
    security_group_id: str
    security_group_name: str

    @classmethod
    def from_table(cls) -> OutputKeys:
        """Build the block from TERRAFORM_OUTPUT_KEYS."""
        return cls(**{key.field: key.name for key in TERRAFORM_OUTPUT_KEYS})


class TerraformerChartValues(_ChartValuesModel):
    """All values of the 'openstack-infra' chart.

    Attributes:
        openstack: Keystone URL, account scope, region and floating pool.
        create: Which resources the chart creates itself.
        dns_servers: DNS servers for the worker subnet.
        ssh_public_key: Public key for the worker key pair.
        router: ID of the router to use, or the Terraform expression of the created one.
        cluster_name: Name prefix for all created resources.
        networks: Worker CIDR.
        output_keys: Names of the Terraform outputs the chart declares.
    """

    openstack: OpenStackValues
    create: CreateValues
    dns_servers: List[str] = Field(alias="dnsServers")
    ssh_public_key: str = Field(alias="sshPublicKey")
    router: RouterValues
    cluster_name: str = Field(alias="clusterName")
    networks: NetworksValues
    output_keys: OutputKeys = Field(alias="outputKeys")

    def to_values(self) -> Dict[str, Any]:
        """Return the nested dict passed to the chart renderer."""
        return self.model_dump(by_alias=True)


__all__ = [
    "OpenStackValues",
    "CreateValues",
    "RouterValues",
    "NetworksValues",
    "output_key_alias",
    "OutputKeys",
    "TerraformerChartValues",
]
