"""
osinfra/models/terraform.py

Defines Pydantic models related to Terraform, including:
 - TERRAFORM_OUTPUT_KEYS: the ordered table of outputs the infrastructure chart
   must produce. It is the only place the output names are spelled out; the chart
   values' 'outputKeys' block and the state extractor's fetch list are both derived
   from it.
 - TerraformOutputs: the seven output values of one Terraform run.
 - TerraformState: A parsed 'terraform show -json' document.
 - TerraformFiles: the files rendered from the infrastructure chart.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, NamedTuple, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field

# Terraform expression for the router created by the chart when none is configured.
DEFAULT_ROUTER_ID = "${openstack_networking_router_v2.router.id}"


class OutputKey(NamedTuple):
    """One entry of the Terraform output contract.

    Attributes:
        field: Attribute name on TerraformOutputs and OutputKeys.
        alias: Key used in the chart values' 'outputKeys' block.
        name: Literal Terraform output name.
    """

    field: str
    alias: str
    name: str


TERRAFORM_OUTPUT_KEYS: Tuple[OutputKey, ...] = (
    OutputKey("ssh_key_name", "keyName", "key_name"),
    OutputKey("router_id", "routerID", "router_id"),
    OutputKey("network_id", "networkID", "network_id"),
    OutputKey("subnet_id", "subnetID", "subnet_id"),
    OutputKey("floating_network_id", "floatingNetworkID", "floating_network_id"),
    OutputKey("security_group_id", "securityGroupID", "security_group_id"),
    OutputKey("security_group_name", "securityGroupName", "security_group_name"),
)


def output_names() -> List[str]:
    """Return the Terraform output names, in table order."""
    return [key.name for key in TERRAFORM_OUTPUT_KEYS]


class TerraformOutputs(BaseModel):
    """The outputs of the infrastructure Terraform run.

    Fields must match TERRAFORM_OUTPUT_KEYS one to one; extra or missing
    fields fail validation in from_output_variables.

    Attributes:
        ssh_key_name: Name of the SSH key pair for worker nodes.
        router_id: ID of the router between provider network and worker subnet.
        network_id: ID of the private worker network.
        subnet_id: ID of the worker subnet.
        floating_network_id: ID of the provider (floating pool) network.
        security_group_id: ID of the worker security group.
        security_group_name: Name of the worker security group.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ssh_key_name: str
    router_id: str
    network_id: str
    subnet_id: str
    floating_network_id: str
    security_group_id: str
    security_group_name: str

    @classmethod
    def from_output_variables(cls, variables: Mapping[str, str]) -> TerraformOutputs:
        """Build from a mapping of Terraform output name -> value.

        Raises:
            KeyError: If an output named in TERRAFORM_OUTPUT_KEYS is absent.
        """
        return cls(
            **{key.field: variables[key.name] for key in TERRAFORM_OUTPUT_KEYS}
        )


class TerraformFiles(BaseModel):
    """The files rendered from the infrastructure chart.

    Attributes:
        main: Content of main.tf.
        variables: Content of variables.tf.
        tfvars: Content of terraform.tfvars, as bytes.
    """

    main: str
    variables: str
    tfvars: bytes


class OutputValue(BaseModel):
    """Represents a Terraform output value as parsed from 'terraform show -json'.

    Attributes:
        sensitive: True if the output is marked sensitive.
        value: Arbitrary data from the Terraform output.
        type: Optional Terraform type hint (string, list, etc.).
    """

    sensitive: bool = False
    value: Any = None
    type: Union[str, List[Any], None] = None


class Values(BaseModel):
    """Represents the 'values' block in a Terraform JSON state.

    Attributes:
        outputs: Mapping of output_name -> OutputValue for all outputs.
        root_module: Dictionary containing resources and possibly child modules.
    """

    outputs: Dict[str, OutputValue] = Field(default_factory=dict)
    root_module: Dict[str, Any] = Field(default_factory=dict)


class TerraformState(BaseModel):
    """Represents a Terraform JSON state at a high level.

    'terraform show -json' on an empty state prints only the version fields,
    so 'values' may be absent.

    Attributes:
        format_version: The format version string of the Terraform state.
        terraform_version: The version of Terraform that generated this state.
        values: A Values instance including outputs and resource info.
    """

    format_version: str
    terraform_version: str = ""
    values: Values = Field(default_factory=Values)


__all__ = [
    "DEFAULT_ROUTER_ID",
    "OutputKey",
    "TERRAFORM_OUTPUT_KEYS",
    "output_names",
    "TerraformOutputs",
    "TerraformFiles",
    "OutputValue",
    "Values",
    "TerraformState",
]
