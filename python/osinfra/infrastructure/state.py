"""
osinfra/infrastructure/state.py

Turns the outputs of the infrastructure Terraform run into an InfrastructureStatus:

  1) extract_terraform_state fetches the outputs named in TERRAFORM_OUTPUT_KEYS.
  2) status_from_terraform_state maps them onto the status fields.
  3) compute_status runs both and adds the floating pool name from the config.

An output missing from Terraform's state is an error (StateAccessError), never an
empty value: a status is either complete or not produced at all.
"""

from __future__ import annotations

import logging
from typing import Mapping, Protocol
from pydantic import ValidationError

from osinfra.errors import StateAccessError
from osinfra.models.openstack import InfrastructureConfig
from osinfra.models.status import (
    API_VERSION,
    PURPOSE_NODES,
    STATUS_KIND,
    FloatingPoolStatus,
    InfrastructureStatus,
    NetworkStatus,
    NodeStatus,
    RouterStatus,
    SecurityGroup,
    Subnet,
    TypeMeta,
)
from osinfra.models.terraform import TerraformOutputs, output_names

logger = logging.getLogger(__name__)


class StateOutputReader(Protocol):
    def get_state_output_variables(self, *names: str) -> Mapping[str, str]:
        """Return the values of the named Terraform outputs."""
        ...


def extract_terraform_state(reader: StateOutputReader) -> TerraformOutputs:
    """Fetch all infrastructure outputs from Terraform in a single call.

    Args:
        reader: Accessor over Terraform's output store.

    Returns:
        TerraformOutputs: The seven output values.

    Raises:
        StateAccessError: If the reader fails or an output is missing.
    """
    names = output_names()
    logger.debug("Fetching terraform outputs: %s", ", ".join(names))

    try:
        variables = reader.get_state_output_variables(*names)
    except StateAccessError:
        raise
    except Exception as exc:
        raise StateAccessError(f"Could not read terraform outputs: {exc}") from exc

    missing = [name for name in names if name not in variables]
    if missing:
        raise StateAccessError(
            f"Terraform state is missing outputs: {', '.join(missing)}",
            missing_keys=missing,
        )
    try:
        return TerraformOutputs.from_output_variables(variables)
    except ValidationError as exc:
        raise StateAccessError(f"Invalid terraform outputs: {exc}") from exc


def status_from_terraform_state(state: TerraformOutputs) -> InfrastructureStatus:
    """Compute an InfrastructureStatus from the given Terraform outputs.

    The floating pool name is left empty; Terraform does not report it.
    """
    return InfrastructureStatus(
        type_meta=TypeMeta(api_version=API_VERSION, kind=STATUS_KIND),
        networks=NetworkStatus(
            id=state.network_id,
            floating_pool=FloatingPoolStatus(id=state.floating_network_id),
            router=RouterStatus(id=state.router_id),
            subnets=[Subnet(purpose=PURPOSE_NODES, id=state.subnet_id)],
        ),
        security_groups=[
            SecurityGroup(
                purpose=PURPOSE_NODES,
                id=state.security_group_id,
                name=state.security_group_name,
            )
        ],
        node=NodeStatus(key_name=state.ssh_key_name),
    )


def compute_status(
    reader: StateOutputReader, config: InfrastructureConfig
) -> InfrastructureStatus:
    """Compute the status based on Terraform's outputs and the InfrastructureConfig.

    Raises:
        StateAccessError: If the outputs cannot be fetched.
    """
    state = extract_terraform_state(reader)
    status = status_from_terraform_state(state)
    status.networks.floating_pool.name = config.floating_pool_name
    return status


__all__ = [
    "StateOutputReader",
    "extract_terraform_state",
    "status_from_terraform_state",
    "compute_status",
]
