"""
osinfra/utils/terraform/__init__.py

Provides a convenient import interface for the Terraform submodules:

- commands.py for running 'terraform show -json'
- outputs.py for reading outputs from the parsed state

Exports:
  - read_terraform_state, parse_terraform_state
  - get_output_from_state for typed retrieval of Terraform outputs
  - TerraformStateOutputs, the output reader used by compute_status
"""

from osinfra.utils.terraform.commands import (
    parse_terraform_state,
    read_terraform_state,
)
from osinfra.utils.terraform.outputs import (
    TerraformStateOutputs,
    get_output_from_state,
)

__all__ = [
    "parse_terraform_state",
    "read_terraform_state",
    "TerraformStateOutputs",
    "get_output_from_state",
]
