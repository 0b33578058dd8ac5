"""
osinfra/utils/terraform/outputs.py

Access to the outputs of a parsed TerraformState:
    - get_output_from_state: one typed output.
    - TerraformStateOutputs: a StateOutputReader for the infrastructure core.
"""

from __future__ import annotations

from typing import Dict, Type, TypeVar

from osinfra.errors import StateAccessError
from osinfra.models.terraform import TerraformState
from osinfra.models.validator import validate_type

T = TypeVar("T")


def get_output_from_state(
    state: TerraformState, output_name: str, output_type: Type[T]
) -> T:
    """Retrieve a typed output from a TerraformState object.

    Args:
        state (TerraformState):
            The parsed Terraform state.
        output_name (str):
            Which output to retrieve by name.
        output_type (Type[T]):
            The Python type to validate/cast the output to.

    Returns:
        The typed output if present.

    Raises:
        KeyError: If the output is missing.
        ValueError: If validation to output_type fails.
    """
    output_val = state.values.outputs.get(output_name)
    if output_val is None:
        raise KeyError(f"Output '{output_name}' not found in Terraform state.")
    return validate_type(output_val.value, output_type)


class TerraformStateOutputs:
    """Reads string outputs from a parsed TerraformState.

    All requested outputs must be present and hold strings; anything else is a
    StateAccessError.
    """

    def __init__(self, state: TerraformState) -> None:
        self.state = state

    def get_state_output_variables(self, *names: str) -> Dict[str, str]:
        """Return the values of the named outputs.

        Raises:
            StateAccessError: If an output is missing or not a string.
        """
        outputs = self.state.values.outputs
        missing = [name for name in names if name not in outputs]
        if missing:
            raise StateAccessError(
                f"Could not find all requested outputs: {', '.join(missing)}",
                missing_keys=missing,
            )

        try:
            return {name: get_output_from_state(self.state, name, str) for name in names}
        except ValueError as exc:
            raise StateAccessError(f"Terraform output is not a string: {exc}") from exc
