"""
osinfra/utils/terraform/commands.py

Reads the state of a Terraform working directory with 'terraform show -json'. The
infrastructure core only consumes outputs; init/apply/destroy belong to the
provisioning runtime and are not run from here.

Exports:
    - read_terraform_state
    - parse_terraform_state
"""

from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from osinfra.errors import StateAccessError
from osinfra.models.terraform import TerraformState
from osinfra.utils.async_command_runner import CommandError, run_command

logger = logging.getLogger(__name__)


def _uninitialized_parser(stderr: str) -> Optional[str]:
    """Parse stderr for an uninitialized working directory, returning a short message.

    Args:
        stderr (str): The standard error output from Terraform.

    Returns:
        Optional[str]: A short user-friendly message, or None for other errors.
    """
    low = stderr.lower()
    if "terraform init" in low and (
        "initialization required" in low or "not initialized" in low
    ):
        return (
            "Terraform working directory is not initialized. "
            "Run 'terraform init' before reading its state."
        )
    return None


def _make_show_command() -> List[str]:
    return ["terraform", "show", "-no-color", "-json"]


def parse_terraform_state(output: Union[str, bytes]) -> TerraformState:
    """Parse the JSON printed by 'terraform show -json'.

    Raises:
        StateAccessError: If the output is empty or not a Terraform state document.
    """
    if not output.strip():
        raise StateAccessError("Failed to retrieve terraform state (empty output).")
    try:
        return TerraformState.model_validate_json(output)
    except ValidationError as exc:
        raise StateAccessError(f"Could not parse terraform state: {exc}") from exc


async def read_terraform_state(
    terraform_dir: str,
    env: Optional[Dict[str, str]] = None,
    sensitive: bool = True,
    retries: int = 0,
) -> TerraformState:
    """Run 'terraform show -json' in a working directory, returning a parsed TerraformState.

    Args:
        terraform_dir (str):
            The initialized Terraform working directory.
        env (Dict[str,str], optional):
            Additional environment variables for Terraform.
        sensitive (bool):
            If True => do not show full command or stdout/stderr in error messages.
        retries (int):
            Retry count for the command.

    Returns:
        TerraformState: Parsed JSON state object.

    Raises:
        StateAccessError: If the directory is missing, Terraform fails, or the
            output cannot be parsed.
    """
    if not os.path.isdir(terraform_dir):
        raise StateAccessError(f"Terraform directory not found: {terraform_dir}")

    logger.debug("Reading terraform state in %s", terraform_dir)
    try:
        output = await run_command(
            _make_show_command(),
            sensitive=sensitive,
            env=env,
            cwd=terraform_dir,
            retries=retries,
            error_parser=_uninitialized_parser,
        )
    except CommandError as exc:
        raise StateAccessError(f"Failed to read terraform state: {exc}") from exc

    return parse_terraform_state(output)
