"""
osinfra/utils/async_command_runner.py

Provides an asynchronous command runner with retry logic, used to run Terraform.
Optionally, a custom error_parser callback can inspect stderr for known errors and
return a short user-friendly message.

Usage example:
    from osinfra.utils.async_command_runner import run_command, CommandError

    try:
        output = await run_command(["terraform", "show", "-json"], cwd="/tf", retries=2)
    except CommandError as err:
        print(f"Command failed: {err}")
"""

from __future__ import annotations

import asyncio
import os
from typing import Callable, Dict, List, Optional, Sequence

from osinfra.utils.async_retry import async_retry


class CommandError(Exception):
    """Represents a failure when executing a command.

    Attributes:
        message (str): The error message describing the command failure.
        return_code (Optional[int]): The exit code if available.
    """

    def __init__(self, message: str, return_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.return_code = return_code


async def run_command(
    command: List[str],
    *,
    sensitive: bool = True,
    env: Optional[Dict[str, str]] = None,
    cwd: Optional[str] = None,
    successful_return_codes: Sequence[int] = (0,),
    retries: int = 0,
    retry_delay: float = 1.0,
    error_parser: Optional[Callable[[str], Optional[str]]] = None,
) -> str:
    """
    Executes a local command in a subprocess, asynchronously, with optional retries
    and an optional error parser callback.

    When `sensitive=True`, the command, stdout, and stderr are omitted from the
    raised error message.

    Args:
        command (List[str]):
            The command and arguments to execute.
        sensitive (bool):
            If True, hides command details in the raised error.
        env (Optional[Dict[str, str]]):
            Additional environment variables to add or override.
        cwd (Optional[str]):
            Working directory for the command.
        successful_return_codes (Sequence[int]):
            Which return codes won't be treated as errors. Defaults to (0,).
        retries (int):
            How many times to retry on failure. Defaults to 0.
        retry_delay (float):
            Delay in seconds between retries. Defaults to 1.0.
        error_parser (Optional[Callable[[str], Optional[str]]]):
            Receives stderr. If it returns a non-None value, that value becomes the
            CommandError message.

    Returns:
        str: The captured stdout of the command on success.

    Raises:
        CommandError: If the command cannot be started, or fails after all retries.
    """

    @async_retry(retries=retries, delay=retry_delay, retry_on=(CommandError,))
    async def _inner_run_command() -> str:
        proc_env = None
        if env:
            proc_env = os.environ.copy()
            proc_env.update(env)

        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=proc_env,
                cwd=cwd,
            )
        except OSError as exc:
            raise CommandError(f"Could not start {command[0]!r}: {exc}") from exc

        stdout_bytes, stderr_bytes = await proc.communicate()
        stdout_str = stdout_bytes.decode(errors="replace").strip()
        stderr_str = stderr_bytes.decode(errors="replace").strip()

        if proc.returncode not in successful_return_codes:
            short_message = error_parser(stderr_str) if error_parser else None
            if short_message is not None:
                raise CommandError(short_message, proc.returncode)

            detail = ""
            if not sensitive:
                detail = (
                    f"\nCommand: {' '.join(command)}"
                    f"\nStdout: {stdout_str}"
                    f"\nStderr: {stderr_str}"
                )

            raise CommandError(
                f"Command failed with return code {proc.returncode}.{detail}",
                proc.returncode,
            )

        return stdout_str

    return await _inner_run_command()
