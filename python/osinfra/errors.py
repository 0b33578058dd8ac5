"""
osinfra/errors.py

Exception types raised while turning infrastructure configuration into
Terraform chart values and Terraform outputs back into a status record.

Every function in the infrastructure core raises on the first problem it
meets and never returns a partially built result, so callers only need to
catch InfrastructureError (or one of its subclasses) to surface a failed
reconciliation.
"""

from __future__ import annotations

from typing import Optional, Sequence


class InfrastructureError(Exception):
    """Base class for all errors raised by osinfra."""


class ConfigDecodeError(InfrastructureError, ValueError):
    """A serialized provider config could not be parsed or validated."""


class ConfigResolutionError(InfrastructureError):
    """A required value (e.g. the keystone URL) could not be resolved.

    Attributes:
        region (Optional[str]): The region the resolution was attempted for.
    """

    def __init__(self, message: str, region: Optional[str] = None) -> None:
        super().__init__(message)
        self.region = region


class RenderError(InfrastructureError):
    """The Terraform chart could not be rendered into its three files."""


class StateAccessError(InfrastructureError):
    """Terraform outputs could not be fetched.

    Attributes:
        missing_keys (List[str]): Output names that were requested but absent.
    """

    def __init__(self, message: str, missing_keys: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.missing_keys = list(missing_keys)


__all__ = [
    "InfrastructureError",
    "ConfigDecodeError",
    "ConfigResolutionError",
    "RenderError",
    "StateAccessError",
]
