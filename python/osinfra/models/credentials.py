"""
filename: osinfra/models/credentials.py

Provides the Credentials pydantic model for the OpenStack account secret.
"""

from __future__ import annotations

from typing import Mapping, Union
from pydantic import BaseModel, ConfigDict, Field, SecretStr

from osinfra.models.validator import validate_type


class Credentials(BaseModel):
    """Pydantic model for OpenStack credentials.

    Only the domain and tenant names end up in the chart values; username and
    password are carried along for the Terraform runtime and never interpreted here.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    domain_name: str = Field(alias="domainName")
    tenant_name: str = Field(alias="tenantName")
    username: str = ""
    password: SecretStr = SecretStr("")

    @classmethod
    def from_secret_data(
        cls, data: Mapping[str, Union[str, bytes]]
    ) -> Credentials:
        """Build Credentials from the data of a Kubernetes secret.

        Args:
            data: Mapping of secret keys ('domainName', 'tenantName', 'username',
                'password') to values. Bytes values are decoded as UTF-8.

        Returns:
            Credentials: The parsed credentials.

        Raises:
            ConfigDecodeError: If required keys are missing.
        """
        decoded = {
            key: value.decode("utf-8") if isinstance(value, bytes) else value
            for key, value in data.items()
        }
        return validate_type(decoded, cls)


__all__ = ["Credentials"]
