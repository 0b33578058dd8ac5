"""
osinfra/models/decode.py

Decodes raw provider configs into their typed models. A raw config is YAML or JSON
text (str or bytes) or an already parsed mapping; YAML is a superset of JSON, so both
are read with yaml.safe_load.

Every failure (unparsable text, a non-mapping document, a field of the wrong type)
raises ConfigDecodeError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Type, TypeVar

import yaml
from pydantic import BaseModel

from osinfra.errors import ConfigDecodeError
from osinfra.models.cluster import Cluster, RawConfig
from osinfra.models.openstack import (
    CloudProfileConfig,
    ControlPlaneConfig,
    InfrastructureConfig,
)
from osinfra.models.validator import validate_type

M = TypeVar("M", bound=BaseModel)

logger = logging.getLogger(__name__)


def _load_raw(raw: RawConfig, what: str) -> Dict[str, Any]:
    """Parse a raw config into a mapping."""
    if isinstance(raw, dict):
        return raw

    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        data = yaml.safe_load(text)
    except (UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigDecodeError(f"Could not parse {what}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigDecodeError(
            f"Could not decode {what}: expected a mapping, got {type(data).__name__}"
        )
    return data


def _decode(raw: RawConfig, model: Type[M]) -> M:
    return validate_type(_load_raw(raw, model.__name__), model)


def decode_infrastructure_config(raw: RawConfig) -> InfrastructureConfig:
    """Decode the provider config of an Infrastructure.

    Raises:
        ConfigDecodeError: If the config cannot be parsed or validated.
    """
    return _decode(raw, InfrastructureConfig)


def decode_cloud_profile_config(raw: RawConfig) -> CloudProfileConfig:
    """Decode the provider config of a cloud profile.

    Raises:
        ConfigDecodeError: If the config cannot be parsed or validated.
    """
    return _decode(raw, CloudProfileConfig)


def decode_control_plane_config(raw: RawConfig) -> ControlPlaneConfig:
    """Decode the provider config of a control plane.

    Raises:
        ConfigDecodeError: If the config cannot be parsed or validated.
    """
    return _decode(raw, ControlPlaneConfig)


def cloud_profile_config_from_cluster(cluster: Cluster) -> CloudProfileConfig:
    """Return the decoded cloud profile config of a cluster.

    A cluster whose cloud profile carries no provider config yields an empty
    CloudProfileConfig.

    Raises:
        ConfigDecodeError: If the cloud profile config is present but malformed.
    """
    if cluster.cloud_profile_config is None:
        logger.debug("Cluster %r has no cloud profile config", cluster.name)
        return CloudProfileConfig()
    return decode_cloud_profile_config(cluster.cloud_profile_config)


__all__ = [
    "decode_infrastructure_config",
    "decode_cloud_profile_config",
    "decode_control_plane_config",
    "cloud_profile_config_from_cluster",
]
