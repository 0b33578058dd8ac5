"""
osinfra/infrastructure/keystone.py

Resolves the keystone (identity) endpoint for a region.
"""

from __future__ import annotations

import logging
from typing import Sequence

from osinfra.errors import ConfigResolutionError
from osinfra.models.openstack import KeyStoneURL

logger = logging.getLogger(__name__)


def find_keystone_url(
    keystone_urls: Sequence[KeyStoneURL], keystone_url: str, region: str
) -> str:
    """Find the keystone URL for the given region.

    The first entry of 'keystone_urls' matching the region wins; otherwise the
    fallback 'keystone_url' is used if it is non-empty.

    Args:
        keystone_urls: Region-specific endpoints from the cloud profile.
        keystone_url: Fallback endpoint, may be empty.
        region: The region to resolve.

    Returns:
        str: The keystone URL.

    Raises:
        ConfigResolutionError: If no entry matches and there is no fallback.
    """
    for entry in keystone_urls:
        if entry.region == region:
            logger.debug("Using keystone URL %s for region %s", entry.url, region)
            return entry.url

    if keystone_url:
        logger.debug("Using fallback keystone URL %s for region %s", keystone_url, region)
        return keystone_url

    raise ConfigResolutionError(
        f"Cannot find keystone URL for region {region!r}", region=region
    )


__all__ = ["find_keystone_url"]
