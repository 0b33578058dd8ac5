"""
osinfra/infrastructure/chart.py

Renders the 'openstack-infra' chart into the Terraform files of an Infrastructure.

The chart renderer itself is external: anything implementing ChartRenderer (for
example a wrapper around 'helm template') can be passed in. Only its contract is
relied on here: a rendered release exposes the content of 'main.tf', 'variables.tf'
and 'terraform.tfvars'.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Protocol

from osinfra.errors import RenderError
from osinfra.infrastructure.values import compute_terraformer_chart_values
from osinfra.models.cluster import Cluster, ClusterContext
from osinfra.models.credentials import Credentials
from osinfra.models.openstack import InfrastructureConfig
from osinfra.models.terraform import TerraformFiles

CHARTS_PATH = os.path.join("controllers", "provider-openstack", "charts")
INTERNAL_CHARTS_PATH = os.path.join(CHARTS_PATH, "internal")
INFRA_CHART_NAME = "openstack-infra"

MAIN_FILE = "main.tf"
VARIABLES_FILE = "variables.tf"
TFVARS_FILE = "terraform.tfvars"

logger = logging.getLogger(__name__)


class RenderedChart(Protocol):
    def file_content(self, name: str) -> str:
        """Return the rendered content of the named template file.

        Raises:
            KeyError: If the chart has no such file.
        """
        ...


class ChartRenderer(Protocol):
    def render(
        self,
        chart_path: str,
        release_name: str,
        namespace: str,
        values: Dict[str, Any],
    ) -> RenderedChart:
        """Render the chart at 'chart_path' with the given values."""
        ...


def render_terraformer_chart(
    renderer: ChartRenderer,
    context: ClusterContext,
    credentials: Credentials,
    config: InfrastructureConfig,
    cluster: Cluster,
    charts_path: str = INTERNAL_CHARTS_PATH,
) -> TerraformFiles:
    """Render the openstack-infra chart with the computed values.

    Args:
        renderer: The chart renderer.
        context: Namespace, region and SSH key of the Infrastructure.
        credentials: OpenStack account.
        config: The decoded InfrastructureConfig.
        cluster: The cluster, carrying the raw cloud profile config.
        charts_path: Directory containing the 'openstack-infra' chart.

    Returns:
        TerraformFiles: main.tf, variables.tf and terraform.tfvars.

    Raises:
        ConfigDecodeError: Propagated from the value computation.
        ConfigResolutionError: Propagated from the value computation.
        RenderError: If rendering fails or a file is missing from the release.
    """
    values = compute_terraformer_chart_values(context, credentials, config, cluster)
    chart_path = os.path.join(charts_path, INFRA_CHART_NAME)

    logger.debug("Rendering chart %s for namespace %s", chart_path, context.namespace)
    try:
        release = renderer.render(
            chart_path, INFRA_CHART_NAME, context.namespace, values.to_values()
        )
    except Exception as exc:
        raise RenderError(f"Failed to render chart {chart_path}: {exc}") from exc

    try:
        return TerraformFiles(
            main=release.file_content(MAIN_FILE),
            variables=release.file_content(VARIABLES_FILE),
            tfvars=release.file_content(TFVARS_FILE).encode("utf-8"),
        )
    except KeyError as exc:
        raise RenderError(
            f"Chart {chart_path} did not render file {exc.args[0]!r}"
        ) from exc


__all__ = [
    "CHARTS_PATH",
    "INTERNAL_CHARTS_PATH",
    "INFRA_CHART_NAME",
    "RenderedChart",
    "ChartRenderer",
    "render_terraformer_chart",
]
