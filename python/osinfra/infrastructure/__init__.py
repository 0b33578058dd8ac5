"""
osinfra/infrastructure/__init__.py

Provides a convenient import interface for the infrastructure submodules:

- keystone.py for resolving the keystone URL of a region
- values.py for computing the Terraform chart values
- chart.py for rendering the chart into Terraform files
- state.py for turning Terraform outputs into an InfrastructureStatus
"""

from osinfra.infrastructure.keystone import find_keystone_url
from osinfra.infrastructure.values import (
    compute_terraformer_chart_values,
    resolve_router,
    resolve_workers_cidr,
)
from osinfra.infrastructure.chart import (
    INFRA_CHART_NAME,
    INTERNAL_CHARTS_PATH,
    ChartRenderer,
    RenderedChart,
    render_terraformer_chart,
)
from osinfra.infrastructure.state import (
    StateOutputReader,
    compute_status,
    extract_terraform_state,
    status_from_terraform_state,
)

__all__ = [
    "find_keystone_url",
    "compute_terraformer_chart_values",
    "resolve_router",
    "resolve_workers_cidr",
    "INFRA_CHART_NAME",
    "INTERNAL_CHARTS_PATH",
    "ChartRenderer",
    "RenderedChart",
    "render_terraformer_chart",
    "StateOutputReader",
    "compute_status",
    "extract_terraform_state",
    "status_from_terraform_state",
]
