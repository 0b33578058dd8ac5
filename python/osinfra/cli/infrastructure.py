#!/usr/bin/env python3
"""
osinfra/cli/infrastructure.py

CLI offering two subcommands around the OpenStack infrastructure chart:

  1) "values": Compute the 'openstack-infra' chart values and print them as JSON or
     YAML, ready to be passed to a chart renderer.
  2) "status": Compute the InfrastructureStatus from Terraform's outputs, read from a
     saved 'terraform show -json' document or from a Terraform working directory.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from osinfra.errors import ConfigDecodeError, InfrastructureError
from osinfra.infrastructure import compute_status, compute_terraformer_chart_values
from osinfra.models.cluster import Cluster, ClusterContext
from osinfra.models.credentials import Credentials
from osinfra.models.decode import decode_infrastructure_config
from osinfra.models.settings import LOG_LEVELS, InfraSettings
from osinfra.models.terraform import TerraformState
from osinfra.utils.terraform import (
    TerraformStateOutputs,
    parse_terraform_state,
    read_terraform_state,
)


def _read_file(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise InfrastructureError(f"Cannot read {path}: {exc}") from exc


def _read_text(path: str) -> str:
    try:
        return _read_file(path).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigDecodeError(f"{path} is not valid UTF-8: {exc}") from exc


def _load_credentials(path: str) -> Credentials:
    try:
        data = yaml.safe_load(_read_file(path))
    except yaml.YAMLError as exc:
        raise ConfigDecodeError(f"Could not parse credentials {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InfrastructureError(f"Credentials file {path} must contain a mapping.")
    return Credentials.from_secret_data(data)


def _run_values(args: argparse.Namespace) -> None:
    """Handle the 'values' subcommand to print the chart values."""
    ssh_public_key = (
        _read_text(args.ssh_public_key_file) if args.ssh_public_key_file else ""
    )
    try:
        context = ClusterContext(
            namespace=args.namespace,
            region=args.region,
            ssh_public_key=ssh_public_key,
        )
    except ValidationError as exc:
        raise ConfigDecodeError(f"Invalid cluster context: {exc}") from exc
    cluster = Cluster(
        name=args.namespace,
        cloud_profile_config=_read_file(args.cloud_profile_config),
    )
    config = decode_infrastructure_config(_read_file(args.infrastructure_config))
    credentials = _load_credentials(args.credentials)

    values = compute_terraformer_chart_values(context, credentials, config, cluster)
    if args.output == "yaml":
        print(yaml.safe_dump(values.to_values(), sort_keys=False), end="")
    else:
        print(json.dumps(values.to_values(), indent=2))


def _run_status(args: argparse.Namespace) -> None:
    """Handle the 'status' subcommand to print the InfrastructureStatus."""
    config = decode_infrastructure_config(_read_file(args.infrastructure_config))

    state: TerraformState
    if args.state_file:
        state = parse_terraform_state(_read_file(args.state_file))
    else:
        state = asyncio.run(
            read_terraform_state(args.terraform_dir, retries=args.retries)
        )

    status = compute_status(TerraformStateOutputs(state), config)
    print(status.to_json())


def build_parser(settings: InfraSettings) -> argparse.ArgumentParser:
    """Build the argument parser, taking defaults from the settings."""
    parser = argparse.ArgumentParser(
        prog="osinfra-infra",
        description="Compute OpenStack Terraform chart values and infrastructure status.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level}).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # "values" subcommand
    values_parser = subparsers.add_parser(
        "values", help="Print the values of the openstack-infra chart."
    )
    values_parser.add_argument(
        "--infrastructure-config",
        required=True,
        help="YAML/JSON file holding the InfrastructureConfig.",
    )
    values_parser.add_argument(
        "--cloud-profile-config",
        required=True,
        help="YAML/JSON file holding the CloudProfileConfig.",
    )
    values_parser.add_argument(
        "--credentials",
        required=True,
        help="YAML file with domainName, tenantName, username and password.",
    )
    values_parser.add_argument(
        "--namespace", required=True, help="Namespace (and name) of the cluster."
    )
    values_parser.add_argument("--region", required=True, help="OpenStack region.")
    values_parser.add_argument(
        "--ssh-public-key-file",
        default=None,
        help="File holding the SSH public key for worker nodes.",
    )
    values_parser.add_argument(
        "--output",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json).",
    )
    values_parser.set_defaults(func=_run_values)

    # "status" subcommand
    status_parser = subparsers.add_parser(
        "status", help="Print the InfrastructureStatus computed from Terraform outputs."
    )
    status_parser.add_argument(
        "--infrastructure-config",
        required=True,
        help="YAML/JSON file holding the InfrastructureConfig.",
    )
    g_state = status_parser.add_mutually_exclusive_group()
    g_state.add_argument(
        "--state-file",
        default=None,
        help="File holding the output of 'terraform show -json'.",
    )
    g_state.add_argument(
        "--terraform-dir",
        default=settings.terraform_dir,
        help=f"Initialized Terraform working directory (default: {settings.terraform_dir}).",
    )
    status_parser.add_argument(
        "--retries",
        type=int,
        default=settings.command_retries,
        help="Number of retries for reading the Terraform state.",
    )
    status_parser.set_defaults(func=_run_status)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for computing chart values and infrastructure status."""
    try:
        settings = InfraSettings()
    except ValidationError as exc:
        print(f"ERROR: Invalid OSINFRA_* settings: {exc}", file=sys.stderr)
        sys.exit(1)
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except InfrastructureError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
