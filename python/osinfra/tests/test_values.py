"""Tests for osinfra.infrastructure.keystone and osinfra.infrastructure.values."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

import osinfra.models.chart_values as chart_values_module
from osinfra.errors import ConfigDecodeError, ConfigResolutionError
from osinfra.infrastructure import (
    compute_terraformer_chart_values,
    find_keystone_url,
    resolve_router,
    resolve_workers_cidr,
)
from osinfra.models.chart_values import (
    OutputKeys,
    TerraformerChartValues,
    output_key_alias,
)
from osinfra.models.cluster import Cluster, ClusterContext
from osinfra.models.openstack import InfrastructureConfig, KeyStoneURL, Networks
from osinfra.models.terraform import (
    DEFAULT_ROUTER_ID,
    TERRAFORM_OUTPUT_KEYS,
    OutputKey,
    TerraformOutputs,
)

EU = [KeyStoneURL(region="eu", url="https://eu.example")]


class TestFindKeystoneURL:
    def test_region_in_table(self):
        assert find_keystone_url(EU, "", "eu") == "https://eu.example"

    def test_table_wins_over_fallback(self):
        assert find_keystone_url(EU, "https://fallback.example", "eu") == "https://eu.example"

    def test_first_matching_entry_wins(self):
        urls = EU + [KeyStoneURL(region="eu", url="https://other.example")]
        assert find_keystone_url(urls, "", "eu") == "https://eu.example"

    def test_fallback_for_unknown_region(self):
        assert find_keystone_url(EU, "https://fallback.example", "us") == "https://fallback.example"

    def test_no_match_and_no_fallback_raises(self):
        with pytest.raises(ConfigResolutionError, match="us") as excinfo:
            find_keystone_url(EU, "", "us")
        assert excinfo.value.region == "us"

    def test_empty_table_and_fallback_raises(self):
        with pytest.raises(ConfigResolutionError):
            find_keystone_url([], "", "eu")


class TestResolveWorkersCIDR:
    def test_primary_field_wins(self):
        networks = Networks(workers="10.1.0.0/16", worker="10.0.0.0/24")
        assert resolve_workers_cidr(networks) == "10.1.0.0/16"

    def test_deprecated_field_fallback(self):
        assert resolve_workers_cidr(Networks(worker="10.0.0.0/24")) == "10.0.0.0/24"

    def test_both_empty_stays_empty(self):
        assert resolve_workers_cidr(Networks()) == ""


class TestResolveRouter:
    def test_without_router_creates_one(self):
        assert resolve_router(InfrastructureConfig()) == (True, DEFAULT_ROUTER_ID)

    def test_with_router_uses_it(self):
        config = InfrastructureConfig.model_validate({"networks": {"router": {"id": "r-1"}}})
        assert resolve_router(config) == (False, "r-1")

    def test_placeholder_is_terraform_expression(self):
        assert DEFAULT_ROUTER_ID == "${openstack_networking_router_v2.router.id}"


class TestComputeTerraformerChartValues:
    def test_full_values(self, context, credentials, infrastructure_config, cluster):
        values = compute_terraformer_chart_values(
            context, credentials, infrastructure_config, cluster
        )
        assert values.to_values() == {
            "openstack": {
                "authURL": "https://eu.example",
                "domainName": "domain",
                "tenantName": "tenant",
                "region": "eu",
                "floatingPoolName": "ext-net",
            },
            "create": {"router": True},
            "dnsServers": ["8.8.8.8", "8.8.4.4"],
            "sshPublicKey": "ssh-rsa AAAA",
            "router": {"id": DEFAULT_ROUTER_ID},
            "clusterName": "shoot-1",
            "networks": {"workers": "10.250.0.0/19"},
            "outputKeys": {
                "keyName": "key_name",
                "routerID": "router_id",
                "networkID": "network_id",
                "subnetID": "subnet_id",
                "floatingNetworkID": "floating_network_id",
                "securityGroupID": "security_group_id",
                "securityGroupName": "security_group_name",
            },
        }

    def test_existing_router(self, context, credentials, cluster):
        config = InfrastructureConfig.model_validate(
            {"floatingPoolName": "ext-net", "networks": {"router": {"id": "r-1"}}}
        )
        values = compute_terraformer_chart_values(context, credentials, config, cluster)
        assert values.create.router is False
        assert values.router.id == "r-1"

    def test_primary_workers_ignores_deprecated(self, context, credentials, cluster):
        config = InfrastructureConfig.model_validate(
            {"networks": {"workers": "10.1.0.0/16", "worker": "10.0.0.0/24"}}
        )
        values = compute_terraformer_chart_values(context, credentials, config, cluster)
        assert values.to_values()["networks"]["workers"] == "10.1.0.0/16"

    def test_deprecated_workers(self, context, credentials, cluster):
        config = InfrastructureConfig.model_validate(
            {"networks": {"workers": "", "worker": "10.0.0.0/24"}}
        )
        values = compute_terraformer_chart_values(context, credentials, config, cluster)
        assert values.to_values()["networks"]["workers"] == "10.0.0.0/24"

    def test_idempotent(self, context, credentials, infrastructure_config, cluster):
        first = compute_terraformer_chart_values(
            context, credentials, infrastructure_config, cluster
        )
        second = compute_terraformer_chart_values(
            context, credentials, infrastructure_config, cluster
        )
        assert first == second
        assert first.to_values() == second.to_values()
        assert first.model_dump_json() == second.model_dump_json()

    def test_fallback_keystone_url(self, credentials, infrastructure_config):
        cluster = Cluster(
            cloud_profile_config={
                "keyStoneURLs": [{"region": "eu", "url": "https://eu.example"}],
                "keyStoneURL": "https://fallback.example",
            }
        )
        context = ClusterContext(namespace="shoot-1", region="us")
        values = compute_terraformer_chart_values(
            context, credentials, infrastructure_config, cluster
        )
        assert values.openstack.auth_url == "https://fallback.example"
        assert values.dns_servers == []

    def test_unresolvable_keystone_url(self, context, credentials, infrastructure_config):
        with pytest.raises(ConfigResolutionError):
            compute_terraformer_chart_values(
                context, credentials, infrastructure_config, Cluster()
            )

    def test_malformed_cloud_profile(self, context, credentials, infrastructure_config):
        cluster = Cluster(cloud_profile_config="keyStoneURLs: [")
        with pytest.raises(ConfigDecodeError):
            compute_terraformer_chart_values(
                context, credentials, infrastructure_config, cluster
            )

    def test_password_not_in_values(self, context, credentials, infrastructure_config, cluster):
        values = compute_terraformer_chart_values(
            context, credentials, infrastructure_config, cluster
        )
        assert "secret" not in values.model_dump_json()


class TestChartValuesSchema:
    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            OutputKeys.model_validate(
                {**OutputKeys.from_table().model_dump(by_alias=True), "zone": "zone"}
            )

    def test_missing_key_rejected(self):
        values = {key.alias: key.name for key in TERRAFORM_OUTPUT_KEYS[1:]}
        with pytest.raises(ValidationError):
            OutputKeys.model_validate(values)

    def test_values_are_frozen(self, context, credentials, infrastructure_config, cluster):
        values = compute_terraformer_chart_values(
            context, credentials, infrastructure_config, cluster
        )
        with pytest.raises(ValidationError):
            values.cluster_name = "other"

    def test_round_trip_from_chart_dict(self, context, credentials, infrastructure_config, cluster):
        values = compute_terraformer_chart_values(
            context, credentials, infrastructure_config, cluster
        )
        assert TerraformerChartValues.model_validate(values.to_values()) == values


class TestOutputKeyTable:
    def test_wire_names(self):
        assert [key.name for key in TERRAFORM_OUTPUT_KEYS] == [
            "key_name",
            "router_id",
            "network_id",
            "subnet_id",
            "floating_network_id",
            "security_group_id",
            "security_group_name",
        ]

    def test_output_keys_model_matches_table(self):
        fields = OutputKeys.model_fields
        assert {name: field.alias for name, field in fields.items()} == {
            key.field: key.alias for key in TERRAFORM_OUTPUT_KEYS
        }

    def test_output_key_alias(self):
        assert output_key_alias("router_id") == "routerID"
        assert output_key_alias("ssh_key_name") == "keyName"
        with pytest.raises(KeyError, match="zone"):
            output_key_alias("zone")

    def test_output_keys_block_follows_table(self):
        block = OutputKeys.from_table().model_dump(by_alias=True)
        assert list(block.items()) == [
            (key.alias, key.name) for key in TERRAFORM_OUTPUT_KEYS
        ]

    def test_terraform_outputs_model_matches_table(self):
        assert set(TerraformOutputs.model_fields) == {
            key.field for key in TERRAFORM_OUTPUT_KEYS
        }

    def test_table_entry_without_field_fails(self, monkeypatch):
        table = TERRAFORM_OUTPUT_KEYS + (OutputKey("zone", "zone", "zone"),)
        monkeypatch.setattr(chart_values_module, "TERRAFORM_OUTPUT_KEYS", table)
        with pytest.raises(ValidationError):
            OutputKeys.from_table()
