"""Tests for dns_provisioner.config."""

import pytest

from dns_provisioner.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "AZURE_SUBSCRIPTION_ID",
        "KEEP_RESOURCE",
        "AZURE_LOCATION",
        "RESOURCE_GROUP_NAME",
        "PRIVATE_ZONE_NAME",
        "RELATIVE_RECORD_SET_NAME",
        "RECORD_SET_ADDRESSES",
        "LRO_POLLING_INTERVAL",
        "LRO_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_load_config_defaults(monkeypatch):
    from dns_provisioner.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-1")

    cfg = load_config()
    assert cfg.subscription_id == "sub-1"
    assert cfg.location == "westus"
    assert cfg.resource_group_name == "sample-resource-group"
    assert cfg.private_zone_name == "sample-private-zone"
    assert cfg.relative_record_set_name == "sample-relative-record-set"
    assert cfg.record_set_addresses == ()
    assert cfg.keep_resources is False
    assert cfg.polling_interval == 10
    assert cfg.operation_timeout is None


def test_load_config_custom_optionals(monkeypatch):
    from dns_provisioner.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-2")
    monkeypatch.setenv("AZURE_LOCATION", "northeurope")
    monkeypatch.setenv("RESOURCE_GROUP_NAME", "rg-dns")
    monkeypatch.setenv("PRIVATE_ZONE_NAME", "internal.example.com")
    monkeypatch.setenv("RELATIVE_RECORD_SET_NAME", "db")
    monkeypatch.setenv("RECORD_SET_ADDRESSES", "10.0.0.4, 10.0.0.5,")
    monkeypatch.setenv("LRO_POLLING_INTERVAL", "2")
    monkeypatch.setenv("LRO_TIMEOUT", "600")

    cfg = load_config()
    assert cfg.location == "northeurope"
    assert cfg.resource_group_name == "rg-dns"
    assert cfg.private_zone_name == "internal.example.com"
    assert cfg.relative_record_set_name == "db"
    assert cfg.record_set_addresses == ("10.0.0.4", "10.0.0.5")
    assert cfg.polling_interval == 2
    assert cfg.operation_timeout == 600


def test_load_config_missing_subscription_id():
    from dns_provisioner.config import load_config

    with pytest.raises(ConfigurationError, match="AZURE_SUBSCRIPTION_ID"):
        load_config()


def test_load_config_empty_subscription_id(monkeypatch):
    from dns_provisioner.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "")

    with pytest.raises(ConfigurationError, match="AZURE_SUBSCRIPTION_ID"):
        load_config()


def test_configuration_error_is_value_error():
    from dns_provisioner.config import load_config

    with pytest.raises(ValueError):
        load_config()


@pytest.mark.parametrize("value, expected", [("1", True), ("yes", True), ("", False)])
def test_keep_resource_flag(monkeypatch, value, expected):
    from dns_provisioner.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-1")
    monkeypatch.setenv("KEEP_RESOURCE", value)

    assert load_config().keep_resources is expected


def test_load_config_invalid_polling_interval(monkeypatch):
    from dns_provisioner.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-1")
    monkeypatch.setenv("LRO_POLLING_INTERVAL", "fast")

    with pytest.raises(ConfigurationError, match="LRO_POLLING_INTERVAL must be an integer"):
        load_config()


def test_load_config_non_positive_timeout(monkeypatch):
    from dns_provisioner.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-1")
    monkeypatch.setenv("LRO_TIMEOUT", "0")

    with pytest.raises(ConfigurationError, match="LRO_TIMEOUT must be a positive integer"):
        load_config()


def test_load_config_invalid_address(monkeypatch):
    from dns_provisioner.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-1")
    monkeypatch.setenv("RECORD_SET_ADDRESSES", "10.0.0.4,not-an-ip")

    with pytest.raises(ConfigurationError, match="not-an-ip"):
        load_config()
