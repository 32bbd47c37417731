"""Configuration loading and validation from environment variables."""

from __future__ import annotations

import ipaddress
import os
from dataclasses import dataclass

from dns_provisioner.errors import ConfigurationError

_DEFAULT_LOCATION = "westus"
_DEFAULT_RESOURCE_GROUP = "sample-resource-group"
_DEFAULT_PRIVATE_ZONE = "sample-private-zone"
_DEFAULT_RELATIVE_RECORD_SET = "sample-relative-record-set"
_DEFAULT_POLLING_INTERVAL = 10


@dataclass(frozen=True)
class ProvisionerConfig:
    """Settings for a single provisioning run, built once at startup."""

    subscription_id: str
    location: str = _DEFAULT_LOCATION
    resource_group_name: str = _DEFAULT_RESOURCE_GROUP
    private_zone_name: str = _DEFAULT_PRIVATE_ZONE
    relative_record_set_name: str = _DEFAULT_RELATIVE_RECORD_SET
    record_set_addresses: tuple[str, ...] = ()
    keep_resources: bool = False
    polling_interval: int = _DEFAULT_POLLING_INTERVAL
    operation_timeout: int | None = None


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ConfigurationError(f"Required environment variable {name} is not set")
    return value


def _positive_int_env(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got: {raw!r}")
    if value < 1:
        raise ConfigurationError(f"{name} must be a positive integer, got: {value}")
    return value


def _parse_addresses(raw: str) -> tuple[str, ...]:
    """Parse a comma-separated list of IPv4 addresses, ignoring blanks."""
    addresses = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            ipaddress.IPv4Address(item)
        except ValueError:
            raise ConfigurationError(f"RECORD_SET_ADDRESSES contains an invalid IPv4 address: {item!r}")
        addresses.append(item)
    return tuple(addresses)


def load_config() -> ProvisionerConfig:
    """Load and validate provisioner configuration from environment variables."""
    subscription_id = _require_env("AZURE_SUBSCRIPTION_ID")

    return ProvisionerConfig(
        subscription_id=subscription_id,
        location=os.environ.get("AZURE_LOCATION") or _DEFAULT_LOCATION,
        resource_group_name=os.environ.get("RESOURCE_GROUP_NAME") or _DEFAULT_RESOURCE_GROUP,
        private_zone_name=os.environ.get("PRIVATE_ZONE_NAME") or _DEFAULT_PRIVATE_ZONE,
        relative_record_set_name=os.environ.get("RELATIVE_RECORD_SET_NAME") or _DEFAULT_RELATIVE_RECORD_SET,
        record_set_addresses=_parse_addresses(os.environ.get("RECORD_SET_ADDRESSES", "")),
        keep_resources=bool(os.environ.get("KEEP_RESOURCE")),
        polling_interval=_positive_int_env("LRO_POLLING_INTERVAL", _DEFAULT_POLLING_INTERVAL),
        operation_timeout=_positive_int_env("LRO_TIMEOUT", None),
    )
