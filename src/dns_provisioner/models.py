"""Handles for the Azure resources created by the workflow."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

RECORD_TYPE_A = "A"


class ProvisioningState(Enum):
    """Progress of a provisioning run."""

    NOT_STARTED = "not_started"
    RESOURCE_GROUP_CREATED = "resource_group_created"
    ZONE_CREATED = "zone_created"
    RECORD_SET_CREATED = "record_set_created"
    DELETED = "deleted"


@dataclass(frozen=True)
class ResourceGroupHandle:
    """A resource group as returned by the resource manager."""

    name: str
    location: str
    id: str


@dataclass(frozen=True)
class ZoneHandle:
    """A private DNS zone scoped to a resource group."""

    name: str
    resource_group: str
    location: str
    id: str


@dataclass(frozen=True)
class RecordSetHandle:
    """A record set, identified by (zone, record type, relative name)."""

    zone: str
    resource_group: str
    relative_name: str
    id: str
    record_type: str = RECORD_TYPE_A
    addresses: tuple[str, ...] = ()
