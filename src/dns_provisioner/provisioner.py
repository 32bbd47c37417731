"""Provisioning workflow: resource group, private zone, A record set, cleanup."""

from __future__ import annotations

import logging

from azure.mgmt.privatedns.models import ARecord, PrivateZone, RecordSet

from dns_provisioner.clients import AzureClients
from dns_provisioner.config import ProvisionerConfig
from dns_provisioner.models import (
    RECORD_TYPE_A,
    ProvisioningState,
    RecordSetHandle,
    ResourceGroupHandle,
    ZoneHandle,
)
from dns_provisioner.operations import provider_call, wait_for_completion

logger = logging.getLogger(__name__)


def create_resource_group(clients: AzureClients, config: ProvisionerConfig) -> ResourceGroupHandle:
    """Create or update the resource group. Synchronous, no polling."""
    with provider_call(f"Creating resource group '{config.resource_group_name}'"):
        group = clients.resources.resource_groups.create_or_update(
            resource_group_name=config.resource_group_name,
            parameters={"location": config.location},
        )
    return ResourceGroupHandle(name=group.name, location=group.location, id=group.id)


def create_private_zone(clients: AzureClients, config: ProvisionerConfig) -> ZoneHandle:
    """Create or update the private DNS zone and wait for the operation to finish."""
    description = f"Creating private zone '{config.private_zone_name}'"
    with provider_call(description):
        poller = clients.private_dns.private_zones.begin_create_or_update(
            resource_group_name=config.resource_group_name,
            private_zone_name=config.private_zone_name,
            parameters=PrivateZone(location=config.location),
            polling_interval=config.polling_interval,
        )
    zone = wait_for_completion(poller, description, timeout=config.operation_timeout)
    return ZoneHandle(
        name=zone.name,
        resource_group=config.resource_group_name,
        location=zone.location,
        id=zone.id,
    )


def create_record_set(clients: AzureClients, config: ProvisionerConfig) -> RecordSetHandle:
    """Create or update the A record set in the private zone.

    The record set is created with ``config.record_set_addresses``, which is
    empty unless configured.
    """
    parameters = RecordSet(a_records=[ARecord(ipv4_address=ip) for ip in config.record_set_addresses])
    with provider_call(f"Creating record set '{config.relative_record_set_name}'"):
        record_set = clients.private_dns.record_sets.create_or_update(
            resource_group_name=config.resource_group_name,
            private_zone_name=config.private_zone_name,
            record_type=RECORD_TYPE_A,
            relative_record_set_name=config.relative_record_set_name,
            parameters=parameters,
        )
    return RecordSetHandle(
        zone=config.private_zone_name,
        resource_group=config.resource_group_name,
        relative_name=config.relative_record_set_name,
        id=record_set.id,
        addresses=tuple(config.record_set_addresses),
    )


def delete_resource_group(clients: AzureClients, config: ProvisionerConfig) -> None:
    """Delete the resource group and wait for it to go away.

    The zone and record set inside it are removed by the provider's cascade;
    no explicit delete is issued for them.
    """
    description = f"Deleting resource group '{config.resource_group_name}'"
    with provider_call(description):
        poller = clients.resources.resource_groups.begin_delete(
            resource_group_name=config.resource_group_name,
            polling_interval=config.polling_interval,
        )
    wait_for_completion(poller, description, timeout=config.operation_timeout)


class Provisioner:
    """Runs the fixed create → create → create → (delete) sequence.

    Steps run strictly in order. The first failure propagates and leaves
    whatever was already created in place.
    """

    def __init__(self, clients: AzureClients, config: ProvisionerConfig) -> None:
        self._clients = clients
        self._config = config
        self.state = ProvisioningState.NOT_STARTED
        self.resource_group: ResourceGroupHandle | None = None
        self.zone: ZoneHandle | None = None
        self.record_set: RecordSetHandle | None = None

    def run(self) -> ProvisioningState:
        self.resource_group = create_resource_group(self._clients, self._config)
        self.state = ProvisioningState.RESOURCE_GROUP_CREATED
        logger.info("resource group: %s", self.resource_group.id)

        self.zone = create_private_zone(self._clients, self._config)
        self.state = ProvisioningState.ZONE_CREATED
        logger.info("private zone: %s", self.zone.id)

        self.record_set = create_record_set(self._clients, self._config)
        self.state = ProvisioningState.RECORD_SET_CREATED
        logger.info("record set: %s", self.record_set.id)

        if self._config.keep_resources:
            logger.warning("KEEP_RESOURCE is set; leaving resource group '%s' in place", self.resource_group.name)
            return self.state

        delete_resource_group(self._clients, self._config)
        self.state = ProvisioningState.DELETED
        logger.info("cleaned up successfully.")
        return self.state
