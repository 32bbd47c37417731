"""Azure management clients used by the provisioner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from azure.core.credentials import TokenCredential
from azure.mgmt.privatedns import PrivateDnsManagementClient
from azure.mgmt.resource.resources import ResourceManagementClient

from dns_provisioner.auth import get_credential as _get_credential
from dns_provisioner.config import ProvisionerConfig


@dataclass
class AzureClients:
    """The two management surfaces the workflow talks to, bound to one subscription."""

    resources: ResourceManagementClient
    private_dns: PrivateDnsManagementClient

    def close(self) -> None:
        self.resources.close()
        self.private_dns.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


def build_clients(config: ProvisionerConfig, credential: TokenCredential | None = None) -> AzureClients:
    """Create management clients for ``config.subscription_id``.

    Falls back to the shared DefaultAzureCredential when no credential is given.
    """
    credential = credential or _get_credential()
    return AzureClients(
        resources=ResourceManagementClient(credential, config.subscription_id),
        private_dns=PrivateDnsManagementClient(credential, config.subscription_id),
    )
