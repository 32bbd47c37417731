"""Provider call helpers shared by every resource type."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from azure.core.exceptions import AzureError
from azure.core.polling import LROPoller

from dns_provisioner.errors import OperationTimeoutError, ProviderError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def provider_call(description: str) -> Iterator[None]:
    """Re-raise any Azure SDK failure inside the block as ProviderError."""
    try:
        yield
    except AzureError as exc:
        raise ProviderError.from_azure_error(description, exc) from exc


def wait_for_completion(poller: LROPoller[T], description: str, timeout: float | None = None) -> T:
    """Block until a long-running operation reaches a terminal state.

    The polling interval is fixed when the operation is started (``polling_interval``
    on the ``begin_*`` call). With ``timeout=None`` this waits as long as the
    provider keeps the operation open.

    Raises:
        ProviderError: The operation ended in a failed state.
        OperationTimeoutError: ``timeout`` elapsed before a terminal state.
    """
    logger.debug("Waiting for %s (status: %s)", description, poller.status())
    with provider_call(description):
        if timeout is not None:
            poller.wait(timeout)
            if not poller.done():
                raise OperationTimeoutError(description, timeout)
        return poller.result()
