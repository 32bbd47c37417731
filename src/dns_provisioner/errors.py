"""Exception hierarchy for the provisioning workflow."""

from __future__ import annotations

from azure.core.exceptions import AzureError, HttpResponseError


class ProvisionerError(Exception):
    """Base class for all provisioning failures."""


class ConfigurationError(ProvisionerError, ValueError):
    """A required setting is missing or malformed."""


class ProviderError(ProvisionerError):
    """An Azure management call failed.

    The provider's status code and message are kept verbatim; the original
    SDK exception is chained as ``__cause__``.
    """

    def __init__(self, description: str, status_code: int | None = None, message: str | None = None) -> None:
        self.description = description
        self.status_code = status_code
        self.message = message
        detail = f" (status {status_code})" if status_code is not None else ""
        super().__init__(f"{description} failed{detail}: {message}")

    @classmethod
    def from_azure_error(cls, description: str, error: AzureError) -> ProviderError:
        status_code = error.status_code if isinstance(error, HttpResponseError) else None
        return cls(description, status_code=status_code, message=error.message)


class OperationTimeoutError(ProvisionerError):
    """A long-running operation did not finish before its deadline."""

    def __init__(self, description: str, timeout: float) -> None:
        self.description = description
        self.timeout = timeout
        super().__init__(f"{description} did not complete within {timeout} seconds")
