"""Process-wide Azure credential."""

from __future__ import annotations

from azure.identity import DefaultAzureCredential

_credential: DefaultAzureCredential | None = None


def get_credential() -> DefaultAzureCredential:
    """Return the cached DefaultAzureCredential, creating it on first use."""
    global _credential
    if _credential is None:
        _credential = DefaultAzureCredential()
    return _credential


def close_credential() -> None:
    """Close the cached credential's transport and forget it."""
    global _credential
    if _credential is not None:
        _credential.close()
        _credential = None
