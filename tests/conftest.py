"""Shared test fixtures for azure-private-dns-provisioner."""

import dns_provisioner.auth as _auth


def pytest_runtest_setup(item):
    """Reset the cached credential between tests."""
    _auth._credential = None
