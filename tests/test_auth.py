"""Tests for dns_provisioner.auth."""

from unittest.mock import patch


@patch("dns_provisioner.auth.DefaultAzureCredential")
def test_get_credential_is_cached(mock_cred_cls):
    from dns_provisioner.auth import get_credential

    first = get_credential()
    second = get_credential()

    mock_cred_cls.assert_called_once_with()
    assert first is second is mock_cred_cls.return_value


@patch("dns_provisioner.auth.DefaultAzureCredential")
def test_close_credential_closes_and_resets(mock_cred_cls):
    from dns_provisioner import auth

    cred = auth.get_credential()
    auth.close_credential()

    cred.close.assert_called_once_with()
    assert auth._credential is None


def test_close_credential_without_credential_is_noop():
    from dns_provisioner import auth

    auth.close_credential()
    assert auth._credential is None
