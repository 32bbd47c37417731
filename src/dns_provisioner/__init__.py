"""Provision an Azure resource group, private DNS zone and A record set."""
