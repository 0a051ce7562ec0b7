"""This module initializes the request handling of the CDN provisioner Lambda."""

# Local Modules
from provisioner.requests import ProvisionRequest, dispatch

__all__ = ["ProvisionRequest", "dispatch"]
