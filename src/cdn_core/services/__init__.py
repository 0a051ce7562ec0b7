"""
This module provides the distribution lifecycle operations and the helpers
they are built from.
"""

# Local Modules
from cdn_core.services.distribution import (
    create_distribution,
    delete_distribution,
    update_distribution,
)
from cdn_core.services.invalidation import create_invalidation

__all__ = [
    "create_distribution",
    "update_distribution",
    "delete_distribution",
    "create_invalidation",
]
