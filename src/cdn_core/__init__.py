"""Provisions CloudFront distributions and the S3 bucket policies that let
them serve private content.
"""

# Local Modules
from cdn_core.services import (
    create_distribution,
    create_invalidation,
    delete_distribution,
    update_distribution,
)

__all__ = [
    "create_distribution",
    "update_distribution",
    "delete_distribution",
    "create_invalidation",
]
