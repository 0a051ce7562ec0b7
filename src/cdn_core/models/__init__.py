"""Pydantic models shared by the CDN provisioner services."""

# Local Modules
from cdn_core.models.inputs import (
    CacheDefaults,
    CloudFrontInputs,
    ForwardOptions,
    Origin,
)
from cdn_core.models.results import DistributionResult, InvalidationResult

__all__ = [
    "CacheDefaults",
    "CloudFrontInputs",
    "ForwardOptions",
    "Origin",
    "DistributionResult",
    "InvalidationResult",
]
