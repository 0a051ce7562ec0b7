# Local Modules
from cdn_core.utils.enums import (
    AllowedMethod,
    CookieForward,
    OriginProtocolPolicy,
    ProvisionAction,
    ViewerProtocolPolicy,
)
from cdn_core.utils.exceptions import DistributionConfigNotFoundError

__all__ = [
    "AllowedMethod",
    "CookieForward",
    "OriginProtocolPolicy",
    "ProvisionAction",
    "ViewerProtocolPolicy",
    "DistributionConfigNotFoundError",
]
