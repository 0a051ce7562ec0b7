# Standard Library
from datetime import datetime, timezone
from typing import List, Optional

# Third Party
from aws_lambda_powertools import Logger

# Local Modules
from cdn_core.aws import CloudFrontClient
from cdn_core.models import InvalidationResult
from cdn_core.utils.config import DEFAULT_INVALIDATION_PATHS

# Initialize logger
logger = Logger(service="cdn-invalidation-service")


def create_invalidation(
    cloudfront: CloudFrontClient,
    distribution_id: str,
    paths: Optional[List[str]] = None,
) -> InvalidationResult:
    """Invalidates cached paths of a distribution.

    Parameters
    ----------
    cloudfront : CloudFrontClient
        The CloudFront client wrapper.
    distribution_id : str
        The ID of the distribution.
    paths : Optional[List[str]], default None
        The paths to invalidate. Defaults to every path.

    Returns
    -------
    InvalidationResult
        The ID and status of the invalidation.
    """
    paths = list(paths) if paths else list(DEFAULT_INVALIDATION_PATHS)
    caller_reference = str(int(datetime.now(timezone.utc).timestamp() * 1000))

    invalidation = cloudfront.create_invalidation(
        distribution_id, paths, caller_reference
    )
    logger.info(
        f"Created invalidation {invalidation.get('Id')} for distribution {distribution_id}"
    )

    return InvalidationResult(
        id=invalidation.get("Id"), status=invalidation.get("Status")
    )
