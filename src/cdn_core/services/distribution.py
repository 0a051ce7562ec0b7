"""Create, update and delete operations of a CloudFront distribution.

Each operation issues one imperative call against CloudFront and trusts it
as the source of truth. Updates and deletes are guarded by the `ETag` of the
config fetched just before the write; a concurrent change makes CloudFront
reject the write and the error is raised unchanged.
"""

# Standard Library
import copy
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple, Union, Any

# Third Party
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

# Local Modules
from cdn_core.aws import CloudFrontClient, S3Client
from cdn_core.models import CloudFrontInputs, DistributionResult
from cdn_core.services.access import (
    execute_access_plan,
    plan_access,
    update_buckets_policies,
)
from cdn_core.services.cache_behavior import get_default_cache_behavior
from cdn_core.services.origins import parse_input_origins
from cdn_core.utils import DistributionConfigNotFoundError
from cdn_core.utils.config import (
    DISTRIBUTION_HTTP_VERSION,
    DISTRIBUTION_PRICE_CLASS,
)

# Initialize logger
logger = Logger(service="cdn-distribution-service")

DISTRIBUTION_NOT_DISABLED = "DistributionNotDisabled"


def _get_caller_reference() -> str:
    return str(int(datetime.now(timezone.utc).timestamp() * 1000))


def _to_inputs(
    inputs: Union[CloudFrontInputs, Dict[str, Any]],
) -> CloudFrontInputs:
    if isinstance(inputs, CloudFrontInputs):
        return inputs
    return CloudFrontInputs.model_validate(inputs)


def _prepare_origins(
    cloudfront: CloudFrontClient, s3: S3Client, inputs: CloudFrontInputs
) -> Tuple[Dict[str, Any], Optional[Dict[str, Any]]]:
    """Provisions private access if needed and parses the origins.

    The identity is created before the origins are parsed, since private
    origins reference it, and the bucket grants run once the S3 origins are
    known.
    """
    identity = execute_access_plan(plan_access(inputs), cloudfront)

    origins, cache_behaviors = parse_input_origins(
        inputs.origins,
        origin_access_identity_id=(
            identity.origin_access_identity_id if identity else None
        ),
        defaults=inputs.defaults,
    )

    if identity:
        update_buckets_policies(s3, origins, identity.s3_canonical_user_id)

    return origins, cache_behaviors


def _get_distribution_config(
    cloudfront: CloudFrontClient, distribution_id: str
) -> Tuple[Dict[str, Any], Optional[str]]:
    response = cloudfront.get_distribution_config(distribution_id)
    if not response.get("DistributionConfig"):
        raise DistributionConfigNotFoundError(distribution_id)
    return response["DistributionConfig"], response.get("ETag")


def create_distribution(
    cloudfront: CloudFrontClient,
    s3: S3Client,
    inputs: Union[CloudFrontInputs, Dict[str, Any]],
) -> DistributionResult:
    """Creates a distribution from the declarative inputs.

    Parameters
    ----------
    cloudfront : CloudFrontClient
        The CloudFront client wrapper.
    s3 : S3Client
        The S3 client wrapper, used when private origins need bucket grants.
    inputs : Union[CloudFrontInputs, Dict[str, Any]]
        The origins, cache defaults, comment and enabled flag.

    Returns
    -------
    DistributionResult
        The ID, ARN and URL of the new distribution.
    """
    inputs = _to_inputs(inputs)
    origins, cache_behaviors = _prepare_origins(cloudfront, s3, inputs)

    distribution_config: Dict[str, Any] = {
        "CallerReference": _get_caller_reference(),
        "Comment": inputs.comment,
        "Aliases": {"Quantity": 0, "Items": []},
        "Origins": origins,
        "PriceClass": DISTRIBUTION_PRICE_CLASS,
        "Enabled": inputs.enabled,
        "HttpVersion": DISTRIBUTION_HTTP_VERSION,
        "DefaultCacheBehavior": get_default_cache_behavior(
            origins["Items"][0]["Id"], inputs.defaults
        ),
    }

    if cache_behaviors:
        distribution_config["CacheBehaviors"] = cache_behaviors

    distribution = cloudfront.create_distribution(distribution_config)
    logger.info(f"Created distribution {distribution.get('Id')}")

    return DistributionResult.from_distribution(distribution)


def update_distribution(
    cloudfront: CloudFrontClient,
    s3: S3Client,
    distribution_id: str,
    inputs: Union[CloudFrontInputs, Dict[str, Any]],
) -> DistributionResult:
    """Rewrites an existing distribution from the declarative inputs.

    The current config is fetched first. Its `CallerReference` and every
    field the inputs do not manage are kept; origins, cache behaviors,
    comment and enabled flag are replaced.

    Parameters
    ----------
    cloudfront : CloudFrontClient
        The CloudFront client wrapper.
    s3 : S3Client
        The S3 client wrapper.
    distribution_id : str
        The ID of the distribution to update.
    inputs : Union[CloudFrontInputs, Dict[str, Any]]
        The new origins, cache defaults, comment and enabled flag.

    Returns
    -------
    DistributionResult
        The ID, ARN and URL of the updated distribution.

    Raises
    ------
    DistributionConfigNotFoundError
        If CloudFront returns no config for the distribution.
    ClientError
        `PreconditionFailed` if the distribution changed since the fetch,
        or any other CloudFront or S3 error.
    """
    inputs = _to_inputs(inputs)
    current_config, etag = _get_distribution_config(
        cloudfront, distribution_id
    )

    # Creating the identity again returns the one created before
    origins, cache_behaviors = _prepare_origins(cloudfront, s3, inputs)

    distribution_config = copy.deepcopy(current_config)
    distribution_config.update(
        {
            "CallerReference": current_config["CallerReference"],
            "Enabled": inputs.enabled,
            "Comment": inputs.comment,
            "DefaultCacheBehavior": get_default_cache_behavior(
                origins["Items"][0]["Id"], inputs.defaults
            ),
            "Origins": origins,
        }
    )

    if cache_behaviors:
        distribution_config["CacheBehaviors"] = cache_behaviors
    elif distribution_config.get("CacheBehaviors", {}).get("Quantity"):
        distribution_config["CacheBehaviors"] = {"Quantity": 0}

    distribution = cloudfront.update_distribution(
        distribution_id, distribution_config, etag
    )
    logger.info(f"Updated distribution {distribution_id}")

    return DistributionResult.from_distribution(distribution)


def disable_distribution(
    cloudfront: CloudFrontClient, distribution_id: str
) -> DistributionResult:
    """Sets `Enabled` to False, keeping every other field as fetched."""
    current_config, etag = _get_distribution_config(
        cloudfront, distribution_id
    )

    distribution_config = copy.deepcopy(current_config)
    distribution_config["Enabled"] = False

    distribution = cloudfront.update_distribution(
        distribution_id, distribution_config, etag
    )
    logger.info(f"Disabled distribution {distribution_id}")

    return DistributionResult.from_distribution(distribution)


def delete_distribution(
    cloudfront: CloudFrontClient, distribution_id: str
) -> None:
    """Deletes a distribution, or disables it if it is still enabled.

    CloudFront refuses to delete an enabled distribution. In that case the
    distribution is disabled and the call returns without deleting it; the
    caller has to call delete again once the disabled config is deployed.

    Parameters
    ----------
    cloudfront : CloudFrontClient
        The CloudFront client wrapper.
    distribution_id : str
        The ID of the distribution to delete.

    Raises
    ------
    DistributionConfigNotFoundError
        If CloudFront returns no config for the distribution.
    ClientError
        Any CloudFront error other than `DistributionNotDisabled`.
    """
    try:
        _, etag = _get_distribution_config(cloudfront, distribution_id)
        cloudfront.delete_distribution(distribution_id, etag)
        logger.info(f"Deleted distribution {distribution_id}")
    except ClientError as e:
        if e.response.get("Error", {}).get("Code") != DISTRIBUTION_NOT_DISABLED:
            raise e
        logger.info(
            f"Distribution {distribution_id} is not disabled, disabling it instead"
        )
        disable_distribution(cloudfront, distribution_id)
