"""Provisions the CloudFront origin access identity and grants it read access
to the S3 buckets behind a distribution.

Private content is handled in two phases. `plan_access` decides from the
inputs alone whether an identity is needed; `execute_access_plan` then
provisions it, and `update_buckets_policies` grants it access once the
origins are parsed.
"""

# Standard Library
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Any

# Third Party
from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict

# Local Modules
from cdn_core.aws import CloudFrontClient, S3Client
from cdn_core.models import CloudFrontInputs, Origin
from cdn_core.services.origins import get_s3_bucket_names
from cdn_core.utils.config import (
    BUCKET_POLICY_MAX_WORKERS,
    ORIGIN_ACCESS_IDENTITY_CALLER_REFERENCE,
    ORIGIN_ACCESS_IDENTITY_COMMENT,
)

# Initialize logger
logger = Logger(service="cdn-access-service")

POLICY_VERSION = "2012-10-17"
POLICY_ID = "PolicyForCloudFrontPrivateContent"
GRANT_STATEMENT_SID = "GrantCloudFrontOriginIdentityAccess"


class OriginAccessIdentity(BaseModel):
    """A provisioned origin access identity."""

    model_config = ConfigDict(frozen=True)

    origin_access_identity_id: str
    s3_canonical_user_id: str


class AccessPlan(BaseModel):
    """Side effects required before the distribution request is built."""

    model_config = ConfigDict(frozen=True)

    serve_private_content: bool


def serve_private_content_enabled(inputs: CloudFrontInputs) -> bool:
    """Returns True if any structured origin is marked private."""
    return any(
        isinstance(origin, Origin) and origin.private
        for origin in inputs.origins
    )


def plan_access(inputs: CloudFrontInputs) -> AccessPlan:
    return AccessPlan(serve_private_content=serve_private_content_enabled(inputs))


def create_origin_access_identity(
    cloudfront: CloudFrontClient,
) -> OriginAccessIdentity:
    """Creates the origin access identity, or returns the existing one.

    The create call always uses the same caller reference, so CloudFront
    returns the identity created by a previous call instead of a new one.

    Parameters
    ----------
    cloudfront : CloudFrontClient
        The CloudFront client wrapper.

    Returns
    -------
    OriginAccessIdentity
        The identity ID and the canonical user ID used in bucket policies.
    """
    identity = cloudfront.create_origin_access_identity(
        caller_reference=ORIGIN_ACCESS_IDENTITY_CALLER_REFERENCE,
        comment=ORIGIN_ACCESS_IDENTITY_COMMENT,
    )
    logger.info(f"Using origin access identity {identity['Id']}")
    return OriginAccessIdentity(
        origin_access_identity_id=identity["Id"],
        s3_canonical_user_id=identity["S3CanonicalUserId"],
    )


def execute_access_plan(
    plan: AccessPlan, cloudfront: CloudFrontClient
) -> Optional[OriginAccessIdentity]:
    """Provisions the identity required by `plan`, if any."""
    if not plan.serve_private_content:
        return None
    return create_origin_access_identity(cloudfront)


def get_grant_statement(
    bucket_name: str, s3_canonical_user_id: str
) -> Dict[str, Any]:
    return {
        "Sid": GRANT_STATEMENT_SID,
        "Effect": "Allow",
        "Principal": {"CanonicalUser": s3_canonical_user_id},
        "Action": "s3:GetObject",
        "Resource": f"arn:aws:s3:::{bucket_name}/*",
    }


def grant_cloudfront_bucket_access(
    s3: S3Client, bucket_name: str, s3_canonical_user_id: str
) -> Dict[str, Any]:
    """Grants the origin access identity read access to a bucket.

    The current bucket policy is read and kept; a previous grant statement
    is replaced, so granting twice leaves a single statement.

    Parameters
    ----------
    s3 : S3Client
        The S3 client wrapper.
    bucket_name : str
        The bucket to grant access to.
    s3_canonical_user_id : str
        The canonical user ID of the origin access identity.

    Returns
    -------
    Dict[str, Any]
        The policy document written to the bucket.
    """
    policy = s3.get_bucket_policy(bucket_name) or {
        "Version": POLICY_VERSION,
        "Id": POLICY_ID,
        "Statement": [],
    }

    statements = policy.get("Statement", [])
    if isinstance(statements, dict):
        statements = [statements]

    policy["Statement"] = [
        statement
        for statement in statements
        if statement.get("Sid") != GRANT_STATEMENT_SID
    ] + [get_grant_statement(bucket_name, s3_canonical_user_id)]

    s3.put_bucket_policy(bucket_name, policy)
    logger.info(f"Granted origin access identity read access to {bucket_name}")
    return policy


def update_buckets_policies(
    s3: S3Client, origins: Dict[str, Any], s3_canonical_user_id: str
) -> List[Dict[str, Any]]:
    """Grants the identity access to every S3 bucket behind `origins`.

    The grants run concurrently. All submitted grants finish before the
    first failure is raised; grants that already succeeded are kept.

    Parameters
    ----------
    s3 : S3Client
        The S3 client wrapper.
    origins : Dict[str, Any]
        The parsed CloudFront `Origins` collection.
    s3_canonical_user_id : str
        The canonical user ID of the origin access identity.

    Returns
    -------
    List[Dict[str, Any]]
        The written policies, in bucket order.
    """
    bucket_names = get_s3_bucket_names(origins)
    if not bucket_names:
        return []

    logger.info(f"Updating bucket policies of {bucket_names}")
    with ThreadPoolExecutor(
        max_workers=min(BUCKET_POLICY_MAX_WORKERS, len(bucket_names))
    ) as executor:
        futures = [
            executor.submit(
                grant_cloudfront_bucket_access,
                s3,
                bucket_name,
                s3_canonical_user_id,
            )
            for bucket_name in bucket_names
        ]
        return [future.result() for future in futures]
