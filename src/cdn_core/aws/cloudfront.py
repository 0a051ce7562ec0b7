"""CloudFront client wrapper for distribution control-plane operations."""

# Standard Library
from typing import Dict, List, Optional, Any

# Third Party
import boto3
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

# Local Modules
from cdn_core.utils.config import CLOUDFRONT_REGION

# Initialize logger
logger = Logger(service="cloudfront-client-wrapper")


class CloudFrontClient:
    """A wrapper for the Boto3 CloudFront client."""

    def __init__(self, region_name: Optional[str] = CLOUDFRONT_REGION) -> None:
        try:
            self.client = boto3.client("cloudfront", region_name=region_name)
        except Exception as e:
            logger.exception(
                f"Failed to initialize Boto3 CloudFront client: {e}"
            )
            raise e

    def create_distribution(
        self, distribution_config: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Creates a new CloudFront distribution.

        Parameters
        ----------
        distribution_config : Dict[str, Any]
            The full `DistributionConfig` for the new distribution.

        Returns
        -------
        Dict[str, Any]
            The created distribution, including `Id`, `ARN` and `DomainName`.

        Raises
        ------
        ClientError
            If CloudFront rejects the request.
        """
        try:
            logger.info(
                "Creating distribution with caller reference %s",
                distribution_config.get("CallerReference"),
            )
            response = self.client.create_distribution(
                DistributionConfig=distribution_config
            )
            return response.get("Distribution", {})
        except ClientError as e:
            logger.error(f"Error creating distribution: {e}")
            raise e

    def get_distribution_config(self, distribution_id: str) -> Dict[str, Any]:
        """Fetches the current configuration of a distribution.

        Parameters
        ----------
        distribution_id : str
            The ID of the distribution.

        Returns
        -------
        Dict[str, Any]
            The raw response containing `DistributionConfig` and the `ETag`
            that must be echoed back on writes.

        Raises
        ------
        ClientError
            If the distribution does not exist or cannot be read.
        """
        try:
            logger.info(f"Fetching config for distribution {distribution_id}")
            return self.client.get_distribution_config(Id=distribution_id)
        except ClientError as e:
            logger.error(
                f"Error fetching config for distribution '{distribution_id}': {e}"
            )
            raise e

    def update_distribution(
        self,
        distribution_id: str,
        distribution_config: Dict[str, Any],
        if_match: Optional[str],
    ) -> Dict[str, Any]:
        """Replaces the configuration of an existing distribution.

        Parameters
        ----------
        distribution_id : str
            The ID of the distribution.
        distribution_config : Dict[str, Any]
            The complete new `DistributionConfig`.
        if_match : Optional[str]
            The `ETag` returned by the last config fetch. CloudFront rejects
            the write with `PreconditionFailed` if the config changed since.

        Returns
        -------
        Dict[str, Any]
            The updated distribution.
        """
        try:
            logger.info(f"Updating distribution {distribution_id}")
            response = self.client.update_distribution(
                Id=distribution_id,
                IfMatch=if_match,
                DistributionConfig=distribution_config,
            )
            return response.get("Distribution", {})
        except ClientError as e:
            logger.error(
                f"Error updating distribution '{distribution_id}': {e}"
            )
            raise e

    def delete_distribution(
        self, distribution_id: str, if_match: Optional[str]
    ) -> None:
        """Deletes a distribution. CloudFront only deletes disabled ones.

        Parameters
        ----------
        distribution_id : str
            The ID of the distribution.
        if_match : Optional[str]
            The `ETag` returned by the last config fetch.

        Raises
        ------
        ClientError
            `DistributionNotDisabled` if the distribution is still enabled,
            or any other CloudFront error.
        """
        try:
            logger.info(f"Deleting distribution {distribution_id}")
            self.client.delete_distribution(Id=distribution_id, IfMatch=if_match)
        except ClientError as e:
            logger.error(
                f"Error deleting distribution '{distribution_id}': {e}"
            )
            raise e

    def create_origin_access_identity(
        self, caller_reference: str, comment: str
    ) -> Dict[str, Any]:
        """Creates a CloudFront origin access identity.

        Calling this again with the same caller reference returns the
        identity created the first time instead of failing.

        Parameters
        ----------
        caller_reference : str
            The idempotency token for the identity.
        comment : str
            A human readable description of the identity.

        Returns
        -------
        Dict[str, Any]
            The identity, including `Id` and `S3CanonicalUserId`.
        """
        try:
            logger.info(
                f"Creating origin access identity with caller reference {caller_reference}"
            )
            response = self.client.create_cloud_front_origin_access_identity(
                CloudFrontOriginAccessIdentityConfig={
                    "CallerReference": caller_reference,
                    "Comment": comment,
                }
            )
            return response.get("CloudFrontOriginAccessIdentity", {})
        except ClientError as e:
            logger.error(f"Error creating origin access identity: {e}")
            raise e

    def create_invalidation(
        self, distribution_id: str, paths: List[str], caller_reference: str
    ) -> Dict[str, Any]:
        """Invalidates cached objects of a distribution.

        Parameters
        ----------
        distribution_id : str
            The ID of the distribution.
        paths : List[str]
            Path patterns to invalidate, e.g. `/*`.
        caller_reference : str
            A unique reference for this invalidation batch.

        Returns
        -------
        Dict[str, Any]
            The invalidation, including `Id` and `Status`.
        """
        try:
            logger.info(
                f"Creating invalidation for distribution {distribution_id} with paths: {paths}"
            )
            response = self.client.create_invalidation(
                DistributionId=distribution_id,
                InvalidationBatch={
                    "CallerReference": caller_reference,
                    "Paths": {"Quantity": len(paths), "Items": paths},
                },
            )
            return response.get("Invalidation", {})
        except ClientError as e:
            logger.error(
                f"Error creating invalidation for distribution '{distribution_id}': {e}"
            )
            raise e
