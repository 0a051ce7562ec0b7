"""S3 client wrapper for bucket policy operations."""

# Standard Library
import json
from typing import Dict, Optional, Any

# Third Party
import boto3
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

# Local Modules
from cdn_core.utils.config import S3_REGION

# Initialize logger
logger = Logger(service="s3-client-wrapper")


class S3Client:
    """A wrapper for the Boto3 S3 client, limited to bucket policies."""

    def __init__(self, region_name: Optional[str] = S3_REGION) -> None:
        try:
            self._client = boto3.client("s3", region_name=region_name)
        except Exception as e:
            logger.error("Failed to create S3 client: %s", e)
            raise e

    def get_bucket_policy(self, bucket_name: str) -> Optional[Dict[str, Any]]:
        """Reads and decodes the policy attached to a bucket.

        Parameters
        ----------
        bucket_name : str
            The name of the bucket.

        Returns
        -------
        Optional[Dict[str, Any]]
            The decoded policy document, or None if the bucket has no policy.

        Raises
        ------
        ClientError
            For any error other than `NoSuchBucketPolicy`.
        """
        try:
            response = self._client.get_bucket_policy(Bucket=bucket_name)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "NoSuchBucketPolicy":
                logger.info("Bucket %s has no policy yet", bucket_name)
                return None
            logger.error(
                "Error reading policy of bucket '%s': %s", bucket_name, e
            )
            raise e
        return json.loads(response["Policy"])

    def put_bucket_policy(
        self, bucket_name: str, policy: Dict[str, Any]
    ) -> None:
        """Replaces the policy attached to a bucket.

        Parameters
        ----------
        bucket_name : str
            The name of the bucket.
        policy : Dict[str, Any]
            The policy document to attach.
        """
        try:
            logger.info("Writing policy of bucket %s", bucket_name)
            self._client.put_bucket_policy(
                Bucket=bucket_name, Policy=json.dumps(policy)
            )
        except ClientError as e:
            logger.error(
                "Error writing policy of bucket '%s': %s", bucket_name, e
            )
            raise e
