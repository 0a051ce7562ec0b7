"""Unit tests for the s3 module."""

# Standard Library
import json
from unittest.mock import MagicMock, patch

# Third Party
import pytest
from botocore.exceptions import ClientError, NoCredentialsError

# Local Modules
from cdn_core.aws.s3 import S3Client


class TestS3Client:
    """Test cases for the S3Client class."""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.bucket_name = "test-bucket"
        self.policy = {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Sid": "AllowRead",
                    "Effect": "Allow",
                    "Principal": "*",
                    "Action": "s3:GetObject",
                    "Resource": f"arn:aws:s3:::{self.bucket_name}/*",
                }
            ],
        }

    @patch("cdn_core.aws.s3.boto3.client")
    def test_init_success_with_region(self, mock_boto3_client):
        """Test successful initialization with region_name."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client

        s3_client = S3Client(region_name="us-west-2")

        mock_boto3_client.assert_called_once_with(
            "s3", region_name="us-west-2"
        )
        assert s3_client._client == mock_client

    @patch("cdn_core.aws.s3.boto3.client")
    @patch("cdn_core.aws.s3.logger")
    def test_init_failure_no_credentials(self, mock_logger, mock_boto3_client):
        """Test initialization failure due to missing credentials."""
        error = NoCredentialsError()
        mock_boto3_client.side_effect = error

        with pytest.raises(NoCredentialsError):
            S3Client()

        mock_logger.error.assert_called_once_with(
            "Failed to create S3 client: %s", error
        )

    @patch("cdn_core.aws.s3.boto3.client")
    def test_get_bucket_policy_success(self, mock_boto3_client):
        """Test the policy document is decoded."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client
        mock_client.get_bucket_policy.return_value = {
            "Policy": json.dumps(self.policy)
        }

        result = S3Client().get_bucket_policy(self.bucket_name)

        mock_client.get_bucket_policy.assert_called_once_with(
            Bucket=self.bucket_name
        )
        assert result == self.policy

    @patch("cdn_core.aws.s3.boto3.client")
    def test_get_bucket_policy_no_policy(self, mock_boto3_client):
        """Test a bucket without a policy yields None."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client
        mock_client.get_bucket_policy.side_effect = ClientError(
            {"Error": {"Code": "NoSuchBucketPolicy", "Message": "No policy"}},
            "GetBucketPolicy",
        )

        assert S3Client().get_bucket_policy(self.bucket_name) is None

    @patch("cdn_core.aws.s3.boto3.client")
    @patch("cdn_core.aws.s3.logger")
    def test_get_bucket_policy_other_error(
        self, mock_logger, mock_boto3_client
    ):
        """Test other errors are logged and re-raised."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client
        error = ClientError(
            {"Error": {"Code": "NoSuchBucket", "Message": "No bucket"}},
            "GetBucketPolicy",
        )
        mock_client.get_bucket_policy.side_effect = error

        with pytest.raises(ClientError):
            S3Client().get_bucket_policy(self.bucket_name)

        mock_logger.error.assert_called_once_with(
            "Error reading policy of bucket '%s': %s", self.bucket_name, error
        )

    @patch("cdn_core.aws.s3.boto3.client")
    def test_put_bucket_policy_success(self, mock_boto3_client):
        """Test the policy is encoded as JSON."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client

        S3Client().put_bucket_policy(self.bucket_name, self.policy)

        mock_client.put_bucket_policy.assert_called_once_with(
            Bucket=self.bucket_name, Policy=json.dumps(self.policy)
        )

    @patch("cdn_core.aws.s3.boto3.client")
    def test_put_bucket_policy_client_error(self, mock_boto3_client):
        """Test write errors are re-raised."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client
        mock_client.put_bucket_policy.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "Access denied"}},
            "PutBucketPolicy",
        )

        with pytest.raises(ClientError):
            S3Client().put_bucket_policy(self.bucket_name, self.policy)
