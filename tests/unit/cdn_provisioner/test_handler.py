"""Unit tests for the CDN provisioner Lambda handler."""

# Standard Library
from unittest.mock import MagicMock, patch

# Third Party
import pytest
from pydantic import ValidationError

# Local Modules
import handler


class FakeLambdaContext:
    function_name = "cdn-provisioner"
    memory_limit_in_mb = 128
    invoked_function_arn = (
        "arn:aws:lambda:us-east-1:123456789012:function:cdn-provisioner"
    )
    aws_request_id = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


class TestLambdaHandler:
    """Test cases for the lambda_handler function."""

    @patch("handler.dispatch")
    @patch("handler.S3Client")
    @patch("handler.CloudFrontClient")
    def test_dispatches_request(
        self, mock_cloudfront, mock_s3, mock_dispatch, lambda_context
    ):
        """Test the validated event is dispatched with fresh clients."""
        mock_dispatch.return_value = {"id": "I1", "status": "InProgress"}
        event = {"action": "invalidate", "distributionId": "EDFDVBD6EXAMPLE"}

        result = handler.lambda_handler(event, lambda_context)

        assert result == {"id": "I1", "status": "InProgress"}
        request = mock_dispatch.call_args.args[0]
        assert request.distribution_id == "EDFDVBD6EXAMPLE"
        assert mock_dispatch.call_args.kwargs == {
            "cloudfront": mock_cloudfront.return_value,
            "s3": mock_s3.return_value,
        }

    @patch("handler.dispatch")
    @patch("handler.S3Client")
    @patch("handler.CloudFrontClient")
    def test_invalid_event(
        self, mock_cloudfront, mock_s3, mock_dispatch, lambda_context
    ):
        """Test a malformed event fails before any client is created."""
        with pytest.raises(ValidationError):
            handler.lambda_handler({"action": "rename"}, lambda_context)

        mock_cloudfront.assert_not_called()
        mock_s3.assert_not_called()
        mock_dispatch.assert_not_called()

    @patch("handler.dispatch")
    @patch("handler.S3Client", MagicMock())
    @patch("handler.CloudFrontClient", MagicMock())
    def test_dispatch_error_propagates(self, mock_dispatch, lambda_context):
        """Test operation errors reach the caller."""
        mock_dispatch.side_effect = ValueError(
            "'distributionId' is required for action 'delete'"
        )

        with pytest.raises(ValueError):
            handler.lambda_handler({"action": "delete"}, lambda_context)
