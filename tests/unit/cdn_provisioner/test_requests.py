"""Unit tests for the provisioner requests module."""

# Standard Library
from unittest.mock import MagicMock, patch

# Third Party
import pytest
from pydantic import ValidationError

# Local Modules
from cdn_core.models import DistributionResult, InvalidationResult
from cdn_core.utils import ProvisionAction
from provisioner.requests import ProvisionRequest, dispatch


@pytest.fixture
def cloudfront():
    return MagicMock()


@pytest.fixture
def s3():
    return MagicMock()


@pytest.fixture
def distribution_result():
    return DistributionResult(
        id="EDFDVBD6EXAMPLE",
        arn="arn:aws:cloudfront::123456789012:distribution/EDFDVBD6EXAMPLE",
        url="https://d111111abcdef8.cloudfront.net",
    )


class TestProvisionRequest:
    """Test cases for the ProvisionRequest model."""

    def test_camel_case_event(self):
        """Test the event keys are read from their camelCase names."""
        request = ProvisionRequest.model_validate(
            {
                "action": "update",
                "distributionId": "EDFDVBD6EXAMPLE",
                "inputs": {"origins": ["my-bucket"]},
            }
        )

        assert request.action == ProvisionAction.update
        assert request.distribution_id == "EDFDVBD6EXAMPLE"
        assert request.inputs.origins == ["my-bucket"]

    def test_unknown_action(self):
        """Test unknown actions are rejected."""
        with pytest.raises(ValidationError):
            ProvisionRequest.model_validate({"action": "rename"})


class TestDispatch:
    """Test cases for the dispatch function."""

    @patch("provisioner.requests.create_distribution")
    def test_create(self, mock_create, cloudfront, s3, distribution_result):
        """Test create returns the distribution triple."""
        mock_create.return_value = distribution_result
        request = ProvisionRequest.model_validate(
            {"action": "create", "inputs": {"origins": ["my-bucket"]}}
        )

        result = dispatch(request, cloudfront, s3)

        mock_create.assert_called_once_with(cloudfront, s3, request.inputs)
        assert result == distribution_result.model_dump()

    @patch("provisioner.requests.update_distribution")
    def test_update(self, mock_update, cloudfront, s3, distribution_result):
        """Test update targets the requested distribution."""
        mock_update.return_value = distribution_result
        request = ProvisionRequest.model_validate(
            {
                "action": "update",
                "distributionId": "EDFDVBD6EXAMPLE",
                "inputs": {"origins": ["my-bucket"]},
            }
        )

        result = dispatch(request, cloudfront, s3)

        mock_update.assert_called_once_with(
            cloudfront, s3, "EDFDVBD6EXAMPLE", request.inputs
        )
        assert result["url"] == "https://d111111abcdef8.cloudfront.net"

    @patch("provisioner.requests.delete_distribution")
    def test_delete(self, mock_delete, cloudfront, s3):
        """Test delete returns an empty result."""
        request = ProvisionRequest.model_validate(
            {"action": "delete", "distributionId": "EDFDVBD6EXAMPLE"}
        )

        assert dispatch(request, cloudfront, s3) == {}
        mock_delete.assert_called_once_with(cloudfront, "EDFDVBD6EXAMPLE")

    @patch("provisioner.requests.create_invalidation")
    def test_invalidate(self, mock_invalidate, cloudfront, s3):
        """Test invalidate forwards the requested paths."""
        mock_invalidate.return_value = InvalidationResult(
            id="I2J0I21PCUYOIK", status="InProgress"
        )
        request = ProvisionRequest.model_validate(
            {
                "action": "invalidate",
                "distributionId": "EDFDVBD6EXAMPLE",
                "paths": ["/index.html"],
            }
        )

        result = dispatch(request, cloudfront, s3)

        mock_invalidate.assert_called_once_with(
            cloudfront, "EDFDVBD6EXAMPLE", ["/index.html"]
        )
        assert result == {"id": "I2J0I21PCUYOIK", "status": "InProgress"}

    @pytest.mark.parametrize(
        "event, missing",
        [
            ({"action": "create"}, "inputs"),
            ({"action": "update", "inputs": {"origins": ["b"]}}, "distributionId"),
            ({"action": "update", "distributionId": "E1"}, "inputs"),
            ({"action": "delete"}, "distributionId"),
            ({"action": "invalidate"}, "distributionId"),
        ],
    )
    def test_missing_field(self, event, missing, cloudfront, s3):
        """Test a field required by the action must be present."""
        request = ProvisionRequest.model_validate(event)

        with pytest.raises(ValueError, match=f"'{missing}' is required"):
            dispatch(request, cloudfront, s3)

        assert cloudfront.method_calls == []
        assert s3.method_calls == []
