# Standard Library
from typing import Dict, List, Optional, Any

# Third Party
from pydantic import BaseModel, Field, ConfigDict
from aws_lambda_powertools import Logger

# Local Modules
from cdn_core import (
    create_distribution,
    create_invalidation,
    delete_distribution,
    update_distribution,
)
from cdn_core.aws import CloudFrontClient, S3Client
from cdn_core.models import CloudFrontInputs
from cdn_core.utils import ProvisionAction

# Initialize logger
logger = Logger(service="cdn-provisioner-requests")


class ProvisionRequest(BaseModel):
    """The event accepted by the provisioner Lambda.

    Attributes:
        action: The lifecycle operation to run.
        distribution_id: The target distribution, required except on create.
        inputs: The declarative inputs, required on create and update.
        paths: The paths to invalidate, defaults to every path.
    """

    model_config = ConfigDict(populate_by_name=True)

    action: ProvisionAction = Field(..., description="Operation to run")
    distribution_id: Optional[str] = Field(
        None, alias="distributionId", description="Target distribution ID"
    )
    inputs: Optional[CloudFrontInputs] = Field(
        None, description="Declarative distribution inputs"
    )
    paths: Optional[List[str]] = Field(
        None, description="Paths to invalidate"
    )


def _require(value: Any, name: str, action: ProvisionAction) -> Any:
    if value is None:
        raise ValueError(f"'{name}' is required for action '{action.value}'")
    return value


def dispatch(
    request: ProvisionRequest, cloudfront: CloudFrontClient, s3: S3Client
) -> Dict[str, Any]:
    """Runs the operation named by `request.action`.

    Parameters
    ----------
    request : ProvisionRequest
        The validated event.
    cloudfront : CloudFrontClient
        The CloudFront client wrapper.
    s3 : S3Client
        The S3 client wrapper.

    Returns
    -------
    Dict[str, Any]
        The operation result; empty for delete.

    Raises
    ------
    ValueError
        If a field required by the action is missing.
    """
    action = request.action
    logger.info(f"Dispatching '{action.value}' request")

    if action == ProvisionAction.create:
        inputs = _require(request.inputs, "inputs", action)
        return create_distribution(cloudfront, s3, inputs).model_dump()

    distribution_id = _require(
        request.distribution_id, "distributionId", action
    )

    if action == ProvisionAction.update:
        inputs = _require(request.inputs, "inputs", action)
        return update_distribution(
            cloudfront, s3, distribution_id, inputs
        ).model_dump()

    if action == ProvisionAction.delete:
        delete_distribution(cloudfront, distribution_id)
        return {}

    return create_invalidation(
        cloudfront, distribution_id, request.paths
    ).model_dump()
