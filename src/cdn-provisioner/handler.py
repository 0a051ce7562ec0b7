# Standard Library
from typing import Dict, Any

# Third Party
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

# Local Modules
from cdn_core.aws import CloudFrontClient, S3Client
from provisioner import ProvisionRequest, dispatch

# Initialize logger
logger = Logger()


@logger.inject_lambda_context(log_event=False)
def lambda_handler(
    event: Dict[str, Any], context: LambdaContext
) -> Dict[str, Any]:
    """Lambda function to create, update, delete or invalidate a
    CloudFront distribution.

    Parameters
    ----------
    event : Dict[str, Any]
        The request, with an `action`, and depending on it a
        `distributionId`, declarative `inputs` or invalidation `paths`.
    context : LambdaContext
        The context object containing runtime information about the
        Lambda function invocation.

    Returns
    -------
    Dict[str, Any]
        `{id, arn, url}` for create and update, `{id, status}` for an
        invalidation and an empty dict for delete.

    Raises
    ------
    pydantic.ValidationError
        If the event does not match the request model.
    botocore.exceptions.ClientError
        If CloudFront or S3 reject a call.
    """
    request = ProvisionRequest.model_validate(event)

    # Add the target to structured logs
    logger.append_keys(
        action=request.action.value, distribution_id=request.distribution_id
    )
    logger.info("CDN provisioner invoked.")

    return dispatch(request, cloudfront=CloudFrontClient(), s3=S3Client())
