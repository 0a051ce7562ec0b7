"""AWS client wrappers for the CDN provisioner.

The services accept these wrappers instead of raw boto3 clients, so tests can
hand them fakes with the same methods.
"""

# Local Modules
from cdn_core.aws.cloudfront import CloudFrontClient
from cdn_core.aws.s3 import S3Client

__all__ = [
    "CloudFrontClient",
    "S3Client",
]
