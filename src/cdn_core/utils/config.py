"""Environment driven configuration for the CDN provisioner."""

# Standard Library
import os

# CloudFront is a global service, its control plane lives in us-east-1
CLOUDFRONT_REGION = os.environ.get("CLOUDFRONT_REGION", "us-east-1")
S3_REGION = os.environ.get("S3_REGION") or None

DISTRIBUTION_PRICE_CLASS = os.environ.get(
    "DISTRIBUTION_PRICE_CLASS", "PriceClass_All"
)
DISTRIBUTION_HTTP_VERSION = os.environ.get("DISTRIBUTION_HTTP_VERSION", "http2")

# A fixed caller reference makes repeated identity creates return the same OAI
ORIGIN_ACCESS_IDENTITY_CALLER_REFERENCE = os.environ.get(
    "ORIGIN_ACCESS_IDENTITY_CALLER_REFERENCE",
    "cdn-provisioner-managed-cloudfront-access-identity",
)
ORIGIN_ACCESS_IDENTITY_COMMENT = os.environ.get(
    "ORIGIN_ACCESS_IDENTITY_COMMENT",
    "CloudFront Origin Access Identity created to allow serving private S3 content",
)

BUCKET_POLICY_MAX_WORKERS = int(
    os.environ.get("BUCKET_POLICY_MAX_WORKERS", "10")
)

DEFAULT_INVALIDATION_PATHS = [
    path.strip()
    for path in os.environ.get("DEFAULT_INVALIDATION_PATHS", "/*").split(",")
    if path.strip()
]
