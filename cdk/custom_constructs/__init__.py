"""This module provides custom constructs for the CDN provisioner CDK app.

The constructs included in this module are:
- CustomLambdaFunction: Python Lambda function built from a folder under `src`.
- CustomPackageLayer: Lambda layer bundling a local package from `src`.
"""

from .lambda_function import CustomLambdaFunction, CustomPackageLayer

__all__ = [
    "CustomLambdaFunction",
    "CustomPackageLayer",
]
