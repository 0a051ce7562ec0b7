# Standard Library
from typing import Optional

# Third Party
from aws_cdk import (
    Stack,
    Duration,
    CfnOutput,
    aws_iam as iam,
)
from constructs import Construct

# Local Modules
from cdk.custom_constructs import CustomLambdaFunction, CustomPackageLayer


class CdnProvisionerStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        stack_suffix: Optional[str] = "",
        **kwargs,
    ) -> None:
        """CDN Provisioner Stack for AWS CDK.

        Deploys the Lambda function that creates, updates, deletes and
        invalidates CloudFront distributions.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        construct_id : str
            The ID of the construct.
        stack_suffix : Optional[str], optional
            Suffix to append to resource names for this stack, by default ""
        """
        super().__init__(scope, construct_id, **kwargs)

        self.stack_suffix = (stack_suffix if stack_suffix else "").lower()
        self.price_class = (
            self.node.try_get_context("price_class") or "PriceClass_All"
        )
        self.http_version = self.node.try_get_context("http_version") or "http2"

        # region IAM Policies
        cloudfront_policy = iam.PolicyStatement(
            effect=iam.Effect.ALLOW,
            actions=[
                "cloudfront:CreateDistribution",
                "cloudfront:GetDistributionConfig",
                "cloudfront:UpdateDistribution",
                "cloudfront:DeleteDistribution",
                "cloudfront:CreateInvalidation",
                "cloudfront:CreateCloudFrontOriginAccessIdentity",
            ],
            resources=["*"],
        )
        bucket_policy = iam.PolicyStatement(
            effect=iam.Effect.ALLOW,
            actions=["s3:GetBucketPolicy", "s3:PutBucketPolicy"],
            resources=["arn:aws:s3:::*"],
        )
        # endregion

        # region Lambda Functions
        core_layer = CustomPackageLayer(
            self,
            "CdnCoreLayer",
            package_name="cdn_core",
            stack_suffix=self.stack_suffix,
        ).layer

        self.provisioner_lambda = CustomLambdaFunction(
            self,
            "CdnProvisionerLambda",
            src_folder_path="cdn-provisioner",
            layers=[core_layer],
            stack_suffix=self.stack_suffix,
            timeout=Duration.minutes(2),
            environment={
                "DISTRIBUTION_PRICE_CLASS": self.price_class,
                "DISTRIBUTION_HTTP_VERSION": self.http_version,
            },
            initial_policy=[cloudfront_policy, bucket_policy],
            description="Creates, updates and deletes CloudFront distributions",
        ).function
        # endregion

        CfnOutput(
            self,
            "CdnProvisionerFunctionName",
            value=self.provisioner_lambda.function_name,
            description="Name of the CDN provisioner Lambda function",
        )
