#!/usr/bin/env python3
# Standard Library
import os

# Third Party
import aws_cdk as cdk

# Local Modules
from cdk.stacks import CdnProvisionerStack

app = cdk.App()

stack_suffix = app.node.try_get_context("stack_suffix") or ""

CdnProvisionerStack(
    app,
    f"CdnProvisionerStack{stack_suffix}",
    stack_suffix=stack_suffix,
    env=cdk.Environment(
        account=os.getenv("CDK_DEFAULT_ACCOUNT"),
        region=os.getenv("CDK_DEFAULT_REGION", "us-east-1"),
    ),
)

app.synth()
