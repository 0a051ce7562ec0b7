# Standard Library
import os
from typing import Optional, List, Dict

# Third Party
from aws_cdk import (
    Duration,
    aws_iam as iam,
    aws_lambda as lambda_,
    BundlingOptions,
)
from constructs import Construct


class CustomPackageLayer(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        package_name: str,
        runtime: lambda_.Runtime = lambda_.Runtime.PYTHON_3_12,
        stack_suffix: Optional[str] = "",
        **kwargs,
    ) -> None:
        """Lambda layer bundling a local Python package from `src`.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        package_name : str
            Name of the package directory under `src`, e.g. "cdn_core".
        runtime : lambda_.Runtime, optional
            Runtime the layer is compatible with, by default
            lambda_.Runtime.PYTHON_3_12
        stack_suffix : Optional[str], optional
            Suffix to append to the layer name, by default ""
        """
        super().__init__(scope, id, **kwargs)

        name = package_name.replace("_", "-")
        if stack_suffix:
            name = f"{name}{stack_suffix}"

        # Lambda layers expose /opt/python on the import path
        self.layer = lambda_.LayerVersion(
            self,
            f"{name}-layer",
            layer_version_name=name,
            code=lambda_.Code.from_asset(
                os.path.join(os.getcwd(), "src"),
                bundling=BundlingOptions(
                    image=runtime.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        f"mkdir -p /asset-output/python && cp -r {package_name} /asset-output/python/",
                    ],
                ),
            ),
            compatible_runtimes=[runtime],
            description=f"Shared {package_name} package",
        )


class CustomLambdaFunction(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        src_folder_path: str,
        layers: Optional[List[lambda_.ILayerVersion]] = None,
        runtime: lambda_.Runtime = lambda_.Runtime.PYTHON_3_12,
        stack_suffix: Optional[str] = "",
        memory_size: Optional[int] = 256,
        timeout: Optional[Duration] = Duration.seconds(60),
        environment: Optional[Dict[str, str]] = None,
        initial_policy: Optional[List[iam.PolicyStatement]] = None,
        description: Optional[str] = None,
        **kwargs,
    ) -> None:
        """Custom Lambda Construct for AWS CDK from a source folder.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        src_folder_path : str
            Folder under `src` holding `handler.py`.
        layers : Optional[List[lambda_.ILayerVersion]], optional
            Layers to attach to the function, by default None
        runtime : lambda_.Runtime, optional
            Runtime for the Lambda function, by default lambda_.Runtime.PYTHON_3_12
        stack_suffix : Optional[str], optional
            Suffix to append to the Lambda function name, by default ""
        memory_size : Optional[int], optional
            Memory size for the Lambda function in MB, by default 256
        timeout : Optional[Duration], optional
            Timeout for the Lambda function, by default Duration.seconds(60)
        environment : Optional[Dict[str, str]], optional
            Environment variables for the Lambda function, by default None
        initial_policy : Optional[List[iam.PolicyStatement]], optional
            Initial IAM policy statements to attach to the Lambda function,
            by default None
        description : Optional[str], optional
            Description for the Lambda function, by default None
        """
        super().__init__(scope, id, **kwargs)

        name = os.path.basename(src_folder_path)
        code_path = os.path.join(os.getcwd(), "src", src_folder_path)

        if stack_suffix:
            name = f"{name}{stack_suffix}"

        requirements_path = os.path.join(code_path, "requirements.txt")
        if os.path.exists(requirements_path):
            code_asset = lambda_.Code.from_asset(
                code_path,
                bundling=BundlingOptions(
                    image=runtime.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        # Dependencies land next to the handler code
                        "pip install -r requirements.txt -t /asset-output/ && cp -r . /asset-output/",
                    ],
                ),
            )
        else:
            code_asset = lambda_.Code.from_asset(code_path)

        # Default environment variables for Powertools for AWS Lambda
        powertools_env_vars = {
            "POWERTOOLS_SERVICE_NAME": name,
            "LOG_LEVEL": "INFO",
            "POWERTOOLS_LOGGER_LOG_EVENT": "false",
        }

        if environment:
            powertools_env_vars.update(environment)

        self.function = lambda_.Function(
            self,
            f"{name}-function",
            function_name=name,
            layers=list(layers) if layers else [],
            runtime=runtime,
            handler="handler.lambda_handler",
            code=code_asset,
            memory_size=memory_size,
            timeout=timeout,
            environment=powertools_env_vars,
            initial_policy=initial_policy,
            description=description
            or f"Lambda function for {name}",
        )
