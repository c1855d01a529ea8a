"""
Main CDK Stack for the ticket verification service.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.storage import StorageConstruct
from infrastructure.constructs.data_layer import DataLayerConstruct
from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class TicketVerificationStack(Stack):
    """Main stack wiring all constructs together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Global tags for cost/accounting.
        Tags.of(self).add("Project", "ticket-verification")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        # 1) Network + ticket image bucket.
        storage_construct = StorageConstruct(
            self,
            "Storage",
            environment=settings.environment,
            images_bucket_name=settings.images_bucket_name,
        )

        # 2) Data layer.
        data_construct = DataLayerConstruct(
            self,
            "DataLayer",
            environment=settings.environment,
            vpc=storage_construct.vpc,
            db_instance_class=settings.db_instance_class,
            db_allocated_storage=settings.db_allocated_storage,
        )

        # 3) API layer (single Lambda).
        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            vpc=storage_construct.vpc,
            db_secret_arn=data_construct.db_secret.secret_arn,
            images_bucket_name=storage_construct.images_bucket.bucket_name,
            validity_window_days=settings.validity_window_days,
            max_edit_distance=settings.max_edit_distance,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
        )

        # Permissions for the API Lambda.
        storage_construct.images_bucket.grant_put(api_construct.main_lambda)
        data_construct.db_secret.grant_read(api_construct.main_lambda)
        data_construct.db_instance.connections.allow_default_port_from(
            api_construct.main_lambda
        )

        # Outputs to quickly find resources.
        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "TicketImagesBucket", value=storage_construct.images_bucket.bucket_name)
        CfnOutput(self, "DbSecretArn", value=data_construct.db_secret.secret_arn)
