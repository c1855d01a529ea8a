"""
Storage construct.

Creates:
- Cost-optimized VPC shared across constructs (no NAT for dev to save cost)
- S3 bucket for uploaded ticket images, readable through public object URLs
"""

from aws_cdk import (
    RemovalPolicy,
    aws_ec2 as ec2,
    aws_iam as iam,
    aws_s3 as s3,
)
from constructs import Construct


class StorageConstruct(Construct):
    """Provision the network and the ticket image bucket."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        images_bucket_name: str,
    ) -> None:
        super().__init__(scope, construct_id)

        # Shared VPC: no NAT in dev; endpoints cover S3 and Secrets Manager.
        self.vpc = ec2.Vpc(
            self,
            "Vpc",
            max_azs=2,
            nat_gateways=0 if environment != "prod" else 1,
            subnet_configuration=[
                ec2.SubnetConfiguration(
                    name="Public",
                    subnet_type=ec2.SubnetType.PUBLIC,
                    cidr_mask=24,
                ),
                ec2.SubnetConfiguration(
                    name="Private",
                    subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS
                    if environment == "prod"
                    else ec2.SubnetType.PRIVATE_ISOLATED,
                    cidr_mask=24,
                ),
            ],
        )

        self.vpc.add_gateway_endpoint(
            "S3Endpoint",
            service=ec2.GatewayVpcEndpointAwsService.S3,
        )
        self.vpc.add_interface_endpoint(
            "SecretsManagerEndpoint",
            service=ec2.InterfaceVpcEndpointAwsService.SECRETS_MANAGER,
        )

        # Ticket images are linked from reviews, so objects are publicly readable.
        self.images_bucket = s3.Bucket(
            self,
            "TicketImages",
            bucket_name=f"{images_bucket_name}-{environment}",
            block_public_access=s3.BlockPublicAccess(
                block_public_acls=True,
                ignore_public_acls=True,
                block_public_policy=False,
                restrict_public_buckets=False,
            ),
            encryption=s3.BucketEncryption.S3_MANAGED,
            enforce_ssl=True,
            removal_policy=RemovalPolicy.RETAIN if environment == "prod" else RemovalPolicy.DESTROY,
            auto_delete_objects=environment != "prod",
        )
        self.images_bucket.add_to_resource_policy(
            iam.PolicyStatement(
                actions=["s3:GetObject"],
                resources=[self.images_bucket.arn_for_objects("*")],
                principals=[iam.AnyPrincipal()],
            )
        )
