from aws_cdk import (
    RemovalPolicy,
    aws_s3 as s3
)
from constructs import Construct


class SecureBucket(s3.Bucket):
    """
    S3 bucket with private, encrypted, versioned defaults.
    Any default can be overridden by passing the matching s3.Bucket keyword.
    """
    DEFAULTS = {
        "encryption": s3.BucketEncryption.S3_MANAGED,
        "block_public_access": s3.BlockPublicAccess.BLOCK_ALL,
        "enforce_ssl": True,
        "versioned": True,
        "removal_policy": RemovalPolicy.RETAIN,
    }

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        props = {**self.DEFAULTS, **kwargs}

        # CDK rejects auto_delete_objects unless the bucket is destroyed with the stack
        if props.get("removal_policy") != RemovalPolicy.DESTROY:
            props.pop("auto_delete_objects", None)

        super().__init__(scope, construct_id, **props)
