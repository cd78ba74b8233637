import random
import string
from typing import Any
from aws_cdk import Stack
from constructs import Construct

from static_site.website import StaticWebsite, WebsiteProps


def random_sub_domain(prefix: str = "ft", length: int = 5) -> str:
    """
    Generates a throwaway sub-domain such as 'ft-k3x9a' so repeated runs never share a bucket name.
    """
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=length))
    return f"{prefix}-{suffix}"


class SmokeTestStack(Stack):
    """
    Deploys a single StaticWebsite end to end against a real hosted zone.
    Deploy and destroy with scripts/deploy-smoke-test.sh and scripts/destroy-smoke-test.sh.
    """
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: Any,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.website = StaticWebsite(self, "TestWebSite", WebsiteProps(
            domain_name=config.domain_name,
            sub_domain=config.sub_domain or random_sub_domain(),
            additional_domains=config.additional_domains,
            path_to_content=config.content_path,
            bucket_props={
                "removal_policy": config.removal_policy,
                "auto_delete_objects": config.auto_delete_objects
            }
        ))
