import os
from typing import List, Optional
import tldextract
from dotenv import load_dotenv
from aws_cdk import RemovalPolicy

# Load environment variables from a .env file
load_dotenv()

# Bundled public suffix snapshot only, no network fetch during synth
_extract_domain = tldextract.TLDExtract(suffix_list_urls=())

CERTIFICATE_REGION = "us-east-1"
DEFAULT_REGION = CERTIFICATE_REGION


class EnvConfig:
    """
    Stores environment-specific configuration for the smoke test stack.
    """
    def __init__(
        self,
        env_name: str,
        account: Optional[str],
        region: str,
        domain: str,
        sub_domain: Optional[str] = None,
        additional_domains: Optional[List[str]] = None,
        content_path: str = "build"
    ):
        self.name = env_name
        self.account = account
        self.region = region
        self.domain_name = domain
        self.sub_domain = sub_domain
        self.additional_domains = additional_domains or []
        self.content_path = content_path

        # Data Lifecycle Policy:
        # In 'prod', we retain resources and disable auto-delete to prevent data loss.
        # In other environments, we clean up to save costs.
        if env_name == 'prod':
            self.removal_policy = RemovalPolicy.RETAIN
            self.auto_delete_objects = False
        else:
            self.removal_policy = RemovalPolicy.DESTROY
            self.auto_delete_objects = True


def get_required_env(key: str) -> str:
    """
    Retrieves a required environment variable or raises a RuntimeError if missing.
    """
    value = os.getenv(key)
    if not value:
        raise RuntimeError(f"❌ MISSING CONFIG: Required environment variable '{key}' not found in .env")
    return value


def split_domain(fqdn: str):
    """
    Splits 'shop.example.com' into the hosted zone domain ('example.com') and
    the sub-domain ('shop', or None for an apex domain).
    """
    extracted = _extract_domain(fqdn)
    if not extracted.suffix:
        return fqdn, None
    zone_name = f"{extracted.domain}.{extracted.suffix}"
    return zone_name, extracted.subdomain or None


def parse_domain_list(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [domain.strip() for domain in value.split(",") if domain.strip()]


def get_config(scope) -> EnvConfig:
    """
    Factory function to generate the EnvConfig object based on CDK context.
    Usage: cdk deploy -c env=prod
    """
    # Default to 'dev' environment if no context is provided
    env_name = scope.node.try_get_context("env") or "dev"

    print(f"🔍 Initializing static website smoke test for environment: {env_name.upper()}")

    # Load Mandatory Variables
    domain = get_required_env("DOMAIN")

    # Load Optional Variables
    account = os.getenv("CDK_DEPLOY_ACCOUNT") or os.getenv("CDK_DEFAULT_ACCOUNT")
    region = os.getenv("CDK_DEPLOY_REGION") or os.getenv("CDK_DEFAULT_REGION") or DEFAULT_REGION
    sub_domain = os.getenv("SUB_DOMAIN")
    additional_domains = parse_domain_list(os.getenv("ADDITIONAL_DOMAINS"))
    content_path = os.getenv("CONTENT_PATH") or "build"

    # A DOMAIN that carries its own sub-domain is split on the hosted zone boundary
    if not sub_domain:
        domain, sub_domain = split_domain(domain)

    if not account:
        print("⚠️ No account configured: hosted zone lookups will fail at synth time")

    # CloudFront only accepts ACM certificates issued in us-east-1
    if region != CERTIFICATE_REGION:
        print(f"⚠️ Region '{region}' is not {CERTIFICATE_REGION}: CloudFront will reject the site certificate")

    return EnvConfig(
        env_name=env_name,
        account=account,
        region=region,
        domain=domain,
        sub_domain=sub_domain,
        additional_domains=additional_domains,
        content_path=content_path
    )
