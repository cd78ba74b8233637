from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence
from aws_cdk import (
    CfnOutput,
    Duration,
    aws_certificatemanager as acm,
    aws_cloudfront as cloudfront,
    aws_cloudfront_origins as origins,
    aws_iam as iam,
    aws_route53 as route53,
    aws_route53_targets as targets,
    aws_s3_deployment as s3deploy
)
from constructs import Construct

from static_site.bucket import SecureBucket
from static_site.topology import (
    WebsiteRequest,
    domain_to_resource_identifier,
    resolve_topology,
    unique_in_order
)


@dataclass
class WebsiteProps:
    """
    Configures the hosted website.

    domain_name: domain with an existing Route53 hosted zone (required).
    sub_domain: site is served under www.<sub_domain>.<domain_name>; None or 'www' serves www.<domain_name>.
    additional_domains: extra hostnames added to the certificate, the distribution and DNS. Default: none.
    path_to_content: local directory uploaded to the bucket. Default: 'build'.
    default_root_object: CloudFront root object. Default: 'index.html'.
    error_response_page_path: page served on 403, must begin with '/'. Default: '/error.html'.
    bucket_policy_actions: actions granted to the OAI on top of s3:GetObject. Default: none.
    bucket_props: s3.Bucket keyword overrides for the content bucket. bucket_name is always the site domain.
    origin_access_identity: existing OAI to reuse instead of creating one.
    enable_cloudfront_logging: turns on CloudFront access logging. Default: False.
    default_behavior: cloudfront.BehaviorOptions keyword overrides. origin, compress and allowed_methods are fixed.
    hosted_zone: pre-resolved hosted zone; looked up from domain_name when omitted.
    """
    domain_name: str
    sub_domain: Optional[str] = None
    additional_domains: Sequence[str] = field(default_factory=tuple)
    path_to_content: str = "build"
    default_root_object: str = "index.html"
    error_response_page_path: str = "/error.html"
    bucket_policy_actions: Sequence[str] = field(default_factory=tuple)
    bucket_props: Optional[Dict[str, Any]] = None
    origin_access_identity: Optional[cloudfront.OriginAccessIdentity] = None
    enable_cloudfront_logging: bool = False
    default_behavior: Optional[Dict[str, Any]] = None
    hosted_zone: Optional[route53.IHostedZone] = None

    def __post_init__(self):
        if not self.error_response_page_path.startswith("/"):
            raise ValueError(
                f"error_response_page_path must begin with '/', got '{self.error_response_page_path}'"
            )

    def to_request(self) -> WebsiteRequest:
        return WebsiteRequest(
            base_domain=self.domain_name,
            sub_domain=self.sub_domain,
            additional_domains=self.additional_domains,
            content_path=self.path_to_content
        )


class StaticWebsite(Construct):
    """
    Static website served from a private S3 bucket through CloudFront:
    1. Content bucket readable only through an Origin Access Identity.
    2. DNS-validated certificate covering every site hostname.
    3. CloudFront distribution with Route53 alias records for each hostname.
    4. Content upload with a full cache invalidation.

    Assumes a Route53 hosted zone already exists for props.domain_name.
    """
    def __init__(self, scope: Construct, construct_id: str, props: WebsiteProps) -> None:
        super().__init__(scope, construct_id)

        request = props.to_request()
        self.topology = resolve_topology(request)
        domain_id = self.topology.resource_identifier
        site_domain = self.topology.site_domain

        # =================================================================
        # 1. DNS ZONE & ORIGIN ACCESS IDENTITY
        # =================================================================
        self.hosted_zone = props.hosted_zone or route53.HostedZone.from_lookup(
            self, f"{domain_id}Zone",
            domain_name=request.base_domain
        )

        self.origin_access_identity = props.origin_access_identity or cloudfront.OriginAccessIdentity(
            self, "OriginAccessIdentity",
            comment=f"OAI for {construct_id}"
        )

        # =================================================================
        # 2. CONTENT BUCKET
        # =================================================================
        self.website_bucket = SecureBucket(self, "WebsiteBucket", **{
            **(props.bucket_props or {}),
            "bucket_name": site_domain
        })

        self.website_bucket.add_to_resource_policy(iam.PolicyStatement(
            actions=[*props.bucket_policy_actions, "s3:GetObject"],
            resources=[self.website_bucket.arn_for_objects("*")],
            principals=[
                iam.CanonicalUserPrincipal(
                    self.origin_access_identity.cloud_front_origin_access_identity_s3_canonical_user_id
                )
            ]
        ))

        # =================================================================
        # 3. CERTIFICATE (DNS validated)
        # =================================================================
        self.certificate = acm.Certificate(self, f"{domain_id}Cert",
            domain_name=site_domain,
            subject_alternative_names=list(unique_in_order(self.topology.certificate_domains)),
            validation=acm.CertificateValidation.from_dns(self.hosted_zone)
        )

        # =================================================================
        # 4. CLOUDFRONT DISTRIBUTION
        # =================================================================
        default_behavior = cloudfront.BehaviorOptions(**{
            **(props.default_behavior or {}),
            "origin": origins.S3BucketOrigin.with_origin_access_identity(
                self.website_bucket,
                origin_access_identity=self.origin_access_identity
            ),
            "compress": True,
            "allowed_methods": cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS
        })

        self.cdn = cloudfront.Distribution(self, f"{domain_id}Distribution",
            certificate=self.certificate,
            enable_logging=props.enable_cloudfront_logging,
            default_root_object=props.default_root_object,
            domain_names=list(self.topology.distribution_domains),
            error_responses=[
                cloudfront.ErrorResponse(
                    http_status=403,
                    response_http_status=403,
                    response_page_path=props.error_response_page_path,
                    ttl=Duration.minutes(30)
                )
            ],
            default_behavior=default_behavior
        )

        # =================================================================
        # 5. DNS RECORDS (Route53)
        # =================================================================
        self.alias_record = route53.ARecord(self, f"{domain_id}AliasRecord",
            zone=self.hosted_zone,
            record_name=f"{site_domain}.",
            target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(self.cdn))
        )

        # Fully qualified names so hostnames outside the zone are not made relative to it
        self.additional_alias_records = [
            route53.ARecord(self, f"{domain_to_resource_identifier(domain)}AdditionalAliasRecord",
                zone=self.hosted_zone,
                record_name=f"{domain}.",
                target=route53.RecordTarget.from_alias(targets.Route53RecordTarget(self.alias_record))
            )
            for domain in self.topology.certificate_domains
        ]

        # =================================================================
        # 6. CONTENT DEPLOYMENT
        # =================================================================
        self.deployment = s3deploy.BucketDeployment(self, "DeployWithInvalidation",
            sources=[s3deploy.Source.asset(request.content_path)],
            destination_bucket=self.website_bucket,
            distribution=self.cdn,
            distribution_paths=["/*"]
        )

        # =================================================================
        # 7. OUTPUTS
        # =================================================================
        CfnOutput(self, "Bucket", value=self.website_bucket.bucket_name)
        CfnOutput(self, "Certificate", value=self.certificate.certificate_arn)
        CfnOutput(self, "DistributionId", value=self.cdn.distribution_id)
        CfnOutput(self, "WebsiteUrl", value=f"https://{site_domain}")
        for domain in self.topology.certificate_domains:
            CfnOutput(self, f"{domain_to_resource_identifier(domain)}Url", value=f"https://{domain}")
