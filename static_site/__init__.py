from static_site.bucket import SecureBucket
from static_site.topology import (
    ResolvedTopology,
    WebsiteRequest,
    compute_certificate_domains,
    compute_distribution_domains,
    compute_site_domain,
    domain_to_resource_identifier,
    pascal_case,
    resolve_topology
)
from static_site.website import StaticWebsite, WebsiteProps

__all__ = [
    "ResolvedTopology",
    "SecureBucket",
    "StaticWebsite",
    "WebsiteProps",
    "WebsiteRequest",
    "compute_certificate_domains",
    "compute_distribution_domains",
    "compute_site_domain",
    "domain_to_resource_identifier",
    "pascal_case",
    "resolve_topology",
]
