import pytest

from static_site.topology import (
    WebsiteRequest,
    compute_certificate_domains,
    compute_distribution_domains,
    compute_site_domain,
    domain_to_resource_identifier,
    pascal_case,
    resolve_topology,
    unique_in_order
)


@pytest.mark.parametrize("sub_domain", [None, "", "www"])
def test_site_domain_without_custom_sub_domain(sub_domain):
    request = WebsiteRequest(base_domain="example.com", sub_domain=sub_domain)
    assert compute_site_domain(request) == "www.example.com"


def test_site_domain_with_sub_domain():
    request = WebsiteRequest(base_domain="example.com", sub_domain="shop")
    assert compute_site_domain(request) == "www.shop.example.com"


def test_certificate_domains_keep_input_order_and_duplicates():
    request = WebsiteRequest(
        base_domain="example.com",
        additional_domains=["b.example.com", "a.example.com", "b.example.com"]
    )
    assert compute_certificate_domains(request) == (
        "example.com", "b.example.com", "a.example.com", "b.example.com"
    )


@pytest.mark.parametrize("additional", [[], ["alt.example.com"], ["a.io", "b.io", "c.io"]])
def test_domain_counts(additional):
    request = WebsiteRequest(base_domain="example.com", sub_domain="shop", additional_domains=additional)
    certificate_domains = compute_certificate_domains(request)
    distribution_domains = compute_distribution_domains(request)

    assert len(certificate_domains) == 1 + len(additional)
    assert len(distribution_domains) == 2 + len(additional)
    assert distribution_domains == certificate_domains + (compute_site_domain(request),)
    assert distribution_domains.count(compute_site_domain(request)) == 1


def test_apex_site():
    topology = resolve_topology(WebsiteRequest(base_domain="example.com"))

    assert topology.site_domain == "www.example.com"
    assert topology.certificate_domains == ("example.com",)
    assert topology.distribution_domains == ("example.com", "www.example.com")
    assert topology.resource_identifier == "ExampleDotCom"


def test_sub_domain_site():
    topology = resolve_topology(WebsiteRequest(base_domain="example.com", sub_domain="shop"))

    assert topology.site_domain == "www.shop.example.com"
    assert topology.certificate_domains == ("shop.example.com",)
    assert topology.distribution_domains == ("shop.example.com", "www.shop.example.com")
    # Identifier always follows the base domain
    assert topology.resource_identifier == "ExampleDotCom"


def test_additional_domains_site():
    topology = resolve_topology(
        WebsiteRequest(base_domain="example.com", additional_domains=["alt.example.com"])
    )

    assert topology.certificate_domains == ("example.com", "alt.example.com")
    assert topology.distribution_domains == ("example.com", "alt.example.com", "www.example.com")


def test_request_is_immutable():
    request = WebsiteRequest(base_domain="example.com", additional_domains=["alt.example.com"])

    assert request.additional_domains == ("alt.example.com",)
    assert request.content_path == "build"
    with pytest.raises(AttributeError):
        request.base_domain = "other.com"


@pytest.mark.parametrize("value, expected", [
    ("example", "Example"),
    ("my-site", "MySite"),
    ("mySite", "MySite"),
    ("MY_SITE", "MySite"),
    ("XMLHttp", "XmlHttp"),
    ("ft-k3x9a", "FtK3x9a"),
    ("site-2go", "Site_2go"),
    ("--", ""),
])
def test_pascal_case(value, expected):
    assert pascal_case(value) == expected


@pytest.mark.parametrize("domain, expected", [
    ("example.com", "ExampleDotCom"),
    ("my-site.example.com", "MySiteDotExampleDotCom"),
    ("my-app.example.com", "MyAppDotExampleDotCom"),
    ("ft-ab12c.example.co.uk", "FtAb12cDotExampleDotCoDotUk"),
])
def test_domain_to_resource_identifier(domain, expected):
    assert domain_to_resource_identifier(domain) == expected


def test_resource_identifier_is_deterministic():
    first = domain_to_resource_identifier("my-site.example.com")
    assert all(domain_to_resource_identifier("my-site.example.com") == first for _ in range(5))


def test_resource_identifier_strips_only_first_hyphen():
    # Identity casing leaves hyphens in place, showing the single strip
    assert domain_to_resource_identifier("a-b-c.example.com", word_case=str) == "ab-cDotexampleDotcom"
    assert domain_to_resource_identifier("a-b.c-d.com", word_case=str) == "abDotc-dDotcom"


def test_unique_in_order():
    assert unique_in_order(["b", "a", "b", "c", "a"]) == ("b", "a", "c")


def test_resource_identifier_keeps_digit_prefix_of_npm_pascal_case():
    # Changing this rule renames every logical id derived from the domain
    assert domain_to_resource_identifier("site-2go.example.com") == "Site_2goDotExampleDotCom"
