import re
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Tuple

# The sub-domain value treated the same as "no sub-domain"
DEFAULT_SUB_DOMAIN = "www"
DOMAIN_SEPARATOR_TOKEN = "Dot"

_CAMEL_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_CAMEL_UPPER_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]+")


@dataclass(frozen=True)
class WebsiteRequest:
    """
    Input of the topology computation.
    additional_domains accepts any sequence and is stored as a tuple.
    """
    base_domain: str
    sub_domain: Optional[str] = None
    additional_domains: Tuple[str, ...] = field(default_factory=tuple)
    content_path: str = "build"

    def __post_init__(self):
        object.__setattr__(self, "additional_domains", tuple(self.additional_domains or ()))


@dataclass(frozen=True)
class ResolvedTopology:
    site_domain: str
    certificate_domains: Tuple[str, ...]
    distribution_domains: Tuple[str, ...]
    resource_identifier: str


def _has_custom_sub_domain(request: WebsiteRequest) -> bool:
    return bool(request.sub_domain) and request.sub_domain != DEFAULT_SUB_DOMAIN


def compute_site_domain(request: WebsiteRequest) -> str:
    """
    Returns the www-prefixed hostname that serves the content.
    'shop' + 'example.com' -> 'www.shop.example.com', no sub-domain -> 'www.example.com'
    """
    if _has_custom_sub_domain(request):
        return f"www.{request.sub_domain}.{request.base_domain}"
    return f"www.{request.base_domain}"


def compute_certificate_domains(request: WebsiteRequest) -> Tuple[str, ...]:
    """
    Returns the bare primary domain followed by every additional domain, in input order.
    Duplicates are kept as given.
    """
    if _has_custom_sub_domain(request):
        primary = f"{request.sub_domain}.{request.base_domain}"
    else:
        primary = request.base_domain
    return (primary, *request.additional_domains)


def compute_distribution_domains(request: WebsiteRequest) -> Tuple[str, ...]:
    return (*compute_certificate_domains(request), compute_site_domain(request))


def pascal_case(value: str) -> str:
    """
    Converts a string such as 'my-site' or 'mySite' to 'MySite'.
    Words are split on camel-case boundaries and on any run of non-alphanumeric
    characters; digit-leading words after the first are prefixed with '_'.

    Reproduces the npm `pascal-case` package (v3) exactly, including the '_'
    digit prefix ('site-2go' -> 'Site_2go'). Logical ids of deployed resources
    are derived from it, so replacing it with inflection or pyhumps would
    rename (and replace) existing resources.
    """
    value = _CAMEL_LOWER_UPPER.sub(r"\1 \2", value)
    value = _CAMEL_UPPER_WORD.sub(r"\1 \2", value)
    value = _NON_ALPHANUMERIC.sub(" ", value)

    words = []
    for index, word in enumerate(value.split()):
        first, rest = word[0], word[1:].lower()
        if index > 0 and first.isdigit():
            words.append(f"_{first}{rest}")
        else:
            words.append(f"{first.upper()}{rest}")
    return "".join(words)


def domain_to_resource_identifier(
    domain: str,
    word_case: Callable[[str], str] = pascal_case
) -> str:
    """
    Builds a logical-id fragment from a domain: 'my-site.example.com' -> 'MySiteDotExampleDotCom'.

    Only the first '-' left after word casing is removed. With the default
    pascal_case no hyphen survives, so this only shows with a custom word_case.
    """
    identifier = "".join(f"{word_case(part)}{DOMAIN_SEPARATOR_TOKEN}" for part in domain.split("."))
    identifier = identifier.replace("-", "", 1)
    return identifier[:identifier.rfind(DOMAIN_SEPARATOR_TOKEN)]


def resolve_topology(request: WebsiteRequest) -> ResolvedTopology:
    return ResolvedTopology(
        site_domain=compute_site_domain(request),
        certificate_domains=compute_certificate_domains(request),
        distribution_domains=compute_distribution_domains(request),
        resource_identifier=domain_to_resource_identifier(request.base_domain)
    )


def unique_in_order(values: Sequence[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(values))
