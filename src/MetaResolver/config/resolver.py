"""Resolver domain configuration (identifier service and transport)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from MetaResolver.config.common import (
    expect_bool,
    expect_float,
    expect_str,
    get_optional_value,
    get_section,
)
from MetaResolver.core.location import DEFAULT_RESOLVER_URL


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Resolver configuration.

    Attributes:
        base_url: DOI resolver base URL.
        timeout: Per-request timeout in seconds, enforced by the transport.
        citation_style: Default style for formatted citations.
        parallel: Issue JSON and citation requests concurrently.
        mailto_env: Environment variable holding a contact email.
    """

    base_url: str = DEFAULT_RESOLVER_URL
    timeout: float = 30.0
    citation_style: str = "apa"
    parallel: bool = False
    mailto_env: str = "METARESOLVER_MAILTO"


def load_resolver(raw: Mapping[str, Any]) -> ResolverConfig:
    """Load resolver config from the ``resolver`` section."""
    section = get_section(raw, "resolver", required=False)
    return ResolverConfig(
        base_url=expect_str(get_optional_value(section, "base_url", DEFAULT_RESOLVER_URL), "resolver.base_url"),
        timeout=expect_float(get_optional_value(section, "timeout", 30.0), "resolver.timeout"),
        citation_style=expect_str(get_optional_value(section, "citation_style", "apa"), "resolver.citation_style"),
        parallel=expect_bool(get_optional_value(section, "parallel", False), "resolver.parallel"),
        mailto_env=expect_str(
            get_optional_value(section, "mailto_env", "METARESOLVER_MAILTO"),
            "resolver.mailto_env",
        ),
    )


def check_resolver(config: ResolverConfig) -> None:
    """Validate resolver domain constraints."""
    if not config.base_url.startswith(("http://", "https://")):
        raise ValueError("resolver.base_url must be an http(s) URL")
    if config.timeout <= 0:
        raise ValueError("resolver.timeout must be > 0")
    if not config.citation_style.strip():
        raise ValueError("resolver.citation_style must not be empty")
