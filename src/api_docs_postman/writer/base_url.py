"""Base URL resolution with a fallback to the configured value."""

import logging
from typing import Callable, NamedTuple

logger = logging.getLogger(__name__)

BaseUrlResolver = Callable[[str | None], str]


class BaseUrlError(ValueError):
    """Raised when no application root can be determined."""


class ResolvedBaseUrl(NamedTuple):
    value: str
    fallback: bool  # True when the resolver failed and the configured value was kept


def format_root(base_url: str | None, app_url: str | None = None) -> str:
    """Return the application root URL without trailing slashes.

    Uses ``base_url`` when given, otherwise ``app_url``.
    """
    root = base_url or app_url
    if not root:
        raise BaseUrlError("No base URL configured and no application URL to fall back on")
    return root.rstrip("/")


def resolve_base_url(configured: str | None, resolver: BaseUrlResolver = format_root) -> ResolvedBaseUrl:
    """Resolve the effective base URL once. Never raises."""
    try:
        return ResolvedBaseUrl(resolver(configured), False)
    except Exception as e:
        logger.warning("Could not resolve base URL (%s); using configured value %r", e, configured)
        return ResolvedBaseUrl(configured or "", True)
