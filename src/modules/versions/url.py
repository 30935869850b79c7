import re

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
# Authority with no path after it, only an optional query or fragment
_BARE_AUTHORITY = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*://[^/?#]+)(?=[?#]|$)")
_SLASH_RUN = re.compile(r"(?<!:)/{2,}")


def has_scheme(url: str) -> bool:
    return _SCHEME.match(url) is not None


def normalize_url(url: str) -> str:
    """
    Canonical form of a specification URL.

    Relative URLs start with ``/``; an absolute URL with nothing but a
    query or fragment after its authority gets a ``/`` right after the
    authority; runs of ``/`` collapse to one except right after the scheme
    colon. ``normalize_url`` is idempotent.
    
    Args:
        url: Relative or absolute URL
        
    Returns:
        str: The normalized URL
    """
    if has_scheme(url):
        url = _SLASH_RUN.sub("/", url)
        return _BARE_AUTHORITY.sub(r"\1/", url)

    if not url.startswith("/"):
        url = "/" + url
    return _SLASH_RUN.sub("/", url)


def direct_urls(url: str) -> tuple[str, str]:
    """REST URLs served without the UI prefix, with and without ``/rest``."""
    rest_url = url.replace("/swagger-ui/plugin/", "/plugin/")
    rest_url = rest_url.replace("/swagger-ui/rest/api/", "/rest/api/")
    rest_url = rest_url.replace("/swagger-ui/api/", "/rest/api/")
    return rest_url, rest_url.replace("/rest/api/", "/api/")
