from .url import normalize_url, has_scheme, direct_urls
from .registry import (
    VersionRegistry,
    VersionNotFoundError,
    CURRENT_CORE_API_VERSION,
    CURRENT_PLUGIN_API_VERSION
)

__all__ = [
    'normalize_url',
    'has_scheme',
    'direct_urls',
    'VersionRegistry',
    'VersionNotFoundError',
    'CURRENT_CORE_API_VERSION',
    'CURRENT_PLUGIN_API_VERSION'
]
