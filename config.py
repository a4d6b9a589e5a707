"""
Stack configuration loaded from pulumi.Config().

Provides a typed, immutable view of the site settings. Values come from
Pulumi config (Pulumi.<stack>.yaml or ``pulumi config set``). Every key is
optional: an unset or empty key falls back to its default, a set key is used
verbatim. Nothing is validated here; a wrong ``path`` surfaces when the
synced folder runs.
"""

from dataclasses import dataclass

import pulumi


def _get_str(config: pulumi.Config, key: str, default: str) -> str:
    return config.get(key) or default


# (attribute, config key, default)
_CONFIG_SPEC: list[tuple[str, str, str]] = [
    ("path", "path", "./www"),
    ("index_document", "indexDocument", "index.html"),
    ("error_document", "errorDocument", "error.html"),
]


@dataclass(frozen=True)
class SiteConfig:
    """
    Site configuration from Pulumi config.

    Attributes:
        path: Local directory synced into the bucket (default ``./www``).
        index_document: Website index document suffix (default ``index.html``).
        error_document: Website error document key, also served by the CDN
            for origin 404s (default ``error.html``).
    """

    path: str
    index_document: str
    error_document: str

    @classmethod
    def from_pulumi_config(cls, config: pulumi.Config) -> "SiteConfig":
        """
        Build SiteConfig from pulumi.Config(). Keys missing from config take
        the defaults in _CONFIG_SPEC.
        """
        kwargs = {
            attr: _get_str(config, key, default)
            for attr, key, default in _CONFIG_SPEC
        }
        return cls(**kwargs)
