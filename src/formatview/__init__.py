"""Resolve which formatters a sitemap offers for a content resource type.

The package filters a sitemap configuration snapshot down to the formatters
that apply to one resource type and indexes them by the container types they
render into. Results are exposed as read-only views wrapped for templates.
"""

from __future__ import annotations

from .config import load_sitemap_config, parse_sitemap_config
from .errors import ConfigurationError, LocalizedError, MessageContainer
from .index import FormatterIndex, FormatterIndexBuilder, ResourceTypeFormatterView
from .info import FormatterInfo, FormatterWrapper, wrap_formatter
from .interfaces import FormatterLike, FormatterSource, ResourceTypeLike
from .schema import FormatterDescriptor, ResourceType, SitemapConfig

__all__ = [
    "ConfigurationError",
    "FormatterDescriptor",
    "FormatterIndex",
    "FormatterIndexBuilder",
    "FormatterInfo",
    "FormatterLike",
    "FormatterSource",
    "FormatterWrapper",
    "LocalizedError",
    "MessageContainer",
    "ResourceType",
    "ResourceTypeFormatterView",
    "ResourceTypeLike",
    "SitemapConfig",
    "load_sitemap_config",
    "parse_sitemap_config",
    "wrap_formatter",
]

__version__ = "0.1.0"
