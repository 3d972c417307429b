"""Localized message bundles."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional

from .template import fill

DEFAULT_LOCALE = "en"

CONFIG_FILE_NOT_FOUND = "config.file_not_found"
CONFIG_FILE_UNREADABLE = "config.file_unreadable"
CONFIG_INVALID_JSON = "config.invalid_json"
CONFIG_INVALID_SCHEMA = "config.invalid_schema"

BUNDLES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "en": MappingProxyType(
            {
                CONFIG_FILE_NOT_FOUND: "Sitemap configuration {{ path|quote }} does not exist.",
                CONFIG_FILE_UNREADABLE: "Sitemap configuration {{ path|quote }} could not be read: {{ reason }}",
                CONFIG_INVALID_JSON: (
                    "Sitemap configuration {{ path|quote }} is not valid JSON "
                    "(line {{ line }}, column {{ column }})."
                ),
                CONFIG_INVALID_SCHEMA: (
                    "Sitemap configuration {{ path|quote }} is invalid: {{ errors|join }}"
                ),
            }
        ),
        "de": MappingProxyType(
            {
                CONFIG_FILE_NOT_FOUND: "Die Sitemap-Konfiguration {{ path|quote }} existiert nicht.",
                CONFIG_FILE_UNREADABLE: (
                    "Die Sitemap-Konfiguration {{ path|quote }} konnte nicht gelesen werden: {{ reason }}"
                ),
                CONFIG_INVALID_JSON: (
                    "Die Sitemap-Konfiguration {{ path|quote }} ist kein gültiges JSON "
                    "(Zeile {{ line }}, Spalte {{ column }})."
                ),
                CONFIG_INVALID_SCHEMA: (
                    "Die Sitemap-Konfiguration {{ path|quote }} ist ungültig: {{ errors|join }}"
                ),
            }
        ),
    }
)


def _bundle_for(locale: Optional[str]) -> Mapping[str, str]:
    if locale:
        candidates = [locale, locale.replace("-", "_").split("_", 1)[0]]
        for candidate in candidates:
            bundle = BUNDLES.get(candidate.lower())
            if bundle is not None:
                return bundle
    return BUNDLES[DEFAULT_LOCALE]


def localize(key: str, arguments: Mapping[str, Any] | None = None, locale: Optional[str] = None) -> str:
    """Render the message ``key`` for ``locale``.

    Missing locales fall back to :data:`DEFAULT_LOCALE`, keys missing from the
    selected bundle are looked up there as well. Unknown keys render as
    ``??? key ???`` so they stay visible instead of failing.
    """

    template = _bundle_for(locale).get(key) or BUNDLES[DEFAULT_LOCALE].get(key)
    if template is None:
        return f"??? {key} ???"
    return fill(template, arguments or {})


__all__ = [
    "BUNDLES",
    "CONFIG_FILE_NOT_FOUND",
    "CONFIG_FILE_UNREADABLE",
    "CONFIG_INVALID_JSON",
    "CONFIG_INVALID_SCHEMA",
    "DEFAULT_LOCALE",
    "localize",
]
