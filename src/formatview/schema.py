"""pydantic models describing a sitemap's formatter configuration."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _unique(values: Tuple[str, ...]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(values))


class FormatterDescriptor(BaseModel):
    """A formatter registered in a sitemap configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., min_length=1, description="Unique key of the formatter within the configuration.")
    id: Optional[str] = Field(None, description="Structure id of the formatter configuration, if known.")
    nice_name: Optional[str] = Field(None, description="Human readable name shown to editors.")
    description: str = Field("", description="Free text description of the formatter.")
    rank: int = Field(1000, description="Sort hint; lower ranks are preferred by editors.")
    active: bool = Field(True, description="Whether the formatter is enabled in this sitemap.")
    resource_type_names: Tuple[str, ...] = Field(
        default_factory=tuple, description="Resource types the formatter can render."
    )
    container_types: Tuple[str, ...] = Field(
        default_factory=tuple, description="Container types the formatter renders into."
    )

    @field_validator("resource_type_names", "container_types")
    @classmethod
    def _drop_duplicates(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return _unique(value)


class ResourceType(BaseModel):
    """A content resource type."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type_name: str = Field(..., description="Name of the resource type, e.g. ``article``.")


class SitemapConfig(BaseModel):
    """Snapshot of the formatters configured for a sitemap."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    formatters: Tuple[FormatterDescriptor, ...] = Field(
        default_factory=tuple, description="Formatters in declaration order."
    )

    @model_validator(mode="after")
    def _check_unique_keys(self) -> "SitemapConfig":
        seen: set[str] = set()
        for formatter in self.formatters:
            if formatter.key in seen:
                raise ValueError(f"duplicate formatter key '{formatter.key}'")
            seen.add(formatter.key)
        return self

    def active_formatters(self) -> Mapping[str, FormatterDescriptor]:
        """Return the enabled formatters keyed by :attr:`FormatterDescriptor.key`."""

        return MappingProxyType(
            {formatter.key: formatter for formatter in self.formatters if formatter.active}
        )

    def formatter(self, key: str) -> Optional[FormatterDescriptor]:
        """Return the formatter registered under ``key``, active or not, or ``None``."""

        for formatter in self.formatters:
            if formatter.key == key:
                return formatter
        return None


__all__ = ["FormatterDescriptor", "ResourceType", "SitemapConfig"]
