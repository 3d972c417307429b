"""Structural interfaces for the objects the formatter index consumes."""

from __future__ import annotations

from typing import Any, Collection, Iterable, Mapping, Protocol, runtime_checkable


@runtime_checkable
class FormatterLike(Protocol):
    """A formatter descriptor as seen by the index.

    Only membership is tested on :attr:`resource_type_names`, while
    :attr:`container_types` is iterated in its natural order.
    """

    @property
    def resource_type_names(self) -> Collection[str]:
        """Names of the resource types the formatter applies to."""

    @property
    def container_types(self) -> Iterable[str]:
        """Identifiers of the container types the formatter renders into."""


@runtime_checkable
class ResourceTypeLike(Protocol):
    """A content resource type, identified by its name."""

    @property
    def type_name(self) -> str:
        """The resource type name used as the filter key."""


@runtime_checkable
class FormatterSource(Protocol):
    """A resolved sitemap configuration snapshot."""

    def active_formatters(self) -> Mapping[Any, FormatterLike]:
        """Return the enabled formatters keyed by an opaque identifier."""


__all__ = ["FormatterLike", "FormatterSource", "ResourceTypeLike"]
