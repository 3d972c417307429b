"""Resolve the formatters applicable to a resource type and group them by container."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import AbstractSet, Any, Iterable, Mapping

from .info import FormatterInfo, FormatterWrapper, wrap_formatter
from .interfaces import FormatterLike, FormatterSource, ResourceTypeLike

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatterIndex:
    """Formatters matching one type name, plus their fan-out by container type."""

    type_name: str
    formatters: tuple[FormatterLike, ...] = ()
    by_container_type: Mapping[str, tuple[FormatterLike, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def build(cls, formatters: Iterable[FormatterLike], type_name: str) -> "FormatterIndex":
        """Index ``formatters`` whose resource type names contain ``type_name``.

        Source order is preserved both in :attr:`formatters` and inside each
        container type bucket; buckets appear in first-seen order.
        """

        matched: list[FormatterLike] = []
        buckets: dict[str, list[FormatterLike]] = {}
        for formatter in formatters:
            if type_name not in formatter.resource_type_names:
                continue
            matched.append(formatter)
            for container_type in formatter.container_types:
                buckets.setdefault(container_type, []).append(formatter)

        return cls(
            type_name=type_name,
            formatters=tuple(matched),
            by_container_type=MappingProxyType(
                {container_type: tuple(bucket) for container_type, bucket in buckets.items()}
            ),
        )

    def for_container(self, container_type: str) -> tuple[FormatterLike, ...]:
        return self.by_container_type.get(container_type, ())

    def container_types(self) -> AbstractSet[str]:
        return self.by_container_type.keys()


class ResourceTypeFormatterView:
    """Active formatters of one resource type within a sitemap configuration.

    Parameters
    ----------
    context:
        Opaque request context. It is not inspected here and is only passed
        on to ``wrapper``.
    config:
        Configuration snapshot exposing ``active_formatters()``. The snapshot
        must not change while the view is being built.
    resource_type:
        The resource type whose ``type_name`` selects the formatters.
    wrapper:
        Callable turning ``(context, config, formatter)`` into the object
        returned by the query methods.
    """

    def __init__(
        self,
        context: Any,
        config: FormatterSource,
        resource_type: ResourceTypeLike,
        /,
        *,
        wrapper: FormatterWrapper = wrap_formatter,
    ) -> None:
        if config is None:
            raise ValueError("config must not be None")
        if resource_type is None:
            raise ValueError("resource_type must not be None")
        type_name = resource_type.type_name
        if type_name is None:
            raise ValueError("resource type name must not be None")

        self._context = context
        self._config = config
        self._wrapper = wrapper
        self._index = FormatterIndex.build(config.active_formatters().values(), type_name)
        LOGGER.debug(
            "indexed type=%r formatters=%d container_types=%d",
            type_name,
            len(self._index.formatters),
            len(self._index.by_container_type),
        )

    @property
    def name(self) -> str:
        """Name of the wrapped resource type."""

        return self._index.type_name

    @property
    def active_formatters(self) -> tuple[FormatterLike, ...]:
        """The raw formatter descriptors applicable to this type, in source order."""

        return self._index.formatters

    def formatter_info(self) -> tuple[FormatterInfo, ...]:
        """Wrap every active formatter of this type."""

        return self._wrap(self._index.formatters)

    def formatter_info_for_container(self, container_type: str) -> tuple[FormatterInfo, ...]:
        """Wrap the formatters rendering into ``container_type``.

        Unknown container types yield an empty tuple.
        """

        return self._wrap(self._index.for_container(container_type))

    def formatter_container_types(self) -> AbstractSet[str]:
        """Read-only set of container types served by any active formatter."""

        return self._index.container_types()

    def _wrap(self, formatters: Iterable[FormatterLike]) -> tuple[FormatterInfo, ...]:
        return tuple(self._wrapper(self._context, self._config, formatter) for formatter in formatters)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"formatters={len(self._index.formatters)})"
        )


class FormatterIndexBuilder:
    """Build :class:`ResourceTypeFormatterView` objects for one configuration snapshot."""

    def __init__(
        self,
        context: Any,
        config: FormatterSource,
        /,
        *,
        wrapper: FormatterWrapper = wrap_formatter,
    ) -> None:
        if config is None:
            raise ValueError("config must not be None")
        self._context = context
        self._config = config
        self._wrapper = wrapper

    def build(self, resource_type: ResourceTypeLike) -> ResourceTypeFormatterView:
        return ResourceTypeFormatterView(
            self._context, self._config, resource_type, wrapper=self._wrapper
        )

    def build_all(
        self, resource_types: Iterable[ResourceTypeLike]
    ) -> Mapping[str, ResourceTypeFormatterView]:
        """Build one view per resource type, keyed by type name in input order."""

        views: dict[str, ResourceTypeFormatterView] = {}
        for resource_type in resource_types:
            view = self.build(resource_type)
            views[view.name] = view
        return MappingProxyType(views)


__all__ = ["FormatterIndex", "FormatterIndexBuilder", "ResourceTypeFormatterView"]
