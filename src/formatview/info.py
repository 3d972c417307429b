"""Presentation wrappers handed to templates for each active formatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .interfaces import FormatterLike, FormatterSource


@dataclass(frozen=True, slots=True)
class FormatterInfo:
    """Read-only view of a single formatter for the presentation layer.

    The wrapper keeps the context and configuration it was created for so
    templates can resolve further details without another lookup. Attributes
    missing on a foreign descriptor fall back to neutral defaults. The hash
    only covers the formatter, so an unhashable context or configuration is
    fine.
    """

    context: Any = field(hash=False)
    config: FormatterSource = field(hash=False)
    formatter: FormatterLike

    @property
    def key(self) -> Optional[str]:
        return getattr(self.formatter, "key", None)

    @property
    def id(self) -> Optional[str]:
        return getattr(self.formatter, "id", None)

    @property
    def label(self) -> str:
        """The nice name of the formatter, or its key when it has none."""

        nice_name = getattr(self.formatter, "nice_name", None)
        if nice_name:
            return nice_name
        return self.key or ""

    @property
    def description(self) -> str:
        return getattr(self.formatter, "description", "") or ""

    @property
    def rank(self) -> Optional[int]:
        return getattr(self.formatter, "rank", None)

    @property
    def is_active(self) -> bool:
        return bool(getattr(self.formatter, "active", True))

    @property
    def resource_type_names(self) -> tuple[str, ...]:
        return tuple(self.formatter.resource_type_names)

    @property
    def container_types(self) -> tuple[str, ...]:
        return tuple(self.formatter.container_types)

    def supports_container(self, container_type: str) -> bool:
        return container_type in self.container_types


FormatterWrapper = Callable[[Any, FormatterSource, FormatterLike], FormatterInfo]


def wrap_formatter(context: Any, config: FormatterSource, formatter: FormatterLike) -> FormatterInfo:
    """Default :data:`FormatterWrapper` building a :class:`FormatterInfo`."""

    return FormatterInfo(context=context, config=config, formatter=formatter)


__all__ = ["FormatterInfo", "FormatterWrapper", "wrap_formatter"]
