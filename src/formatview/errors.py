"""Exception types carrying localized messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .messages import localize


@dataclass(frozen=True, slots=True)
class MessageContainer:
    """A message key together with the arguments needed to render it."""

    key: str
    arguments: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise ValueError("message key must be a non-empty string")
        object.__setattr__(self, "arguments", MappingProxyType(dict(self.arguments)))

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.key, dict(self.arguments))

    def localize(self, locale: Optional[str] = None) -> str:
        return localize(self.key, self.arguments, locale)


class LocalizedError(RuntimeError):
    """Base error whose message is rendered from a :class:`MessageContainer`."""

    def __init__(self, container: MessageContainer, cause: BaseException | None = None) -> None:
        super().__init__(container.localize())
        self.container = container
        self.__cause__ = cause

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.container, self.__cause__)

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def localized_message(self, locale: Optional[str] = None) -> str:
        """Render the message for ``locale``."""

        return self.container.localize(locale)

    def create_exception(
        self, container: MessageContainer, cause: BaseException | None = None
    ) -> "LocalizedError":
        """Return a new error of the same type for ``container``."""

        return type(self)(container, cause)


class ConfigurationError(LocalizedError):
    """Raised when a sitemap configuration cannot be loaded."""


__all__ = ["ConfigurationError", "LocalizedError", "MessageContainer"]
