"""Fill ``{{ argument|filter }}`` placeholders in message templates."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

__all__ = ["FILTERS", "fill"]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<name>\w+)\s*(?P<filters>(?:\|\s*\w+\s*)*)}}")


def _quote(value: Any) -> str:
    return f"'{value}'"


def _join(value: Any) -> str:
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return ", ".join(str(item) for item in value)
    return str(value)


FILTERS: Mapping[str, Callable[[Any], str]] = MappingProxyType({"quote": _quote, "join": _join})


def fill(template: str, arguments: Mapping[str, Any]) -> str:
    """Substitute ``arguments`` into ``template``.

    Placeholders naming an argument that is not supplied are left in place
    so a partially rendered message still shows what is missing. An unknown
    filter name raises :class:`ValueError`.
    """

    def substitute(match: re.Match[str]) -> str:
        name = match.group("name")
        if name not in arguments:
            return match.group(0)

        value: Any = arguments[name]
        for filter_name in (part.strip() for part in match.group("filters").split("|")[1:]):
            try:
                value = FILTERS[filter_name](value)
            except KeyError as exc:
                raise ValueError(f"unknown filter '{filter_name}'") from exc
        return str(value)

    return _PLACEHOLDER_PATTERN.sub(substitute, template)
