"""Loading of sitemap configuration snapshots from JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from . import messages
from .errors import ConfigurationError, MessageContainer
from .schema import SitemapConfig

LOGGER = logging.getLogger(__name__)


def _describe_errors(exc: ValidationError) -> list[str]:
    described = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        described.append(f"{location}: {error['msg']}")
    return described


def parse_sitemap_config(data: Mapping[str, Any], *, source: str = "<memory>") -> SitemapConfig:
    """Validate ``data`` into a :class:`SitemapConfig`.

    ``source`` only appears in error messages.
    """

    try:
        return SitemapConfig.model_validate(data)
    except ValidationError as exc:
        container = MessageContainer(
            messages.CONFIG_INVALID_SCHEMA, {"path": source, "errors": _describe_errors(exc)}
        )
        raise ConfigurationError(container, exc) from exc


def load_sitemap_config(path: str | Path, *, encoding: str = "utf-8") -> SitemapConfig:
    """Read and validate the JSON sitemap configuration at ``path``."""

    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(MessageContainer(messages.CONFIG_FILE_NOT_FOUND, {"path": str(path)}))

    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        container = MessageContainer(messages.CONFIG_FILE_UNREADABLE, {"path": str(path), "reason": exc})
        raise ConfigurationError(container, exc) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        container = MessageContainer(
            messages.CONFIG_INVALID_JSON, {"path": str(path), "line": exc.lineno, "column": exc.colno}
        )
        raise ConfigurationError(container, exc) from exc

    if not isinstance(data, Mapping):
        container = MessageContainer(
            messages.CONFIG_INVALID_SCHEMA,
            {"path": str(path), "errors": ["<root>: expected a JSON object"]},
        )
        raise ConfigurationError(container)

    config = parse_sitemap_config(data, source=str(path))
    LOGGER.info(
        "loaded sitemap configuration path=%s formatters=%d active=%d",
        path,
        len(config.formatters),
        len(config.active_formatters()),
    )
    return config


__all__ = ["load_sitemap_config", "parse_sitemap_config"]
